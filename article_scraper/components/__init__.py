"""
Components sub-package for the Article Scraper.

The renderer loads a page in a headless browser; the extractor turns the
rendered HTML into a parsed article.
"""

from .renderer.playwright_manager import PlaywrightManager, RenderedPage
from .renderer.settings import BrowserSettings
from .extractor.readability_extractor import ReadabilityExtractor
from .extractor.settings import ExtractorSettings

__all__ = [
    "PlaywrightManager",
    "RenderedPage",
    "BrowserSettings",
    "ReadabilityExtractor",
    "ExtractorSettings",
]
