"""
Renderer component for the Article Scraper.

This sub-package renders web pages in a headless browser so that the HTML
handed to the extractor includes content generated by JavaScript.
"""
from .playwright_manager import PlaywrightManager, RenderedPage
from .settings import BrowserSettings

__all__ = [
    "PlaywrightManager",
    "RenderedPage",
    "BrowserSettings",
]
