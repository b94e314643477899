"""
Extractor component for the Article Scraper.

This sub-package turns rendered HTML into a `ParsedArticle`: page metadata
parsing with BeautifulSoup and main-content isolation with readability.
"""
from .metadata_parser import MetadataParser
from .readability_extractor import ReadabilityExtractor
from .settings import ExtractorSettings

__all__ = [
    "MetadataParser",
    "ReadabilityExtractor",
    "ExtractorSettings",
]
