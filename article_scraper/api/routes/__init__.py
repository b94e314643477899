"""
API Routes sub-package for the Article Scraper.
"""

from .article_routes import router as article_router

__all__ = [
    "article_router",
]
