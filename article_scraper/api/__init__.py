"""
API sub-package for the Article Scraper.

This package contains the FastAPI application that exposes the same
scrape-and-extract pipeline as the serverless handler over HTTP.

Modules like `api.main` or routers from `api.routes` should be imported
directly from their respective paths.
"""

__all__ = []
