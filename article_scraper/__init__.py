"""
Article Scraper: renders an article URL in a headless browser and extracts
its readable content.

The serverless entry point is `article_scraper.handler.handler`; the same
pipeline is served over HTTP by `article_scraper.api.main:app`.
"""

__version__ = "0.1.0"
