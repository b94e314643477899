"""
Models sub-package for the Article Scraper.

Pydantic models shared by the serverless handler and the HTTP API.
"""
from .article import ParseArticleRequest, ParsedArticle

__all__ = [
    "ParseArticleRequest",
    "ParsedArticle",
]
