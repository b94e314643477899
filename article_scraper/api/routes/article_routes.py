"""
API routes for article parsing.

Exposes the scrape-and-extract pipeline as `POST /parse`. Each request gets its
own browser session through `ArticleScrapingManager.scrape_article`.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from article_scraper.core.config import config_manager
from article_scraper.core.exceptions import (
    ArticleScraperError,
    BrowserLaunchError,
    NavigationError,
)
from article_scraper.core.logger import get_logger
from article_scraper.core.manager import ArticleScrapingManager
from article_scraper.models.article import ParseArticleRequest, ParsedArticle

logger = get_logger(__name__)

router = APIRouter()


def get_scraping_manager() -> ArticleScrapingManager:
    """Dependency provider: a manager configured from the global configuration."""
    return ArticleScrapingManager(config=config_manager)


@router.post(
    "/parse",
    response_model=ParsedArticle,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
    summary="Render a URL and extract its article",
    description="Loads the URL in a headless browser, waits for the page to settle and "
                "returns the readable article. A page without an article returns "
                "`content: null` and `length: 0` rather than an error."
)
async def parse_article_endpoint(request: ParseArticleRequest,
                                 manager: ArticleScrapingManager = Depends(get_scraping_manager)):
    """
    Handles requests to parse a single article URL.

    Raises:
        HTTPException:
            - 502 Bad Gateway: If the target page could not be loaded.
            - 503 Service Unavailable: If the browser could not be launched
                                       (e.g., binaries missing; run 'playwright install').
            - 500 Internal Server Error: For extraction or other application failures.
    """
    url = request.article_url
    try:
        article = await manager.scrape_article(url)
    except NavigationError as e:
        logger.error(f"NavigationError for URL {url}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Could not load URL {url}. Error: {e.message}"
        )
    except BrowserLaunchError as e:
        logger.error(f"BrowserLaunchError for URL {url}: {e.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Scraping service unavailable: browser could not be launched. Error: {e.message}"
        )
    except ArticleScraperError as e:
        logger.error(f"{e.__class__.__name__} for URL {url}: {e.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Article parsing failed for URL {url}. Error: {e.message}"
        )

    logger.info(f"Parse request for {url} completed (has_content={article.has_content}).")
    return article
