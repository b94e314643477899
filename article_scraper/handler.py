"""
Serverless entry point for the Article Scraper.

The platform invokes `handler(event, context)` with an event of the form
``{"articleUrl": "https://..."}``. The handler renders the page in a headless
browser, extracts the readable article and returns it as a camelCase dict
(``title``, ``byline``, ``content``, ``textContent``, ``excerpt``, ``siteName``, ...).

Launch and navigation failures propagate to the platform as invocation errors.
A page without a readable article is not an error: the returned dict has
``content`` set to None and ``length`` 0.
"""
import asyncio
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from article_scraper.core.config import config_manager
from article_scraper.core.exceptions import InvalidEventError
from article_scraper.core.logger import get_logger, setup_logging
from article_scraper.core.manager import ArticleScrapingManager
from article_scraper.models.article import ParseArticleRequest, ParsedArticle

setup_logging(config_manager)
logger = get_logger(__name__)


def parse_event(event: Any) -> ParseArticleRequest:
    """
    Validates an invocation event.

    Args:
        event (Any): The raw event payload.

    Returns:
        ParseArticleRequest: The validated request.

    Raises:
        InvalidEventError: If the event is not a mapping or lacks a valid `articleUrl`.
    """
    if not isinstance(event, Mapping):
        raise InvalidEventError(f"Event must be a JSON object, got {type(event).__name__}.")
    try:
        return ParseArticleRequest.model_validate(event)
    except ValidationError as e:
        raise InvalidEventError(f"Invalid event: {e.errors(include_url=False)}")


def _describe_context(context: Any) -> str:
    if context is None:
        return "no context"
    request_id = getattr(context, "aws_request_id", None)
    function_name = getattr(context, "function_name", None)
    return f"request_id={request_id}, function={function_name}"


async def handle_event(event: Any, context: Any = None,
                       manager: Optional[ArticleScrapingManager] = None) -> ParsedArticle:
    """
    Async implementation of one invocation.

    Args:
        event (Any): The event payload, carrying `articleUrl`.
        context (Any): Platform context object; only read for logging.
        manager (Optional[ArticleScrapingManager]): Manager to use. A new one built from the
            global configuration is used if None.

    Returns:
        ParsedArticle: The extracted article.

    Raises:
        InvalidEventError: If the event is malformed.
        BrowserLaunchError, NavigationError, ExtractorError: If the scrape fails.
    """
    logger.info(f"In handler - event: {event!r} ({_describe_context(context)})")
    request = parse_event(event)
    logger.info(f"Processing url: {request.article_url}")

    manager = manager or ArticleScrapingManager(config_manager)
    return await manager.scrape_article(request.article_url)


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Platform entry point.

    Args:
        event (Dict[str, Any]): ``{"articleUrl": "<url>"}``.
        context (Any): Platform context object.

    Returns:
        Dict[str, Any]: The parsed article with camelCase keys.
    """
    article = asyncio.run(handle_event(event, context))
    return article.to_response()
