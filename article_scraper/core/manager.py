"""
Orchestration of one scrape-and-extract operation.
"""
from typing import Optional, TYPE_CHECKING

from article_scraper.components.extractor.readability_extractor import ReadabilityExtractor
from article_scraper.components.extractor.settings import ExtractorSettings
from article_scraper.components.renderer.playwright_manager import PlaywrightManager
from article_scraper.components.renderer.settings import BrowserSettings
from article_scraper.core.logger import get_logger
from article_scraper.models.article import ParsedArticle

if TYPE_CHECKING:
    from article_scraper.core.config import ConfigurationManager

logger = get_logger(__name__)


class ArticleScrapingManager:
    """
    Coordinates the renderer and the extractor for single-URL article scraping.

    The manager holds settings only. Each call to `scrape_article` launches and
    owns its own browser, so concurrent calls never share a browser or page.
    """
    def __init__(self, config: Optional['ConfigurationManager'] = None,
                 browser_settings: Optional[BrowserSettings] = None,
                 extractor_settings: Optional[ExtractorSettings] = None):
        """
        Initializes the ArticleScrapingManager.

        Args:
            config (Optional[ConfigurationManager]): Source for settings not passed explicitly.
            browser_settings (Optional[BrowserSettings]): Overrides `components.playwright_manager`.
            extractor_settings (Optional[ExtractorSettings]): Overrides `components.extractor`.

        Raises:
            ConfigurationError: If the configured settings are invalid.
        """
        self.browser_settings = browser_settings or BrowserSettings.from_config(config)
        self.extractor_settings = extractor_settings or ExtractorSettings.from_config(config)
        self.extractor = ReadabilityExtractor(self.extractor_settings)
        logger.info("ArticleScrapingManager initialized successfully.")

    async def scrape_article(self, url: str) -> ParsedArticle:
        """
        Renders `url` in a headless browser and extracts its article.

        The browser, context and page are released before this method returns
        or raises.

        Args:
            url (str): The article URL.

        Returns:
            ParsedArticle: The extracted article. `has_content` is False when the page
                           had no readable article (e.g., a page of navigation links).

        Raises:
            BrowserLaunchError: If the browser cannot be started.
            NavigationError: If the page cannot be loaded.
            ExtractorError: If the rendered HTML cannot be processed.
        """
        logger.info(f"Starting article scrape for URL: {url}")

        async with PlaywrightManager(self.browser_settings) as renderer:
            rendered_page = await renderer.render(url)
        logger.info(f"Rendered {url} (final URL: {rendered_page.final_url}, status: {rendered_page.status}).")

        article = self.extractor.extract(rendered_page.html, url=rendered_page.final_url)
        if article.has_content:
            logger.info(f"Article scrape for {url} completed: '{article.title}' ({article.length} characters).")
        else:
            logger.warning(f"Article scrape for {url} completed but no article content was found.")
        return article
