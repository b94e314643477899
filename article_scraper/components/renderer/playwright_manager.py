"""
Manages Playwright browser instances for web page rendering.

This module provides the `PlaywrightManager` class, an asynchronous context manager
that owns one Playwright engine and one browser for the duration of an `async with`
block, and renders pages into `RenderedPage` snapshots. Every resource it acquires
(engine, browser, context, page) is released exactly once, on success and on failure.
"""
from dataclasses import dataclass
from typing import Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
)

from article_scraper.components.renderer.settings import BrowserSettings
from article_scraper.core.exceptions import BrowserLaunchError, NavigationError, RendererError
from article_scraper.core.logger import get_logger

logger = get_logger(__name__)

# Rendered HTML is only ever logged at DEBUG, and cut to this many characters.
HTML_LOG_PREVIEW_CHARS = 500


@dataclass
class RenderedPage:
    """
    Snapshot of a page after navigation settled.

    Attributes:
        requested_url (str): The URL passed to `render`.
        final_url (str): The page URL after redirects.
        status (Optional[int]): HTTP status of the main document response, if any.
        html (str): Serialized DOM of the rendered page.
    """
    requested_url: str
    final_url: str
    status: Optional[int]
    html: str


class PlaywrightManager:
    """
    Asynchronous context manager for Playwright browser instances.

    Entering the context starts the Playwright engine and launches the browser
    described by `BrowserSettings`; leaving it closes the browser and stops the engine.

    Attributes:
        settings (BrowserSettings): Launch and navigation options.
        playwright (Optional[Playwright]): The Playwright engine instance.
        browser (Optional[Browser]): The launched Playwright browser instance.
    """

    def __init__(self, settings: Optional[BrowserSettings] = None):
        """
        Initializes the PlaywrightManager.

        Args:
            settings (Optional[BrowserSettings]): Browser options. If None, `BrowserSettings()`
                defaults are used (bundled headless Chromium).
        """
        self.settings = settings or BrowserSettings()
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        logger.info(f"PlaywrightManager configured to use browser: {self.settings.browser_type} (headless={self.settings.headless})")

    @property
    def browser_type(self) -> str:
        return self.settings.browser_type

    async def __aenter__(self) -> 'PlaywrightManager':
        """
        Starts the Playwright engine and launches the configured browser.

        Returns:
            PlaywrightManager: The instance of itself.

        Raises:
            BrowserLaunchError: If Playwright fails to start or the browser fails to launch
                                (e.g., browser binaries are not installed).
        """
        logger.debug(f"Entering PlaywrightManager context: Starting Playwright and launching {self.browser_type} browser.")
        try:
            self.playwright = await async_playwright().start()
            browser_launcher = getattr(self.playwright, self.browser_type)
            self.browser = await browser_launcher.launch(**self.settings.launch_options())
            logger.info(f"{self.browser_type} browser launched successfully.")
        except Exception as e:
            logger.error(f"Failed to initialize Playwright or launch browser {self.browser_type}: {e}", exc_info=True)
            await self._stop_playwright()
            raise BrowserLaunchError(f"Failed to initialize Playwright or launch browser {self.browser_type}: {e}")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """
        Closes the browser and stops the Playwright engine.

        Errors raised while closing are logged and never replace an exception
        raised inside the `async with` block.
        """
        logger.debug("Exiting PlaywrightManager context: Closing browser and stopping Playwright.")
        if self.browser:
            browser, self.browser = self.browser, None
            try:
                await browser.close()
                logger.info("Browser closed successfully.")
            except Exception as e:
                logger.error(f"Error closing browser: {e}", exc_info=True)
        await self._stop_playwright()

    async def _stop_playwright(self) -> None:
        if self.playwright:
            playwright, self.playwright = self.playwright, None
            try:
                await playwright.stop()
                logger.info("Playwright stopped successfully.")
            except Exception as e:
                logger.error(f"Error stopping Playwright: {e}", exc_info=True)

    async def render(self, url: str) -> RenderedPage:
        """
        Loads `url` in a fresh browser context and returns the rendered HTML.

        HTTP error statuses (404, 500, ...) are not treated as failures: the error page
        is rendered and returned like any other page.

        Args:
            url (str): The URL of the webpage to render.

        Returns:
            RenderedPage: The rendered page snapshot.

        Raises:
            RendererError: If the browser is not initialized (not used within 'async with'),
                           or a new page cannot be opened.
            NavigationError: If navigation or content retrieval fails or times out.
        """
        if not self.browser:
            logger.error("render called but browser is not initialized.")
            raise RendererError("Browser is not initialized. Ensure PlaywrightManager is used within an 'async with' statement.")

        context: Optional[BrowserContext] = None
        page: Optional[Page] = None
        timeout = self.settings.navigation_timeout_ms
        wait_until = self.settings.wait_until

        try:
            try:
                context = await self.browser.new_context(**self.settings.context_options())
                page = await context.new_page()
                logger.debug("Created new browser context and page.")
            except Exception as e:
                logger.error(f"Failed to open a new page: {e}", exc_info=True)
                raise RendererError(f"Failed to open a new page: {e}")

            logger.info(f"Navigating to {url} (wait_until={wait_until}, timeout={timeout}ms).")
            try:
                response = await page.goto(url, wait_until=wait_until, timeout=timeout)
                html = await page.content()
            except PlaywrightTimeoutError as e:
                logger.error(f"Timed out loading URL '{url}' after {timeout}ms: {e}")
                raise NavigationError(url, f"Timed out loading URL '{url}' after {timeout}ms: {e}", timed_out=True)
            except Exception as e:
                logger.error(f"Failed to get content from URL '{url}': {e}", exc_info=True)
                raise NavigationError(url, f"Failed to get content from URL '{url}': {e}")

            status = response.status if response is not None else None
            final_url = page.url or url
            if status is not None and status >= 400:
                logger.warning(f"URL '{url}' responded with HTTP {status}; continuing with the rendered error page.")
            logger.info(f"Retrieved {len(html)} characters of rendered HTML from {final_url} (status={status}).")
            logger.debug(f"Rendered HTML preview: {html[:HTML_LOG_PREVIEW_CHARS]}")
            return RenderedPage(requested_url=url, final_url=final_url, status=status, html=html)
        finally:
            if page:
                try:
                    await page.close()
                    logger.debug(f"Page for URL {url} closed.")
                except Exception as e:
                    logger.error(f"Error closing page for URL '{url}': {e}", exc_info=True)
            if context:
                try:
                    await context.close()
                    logger.debug(f"Browser context for URL {url} closed.")
                except Exception as e:
                    logger.error(f"Error closing browser context for URL '{url}': {e}", exc_info=True)
