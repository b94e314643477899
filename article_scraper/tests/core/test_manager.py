import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from article_scraper.components.extractor.settings import ExtractorSettings
from article_scraper.components.renderer.playwright_manager import RenderedPage
from article_scraper.components.renderer.settings import BrowserSettings
from article_scraper.core.exceptions import BrowserLaunchError, NavigationError
from article_scraper.core.manager import ArticleScrapingManager

URL = "https://example-news-site.test/article-123"


# Mock the logger used in ArticleScrapingManager to keep test output quiet
@pytest.fixture(autouse=True)
def mock_manager_logger():
    with patch('article_scraper.core.manager.logger', MagicMock()) as mock_log:
        yield mock_log


@pytest.fixture
def renderer_mocker():
    """
    Patches PlaywrightManager inside the manager module. Yields (class_mock, instance_mock);
    the instance works as an async context manager whose `render` returns the given page.
    """
    with patch('article_scraper.core.manager.PlaywrightManager') as playwright_manager_cls:
        renderer = playwright_manager_cls.return_value
        renderer.__aenter__.return_value = renderer
        # A falsy return value lets exceptions raised inside `async with` propagate.
        renderer.__aexit__.return_value = False
        renderer.render = AsyncMock()
        yield playwright_manager_cls, renderer


def rendered(html, status=200, final_url=URL):
    return RenderedPage(requested_url=URL, final_url=final_url, status=status, html=html)


@pytest.mark.asyncio
async def test_scrape_article_success(renderer_mocker, article_html):
    playwright_manager_cls, renderer = renderer_mocker
    renderer.render.return_value = rendered(article_html)

    manager = ArticleScrapingManager(config=None)
    article = await manager.scrape_article(URL)

    assert article.has_content
    assert article.title == "City Council Approves Riverside Park Expansion"
    playwright_manager_cls.assert_called_once_with(manager.browser_settings)
    renderer.render.assert_awaited_once_with(URL)
    renderer.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
async def test_scrape_article_uses_final_url_for_extraction(renderer_mocker, article_html):
    _, renderer = renderer_mocker
    renderer.render.return_value = rendered(article_html, final_url="https://example-news-site.test/a/123")

    manager = ArticleScrapingManager(config=None)
    with patch.object(manager.extractor, 'extract', wraps=manager.extractor.extract) as extract_spy:
        await manager.scrape_article(URL)

    extract_spy.assert_called_once_with(article_html, url="https://example-news-site.test/a/123")


@pytest.mark.asyncio
async def test_scrape_article_without_article_content(renderer_mocker, navigation_only_html):
    _, renderer = renderer_mocker
    renderer.render.return_value = rendered(navigation_only_html, final_url="https://example.test/sitemap")

    article = await ArticleScrapingManager(config=None).scrape_article("https://example.test/sitemap")

    assert not article.has_content
    assert article.content is None
    assert article.title == "Site Map"


@pytest.mark.asyncio
async def test_scrape_article_not_found_page_is_not_an_error(renderer_mocker, not_found_html):
    _, renderer = renderer_mocker
    renderer.render.return_value = rendered(not_found_html, status=404)

    article = await ArticleScrapingManager(config=None).scrape_article("https://example.test/not-found")

    assert article.title == "404 Not Found"
    assert article.length < 100


@pytest.mark.asyncio
async def test_scrape_article_navigation_error_propagates(renderer_mocker):
    _, renderer = renderer_mocker
    renderer.render.side_effect = NavigationError(URL, "net::ERR_NAME_NOT_RESOLVED")

    with pytest.raises(NavigationError):
        await ArticleScrapingManager(config=None).scrape_article(URL)

    renderer.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
async def test_scrape_article_launch_error_propagates(renderer_mocker):
    _, renderer = renderer_mocker
    renderer.__aenter__.side_effect = BrowserLaunchError("Executable doesn't exist")

    with pytest.raises(BrowserLaunchError):
        await ArticleScrapingManager(config=None).scrape_article(URL)

    renderer.render.assert_not_awaited()


@pytest.mark.asyncio
async def test_scrape_article_empty_html_returns_empty_article(renderer_mocker):
    _, renderer = renderer_mocker
    renderer.render.return_value = rendered("")

    article = await ArticleScrapingManager(config=None).scrape_article(URL)

    assert not article.has_content
    assert article.content is None
    assert article.length == 0
    renderer.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
async def test_each_scrape_uses_its_own_browser(renderer_mocker, article_html):
    playwright_manager_cls, renderer = renderer_mocker
    renderer.render.return_value = rendered(article_html)

    manager = ArticleScrapingManager(config=None)
    await manager.scrape_article(URL)
    await manager.scrape_article(URL)

    assert playwright_manager_cls.call_count == 2
    assert renderer.__aenter__.await_count == 2
    assert renderer.__aexit__.await_count == 2


def test_explicit_settings_override_config():
    config = MagicMock()
    config.get.return_value = {}
    browser_settings = BrowserSettings(browser_type="webkit")
    extractor_settings = ExtractorSettings(min_text_length=5)

    manager = ArticleScrapingManager(config, browser_settings=browser_settings,
                                     extractor_settings=extractor_settings)

    assert manager.browser_settings is browser_settings
    assert manager.extractor.settings is extractor_settings
