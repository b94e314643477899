import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch


ARTICLE_URL = "https://example-news-site.test/article-123"
ARTICLE_TITLE = "City Council Approves Riverside Park Expansion"

ARTICLE_HTML = f"""<!DOCTYPE html>
<html lang="en" dir="ltr">
<head>
  <meta charset="utf-8">
  <title>{ARTICLE_TITLE}</title>
  <meta name="author" content="Jane Reporter">
  <meta property="og:site_name" content="Example News">
  <meta name="description" content="The council voted to expand Riverside Park by twelve acres.">
  <meta property="article:published_time" content="2024-03-05T10:00:00Z">
</head>
<body>
  <nav class="top-menu">
    <a href="/">Home</a> <a href="/world">World desk</a> <a href="/subscribe">Subscribe to our newsletter</a>
  </nav>
  <aside class="sidebar">
    <div class="advert">Buy discount watches today, limited time offer!</div>
  </aside>
  <article>
    <h1>{ARTICLE_TITLE}</h1>
    <p>The city council voted on Tuesday evening to approve a long-debated expansion of Riverside Park,
       adding twelve acres of green space along the eastern bank of the river.</p>
    <p>Supporters of the plan, including several neighborhood associations, argued that the expansion
       would provide much-needed recreational space for families, joggers, and local schools.</p>
    <p>Opponents raised concerns about the cost of the project, which is estimated at four million dollars,
       and about the loss of parking spaces near the existing park entrance.</p>
    <p>Construction is expected to begin next spring, according to the parks department, and the new
       section of the park should open to the public within eighteen months.</p>
  </article>
  <footer>Copyright 2024 Example News. All rights reserved.</footer>
</body>
</html>
"""

NAVIGATION_ONLY_HTML = """<!DOCTYPE html>
<html lang="en">
<head><title>Site Map</title></head>
<body>
  <nav>
    <ul>
      <li><a href="/">Home</a></li>
      <li><a href="/news">News</a></li>
      <li><a href="/sports">Sports</a></li>
      <li><a href="/weather">Weather</a></li>
    </ul>
  </nav>
  <div class="links"><a href="/about">About us</a> <a href="/contact">Contact</a></div>
</body>
</html>
"""

NOT_FOUND_HTML = """<!DOCTYPE html>
<html>
<head><title>404 Not Found</title></head>
<body><h1>Not Found</h1><p>The requested URL was not found on this server.</p></body>
</html>
"""


@pytest.fixture
def article_html():
    return ARTICLE_HTML


@pytest.fixture
def navigation_only_html():
    return NAVIGATION_ONLY_HTML


@pytest.fixture
def not_found_html():
    return NOT_FOUND_HTML


@pytest.fixture
def playwright_mocks():
    """
    Replaces `async_playwright` in the renderer with a chain of mocks:
    engine -> chromium launcher -> browser -> context -> page.

    Yields a namespace exposing each mock so tests can change behavior
    (e.g., `mocks.page.goto.side_effect = ...`) and assert close calls.
    """
    response = MagicMock()
    response.status = 200

    page = MagicMock()
    page.url = ARTICLE_URL
    page.goto = AsyncMock(return_value=response)
    page.content = AsyncMock(return_value=ARTICLE_HTML)
    page.close = AsyncMock()

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    starter = MagicMock()
    starter.start = AsyncMock(return_value=playwright)

    with patch("article_scraper.components.renderer.playwright_manager.async_playwright",
               return_value=starter) as async_playwright_mock:
        yield SimpleNamespace(
            async_playwright=async_playwright_mock,
            playwright=playwright,
            browser=browser,
            context=context,
            page=page,
            response=response,
        )
