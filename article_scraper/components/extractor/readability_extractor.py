"""
Readable article extraction using readability-lxml.

`ReadabilityExtractor` turns rendered HTML into a `ParsedArticle`: page metadata is
read with `MetadataParser`, page chrome is stripped, and the main content block is
isolated by readability's scoring. A page without enough readable text produces an
article with empty content rather than an error.
"""
import re
from typing import Optional

from bs4 import BeautifulSoup
from readability import Document
from readability.readability import Unparseable

from article_scraper.components.extractor.metadata_parser import MetadataParser
from article_scraper.components.extractor.settings import ExtractorSettings
from article_scraper.core.exceptions import ExtractorError
from article_scraper.core.logger import get_logger
from article_scraper.models.article import ParsedArticle

logger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def _normalize_text(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _text_outside_links(soup: BeautifulSoup) -> str:
    # A leftover menu or link list is not article text.
    return _normalize_text(" ".join(
        text for text in soup.find_all(string=True) if text.find_parent('a') is None
    ))


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    cut = text[:limit].rsplit(" ", 1)[0]
    return cut.rstrip(" ,;:") + "..."


class ReadabilityExtractor:
    """
    Extracts the main article of a page.

    Attributes:
        settings (ExtractorSettings): Thresholds and boilerplate rules.
    """
    def __init__(self, settings: Optional[ExtractorSettings] = None):
        self.settings = settings or ExtractorSettings()

    def extract(self, html_content: str, url: Optional[str] = None) -> ParsedArticle:
        """
        Extracts readable article content from rendered HTML.

        Args:
            html_content (str): The rendered page HTML.
            url (Optional[str]): The page URL, used by readability to resolve relative links.

        Returns:
            ParsedArticle: The article. If no article content is found, `content` is None
                           and `length` is 0, while page metadata is still populated.

        Raises:
            ExtractorError: If `html_content` is None or the HTML cannot be processed.
        """
        if html_content is None:
            raise ExtractorError("HTML content cannot be None for ReadabilityExtractor.")
        if not html_content.strip():
            logger.warning(f"Empty HTML received for {url}; no article to extract.")
            return ParsedArticle()

        parser = MetadataParser(html_content)
        article = ParsedArticle(
            title=parser.get_title(),
            byline=parser.get_byline(),
            dir=parser.get_dir(),
            lang=parser.get_lang(),
            excerpt=parser.get_excerpt(),
            site_name=parser.get_site_name(),
            published_time=parser.get_published_time(),
        )
        logger.debug(f"Page metadata for {url}: title='{article.title}', byline='{article.byline}', site='{article.site_name}'")

        removed = parser.strip_boilerplate(self.settings.strip_tags, self.settings.strip_roles)
        logger.debug(f"Removed {removed} boilerplate elements before readability.")

        try:
            document = Document(parser.to_html(), url=url)
            content_html = document.summary(html_partial=True)
        except Unparseable as e:
            logger.warning(f"Readability could not find article content for {url}: {e}")
            return article
        except Exception as e:
            logger.error(f"Readability extraction failed for {url}: {e}", exc_info=True)
            raise ExtractorError(f"Readability extraction failed for {url}", original_exception=e)

        content_soup = BeautifulSoup(content_html, 'lxml')
        text_content = _normalize_text(content_soup.get_text(" "))
        if not _text_outside_links(content_soup):
            logger.info(f"Extracted content for {url} is empty or only links; treating page as having no article.")
            return article
        if len(text_content) < self.settings.min_text_length:
            logger.info(
                f"Extracted text for {url} is {len(text_content)} characters "
                f"(< {self.settings.min_text_length}); treating page as having no article."
            )
            return article

        article.content = content_html
        article.text_content = text_content
        article.length = len(text_content)
        if not article.excerpt:
            first_paragraph = next(
                (p.get_text(" ", strip=True) for p in content_soup.find_all('p') if p.get_text(strip=True)),
                None,
            )
            if first_paragraph:
                article.excerpt = _truncate(_normalize_text(first_paragraph), self.settings.excerpt_length)
        if not article.title:
            short_title = document.short_title()
            # readability-lxml reports a missing <title> as '[no-title]'.
            if short_title and short_title != '[no-title]':
                article.title = short_title

        logger.info(f"Extracted article from {url}: title='{article.title}', length={article.length}.")
        return article
