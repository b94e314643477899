"""
Page metadata parsing using BeautifulSoup.

This module provides the `MetadataParser` class, which wraps BeautifulSoup to read
the page-level article fields readability itself does not report (byline, excerpt,
site name, language, text direction, publication date) and to strip page chrome
such as navigation bars and sidebars before readability runs.
"""
import json
from typing import Any, Dict, Iterable, Iterator, List, Optional

from bs4 import BeautifulSoup, Tag

from article_scraper.core.exceptions import ExtractorError

# Bylines longer than this are almost always a whole author bio, not a name.
MAX_BYLINE_LENGTH = 100


class MetadataParser:
    """
    Reads article metadata from an HTML document.

    Attributes:
        soup (BeautifulSoup): The parsed HTML document.
    """
    def __init__(self, html_content: str):
        """
        Initializes the MetadataParser with the provided HTML content.

        Args:
            html_content (str): The HTML content string to be parsed.

        Raises:
            ExtractorError: If `html_content` is None, or if BeautifulSoup fails to parse it.
        """
        if html_content is None:
            raise ExtractorError("HTML content cannot be None for MetadataParser.")

        try:
            self.soup = BeautifulSoup(html_content, 'lxml')
        except Exception as e:
            raise ExtractorError("Failed to initialize BeautifulSoup parser", original_exception=e)

    def _meta(self, *keys: str) -> Optional[str]:
        """Content of the first <meta> whose name, property or itemprop matches one of `keys`."""
        for key in keys:
            for attr in ('property', 'name', 'itemprop'):
                tag = self.soup.find('meta', attrs={attr: key})
                if tag and tag.get('content', '').strip():
                    return tag['content'].strip()
        return None

    def _json_ld_objects(self) -> Iterator[Dict[str, Any]]:
        """Yields every JSON-LD object on the page, flattening lists and @graph blocks."""
        for script in self.soup.find_all('script', attrs={'type': 'application/ld+json'}):
            try:
                data = json.loads(script.string or '')
            except ValueError:
                continue
            pending: List[Any] = [data]
            while pending:
                item = pending.pop(0)
                if isinstance(item, list):
                    pending.extend(item)
                elif isinstance(item, dict):
                    if '@graph' in item:
                        pending.extend(item['@graph'] if isinstance(item['@graph'], list) else [item['@graph']])
                    yield item

    def _json_ld_value(self, key: str) -> Optional[Any]:
        for obj in self._json_ld_objects():
            if obj.get(key):
                return obj[key]
        return None

    @staticmethod
    def _name_of(value: Any) -> Optional[str]:
        """Flattens a JSON-LD Person/Organization (or a list of them) into a display name."""
        if isinstance(value, str):
            return value.strip() or None
        if isinstance(value, dict):
            return MetadataParser._name_of(value.get('name'))
        if isinstance(value, list):
            names = [name for name in (MetadataParser._name_of(v) for v in value) if name]
            return ", ".join(names) or None
        return None

    def _html_attr(self, name: str) -> Optional[str]:
        html_tag = self.soup.find('html')
        if html_tag and html_tag.get(name, '').strip():
            return html_tag[name].strip()
        return None

    def get_title(self) -> Optional[str]:
        """
        Extracts the page title.

        Returns:
            Optional[str]: The stripped text of the <title> tag, falling back to
                           og:title and then the first <h1>. None if none exist.
        """
        if self.soup.title:
            title = self.soup.title.get_text(strip=True)
            if title:
                return title
        og_title = self._meta('og:title', 'twitter:title')
        if og_title:
            return og_title
        h1 = self.soup.find('h1')
        if h1 and h1.get_text(strip=True):
            return h1.get_text(strip=True)
        return None

    def get_lang(self) -> Optional[str]:
        """Returns the document language from <html lang> or the content-language header meta."""
        lang = self._html_attr('lang')
        if lang:
            return lang
        tag = self.soup.find('meta', attrs={'http-equiv': lambda v: v and v.lower() == 'content-language'})
        if tag and tag.get('content', '').strip():
            return tag['content'].strip()
        return None

    def get_dir(self) -> Optional[str]:
        return self._html_attr('dir')

    def get_byline(self) -> Optional[str]:
        """
        Extracts the article author.

        Sources, in order: author meta tags, JSON-LD `author`, `rel="author"` links,
        `itemprop="author"` elements, then elements classed `byline` or `author`.

        Returns:
            Optional[str]: The author string, or None if not found.
        """
        meta_author = self._meta('author', 'article:author', 'parsely-author', 'sailthru.author')
        # article:author is frequently a profile URL rather than a name.
        if meta_author and not meta_author.startswith(('http://', 'https://')):
            return meta_author

        json_ld_author = self._name_of(self._json_ld_value('author'))
        if json_ld_author:
            return json_ld_author

        candidates: Iterable[Optional[Tag]] = (
            self.soup.find(attrs={'rel': 'author'}),
            self.soup.find(attrs={'itemprop': 'author'}),
            self.soup.find(class_='byline'),
            self.soup.find(class_='author'),
        )
        for candidate in candidates:
            if candidate is None:
                continue
            text = candidate.get_text(" ", strip=True)
            if text and len(text) <= MAX_BYLINE_LENGTH:
                return text
        return None

    def get_excerpt(self) -> Optional[str]:
        """Returns the page description from description, og:description or twitter:description."""
        return self._meta('description', 'og:description', 'twitter:description')

    def get_site_name(self) -> Optional[str]:
        site_name = self._meta('og:site_name', 'application-name')
        if site_name:
            return site_name
        return self._name_of(self._json_ld_value('publisher'))

    def get_published_time(self) -> Optional[str]:
        """
        Extracts the publication timestamp as it appears on the page (usually ISO 8601).

        Returns:
            Optional[str]: The timestamp string, or None if not found.
        """
        published = self._meta('article:published_time', 'datePublished', 'parsely-pub-date', 'pubdate', 'date')
        if published:
            return published
        json_ld_date = self._json_ld_value('datePublished')
        if isinstance(json_ld_date, str) and json_ld_date.strip():
            return json_ld_date.strip()
        time_tag = self.soup.find('time', attrs={'datetime': True})
        if time_tag and time_tag['datetime'].strip():
            return time_tag['datetime'].strip()
        return None

    def strip_boilerplate(self, tags: Iterable[str], roles: Iterable[str] = ()) -> int:
        """
        Removes page chrome (navigation, sidebars, scripts, ...) from the document in place.

        Call this after reading metadata: bylines and dates often live in the chrome.

        Args:
            tags (Iterable[str]): Tag names to remove, e.g. 'nav', 'aside'.
            roles (Iterable[str]): ARIA role values whose elements are removed, e.g. 'navigation'.

        Returns:
            int: The number of elements removed.
        """
        removed = 0
        tag_names = list(tags)
        if tag_names:
            for element in self.soup.find_all(tag_names):
                if element.decomposed:
                    continue
                element.decompose()
                removed += 1
        role_names = {role.lower() for role in roles}
        if role_names:
            for element in self.soup.find_all(attrs={'role': lambda v: v and v.lower() in role_names}):
                if element.decomposed:
                    continue
                element.decompose()
                removed += 1
        return removed

    def to_html(self) -> str:
        return str(self.soup)
