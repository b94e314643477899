"""
Pydantic models for invocation payloads and parsed articles.

Both models accept and emit camelCase keys (`articleUrl`, `textContent`, `siteName`, ...)
so the serverless event and result shapes match what callers send and store.
"""
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class ParseArticleRequest(BaseModel):
    """
    Invocation payload: the article URL to fetch.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    article_url: str

    @field_validator("article_url")
    @classmethod
    def check_article_url(cls, value: str) -> str:
        value = value.strip()
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"articleUrl must be an absolute http(s) URL, got '{value}'")
        return value


class ParsedArticle(BaseModel):
    """
    Readable article content extracted from a rendered page.

    When no article could be extracted, `content` is None, `text_content` is empty
    and `length` is 0; page-level metadata (title, lang, ...) is still filled in.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    byline: Optional[str] = None
    dir: Optional[str] = None
    lang: Optional[str] = None
    content: Optional[str] = None
    text_content: str = ""
    length: int = 0
    excerpt: Optional[str] = None
    site_name: Optional[str] = None
    published_time: Optional[str] = None

    @property
    def has_content(self) -> bool:
        """True if readable article content was extracted."""
        return bool(self.content) and self.length > 0

    def to_response(self) -> Dict[str, Any]:
        """Serializes the article with camelCase keys, as returned to the invoking platform."""
        return self.model_dump(by_alias=True)
