"""
Explicit configuration for the Extractor component.
"""
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from article_scraper.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from article_scraper.core.config import ConfigurationManager

CONFIG_PREFIX = 'components.extractor'

DEFAULT_STRIP_TAGS = ['nav', 'aside', 'footer', 'script', 'style', 'noscript', 'iframe', 'svg']
DEFAULT_STRIP_ROLES = ['navigation', 'banner', 'complementary', 'contentinfo']


@dataclass
class ExtractorSettings:
    """
    Attributes:
        min_text_length (int): Extracted text shorter than this counts as "no article".
                               0 accepts any text outside links.
        excerpt_length (int): Maximum length of an excerpt taken from the first paragraph.
        strip_tags (List[str]): Tag names removed before readability runs.
        strip_roles (List[str]): ARIA roles whose elements are removed before readability runs.
    """
    min_text_length: int = 0
    excerpt_length: int = 200
    strip_tags: List[str] = field(default_factory=lambda: list(DEFAULT_STRIP_TAGS))
    strip_roles: List[str] = field(default_factory=lambda: list(DEFAULT_STRIP_ROLES))

    def __post_init__(self):
        for name in ('min_text_length', 'excerpt_length'):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}.")

    @classmethod
    def from_config(cls, config: Optional['ConfigurationManager']) -> 'ExtractorSettings':
        """
        Builds settings from the `components.extractor` section of the configuration.

        Raises:
            ConfigurationError: If a configured value is invalid.
        """
        if config is None:
            return cls()
        section = config.get(CONFIG_PREFIX, {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'{CONFIG_PREFIX}' must be a mapping, got {type(section).__name__}.")
        kwargs = {k: v for k, v in section.items() if k in cls.__dataclass_fields__ and v is not None}
        for name in ('strip_tags', 'strip_roles'):
            if name in kwargs:
                kwargs[name] = [str(item).lower() for item in kwargs[name]]
        return cls(**kwargs)
