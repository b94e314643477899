"""
Explicit browser configuration for the Renderer component.

`BrowserSettings` collects every value the `PlaywrightManager` needs to launch
a browser and load a page, so nothing is read from module-level defaults at
render time.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from article_scraper.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from article_scraper.core.config import ConfigurationManager

SUPPORTED_BROWSER_TYPES = ('chromium', 'firefox', 'webkit')
SUPPORTED_WAIT_UNTIL = ('load', 'domcontentloaded', 'networkidle', 'commit')

CONFIG_PREFIX = 'components.playwright_manager'


@dataclass
class BrowserSettings:
    """
    Launch and navigation options for one browser session.

    Attributes:
        browser_type (str): 'chromium', 'firefox' or 'webkit'.
        headless (bool): Run without a visible window.
        executable_path (Optional[str]): Browser binary to use instead of Playwright's bundled one.
        args (List[str]): Extra command line flags passed to the browser process.
        ignore_https_errors (bool): Load pages with invalid certificates.
        viewport (Dict[str, int]): Page viewport, {'width': ..., 'height': ...}.
        user_agent (Optional[str]): Override for the browser's user agent.
        wait_until (str): Load state `page.goto` waits for.
        navigation_timeout_ms (int): Navigation timeout in milliseconds.
    """
    browser_type: str = 'chromium'
    headless: bool = True
    executable_path: Optional[str] = None
    args: List[str] = field(default_factory=list)
    ignore_https_errors: bool = True
    viewport: Dict[str, int] = field(default_factory=lambda: {'width': 1280, 'height': 800})
    user_agent: Optional[str] = None
    wait_until: str = 'load'
    navigation_timeout_ms: int = 30000

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Checks that the settings describe a launchable browser.

        Raises:
            ConfigurationError: On an unsupported browser type, wait state, or an invalid
                                timeout or viewport.
        """
        if self.browser_type not in SUPPORTED_BROWSER_TYPES:
            raise ConfigurationError(
                f"Unsupported browser type: {self.browser_type}. Must be 'chromium', 'firefox', or 'webkit'."
            )
        if self.wait_until not in SUPPORTED_WAIT_UNTIL:
            raise ConfigurationError(
                f"Unsupported wait_until value: {self.wait_until}. Must be one of {', '.join(SUPPORTED_WAIT_UNTIL)}."
            )
        if not isinstance(self.navigation_timeout_ms, int) or self.navigation_timeout_ms < 0:
            raise ConfigurationError(
                f"navigation_timeout_ms must be a non-negative integer, got {self.navigation_timeout_ms!r}."
            )
        if not isinstance(self.viewport, dict) or not {'width', 'height'} <= set(self.viewport):
            raise ConfigurationError(f"viewport must define 'width' and 'height', got {self.viewport!r}.")

    @classmethod
    def from_config(cls, config: Optional['ConfigurationManager']) -> 'BrowserSettings':
        """
        Builds settings from the `components.playwright_manager` section of the configuration.
        Missing keys keep their defaults.

        Args:
            config (Optional[ConfigurationManager]): Configuration source. If None, defaults are used.

        Returns:
            BrowserSettings: The validated settings.

        Raises:
            ConfigurationError: If a configured value is invalid.
        """
        if config is None:
            return cls()

        section = config.get(CONFIG_PREFIX, {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'{CONFIG_PREFIX}' must be a mapping, got {type(section).__name__}.")

        known_fields = cls.__dataclass_fields__
        kwargs: Dict[str, Any] = {k: v for k, v in section.items() if k in known_fields and v is not None}
        if 'args' in kwargs:
            kwargs['args'] = [str(arg) for arg in kwargs['args']]
        if 'navigation_timeout_ms' in kwargs:
            try:
                kwargs['navigation_timeout_ms'] = int(kwargs['navigation_timeout_ms'])
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"navigation_timeout_ms must be an integer, got {kwargs['navigation_timeout_ms']!r}."
                )
        return cls(**kwargs)

    def launch_options(self) -> Dict[str, Any]:
        """Keyword arguments for `BrowserType.launch()`."""
        options: Dict[str, Any] = {'headless': self.headless, 'args': list(self.args)}
        if self.executable_path:
            options['executable_path'] = self.executable_path
        return options

    def context_options(self) -> Dict[str, Any]:
        """Keyword arguments for `Browser.new_context()`."""
        options: Dict[str, Any] = {
            'viewport': dict(self.viewport),
            'ignore_https_errors': self.ignore_https_errors,
        }
        if self.user_agent:
            options['user_agent'] = self.user_agent
        return options
