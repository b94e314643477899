from .config import get_config, config_manager, ConfigurationManager, ConfigError, ConfigFileNotFoundError, InvalidYamlError
from .exceptions import (
    ArticleScraperError,
    ConfigurationError,
    InvalidEventError,
    ComponentError,
    RendererError,
    BrowserLaunchError,
    NavigationError,
    ExtractorError,
)
from .logger import setup_logging, get_logger

__all__ = [
    # Config
    "get_config",
    "config_manager",
    "ConfigurationManager",
    "ConfigError",
    "ConfigFileNotFoundError",
    "InvalidYamlError",
    # Logger
    "setup_logging",
    "get_logger",
    # Exceptions
    "ArticleScraperError",
    "ConfigurationError",
    "InvalidEventError",
    "ComponentError",
    "RendererError",
    "BrowserLaunchError",
    "NavigationError",
    "ExtractorError",
]
