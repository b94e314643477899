"""
Custom exception classes for the Article Scraper.
"""
from typing import Optional


class ArticleScraperError(Exception):
    """
    Base class for all custom exceptions in the Article Scraper.

    Attributes:
        message (str): A human-readable description of the error.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"


# --- Configuration Related Exceptions ---
class ConfigurationError(ArticleScraperError):
    """
    Raised when configuration values are present but unusable
    (e.g., an unsupported browser type or a non-numeric timeout).
    """
    def __init__(self, message: str):
        super().__init__(message)


# --- Invocation Related Exceptions ---
class InvalidEventError(ArticleScraperError):
    """
    Raised when an invocation event does not carry a usable `articleUrl`.
    """
    def __init__(self, message: str):
        super().__init__(message)


# --- Component Related Exceptions ---
class ComponentError(ArticleScraperError):
    """
    A general base class for errors originating from within a specific component
    (Renderer or Extractor).

    Attributes:
        component_name (str): Name of the component where the error originated.
    """
    def __init__(self, component_name: str, message: str):
        full_message = f"Error in component '{component_name}': {message}"
        super().__init__(full_message)
        self.component_name = component_name


class RendererError(ComponentError):
    """Raised for errors specific to the Renderer component (browser lifecycle, page rendering)."""
    def __init__(self, message: str):
        super().__init__(component_name="Renderer", message=message)


class BrowserLaunchError(RendererError):
    """
    Raised when Playwright cannot start or the browser process cannot be launched
    (missing executable, resource limits).
    """
    pass


class NavigationError(RendererError):
    """
    Raised when the target URL cannot be loaded (DNS failure, refused connection, timeout).

    Attributes:
        url (str): The URL that could not be loaded.
        timed_out (bool): True if the failure was a navigation timeout.
    """
    def __init__(self, url: str, message: str, timed_out: bool = False):
        super().__init__(message)
        self.url = url
        self.timed_out = timed_out


class ExtractorError(ComponentError):
    """Raised for errors specific to the Extractor component (DOM construction, readability parsing)."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        self.original_exception = original_exception
        if original_exception:
            message += f" (Original exception: {str(original_exception)})"
        super().__init__(component_name="Extractor", message=message)
