"""Domain exceptions for Movie/Book Finder."""


class FinderError(Exception):
    """Base class for all application errors."""


class ConfigError(FinderError):
    """A required credential or setting is missing."""


class CatalogError(FinderError):
    """A catalog provider could not answer a request."""

    def __init__(
        self,
        message: str,
        provider: str = "",
        original_exception: Exception | None = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.original_exception = original_exception


class NetworkError(CatalogError):
    """The provider could not be reached."""


class ProviderError(CatalogError):
    """The provider answered with a failure or an unreadable body."""
