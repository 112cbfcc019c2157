"""Catalog provider base classes and interfaces."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List

import niquests

from app.core.config import Settings, get_settings
from app.core.errors import NetworkError
from app.models.media import Details, Hit, MediaType

logger = logging.getLogger(__name__)


class CatalogProvider(ABC):
    """Abstract base class for catalog providers.

    A provider wraps one external search/details API and translates its
    raw records into ``Hit`` and ``Details`` models. Optional or sentinel
    fields are mapped to ``None`` rather than raising.
    """

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self._settings = settings
        self.session = niquests.AsyncSession()
        if settings.proxy:
            self.session.proxies = {"http": settings.proxy, "https": settings.proxy}

    async def aclose(self) -> None:
        """Properly close the internal HTTP session."""
        if hasattr(self, "session") and self.session:
            await self.session.close()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the display name of this provider."""
        pass

    @property
    @abstractmethod
    def media_type(self) -> MediaType:
        """Return the media type this provider serves."""
        pass

    @abstractmethod
    async def search(self, query: str, page: int = 1) -> List[Hit]:
        """Search the catalog.

        Args:
            query: The search text.
            page: 1-based page number.

        Returns:
            A list of hits, empty when the provider has no results.
        """
        pass

    @abstractmethod
    async def get_details(self, item_id: str) -> Details | None:
        """Fetch the full record for one item.

        Args:
            item_id: The provider-assigned id.

        Returns:
            The details, or None when the provider reports a failure.
        """
        pass

    async def _get(self, url: str, params: dict | None = None) -> tuple[int, Any]:
        """Perform a GET request and return (status code, decoded JSON body).

        The body is None when it cannot be decoded as JSON.
        """
        logger.debug(f"{self.name}: GET {url}")
        try:
            response = await self.session.get(url, params=params)
        except niquests.exceptions.RequestException as e:
            logger.error(f"Error requesting {self.name}: {e}")
            raise NetworkError(f"Could not reach {self.name}", self.name, e)

        try:
            data = response.json()
        except ValueError:
            data = None
        return response.status_code, data
