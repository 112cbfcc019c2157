"""Provider registry mapping media types to catalog providers."""

from typing import Dict, List

from app.models.media import MediaType
from app.providers.base import CatalogProvider


class ProviderRegistry:
    """Registry for the catalog provider serving each media type."""

    def __init__(self, providers: List[CatalogProvider] | None = None):
        self._providers: Dict[MediaType, CatalogProvider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: CatalogProvider) -> None:
        """Register a provider instance for its media type."""
        self._providers[provider.media_type] = provider

    def get(self, media_type: MediaType) -> CatalogProvider | None:
        """Get the provider for a media type."""
        return self._providers.get(media_type)

    def all(self) -> List[CatalogProvider]:
        """Get all registered providers."""
        return list(self._providers.values())

    def names(self) -> List[str]:
        """Get names of all registered providers."""
        return [p.name for p in self._providers.values()]
