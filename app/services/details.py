"""Details controller for the modal view of a single hit."""

import logging
from typing import Optional

from pydantic import BaseModel

from app.core.errors import CatalogError
from app.models.media import Details, Hit, MediaType
from app.providers import ProviderRegistry

logger = logging.getLogger(__name__)


class DetailsView(BaseModel):
    """What the modal renders: the opened hit and its fetched details."""

    hit: Hit
    details: Optional[Details] = None
    loading: bool = False

    @property
    def media_type(self) -> MediaType:
        return MediaType(self.hit.type)


class DetailsController:
    """Fetches full details for the selected hit.

    Loading state is tracked separately from the search flow. Details are
    never cached; every open re-fetches.
    """

    def __init__(self, providers: ProviderRegistry):
        self.providers = providers
        self.view: DetailsView | None = None
        self._sequence = 0

    @property
    def selected(self) -> Hit | None:
        return self.view.hit if self.view else None

    def select(self, hit: Hit) -> DetailsView:
        """Record the selected hit and clear any previous details."""
        self._sequence += 1
        self.view = DetailsView(hit=hit, loading=True)
        return self.view

    async def open(self, hit: Hit) -> DetailsView:
        view = self.select(hit)
        token = self._sequence

        details = None
        provider = self.providers.get(MediaType(hit.type))
        if provider is None:
            logger.warning(f"No provider registered for {hit.type}")
        else:
            try:
                details = await provider.get_details(hit.id)
            except CatalogError as e:
                logger.error(f"Failed to fetch {hit.type} details for {hit.id}: {e}")
            except Exception:
                logger.exception(f"Unexpected error fetching {hit.type} details for {hit.id}")

        if token != self._sequence:
            # Another hit was opened, or the modal closed, in the meantime
            logger.debug(f"Discarding stale details for {hit.type} {hit.id}")
            return view

        view.details = details
        view.loading = False
        return view

    def close(self) -> None:
        self._sequence += 1
        self.view = None
