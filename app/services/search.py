"""Search controller holding the transient search session."""

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from app.core.config import Capabilities
from app.core.errors import CatalogError, ConfigError
from app.models.media import Hit, MediaType
from app.providers import ProviderRegistry

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
GENERIC_ERROR = "Something went wrong"


class SearchState(str, Enum):
    """Lifecycle of a search session."""

    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS = "results"
    ERROR = "error"


class SearchSession(BaseModel):
    """In-memory state of the search box and its results. Never persisted."""

    media_type: MediaType = MediaType.MOVIE
    query: str = ""
    hits: List[Hit] = []
    state: SearchState = SearchState.IDLE
    error: Optional[str] = None
    term: str = ""

    @property
    def searching(self) -> bool:
        return self.state == SearchState.SEARCHING


def can_search(query: str) -> bool:
    """A query is submittable once it has at least two non-blank characters."""
    return len(query.strip()) >= MIN_QUERY_LENGTH


class SearchController:
    """Runs searches against the provider for the active media type.

    Each submit takes a sequence token; a response whose token is no
    longer current belongs to a superseded search and is dropped.
    """

    def __init__(self, providers: ProviderRegistry, capabilities: Capabilities):
        self.providers = providers
        self.capabilities = capabilities
        self.session = SearchSession()
        self._sequence = 0

    def set_media_type(self, media_type: MediaType) -> None:
        """Switch the active media type. The last query is not re-run."""
        self.session.media_type = MediaType(media_type)

    def set_query(self, query: str) -> None:
        self.session.query = query

    def can_submit(self, query: str | None = None) -> bool:
        query = self.session.query if query is None else query
        return can_search(query) and self.capabilities.enabled(
            self.session.media_type
        )

    def find_hit(self, media_type: MediaType, item_id: str) -> Hit | None:
        """Look up a hit from the current result list."""
        return next(
            (h for h in self.session.hits if h.type == media_type and h.id == item_id),
            None,
        )

    async def submit(self, query: str | None = None) -> SearchSession:
        """Submit a search for page 1 of the current media type.

        Too-short queries and disabled media types are ignored without
        touching the network.
        """
        if query is not None:
            self.set_query(query)
        session = self.session

        if not self.can_submit():
            logger.debug(f"Ignoring search for '{session.query}'")
            return session

        provider = self.providers.get(session.media_type)
        if provider is None:
            logger.warning(f"No provider registered for {session.media_type.value}")
            return session

        self._sequence += 1
        token = self._sequence
        session.state = SearchState.SEARCHING
        session.error = None
        term = session.query.strip()

        try:
            hits = await provider.search(term, 1)
        except ConfigError as e:
            # Surfaced through capabilities as a persistent warning
            logger.warning(f"{provider.name} is not configured: {e}")
            if token == self._sequence:
                session.state = SearchState.IDLE
            return session
        except CatalogError as e:
            if token != self._sequence:
                return session
            logger.error(f"Search on {provider.name} for '{term}' failed: {e}")
            session.state = SearchState.ERROR
            session.error = str(e) or GENERIC_ERROR
            return session
        except Exception as e:
            if token != self._sequence:
                return session
            logger.exception(f"Unexpected error searching {provider.name}: {e}")
            session.state = SearchState.ERROR
            session.error = GENERIC_ERROR
            return session

        if token != self._sequence:
            logger.debug(f"Discarding stale results for '{term}'")
            return session

        session.hits = hits
        session.term = term
        session.state = SearchState.RESULTS
        logger.info(f"{provider.name}: {len(hits)} results for '{term}'")
        return session
