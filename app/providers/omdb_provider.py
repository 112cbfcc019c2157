"""OMDb movie provider."""

import logging
from typing import Any, List, Optional

from app.core.errors import ConfigError, ProviderError
from app.models.media import MediaType, MovieDetails, MovieHit
from app.providers.base import CatalogProvider

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def _value(record: dict, key: str) -> Optional[str]:
    """Return a field from an OMDb record, mapping the "N/A" sentinel to None."""
    value = record.get(key)
    if value in (None, "", NOT_AVAILABLE):
        return None
    return str(value)


def _parse_movie_search(movie: dict) -> MovieHit:
    """Parse a movie search result from OMDb."""
    return MovieHit(
        id=str(movie["imdbID"]),
        title=_value(movie, "Title") or "Untitled",
        year=_value(movie, "Year"),
        poster=_value(movie, "Poster"),
    )


def _parse_movie_details(info: dict) -> MovieDetails:
    """Parse a full movie record from OMDb."""
    return MovieDetails(
        title=_value(info, "Title") or "Untitled",
        year=_value(info, "Year"),
        genre=_value(info, "Genre"),
        plot=_value(info, "Plot"),
        runtime=_value(info, "Runtime"),
        director=_value(info, "Director"),
        actors=_value(info, "Actors"),
        poster=_value(info, "Poster"),
        rating=_value(info, "imdbRating"),
    )


class OMDbProvider(CatalogProvider):
    """Movie search and details backed by the OMDb API."""

    API_URL = "https://www.omdbapi.com/"

    @property
    def name(self) -> str:
        return "OMDb"

    @property
    def media_type(self) -> MediaType:
        return MediaType.MOVIE

    @property
    def api_key(self) -> str | None:
        key = self._settings.omdb_api_key
        return key.get_secret_value() if key else None

    @staticmethod
    def _is_success(data: Any) -> bool:
        return isinstance(data, dict) and data.get("Response") != "False"

    async def search(self, query: str, page: int = 1) -> List[MovieHit]:
        """Search OMDb for movies."""
        if not self.api_key:
            raise ConfigError("Missing OMDb API key. Add OMDB_API_KEY in .env")

        params = {"apikey": self.api_key, "s": query, "type": "movie", "page": page}
        status, data = await self._get(self.API_URL, params)

        if status >= 400:
            message = data.get("Error") if isinstance(data, dict) else None
            raise ProviderError(
                message or f"{self.name} returned HTTP {status}", self.name
            )
        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected response from {self.name}", self.name)
        if not self._is_success(data):
            logger.info(f"No movies for '{query}': {data.get('Error', 'no results')}")
            return []

        return [_parse_movie_search(m) for m in data.get("Search") or []]

    async def get_details(self, item_id: str) -> MovieDetails | None:
        """Fetch full movie details from OMDb."""
        if not self.api_key:
            return None

        params = {"apikey": self.api_key, "i": item_id, "plot": "full"}
        status, data = await self._get(self.API_URL, params)

        if status >= 400 or not self._is_success(data):
            logger.info(f"No movie details for {item_id} (HTTP {status})")
            return None

        return _parse_movie_details(data)
