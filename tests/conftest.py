import asyncio
from typing import List

import pytest

from app.core.config import Capabilities, Settings
from app.models.media import BookHit, MediaType, MovieHit
from app.providers import ProviderRegistry
from app.providers.base import CatalogProvider


def make_settings(**overrides) -> Settings:
    """Settings that ignore the developer's .env file."""
    values = {"omdb_api_key": "test-key"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeProvider(CatalogProvider):
    """Provider returning canned hits and details, recording every call."""

    def __init__(self, media_type, hits=None, details=None, error=None):
        super().__init__(make_settings())
        self._media_type = MediaType(media_type)
        self.hits = hits or []
        self.details = details
        self.error = error
        self.search_calls: List[tuple[str, int]] = []
        self.details_calls: List[str] = []

    @property
    def name(self) -> str:
        return f"Fake {self._media_type.value}"

    @property
    def media_type(self) -> MediaType:
        return self._media_type

    async def search(self, query, page=1):
        self.search_calls.append((query, page))
        if self.error:
            raise self.error
        return self.hits

    async def get_details(self, item_id):
        self.details_calls.append(item_id)
        if self.error:
            raise self.error
        return self.details


class GatedProvider(FakeProvider):
    """Provider whose searches block until the test releases them."""

    def __init__(self, media_type, results: dict):
        super().__init__(media_type)
        self.results = results
        self.gates = {query: asyncio.Event() for query in results}

    async def search(self, query, page=1):
        self.search_calls.append((query, page))
        await self.gates[query].wait()
        return self.results[query]


class GatedDetailsProvider(FakeProvider):
    """Provider whose detail fetches block until the test releases them."""

    def __init__(self, media_type, details=None):
        super().__init__(media_type, details=details)
        self.gate = asyncio.Event()

    async def get_details(self, item_id):
        self.details_calls.append(item_id)
        await self.gate.wait()
        return self.details


INTERSTELLAR = MovieHit(
    id="tt0816692",
    title="Interstellar",
    year="2014",
    poster="https://m.media-amazon.com/images/M/interstellar.jpg",
)

ATOMIC_HABITS = BookHit(
    id="abc123",
    title="Atomic Habits",
    year="2018",
    authors="James Clear",
)


@pytest.fixture
def movie_provider():
    return FakeProvider(MediaType.MOVIE, hits=[INTERSTELLAR])


@pytest.fixture
def book_provider():
    return FakeProvider(MediaType.BOOK, hits=[ATOMIC_HABITS])


@pytest.fixture
def registry(movie_provider, book_provider):
    return ProviderRegistry([movie_provider, book_provider])


@pytest.fixture
def capabilities():
    return Capabilities(movie_search=True)
