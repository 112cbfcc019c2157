"""Google Books provider."""

import logging
from typing import List, Optional
from urllib.parse import quote

from app.core.errors import ProviderError
from app.models.media import BookDetails, BookHit, MediaType
from app.providers.base import CatalogProvider

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


def _join_authors(info: dict) -> Optional[str]:
    authors = info.get("authors")
    if isinstance(authors, list) and authors:
        return ", ".join(str(a) for a in authors)
    return None


def _pick_image(info: dict) -> Optional[str]:
    """Prefer the larger thumbnail, fall back to the small one."""
    links = info.get("imageLinks") or {}
    return links.get("thumbnail") or links.get("smallThumbnail") or None


def _parse_book_search(volume: dict) -> BookHit:
    """Parse a volume search result from Google Books."""
    info = volume.get("volumeInfo") or {}
    published_date = info.get("publishedDate") or ""

    return BookHit(
        id=str(volume["id"]),
        title=info.get("title") or "Untitled",
        authors=_join_authors(info),
        year=published_date[:4] or None,
        poster=_pick_image(info),
    )


def _parse_book_details(volume: dict) -> BookDetails:
    """Parse a full volume record from Google Books."""
    info = volume.get("volumeInfo") or {}
    categories = info.get("categories")

    return BookDetails(
        title=info.get("title") or "Untitled",
        authors=_join_authors(info),
        published_date=info.get("publishedDate"),
        description=info.get("description"),
        page_count=info.get("pageCount"),
        categories=categories if isinstance(categories, list) else [],
        image=_pick_image(info),
        preview_link=info.get("previewLink"),
    )


class GoogleBooksProvider(CatalogProvider):
    """Book search and details backed by the Google Books API."""

    API_BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    @property
    def name(self) -> str:
        return "Google Books"

    @property
    def media_type(self) -> MediaType:
        return MediaType.BOOK

    async def search(self, query: str, page: int = 1) -> List[BookHit]:
        """Search Google Books for volumes."""
        params = {
            "q": query,
            "printType": "books",
            "startIndex": (page - 1) * PAGE_SIZE,
            "maxResults": PAGE_SIZE,
        }
        status, data = await self._get(self.API_BASE_URL, params)

        if status >= 400:
            raise ProviderError(f"{self.name} returned HTTP {status}", self.name)
        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected response from {self.name}", self.name)

        items = data.get("items")
        if not items:
            logger.info(f"No books for '{query}'")
            return []

        return [_parse_book_search(v) for v in items]

    async def get_details(self, item_id: str) -> BookDetails | None:
        """Fetch full volume details from Google Books."""
        url = f"{self.API_BASE_URL}/{quote(item_id, safe='')}"
        status, data = await self._get(url)

        if status >= 400 or not isinstance(data, dict):
            logger.info(f"No book details for {item_id} (HTTP {status})")
            return None

        return _parse_book_details(data)
