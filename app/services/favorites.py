"""Favorites store: an ordered, deduplicated list of hits kept on the device."""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from pydantic import ValidationError

from app.models.media import Hit, HitAdapter, HitList, MediaType

logger = logging.getLogger(__name__)


def _key(hit: Hit) -> tuple[str, str]:
    return (hit.type, hit.id)


class FavoritesStore(ABC):
    """Favorites list with toggle semantics.

    Entries are keyed by ``(type, id)`` and kept most-recently-added first.
    Every mutation is written through to storage immediately.
    """

    def __init__(self):
        self._favorites: List[Hit] = self.load()

    @abstractmethod
    def load(self) -> List[Hit]:
        """Read the persisted list. Never raises; returns [] when unreadable."""
        pass

    @abstractmethod
    def _save(self, favorites: List[Hit]) -> None:
        """Replace the persisted list."""
        pass

    def all(self) -> List[Hit]:
        return list(self._favorites)

    def is_favorite(self, media_type: MediaType | str, item_id: str) -> bool:
        key = (MediaType(media_type).value, item_id)
        return any(_key(f) == key for f in self._favorites)

    def get(self, media_type: MediaType | str, item_id: str) -> Hit | None:
        key = (MediaType(media_type).value, item_id)
        return next((f for f in self._favorites if _key(f) == key), None)

    def toggle(self, hit: Hit) -> bool:
        """Add the hit to the front, or remove it if already present.

        Returns:
            True if the hit is a favorite after the call.
        """
        if any(_key(f) == _key(hit) for f in self._favorites):
            self._favorites = [f for f in self._favorites if _key(f) != _key(hit)]
            added = False
        else:
            self._favorites = [hit, *self._favorites]
            added = True

        self._save(self._favorites)
        logger.info(
            f"Favorite {'added' if added else 'removed'}: {hit.type} {hit.id}"
        )
        return added

    def __len__(self) -> int:
        return len(self._favorites)


class JsonFavoritesStore(FavoritesStore):
    """Favorites persisted as a JSON array in a local file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__()

    def load(self) -> List[Hit]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning(f"Could not read favorites from {self.path}: {e}")
            return []

        try:
            entries = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable favorites in {self.path}: {e}")
            return []
        if not isinstance(entries, list):
            logger.warning(f"Ignoring favorites in {self.path}: not a list")
            return []

        favorites: List[Hit] = []
        seen = set()
        for entry in entries:
            try:
                hit = HitAdapter.validate_python(entry)
            except ValidationError:
                logger.warning(f"Skipping malformed favorite entry: {entry!r}")
                continue
            if _key(hit) not in seen:
                seen.add(_key(hit))
                favorites.append(hit)
        return favorites

    def _save(self, favorites: List[Hit]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(HitList.dump_json(favorites))
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class InMemoryFavoritesStore(FavoritesStore):
    """Favorites kept in a plain list. Useful for tests."""

    def __init__(self, favorites: List[Hit] | None = None):
        self.saved: List[Hit] = list(favorites or [])
        self.save_count = 0
        super().__init__()

    def load(self) -> List[Hit]:
        return list(self.saved)

    def _save(self, favorites: List[Hit]) -> None:
        self.saved = list(favorites)
        self.save_count += 1
