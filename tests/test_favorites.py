import json

from app.models.media import BookHit, MovieHit
from app.services.favorites import InMemoryFavoritesStore, JsonFavoritesStore
from conftest import ATOMIC_HABITS, INTERSTELLAR

DUNE = MovieHit(id="tt1160419", title="Dune", year="2021")


def test_toggle_adds_to_front_and_removes():
    store = InMemoryFavoritesStore([DUNE])

    assert store.toggle(INTERSTELLAR) is True
    assert [f.id for f in store.all()] == ["tt0816692", "tt1160419"]
    assert store.is_favorite("movie", "tt0816692")

    assert store.toggle(INTERSTELLAR) is False
    assert [f.id for f in store.all()] == ["tt1160419"]
    assert not store.is_favorite("movie", "tt0816692")


def test_toggle_twice_restores_original_list():
    store = InMemoryFavoritesStore([DUNE, ATOMIC_HABITS])
    before = store.all()

    store.toggle(INTERSTELLAR)
    store.toggle(INTERSTELLAR)

    assert store.all() == before


def test_every_toggle_writes_through():
    store = InMemoryFavoritesStore()

    store.toggle(INTERSTELLAR)
    assert store.saved == [INTERSTELLAR]
    store.toggle(ATOMIC_HABITS)
    assert store.saved == [ATOMIC_HABITS, INTERSTELLAR]
    assert store.save_count == 2


def test_same_id_different_type_does_not_collide():
    """A movie and a book sharing an id string are separate favorites."""
    movie = MovieHit(id="shared", title="The Movie")
    book = BookHit(id="shared", title="The Book")
    store = InMemoryFavoritesStore()

    store.toggle(movie)
    assert store.is_favorite("movie", "shared")
    assert not store.is_favorite("book", "shared")

    store.toggle(book)
    assert len(store) == 2
    assert store.get("book", "shared") == book


def test_json_store_persists_across_reload(tmp_path):
    path = tmp_path / "favorites.json"
    store = JsonFavoritesStore(path)
    store.toggle(DUNE)
    store.toggle(ATOMIC_HABITS)
    store.toggle(INTERSTELLAR)

    reloaded = JsonFavoritesStore(path)
    assert [(f.type, f.id) for f in reloaded.all()] == [
        ("movie", "tt0816692"),
        ("book", "abc123"),
        ("movie", "tt1160419"),
    ]
    assert reloaded.all() == store.all()


def test_json_store_missing_file_is_empty(tmp_path):
    store = JsonFavoritesStore(tmp_path / "nope" / "favorites.json")
    assert store.all() == []

    store.toggle(INTERSTELLAR)
    assert (tmp_path / "nope" / "favorites.json").exists()


def test_json_store_corrupt_content_is_empty(tmp_path):
    path = tmp_path / "favorites.json"
    path.write_text("{not json at all", encoding="utf-8")

    assert JsonFavoritesStore(path).all() == []


def test_json_store_non_list_content_is_empty(tmp_path):
    path = tmp_path / "favorites.json"
    path.write_text('{"id": "tt0816692"}', encoding="utf-8")

    assert JsonFavoritesStore(path).all() == []


def test_json_store_skips_malformed_entries(tmp_path):
    path = tmp_path / "favorites.json"
    path.write_text(
        json.dumps(
            [
                {"type": "movie", "id": "tt0816692", "title": "Interstellar"},
                {"type": "podcast", "id": "p1", "title": "Unknown type"},
                {"type": "book"},
                {"type": "movie", "id": "tt0816692", "title": "Duplicate"},
            ]
        ),
        encoding="utf-8",
    )

    favorites = JsonFavoritesStore(path).all()
    assert len(favorites) == 1
    assert favorites[0].title == "Interstellar"


def test_json_store_file_layout(tmp_path):
    """The file holds a plain JSON array of hits."""
    path = tmp_path / "favorites.json"
    JsonFavoritesStore(path).toggle(ATOMIC_HABITS)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [
        {
            "type": "book",
            "id": "abc123",
            "title": "Atomic Habits",
            "year": "2018",
            "poster": None,
            "authors": "James Clear",
        }
    ]
