"""UI routes returning HTML via Jinja2 templates."""

import logging
from enum import Enum
from pathlib import Path

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.models.media import Hit, MediaType
from app.services.details import DetailsController
from app.services.favorites import FavoritesStore
from app.services.search import SearchController, SearchState

router = APIRouter()
logger = logging.getLogger(__name__)

# Templates directory
BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=BASE_DIR / "templates")

PLACEHOLDERS = {
    MediaType.MOVIE: "Search movies (e.g., Interstellar)",
    MediaType.BOOK: "Search books (e.g., Atomic Habits)",
}


class Tab(str, Enum):
    """Top-level views."""

    RESULTS = "results"
    FAVORITES = "favorites"


def placeholder_poster(media_type: str) -> str:
    return f"https://placehold.co/400x600?text={media_type}"


templates.env.globals["placeholder_poster"] = placeholder_poster


def _search(request: Request) -> SearchController:
    return request.app.state.search


def _details(request: Request) -> DetailsController:
    return request.app.state.details


def _favorites(request: Request) -> FavoritesStore:
    return request.app.state.favorites


def _render_main(request: Request):
    """Render everything below the brand: toggles, search bar and active view."""
    return templates.TemplateResponse(
        request=request,
        name="partials/main.html",
        context=_main_context(request),
    )


def _main_context(request: Request) -> dict:
    search = _search(request)
    session = search.session
    capabilities = request.app.state.capabilities
    return {
        "session": session,
        "tab": request.app.state.tab,
        "favorites": _favorites(request),
        "placeholder": PLACEHOLDERS[session.media_type],
        "can_search": search.can_submit(),
        "config_warning": not capabilities.enabled(session.media_type),
    }


def _lookup_hit(request: Request, media_type: MediaType, hit_id: str) -> Hit:
    """Find a hit among the current results or the favorites."""
    hit = _search(request).find_hit(media_type, hit_id) or _favorites(request).get(
        media_type, hit_id
    )
    if hit is None:
        logger.warning(f"Unknown {media_type.value} '{hit_id}' requested")
        raise HTTPException(status_code=404, detail="Item not found")
    return hit


@router.get("/")
async def index(request: Request):
    """Render the single-page finder."""
    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context=_main_context(request),
    )


@router.post("/media/{media_type}")
async def switch_media(
    request: Request,
    media_type: MediaType,
    query: str = Form(""),
):
    """Switch between movies and books, keeping the typed query."""
    search = _search(request)
    search.set_media_type(media_type)
    search.set_query(query)
    return _render_main(request)


@router.post("/view/{tab}")
async def switch_view(
    request: Request,
    tab: Tab,
    query: str = Form(""),
):
    """Switch between the Results and Favorites tabs."""
    request.app.state.tab = tab
    _search(request).set_query(query)
    return _render_main(request)


@router.post("/search")
async def search(
    request: Request,
    query: str = Form(""),
):
    """Handle search form submission and return the results view."""
    session = await _search(request).submit(query)
    if session.state == SearchState.RESULTS:
        request.app.state.tab = Tab.RESULTS
    return _render_main(request)


@router.post("/favorites/{media_type}/{hit_id}/toggle")
async def toggle_favorite(
    request: Request,
    media_type: MediaType,
    hit_id: str,
    query: str = Form(""),
):
    """Add or remove a hit from the favorites and re-render the active view."""
    hit = _lookup_hit(request, media_type, hit_id)
    _favorites(request).toggle(hit)
    _search(request).set_query(query)
    return _render_main(request)


@router.get("/details/{media_type}/{hit_id}")
async def details_modal(
    request: Request,
    media_type: MediaType,
    hit_id: str,
):
    """Return the details modal with a loading placeholder.

    The modal body fetches its content separately via HTMX.
    """
    hit = _lookup_hit(request, media_type, hit_id)
    view = _details(request).select(hit)

    return templates.TemplateResponse(
        request=request,
        name="partials/details_modal.html",
        context={"view": view},
    )


@router.get("/details/{media_type}/{hit_id}/content")
async def details_content(
    request: Request,
    media_type: MediaType,
    hit_id: str,
):
    """Fetch full details for a hit and return the modal body."""
    hit = _lookup_hit(request, media_type, hit_id)
    view = await _details(request).open(hit)

    return templates.TemplateResponse(
        request=request,
        name="partials/details_content.html",
        context={"view": view},
    )


@router.delete("/details")
async def close_details(request: Request):
    """Close the modal."""
    _details(request).close()
    return HTMLResponse("")
