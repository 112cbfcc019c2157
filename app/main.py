import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.routes_api import router as api_router
from app.api.routes_ui import Tab, router as ui_router
from app.core.config import Capabilities, Settings, get_settings
from app.providers import ProviderRegistry
from app.providers.base import CatalogProvider
from app.providers.google_books_provider import GoogleBooksProvider
from app.providers.omdb_provider import OMDbProvider
from app.services.details import DetailsController
from app.services.favorites import FavoritesStore, JsonFavoritesStore
from app.services.search import SearchController

load_dotenv()

logger = logging.getLogger(__name__)

# Paths
BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    """Application lifespan context manager."""
    try:
        yield
    finally:
        # Teardown providers
        for provider in app.state.providers.all():
            try:
                await provider.aclose()
            except Exception as e:
                logger.error(f"Error closing provider {provider.name}: {e}")


def create_app(
    settings: Settings | None = None,
    providers: list[CatalogProvider] | None = None,
    favorites: FavoritesStore | None = None,
) -> FastAPI:
    """Build the application with its providers, favorites store and controllers."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Movie/Book Finder",
        description="Search movies and books, keep a list of favorites",
        version="0.1.0",
        lifespan=app_lifespan,
    )

    # Mount static files
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    capabilities = Capabilities.from_settings(settings)
    if not capabilities.movie_search:
        logger.warning("OMDB_API_KEY is not set; movie search is disabled")

    registry = ProviderRegistry(
        providers
        if providers is not None
        else [OMDbProvider(settings), GoogleBooksProvider(settings)]
    )

    app.state.settings = settings
    app.state.capabilities = capabilities
    app.state.providers = registry
    app.state.favorites = (
        favorites if favorites is not None else JsonFavoritesStore(settings.favorites_path)
    )
    app.state.search = SearchController(registry, capabilities)
    app.state.details = DetailsController(registry)
    app.state.tab = Tab.RESULTS

    # Include routers
    app.include_router(ui_router)
    app.include_router(api_router, prefix="/api")
    return app
