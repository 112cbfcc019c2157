"""API routes returning JSON for monitoring."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    capabilities = request.app.state.capabilities
    return {
        "status": "ok",
        "service": "movie-book-finder",
        "providers": request.app.state.providers.names(),
        "capabilities": capabilities.model_dump(),
    }
