"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .analysis import router as analysis_router
from .feeds import router as feeds_router
from .interactions import router as interactions_router
from .quality import router as quality_router
from .root import router as root_router
from .sessions import router as sessions_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(sessions_router, prefix="/api/sessions", tags=["sessions"])
    app.include_router(feeds_router, prefix="/api/feeds", tags=["feeds"])
    app.include_router(interactions_router, prefix="/api/interactions", tags=["interactions"])
    app.include_router(analysis_router, prefix="/api/analysis", tags=["analysis"])
    app.include_router(quality_router, prefix="/api/quality", tags=["quality"])
