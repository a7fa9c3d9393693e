"""Root and health endpoints."""

from fastapi import APIRouter, Depends

from ..state import AppState, get_state

router = APIRouter()

SERVICE_NAME = "Feedrank API"
VERSION = "1.0.0"


@router.get("/")
def root(state: AppState = Depends(get_state)):
    return {
        "name": SERVICE_NAME,
        "version": VERSION,
        "store": type(state.store).__name__,
        "sessions": len(state.sessions),
        "endpoints": {
            "sessions": ["/api/sessions", "/api/sessions/{id}"],
            "feeds": [
                "/api/feeds/home",
                "/api/feeds/recommended",
                "/api/feeds/showcase",
                "/api/feeds/previews",
                "/api/feeds/free-for-all",
            ],
            "interactions": ["/api/interactions"],
            "analysis": ["/api/analysis/clickbait"],
            "quality": ["/api/quality/refresh"],
        },
    }


@router.get("/api/health")
def health(state: AppState = Depends(get_state)):
    ping = getattr(state.store, "ping", None)
    store_ok = bool(ping()) if ping is not None else True
    return {
        "status": "healthy" if store_ok else "degraded",
        "store": {"type": type(state.store).__name__, "available": store_ok},
        "failed_writes": state.failed_writes,
    }
