"""
Feedrank API: FastAPI app factory.

Use: uvicorn feedrank_server.app:create_app --factory
Or:  python -m feedrank_server.server
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import ServerConfig, configure_logging
from .routes import register_routes
from .state import AppState

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None, state: Optional[AppState] = None) -> FastAPI:
    """Build FastAPI app with CORS, routes, and shared state."""
    if state is None:
        config = config or ServerConfig.from_env()
        configure_logging(config.log_level)
        ok, errors = config.validate()
        for error in errors:
            logger.warning("[startup] config: %s", error)
        state = AppState(config)

    app = FastAPI(
        title="Feedrank API",
        description="Video feed ranking, viewer preferences, and interaction recording",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.feedrank = state
    register_routes(app)

    @app.on_event("startup")
    async def _startup_logging():
        cfg = state.config
        logger.info("[startup] Feedrank API starting...")
        logger.info("[startup] Store: %s (%s)", cfg.store, type(state.store).__name__)
        logger.info("[startup] Interaction workers: %d", cfg.workers)

    @app.on_event("shutdown")
    def _drain_interactions():
        logger.info("[startup] draining pending interaction writes")
        state.shutdown()

    return app
