"""Feedrank HTTP service: stores, OCR client, and the FastAPI app."""

from .app import create_app
from .config import ServerConfig

__all__ = ["ServerConfig", "create_app"]
