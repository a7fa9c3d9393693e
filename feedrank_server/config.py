"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from feedrank.models.config import DEFAULT_CONFIG, RankingConfig

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent

STORE_KINDS = ("memory", "json", "firestore")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Store: "memory" | "json" | "firestore"
    store: str = "memory"
    data_path: Path = BASE_DIR / "data" / "feed.json"
    firebase_credentials_path: Optional[Path] = None
    firebase_project_id: Optional[str] = None

    # Poster OCR; no endpoint means clickbait scores stay 0
    ocr_endpoint: Optional[str] = None
    ocr_api_key: Optional[str] = None
    ocr_timeout_seconds: float = 10.0

    # Background interaction writes
    workers: int = 4

    # Optional JSON file with quality/relevance/feeds sections
    ranking_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "ServerConfig":
        """Load configuration from environment variables (after .env)."""
        env_path = env_file or BASE_DIR / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            store=os.getenv("FEEDRANK_STORE", "memory").strip().lower() or "memory",
            data_path=_path_env("FEEDRANK_DATA_PATH", BASE_DIR / "data" / "feed.json"),
            firebase_credentials_path=_path_env("FIREBASE_CREDENTIALS_PATH") or _path_env("GOOGLE_APPLICATION_CREDENTIALS"),
            firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
            ocr_endpoint=os.getenv("OCR_ENDPOINT") or None,
            ocr_api_key=os.getenv("OCR_API_KEY") or None,
            ocr_timeout_seconds=float(os.getenv("OCR_TIMEOUT_SECONDS", "10")),
            workers=int(os.getenv("FEEDRANK_WORKERS", "4")),
            ranking_config_path=_path_env("FEEDRANK_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.store not in STORE_KINDS:
            errors.append(f"FEEDRANK_STORE must be one of {', '.join(STORE_KINDS)}, got {self.store!r}")

        if self.store == "firestore" and self.firebase_credentials_path:
            if not self.firebase_credentials_path.is_file():
                errors.append(f"Firebase credentials file not found: {self.firebase_credentials_path}")

        if self.ranking_config_path and not self.ranking_config_path.is_file():
            errors.append(f"Ranking config file not found: {self.ranking_config_path}")

        if self.workers < 1:
            errors.append(f"FEEDRANK_WORKERS must be at least 1, got {self.workers}")

        if not 1 <= self.port <= 65535:
            errors.append(f"PORT out of range: {self.port}")

        return len(errors) == 0, errors


def load_ranking_config(config: ServerConfig) -> RankingConfig:
    """Ranking constants from FEEDRANK_CONFIG_PATH, or the defaults."""
    path = config.ranking_config_path
    if not path:
        return DEFAULT_CONFIG
    try:
        with open(path) as f:
            data = json.load(f)
        return RankingConfig.from_dict(data)
    except (IOError, ValueError) as e:
        logger.warning("[startup] could not load ranking config %s, using defaults: %s", path, e)
        return DEFAULT_CONFIG


def configure_logging(level: str = "INFO") -> None:
    """Single stream handler on the root logger."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
