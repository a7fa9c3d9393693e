"""Application state: store, analyzer, engine, and viewer sessions."""

import logging
import threading
import uuid
from typing import Dict, Optional

from fastapi import Request

from feedrank import ClickbaitAnalyzer, FeedEngine, FeedSession, RankingConfig

from .config import ServerConfig, load_ranking_config
from .services import FirestoreFeedStore, HttpTextExtractor, InMemoryFeedStore, JsonFeedStore

logger = logging.getLogger(__name__)


def create_store(config: ServerConfig):
    """Store from FEEDRANK_STORE; falls back to memory when Firestore can't start."""
    if config.store == "firestore":
        cred_path = config.firebase_credentials_path
        if cred_path and not cred_path.is_file():
            logger.warning(
                "[startup] Firestore store skipped: credentials path not found or not a file: %s", cred_path
            )
        else:
            try:
                return FirestoreFeedStore(
                    project_id=config.firebase_project_id,
                    credentials_path=cred_path,
                )
            except Exception as e:
                logger.warning("[startup] Firestore store init failed: %s, using memory", e)
        return InMemoryFeedStore()
    if config.store == "json":
        return JsonFeedStore(config.data_path)
    return InMemoryFeedStore()


def create_analyzer(config: ServerConfig) -> ClickbaitAnalyzer:
    """Poster analyzer; OCR-backed when OCR_ENDPOINT is set, otherwise scores stay 0."""
    if config.ocr_endpoint:
        logger.info("[startup] Poster OCR: %s", config.ocr_endpoint)
        return ClickbaitAnalyzer(
            HttpTextExtractor(config.ocr_endpoint, config.ocr_api_key, config.ocr_timeout_seconds)
        )
    logger.info("[startup] Poster OCR not configured; clickbait scores are 0")
    return ClickbaitAnalyzer()


class AppState:
    """State shared by every request of one app instance."""

    def __init__(
        self,
        config: ServerConfig,
        store=None,
        ranking_config: Optional[RankingConfig] = None,
        analyzer: Optional[ClickbaitAnalyzer] = None,
    ):
        self.config = config
        self._stats_lock = threading.Lock()
        self.failed_writes = 0

        self.store = store if store is not None else create_store(config)
        logger.info("[startup] Feed store: %s", type(self.store).__name__)

        self.analyzer = analyzer or create_analyzer(config)
        self.engine = FeedEngine(
            self.store,
            config=ranking_config or load_ranking_config(config),
            analyzer=self.analyzer,
            max_workers=config.workers,
            on_failure=self._on_write_failure,
        )

        self._sessions_lock = threading.Lock()
        self.sessions: Dict[str, FeedSession] = {}

    def _on_write_failure(self, step, plan, error) -> None:
        # Runs on executor threads.
        with self._stats_lock:
            self.failed_writes += 1

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def create_session(self, user_id: Optional[str] = None) -> FeedSession:
        session = FeedSession(session_id=str(uuid.uuid4())[:8], user_id=user_id)
        with self._sessions_lock:
            self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> Optional[FeedSession]:
        with self._sessions_lock:
            return self.sessions.get(session_id)

    def hide(self, session_id: str, content_id: str) -> bool:
        with self._sessions_lock:
            session = self.sessions.get(session_id)
            if session is None:
                return False
            session.hide(content_id)
            return True

    def shutdown(self) -> None:
        self.engine.shutdown(wait=True)


def get_state(request: Request) -> AppState:
    """FastAPI dependency: the AppState attached by create_app."""
    return request.app.state.feedrank
