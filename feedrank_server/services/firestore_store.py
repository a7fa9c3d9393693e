"""
Firestore feed store.

Collections:
- videos/{content_id}: ContentItem fields (created_at as ISO string or timestamp)
- user_preferences/{user_id}: { preferred_tags, muted_channels, updated_at }
- user_interactions/{auto_id}: { user_id, content_id, kind, timestamp }

Used when FEEDRANK_STORE=firestore. Every backend exception is re-raised as
StoreError so the engine can degrade. Pass db to inject a client (tests).
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from feedrank.errors import StoreError
from feedrank.models.content import ContentItem
from feedrank.models.interaction import Interaction, InteractionKind
from feedrank.models.preferences import PreferenceModel
from feedrank.store import COUNTER_FIELDS, ItemQuery

logger = logging.getLogger(__name__)

VIDEOS = "videos"
PREFERENCES = "user_preferences"
INTERACTIONS = "user_interactions"


class FirestoreFeedStore:
    """FeedStore backed by Cloud Firestore via firebase-admin."""

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
        db: Any = None,
    ):
        if db is None:
            try:
                import firebase_admin
                from firebase_admin import credentials, firestore
            except ImportError:
                raise ImportError(
                    "firebase-admin is required for FirestoreFeedStore. pip install firebase-admin"
                )
            if not firebase_admin._apps:
                if credentials_path:
                    cred = credentials.Certificate(str(Path(credentials_path).resolve()))
                    opts = {"projectId": project_id} if project_id else None
                    firebase_admin.initialize_app(cred, opts)
                else:
                    firebase_admin.initialize_app(options={"projectId": project_id} if project_id else None)
            db = firestore.client()
        self._db = db
        self._videos = self._db.collection(VIDEOS)
        self._preferences = self._db.collection(PREFERENCES)
        self._interactions = self._db.collection(INTERACTIONS)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def query_items(self, query: ItemQuery) -> List[ContentItem]:
        from firebase_admin import firestore

        ref = self._videos
        if query.is_preview is not None:
            ref = ref.where("is_preview", "==", query.is_preview)
        if query.min_quality is not None:
            ref = ref.where("quality_score", ">=", query.min_quality)
        ref = ref.order_by(query.order_by.value, direction=firestore.Query.DESCENDING)
        # Exclusions are applied client-side; over-fetch so the limit still fills.
        ref = ref.limit(query.limit + len(query.exclude_ids))
        try:
            items = [self._doc_to_item(doc) for doc in ref.stream()]
        except Exception as e:
            raise StoreError(f"query_items failed: {e}") from e
        return [item for item in items if query.matches(item)][: query.limit]

    def get_item(self, content_id: str) -> Optional[ContentItem]:
        try:
            doc = self._videos.document(content_id).get()
        except Exception as e:
            raise StoreError(f"get_item failed for {content_id}: {e}") from e
        return self._doc_to_item(doc) if doc.exists else None

    def query_preferences(self, user_id: str) -> Optional[PreferenceModel]:
        try:
            doc = self._preferences.document(user_id).get()
        except Exception as e:
            raise StoreError(f"query_preferences failed for {user_id}: {e}") from e
        if not doc.exists:
            return None
        d = doc.to_dict() or {}
        return PreferenceModel(
            preferred_tags=d.get("preferred_tags") or [],
            muted_channels=d.get("muted_channels") or [],
        )

    def query_interactions(
        self,
        user_id: str,
        kinds: Iterable[InteractionKind],
    ) -> List[Interaction]:
        kind_values = [InteractionKind(k).value for k in kinds]
        ref = self._interactions.where("user_id", "==", user_id).where("kind", "in", kind_values)
        try:
            return [self._doc_to_interaction(doc) for doc in ref.stream()]
        except Exception as e:
            raise StoreError(f"query_interactions failed for {user_id}: {e}") from e

    def count_interactions(self, content_id: str, kind: InteractionKind) -> int:
        ref = (
            self._interactions
            .where("content_id", "==", content_id)
            .where("kind", "==", InteractionKind(kind).value)
        )
        try:
            return sum(1 for _ in ref.stream())
        except Exception as e:
            raise StoreError(f"count_interactions failed for {content_id}: {e}") from e

    def has_preview(self, content_id: str) -> bool:
        ref = self._videos.where("preview_of", "==", content_id).where("is_preview", "==", True).limit(1)
        try:
            return any(True for _ in ref.stream())
        except Exception as e:
            raise StoreError(f"has_preview failed for {content_id}: {e}") from e

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def upsert_preferences(
        self,
        user_id: str,
        preferred_tags: Optional[List[str]] = None,
        muted_channels: Optional[List[str]] = None,
    ) -> None:
        data: Dict[str, Any] = {"user_id": user_id, "updated_at": _now_iso()}
        if preferred_tags is not None:
            data["preferred_tags"] = list(preferred_tags)
        if muted_channels is not None:
            data["muted_channels"] = list(muted_channels)
        try:
            self._preferences.document(user_id).set(data, merge=True)
        except Exception as e:
            raise StoreError(f"upsert_preferences failed for {user_id}: {e}") from e

    def increment_counter(self, content_id: str, field: str, delta: int = 1) -> None:
        if field not in COUNTER_FIELDS:
            raise StoreError(f"Unknown counter field: {field}")
        from firebase_admin import firestore

        try:
            self._videos.document(content_id).update({field: firestore.Increment(delta)})
        except Exception as e:
            raise StoreError(f"increment_counter failed for {content_id}.{field}: {e}") from e

    def insert_interaction(self, interaction: Interaction) -> None:
        data = {
            "user_id": interaction.user_id,
            "content_id": interaction.content_id,
            "kind": interaction.kind.value,
            "timestamp": interaction.timestamp.isoformat(),
        }
        try:
            self._interactions.add(data)
        except Exception as e:
            raise StoreError(f"insert_interaction failed for {interaction.content_id}: {e}") from e

    def update_quality_score(self, content_id: str, score: float) -> None:
        clamped = max(0.0, min(100.0, float(score)))
        try:
            self._videos.document(content_id).update({"quality_score": clamped})
        except Exception as e:
            raise StoreError(f"update_quality_score failed for {content_id}: {e}") from e

    def add_item(self, item: ContentItem) -> None:
        data = item.model_dump(mode="json")
        data.pop("id", None)
        try:
            self._videos.document(item.id).set(data)
        except Exception as e:
            raise StoreError(f"add_item failed for {item.id}: {e}") from e

    def ping(self) -> bool:
        try:
            for _ in self._videos.limit(1).stream():
                break
            return True
        except Exception as e:
            logger.warning("[store] Firestore not reachable: %s", e)
            return False

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def _doc_to_item(self, doc: Any) -> ContentItem:
        d = doc.to_dict() or {}
        d["id"] = doc.id
        return ContentItem.model_validate(d)

    def _doc_to_interaction(self, doc: Any) -> Interaction:
        d = doc.to_dict() or {}
        return Interaction.model_validate(d)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
