"""
JSON file feed store.

InMemoryFeedStore persisted to a single JSON file (e.g. data/feed.json) with
"items", "preferences", and "interactions" keys. The whole file is rewritten
after every write; meant for local development, not for concurrent servers.
"""

import json
import logging
import os
from pathlib import Path
from typing import Union

from feedrank.errors import StoreError
from feedrank.models.content import ensure_items
from feedrank.models.interaction import ensure_interactions
from feedrank.models.preferences import PreferenceModel

from .memory_store import InMemoryFeedStore

logger = logging.getLogger(__name__)


class JsonFeedStore(InMemoryFeedStore):
    """Feed store backed by a JSON file."""

    def __init__(self, path: Union[Path, str]):
        super().__init__()
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("[store] could not read %s, starting empty: %s", self._path, e)
            return
        for item in ensure_items(data.get("items", [])):
            self._items[item.id] = item
        for user_id, prefs in (data.get("preferences") or {}).items():
            self._preferences[user_id] = PreferenceModel.model_validate(prefs)
        self._interactions.extend(ensure_interactions(data.get("interactions", [])))
        logger.info(
            "[store] loaded %s: %d items, %d preference models, %d interactions",
            self._path, len(self._items), len(self._preferences), len(self._interactions),
        )

    def _after_write(self) -> None:
        out = {
            "items": [item.model_dump(mode="json") for item in self._items.values()],
            "preferences": {uid: p.model_dump(mode="json") for uid, p in self._preferences.items()},
            "interactions": [i.model_dump(mode="json") for i in self._interactions],
        }
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(tmp_path, "w") as f:
                json.dump(out, f, indent=2)
            os.replace(tmp_path, self._path)
        except IOError as e:
            raise StoreError(f"Failed to write {self._path}: {e}") from e
