"""Shared fixtures: a fixed clock, item factory, in-memory and failing stores."""

from datetime import datetime, timedelta, timezone

import pytest

from feedrank import ContentItem, StoreError
from feedrank_server.services import InMemoryFeedStore

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_item(content_id: str, hours_old: float = 1.0, **fields) -> ContentItem:
    """ContentItem created hours_old before NOW."""
    data = {
        "id": content_id,
        "title": f"Video {content_id}",
        "creator_id": "creator-default",
        "created_at": NOW - timedelta(hours=hours_old),
    }
    data.update(fields)
    return ContentItem(**data)


class FailingStore:
    """Store double whose every call raises StoreError."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            self.calls.append(name)
            raise StoreError(f"{name} unavailable")

        return _fail


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def store():
    return InMemoryFeedStore()


@pytest.fixture
def failing_store():
    return FailingStore()
