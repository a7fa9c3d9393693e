"""
Feed Store Tests

InMemoryFeedStore and JsonFeedStore against the FeedStore contract.
"""

import json

import pytest

from feedrank import Interaction, InteractionKind, ItemQuery, OrderBy, PreferenceModel, StoreError
from feedrank_server.services import InMemoryFeedStore, JsonFeedStore

from conftest import make_item


def _items():
    return [
        make_item("a", hours_old=3, quality_score=50),
        make_item("b", hours_old=1, quality_score=90, is_preview=True),
        make_item("c", hours_old=2, quality_score=70),
    ]


class TestInMemoryFeedStore:
    def test_query_orders_descending(self):
        store = InMemoryFeedStore(items=_items())
        assert [i.id for i in store.query_items(ItemQuery())] == ["b", "c", "a"]
        assert [i.id for i in store.query_items(ItemQuery(order_by=OrderBy.QUALITY_SCORE))] == ["b", "c", "a"]

    def test_query_filters(self):
        store = InMemoryFeedStore(items=_items())
        q = ItemQuery(is_preview=False, min_quality=60, order_by=OrderBy.QUALITY_SCORE)
        assert [i.id for i in store.query_items(q)] == ["c"]
        assert [i.id for i in store.query_items(ItemQuery(exclude_ids={"b"}, limit=1))] == ["c"]

    def test_upsert_preferences_merges_fields(self):
        store = InMemoryFeedStore()
        store.upsert_preferences("u1", preferred_tags=["x"])
        store.upsert_preferences("u1", muted_channels=["c1"])
        assert store.query_preferences("u1") == PreferenceModel(preferred_tags=["x"], muted_channels=["c1"])

    def test_returned_preferences_are_copies(self):
        store = InMemoryFeedStore(preferences={"u1": PreferenceModel(preferred_tags=["x"])})
        store.query_preferences("u1").preferred_tags.append("y")
        assert store.query_preferences("u1").preferred_tags == ["x"]

    def test_increment_counter(self):
        store = InMemoryFeedStore(items=[make_item("a", views=1)])
        store.increment_counter("a", "views")
        store.increment_counter("a", "views", 2)
        assert store.get_item("a").views == 4

    def test_increment_rejects_unknown_field_or_item(self):
        store = InMemoryFeedStore(items=[make_item("a")])
        with pytest.raises(StoreError):
            store.increment_counter("a", "quality_score")
        with pytest.raises(StoreError):
            store.increment_counter("missing", "views")

    def test_interactions_by_kind(self):
        store = InMemoryFeedStore()
        store.insert_interaction(Interaction(user_id="u1", content_id="a", kind=InteractionKind.LIKE))
        store.insert_interaction(Interaction(user_id="u1", content_id="b", kind=InteractionKind.HIDE))
        store.insert_interaction(Interaction(user_id="u2", content_id="a", kind=InteractionKind.LIKE))
        liked = store.query_interactions("u1", [InteractionKind.LIKE, InteractionKind.VIEW])
        assert [i.content_id for i in liked] == ["a"]
        assert store.count_interactions("a", InteractionKind.LIKE) == 2

    def test_quality_score_is_clamped(self):
        store = InMemoryFeedStore(items=[make_item("a")])
        store.update_quality_score("a", 140)
        assert store.get_item("a").quality_score == 100.0

    def test_has_preview(self):
        store = InMemoryFeedStore(items=[make_item("a"), make_item("t", is_preview=True, preview_of="a")])
        assert store.has_preview("a")
        assert not store.has_preview("t")


class TestJsonFeedStore:
    def test_round_trip_through_file(self, tmp_path):
        path = tmp_path / "data" / "feed.json"
        store = JsonFeedStore(path)
        for item in _items():
            store.add_item(item)
        store.upsert_preferences("u1", preferred_tags=["x"], muted_channels=["c1"])
        store.insert_interaction(Interaction(user_id="u1", content_id="a", kind=InteractionKind.VIEW))
        store.increment_counter("a", "views")

        reloaded = JsonFeedStore(path)
        assert reloaded.get_item("a").views == 1
        assert reloaded.get_item("a").created_at == store.get_item("a").created_at
        assert reloaded.query_preferences("u1").muted_channels == ["c1"]
        assert reloaded.count_interactions("a", InteractionKind.VIEW) == 1

    def test_file_layout(self, tmp_path):
        path = tmp_path / "feed.json"
        JsonFeedStore(path).add_item(make_item("a"))
        data = json.loads(path.read_text())
        assert set(data) == {"items", "preferences", "interactions"}
        assert data["items"][0]["id"] == "a"

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "feed.json"
        path.write_text("{not json")
        assert JsonFeedStore(path).query_items(ItemQuery()) == []

    def test_failed_persist_rolls_back_every_write(self, tmp_path, monkeypatch):
        from feedrank_server.services import json_store

        path = tmp_path / "feed.json"
        store = JsonFeedStore(path)
        store.add_item(make_item("v1"))

        def _disk_full(*args, **kwargs):
            raise IOError("No space left on device")

        monkeypatch.setattr(json_store, "open", _disk_full, raising=False)
        with pytest.raises(StoreError):
            store.increment_counter("v1", "likes", 1)
        with pytest.raises(StoreError):
            store.upsert_preferences("u1", muted_channels=["c1"])
        with pytest.raises(StoreError):
            store.insert_interaction(Interaction(user_id="u1", content_id="v1", kind=InteractionKind.LIKE))
        assert store.get_item("v1").likes == 0
        assert store.query_preferences("u1") is None
        assert store.count_interactions("v1", InteractionKind.LIKE) == 0

        monkeypatch.undo()
        store.increment_counter("v1", "views", 1)
        reloaded = JsonFeedStore(path)
        assert reloaded.get_item("v1").likes == 0
        assert reloaded.get_item("v1").views == 1
        assert reloaded.query_preferences("u1") is None
