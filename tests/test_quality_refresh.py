"""
Quality Refresh Tests

Stored quality_score is rebuilt from counters, mute interactions against the
item, preview existence, and the poster's clickbait signal.
"""

import pytest

from feedrank import ClickbaitAnalyzer, FeedEngine, Interaction, InteractionKind, StoreError
from feedrank.stages import refresh_quality_score, refresh_quality_scores
from feedrank_server.services import InMemoryFeedStore

from conftest import make_item


class _Poster:
    def extract_text(self, image_uri):
        return "SHOCKING"


class TestRefreshQuality:
    def test_recomputes_from_live_signals(self):
        item = make_item("v1", views=100, likes=30, poster_url="p.jpg", quality_score=99)
        store = InMemoryFeedStore(
            items=[item, make_item("t1", is_preview=True, preview_of="v1")],
            interactions=[Interaction(user_id=f"u{i}", content_id="v1", kind=InteractionKind.MUTE_CHANNEL) for i in range(2)],
        )
        # 30 likes + 15 preview - 3 mutes (2/100*150) - 6 clickbait (3*2)
        score = refresh_quality_score(store, item, ClickbaitAnalyzer(_Poster()))
        assert score == pytest.approx(36.0)
        assert store.get_item("v1").quality_score == pytest.approx(36.0)

    def test_without_analyzer_clickbait_is_zero(self):
        item = make_item("v1", views=10, likes=2)
        store = InMemoryFeedStore(items=[item])
        assert refresh_quality_score(store, item) == pytest.approx(20.0)

    def test_selected_ids_and_unknown_ids(self):
        store = InMemoryFeedStore(items=[make_item("a", views=10, likes=1), make_item("b", views=10, likes=1)])
        assert refresh_quality_scores(store, ["a", "missing"]) == 1
        assert store.get_item("a").quality_score == pytest.approx(10.0)
        assert store.get_item("b").quality_score == 0.0

    def test_all_recent_items_by_default(self):
        store = InMemoryFeedStore(items=[make_item("a", views=10, likes=1), make_item("b", views=10, likes=5)])
        engine = FeedEngine(store)
        try:
            assert engine.refresh_quality() == 2
        finally:
            engine.shutdown()
        assert store.get_item("b").quality_score == pytest.approx(40.0)

    def test_failures_are_skipped(self):
        class _NoCounts(InMemoryFeedStore):
            def count_interactions(self, content_id, kind):
                if content_id == "bad":
                    raise StoreError("count failed")
                return super().count_interactions(content_id, kind)

        store = _NoCounts(items=[make_item("bad"), make_item("ok", views=1, likes=1)])
        assert refresh_quality_scores(store) == 1
        assert store.get_item("ok").quality_score == pytest.approx(40.0)

    def test_unreadable_store_updates_nothing(self, failing_store):
        assert refresh_quality_scores(failing_store) == 0
        assert refresh_quality_scores(failing_store, ["a"]) == 0
