"""
Feed Ranking Tests

rank_feed: candidate pool (recency window minus exclusions), mute filter,
relevance for signed-in viewers, quality ordering for anonymous viewers,
deterministic tie-break, and degrade-to-empty on store failure.
"""

import pytest

from feedrank import Interaction, InteractionKind, PreferenceModel, RankingConfig, StoreError, rank_feed
from feedrank_server.services import InMemoryFeedStore

from conftest import NOW, make_item


class _NoViewerState(InMemoryFeedStore):
    """Items readable; preference and interaction lookups fail."""

    def query_preferences(self, user_id):
        raise StoreError("preferences down")

    def query_interactions(self, user_id, kinds):
        raise StoreError("interactions down")


def _ids(entries):
    return [e.item.id for e in entries]


class TestAnonymousRanking:
    def test_higher_quality_first(self):
        store = InMemoryFeedStore(items=[make_item("low", quality_score=60), make_item("high", quality_score=80)])
        entries = rank_feed(store, None, 10)
        assert _ids(entries) == ["high", "low"]

    def test_relevance_equals_quality(self):
        store = InMemoryFeedStore(items=[make_item("a", quality_score=42)])
        entry = rank_feed(store, None, 10)[0]
        assert entry.relevance_score == entry.quality_score == 42

    def test_no_mute_filter_for_anonymous(self):
        store = InMemoryFeedStore(
            items=[make_item("a", creator_id="c1")],
            preferences={"u1": PreferenceModel(muted_channels=["c1"])},
        )
        assert _ids(rank_feed(store, None, 10)) == ["a"]

    def test_fifty_items_sorted_by_quality(self):
        store = InMemoryFeedStore(items=[make_item(f"v{i:02d}", hours_old=i, quality_score=(i * 37) % 101) for i in range(60)])
        entries = rank_feed(store, None, 50)
        assert len(entries) == 50
        qualities = [e.quality_score for e in entries]
        assert qualities == sorted(qualities, reverse=True)
        assert all(e.relevance_score == e.quality_score for e in entries)

    def test_limit_truncates(self):
        store = InMemoryFeedStore(items=[make_item(f"v{i}", quality_score=i) for i in range(10)])
        assert _ids(rank_feed(store, None, 3)) == ["v9", "v8", "v7"]

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_is_empty(self, limit):
        store = InMemoryFeedStore(items=[make_item("a")])
        assert rank_feed(store, None, limit) == []


class TestPersonalizedRanking:
    def test_combined_score_orders_feed(self):
        store = InMemoryFeedStore(
            items=[
                make_item("plain", hours_old=500, quality_score=70),
                make_item("tagged", hours_old=500, quality_score=60, tags=["music", "live"]),
            ],
            preferences={"u1": PreferenceModel(preferred_tags=["music", "live"])},
        )
        entries = rank_feed(store, "u1", 10, now=NOW)
        # plain: 70 + 35 = 105; tagged: 60 + 20 + 30 = 110
        assert _ids(entries) == ["tagged", "plain"]
        assert entries[0].relevance_score == pytest.approx(50.0)
        assert entries[0].combined_score == pytest.approx(110.0)

    def test_liked_and_viewed_history_counts(self):
        store = InMemoryFeedStore(
            items=[make_item("a", hours_old=500, quality_score=50), make_item("b", hours_old=500, quality_score=50)],
            interactions=[
                Interaction(user_id="u1", content_id="b", kind=InteractionKind.LIKE),
                Interaction(user_id="u2", content_id="a", kind=InteractionKind.LIKE),
            ],
        )
        entries = rank_feed(store, "u1", 10, now=NOW)
        assert _ids(entries) == ["b", "a"]
        assert entries[0].relevance_score == pytest.approx(45.0)

    def test_muted_creator_filtered(self):
        store = InMemoryFeedStore(
            items=[make_item("a", creator_id="c1", quality_score=90), make_item("b", creator_id="c2")],
            preferences={"u1": PreferenceModel(muted_channels=["c1"])},
        )
        assert _ids(rank_feed(store, "u1", 10, now=NOW)) == ["b"]

    def test_excluded_ids_never_returned(self):
        store = InMemoryFeedStore(items=[make_item(f"v{i}") for i in range(5)])
        entries = rank_feed(store, "u1", 10, exclude_ids=["v1", "v3"], now=NOW)
        assert set(_ids(entries)) == {"v0", "v2", "v4"}

    def test_preview_filter(self):
        store = InMemoryFeedStore(items=[make_item("pub"), make_item("pre", is_preview=True)])
        assert _ids(rank_feed(store, "u1", 10, now=NOW, is_preview=False)) == ["pub"]

    def test_viewer_state_failure_ranks_as_new_viewer(self):
        store = _NoViewerState(items=[make_item("a", hours_old=500, quality_score=40)])
        entries = rank_feed(store, "u1", 10, now=NOW)
        assert _ids(entries) == ["a"]
        assert entries[0].relevance_score == pytest.approx(20.0)


class TestCandidatePool:
    def test_only_recent_window_considered(self):
        config = RankingConfig(candidate_window=2)
        store = InMemoryFeedStore(
            items=[
                make_item("oldest", hours_old=30, quality_score=100),
                make_item("middle", hours_old=20, quality_score=10),
                make_item("newest", hours_old=10, quality_score=5),
            ]
        )
        assert _ids(rank_feed(store, None, 10, config=config)) == ["middle", "newest"]

    def test_store_failure_gives_empty_feed(self, failing_store):
        assert rank_feed(failing_store, None, 10) == []
        assert rank_feed(failing_store, "u1", 10, now=NOW) == []

    def test_empty_store_gives_empty_feed(self):
        assert rank_feed(InMemoryFeedStore(), "u1", 10, now=NOW) == []


class TestTieBreak:
    def test_equal_scores_newer_first(self):
        store = InMemoryFeedStore(
            items=[make_item("older", hours_old=300, quality_score=50), make_item("newer", hours_old=200, quality_score=50)]
        )
        assert _ids(rank_feed(store, None, 10)) == ["newer", "older"]
        assert _ids(rank_feed(store, "u1", 10, now=NOW)) == ["newer", "older"]

    def test_equal_scores_and_age_by_id(self):
        store = InMemoryFeedStore(
            items=[make_item("b", hours_old=300, quality_score=50), make_item("a", hours_old=300, quality_score=50)]
        )
        assert _ids(rank_feed(store, "u1", 10, now=NOW)) == ["a", "b"]
