"""
Quality Scorer Tests

quality_score(views, likes, dislikes, muted_count, has_preview,
clickbait_score, relevance_score) is a pure 0-100 health metric:
engagement adds up to 40, dislikes subtract up to 20, mutes (x1.5) up to 30,
a preview adds 15, relevance adds up to 25, clickbait (x2) subtracts up to 20.
"""

import pytest

from feedrank import RankingConfig, quality_score


def _score(**overrides):
    args = {
        "views": 0,
        "likes": 0,
        "dislikes": 0,
        "muted_count": 0,
        "has_preview": False,
        "clickbait_score": 0,
        "relevance_score": 0,
    }
    args.update(overrides)
    return quality_score(**args)


class TestQualityScore:
    def test_all_zero_inputs_score_zero(self):
        assert _score() == 0.0

    def test_engagement_is_capped_at_40(self):
        assert _score(views=100, likes=30) == pytest.approx(30.0)
        assert _score(views=100, likes=90) == pytest.approx(40.0)

    def test_zero_views_divides_by_one(self):
        assert _score(views=0, likes=1) == pytest.approx(40.0)

    def test_preview_adds_flat_bonus(self):
        assert _score(has_preview=True) == pytest.approx(15.0)

    def test_dislikes_clamp_to_zero(self):
        assert _score(views=100, dislikes=100) == 0.0

    def test_mute_penalty(self):
        # 30 from likes, 10/100 * 150 = 15 from mutes
        assert _score(views=100, likes=30, muted_count=10) == pytest.approx(15.0)

    def test_mute_penalty_is_capped(self):
        assert _score(views=100, likes=40, muted_count=100) == pytest.approx(10.0)

    def test_relevance_is_capped_at_25(self):
        assert _score(relevance_score=10) == pytest.approx(10.0)
        assert _score(relevance_score=500) == pytest.approx(25.0)

    def test_clickbait_penalty(self):
        assert _score(views=100, likes=40, clickbait_score=3) == pytest.approx(34.0)
        assert _score(views=100, likes=40, clickbait_score=50) == pytest.approx(20.0)

    def test_maximum_reachable_score(self):
        assert _score(views=10, likes=10, has_preview=True, relevance_score=100) == pytest.approx(80.0)

    def test_result_always_in_range(self):
        for likes in (0, 5, 50):
            for dislikes in (0, 5, 50):
                for muted in (0, 5, 50):
                    for clickbait in (0, 5):
                        s = _score(
                            views=50,
                            likes=likes,
                            dislikes=dislikes,
                            muted_count=muted,
                            has_preview=bool(likes),
                            clickbait_score=clickbait,
                            relevance_score=likes,
                        )
                        assert 0.0 <= s <= 100.0

    def test_monotonic_in_likes(self):
        scores = [_score(views=100, likes=n) for n in range(0, 60, 5)]
        assert scores == sorted(scores)

    def test_monotonic_against_dislikes(self):
        scores = [_score(views=100, likes=40, dislikes=n) for n in range(0, 40, 5)]
        assert scores == sorted(scores, reverse=True)

    def test_monotonic_in_preview(self):
        for likes in (0, 20, 40):
            for muted in (0, 10, 50):
                without = _score(views=100, likes=likes, muted_count=muted)
                with_preview = _score(views=100, likes=likes, muted_count=muted, has_preview=True)
                assert with_preview >= without
        assert _score(views=100, likes=20, has_preview=True) > _score(views=100, likes=20)

    def test_monotonic_against_mutes(self):
        for views in (1, 100, 1000):
            scores = [_score(views=views, likes=views, has_preview=True, muted_count=n) for n in range(0, 60, 3)]
            assert scores == sorted(scores, reverse=True)
        # strictly lower until the mute cap is reached
        assert _score(views=100, likes=40, muted_count=5) < _score(views=100, likes=40, muted_count=0)

    def test_monotonic_against_clickbait(self):
        for likes in (0, 20, 40):
            scores = [
                _score(views=100, likes=likes, has_preview=True, relevance_score=10, clickbait_score=n)
                for n in range(0, 11)
            ]
            assert scores == sorted(scores, reverse=True)
        assert _score(views=100, likes=40, clickbait_score=1) < _score(views=100, likes=40)

    def test_custom_config_weights(self):
        config = RankingConfig(preview_bonus=5)
        assert quality_score(0, 0, 0, 0, True, 0, 0, config=config) == pytest.approx(5.0)
