"""
Clickbait Analysis Tests

score_text rates extracted poster text against the phrase taxonomy
(3/2/1 points per high/medium/low risk phrase, capped at 5). The analyzer
never raises: extractor failures give the empty analysis.
"""

from feedrank import ClickbaitAnalysis, ClickbaitAnalyzer, NullTextExtractor, score_text


class _StaticExtractor:
    def __init__(self, text):
        self.text = text
        self.seen = []

    def extract_text(self, image_uri):
        self.seen.append(image_uri)
        return self.text


class _BrokenExtractor:
    def extract_text(self, image_uri):
        raise ConnectionError("ocr offline")


class TestScoreText:
    def test_no_terms(self):
        result = score_text("A calm walk through the park")
        assert result.clickbait_score == 0
        assert result.detected_terms == []

    def test_single_low_risk_term(self):
        assert score_text("My review of the new phone").clickbait_score == 1

    def test_medium_risk_term_is_case_insensitive(self):
        result = score_text("an epic journey")
        assert result.clickbait_score == 2
        assert result.detected_terms == ["EPIC"]

    def test_high_plus_low(self):
        result = score_text("SHOCKING reaction")
        assert result.clickbait_score == 4
        assert result.detected_terms == ["SHOCKING", "REACTION"]

    def test_score_capped_at_five(self):
        result = score_text("You won't believe this SHOCKING, INSANE secret")
        assert result.clickbait_score == 5
        assert result.detected_terms == ["YOU WON'T BELIEVE", "SHOCKING", "INSANE", "SECRET"]

    def test_terms_match_whole_words_only(self):
        assert score_text("bus stop").clickbait_score == 0

    def test_empty_text(self):
        assert score_text("") == ClickbaitAnalysis.empty()


class TestClickbaitAnalyzer:
    def test_default_extractor_sees_nothing(self):
        assert ClickbaitAnalyzer().analyze("https://cdn.example/poster.jpg").clickbait_score == 0
        assert NullTextExtractor().extract_text("x") == ""

    def test_scores_extracted_text(self):
        extractor = _StaticExtractor("TOP 10 INCREDIBLE moments")
        result = ClickbaitAnalyzer(extractor).analyze("https://cdn.example/poster.jpg")
        assert result.clickbait_score == 3
        assert result.extracted_text == "TOP 10 INCREDIBLE moments"
        assert extractor.seen == ["https://cdn.example/poster.jpg"]

    def test_extractor_failure_gives_empty(self):
        assert ClickbaitAnalyzer(_BrokenExtractor()).analyze("https://cdn.example/p.jpg") == ClickbaitAnalysis.empty()

    def test_empty_uri_skips_extractor(self):
        extractor = _StaticExtractor("SHOCKING")
        assert ClickbaitAnalyzer(extractor).analyze("") == ClickbaitAnalysis.empty()
        assert extractor.seen == []
