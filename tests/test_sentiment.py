"""Tests for the lexicon sentiment scorer and /api/sentiment."""

import pytest
from unittest.mock import MagicMock

from marketdesk.sentiment import LexiconSentimentScorer, tokenize

ZERO = {"score": 0, "comparative": 0, "tokens": [], "words": [], "negations": []}


@pytest.fixture(scope="module")
def scorer():
    return LexiconSentimentScorer()


class TestTokenize:
    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("I love this, it is GREAT!") == ["i", "love", "this", "it", "is", "great"]

    def test_keeps_apostrophes(self):
        assert tokenize("don't panic") == ["don't", "panic"]

    def test_blank(self):
        assert tokenize("   ") == []


class TestScorer:
    def test_positive_text(self, scorer):
        result = scorer.analyze("I love this, it is great")
        assert result.score > 0
        assert "love" in result.words
        assert "great" in result.words
        assert result.negations == []

    def test_negative_text(self, scorer):
        result = scorer.analyze("This is terrible, horrible and awful")
        assert result.score < 0
        assert result.comparative < 0

    def test_negation_flips_sign(self, scorer):
        plain = scorer.analyze("good")
        negated = scorer.analyze("not good")
        assert plain.score > 0
        assert negated.score == -plain.score
        assert negated.negations == ["good"]

    def test_comparative_is_score_per_token(self, scorer):
        result = scorer.analyze("I love this, it is great")
        assert result.comparative == pytest.approx(result.score / len(result.tokens))

    def test_score_is_integer(self, scorer):
        assert isinstance(scorer.analyze("a wonderful, happy day").score, int)

    def test_no_lexicon_words(self, scorer):
        result = scorer.analyze("Table 4 on page 12")
        assert result.score == 0
        assert result.words == []
        assert len(result.tokens) == 5


class TestSentimentEndpoint:
    def test_empty_text_zero(self, client):
        assert client.post("/api/sentiment", json={"text": ""}).json() == ZERO

    def test_whitespace_text_zero(self, client):
        assert client.post("/api/sentiment", json={"text": "   \n "}).json() == ZERO

    def test_missing_text_zero(self, client):
        assert client.post("/api/sentiment", json={}).json() == ZERO

    def test_blank_skips_scorer(self, make_client):
        scorer = MagicMock()
        make_client(scorer=scorer).post("/api/sentiment", json={"text": " "})
        scorer.analyze.assert_not_called()

    def test_positive(self, client):
        body = client.post("/api/sentiment", json={"text": "I love this, it is great"}).json()
        assert body["score"] > 0
        assert set(body) == {"score", "comparative", "tokens", "words", "negations"}

    def test_scorer_failure_500(self, make_client):
        scorer = MagicMock()
        scorer.analyze.side_effect = RuntimeError("boom")
        resp = make_client(scorer=scorer).post("/api/sentiment", json={"text": "hello"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "sentiment analysis failed"}
