"""
Lexicon-based sentiment scoring.

AFINN-style word scoring over the VADER lexicon: every token found in
the lexicon adds its (rounded) valence to the score, a token directly
preceded by a negation word counts with the opposite sign. The output
keeps the per-token detail the client highlights in the UI.
"""

import re
from typing import Dict, List

from vaderSentiment.vaderSentiment import NEGATE, SentimentIntensityAnalyzer

from marketdesk.models import SentimentResult

_PUNCTUATION = re.compile(r"[.,/#!?$%^&*;:{}=_`\"~()\[\]<>|+\\-]")


def tokenize(text: str) -> List[str]:
    """Lowercase, drop punctuation (apostrophes survive), split on whitespace."""
    return _PUNCTUATION.sub(" ", text.lower()).split()


class LexiconSentimentScorer:
    """Scores text against the VADER word list."""

    def __init__(self):
        self.analyzer = self._init_vader()
        self.lexicon: Dict[str, float] = self.analyzer.lexicon
        self.negators = {w.lower() for w in NEGATE}

    @staticmethod
    def _init_vader() -> SentimentIntensityAnalyzer:
        return SentimentIntensityAnalyzer()

    def analyze(self, text: str) -> SentimentResult:
        """
        Score a text string.

        Returns:
            SentimentResult with integer score, score per token
            (comparative), all tokens, the scored words and the scored
            words that were negated.
        """
        tokens = tokenize(text)
        score = 0
        words: List[str] = []
        negations: List[str] = []

        for i, token in enumerate(tokens):
            if token not in self.lexicon:
                continue
            value = int(round(self.lexicon[token]))
            if i > 0 and tokens[i - 1] in self.negators:
                value = -value
                negations.append(token)
            words.append(token)
            score += value

        comparative = score / len(tokens) if tokens else 0.0
        return SentimentResult(
            score=score,
            comparative=comparative,
            tokens=tokens,
            words=words,
            negations=negations,
        )
