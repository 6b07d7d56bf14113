"""
Sentiment scoring for submitted text.

The analyzer is pluggable: anything with an ``analyze(text) -> SentimentResult``
method can be handed to the checker. The default scores words and phrases
against the AFINN valence lexicon (-5..+5 per entry).
"""
import re
from typing import Protocol

from afinn import Afinn

from plagscan.models import SentimentResult

_WORD = re.compile(r"[a-z0-9']+")


class SentimentAnalyzer(Protocol):
    def analyze(self, text: str) -> SentimentResult:
        ...


class AfinnSentimentAnalyzer:
    """Sum of AFINN valences, normalized by token count for `comparative`"""

    def __init__(self, afinn: Afinn = None):
        self.afinn = afinn or Afinn(language='en')

    def analyze(self, text: str) -> SentimentResult:
        if not text or not isinstance(text, str):
            return SentimentResult()

        lowered = text.lower()
        tokens = _WORD.findall(lowered)
        matches = self.afinn.find_all(lowered)
        valences = self.afinn.scores(lowered)

        positive = [word for word, valence in zip(matches, valences) if valence > 0]
        negative = [word for word, valence in zip(matches, valences) if valence < 0]
        score = int(sum(valences))

        return SentimentResult(
            score=score,
            comparative=score / len(tokens) if tokens else 0.0,
            tokens=tokens,
            positive=positive,
            negative=negative,
        )
