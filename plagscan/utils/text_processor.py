import re
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from plagscan.logging_config import get_logger
from plagscan.models import TextStatistics

logger = get_logger('text_processor')

STOPWORDS = frozenset(ENGLISH_STOP_WORDS)

_WHITESPACE = re.compile(r'\s+')
_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_SENTENCE_DELIMITERS = re.compile(r'[.!?]+')


def to_fixed(value: float) -> str:
    """Two decimals, ties rounded away from zero on the float's exact value"""
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def tokenize(text) -> List[str]:
    """
    Normalize raw text into filtered lowercase tokens.
    Non-string or empty input gives an empty list.
    """
    if not text or not isinstance(text, str):
        logger.debug("Invalid input text: %r", text)
        return []

    sanitized = _WHITESPACE.sub(' ', text.strip())
    sanitized = _NON_WORD.sub(' ', sanitized).lower()

    return [
        word for word in sanitized.split()
        if word not in STOPWORDS and len(word) > 1
    ]


def analyze_text(text) -> TextStatistics:
    """
    Descriptive statistics over raw, unnormalized text
    """
    if not text or not isinstance(text, str):
        return TextStatistics.empty()

    words = text.split()
    sentences = [s for s in _SENTENCE_DELIMITERS.split(text) if s]
    characters = _WHITESPACE.sub('', text)
    unique_words = set(words)

    # floored to 1 so the ratios below never divide by zero
    word_count = len(words) or 1
    sentence_count = len(sentences) or 1

    return TextStatistics(
        wordCount=word_count,
        characterCount=len(characters),
        sentenceCount=sentence_count,
        uniqueWordCount=len(unique_words),
        averageWordLength=to_fixed(len(characters) / word_count),
        lexicalDensity=to_fixed(len(unique_words) / word_count * 100),
        averageWordsPerSentence=to_fixed(word_count / sentence_count),
    )
