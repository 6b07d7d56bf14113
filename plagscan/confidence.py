import math

from plagscan.errors import ComputationFailure
from plagscan.models import Metadata, TextStatistics

EXACT_MATCH_SCORE = 100.0
MAX_SCORE = 100.0


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def calculate_confidence_score(
    similarity: float,
    text_analysis: TextStatistics,
    metadata: Metadata,
    original_content: str,
    fetched_content: str,
) -> float:
    """
    Heuristic 0-100 confidence that the fetched document is a source of the
    submitted text.

    The base term is similarity * 0.5 and the bonuses below are on the same
    0-1 scale, except the flat +20 for very high similarity. Everything is
    multiplied by 100 at the end, so the base spans 0-50 points, each small
    bonus is worth up to 10-15 points and the +20 alone saturates the score.
    Keep this arithmetic as is; reported scores depend on it.
    """
    try:
        if original_content.strip() == fetched_content.strip():
            return EXACT_MATCH_SCORE

        score = similarity * 0.5

        if similarity > 0.8:
            score += 20

        score += min((text_analysis.wordCount / 1000) * 0.1, 0.15)
        score += (float(text_analysis.lexicalDensity) / 100) * 0.1
        words_per_sentence = float(text_analysis.averageWordsPerSentence)
        score += min(abs(20 - words_per_sentence) / 20, 1) * 0.1

        score += metadata.completeness() * 0.15

        return min(_round_half_up(score * 100 * 100) / 100, MAX_SCORE)
    except (AttributeError, TypeError, ValueError) as e:
        raise ComputationFailure(f"Confidence scoring failed: {e}") from e
