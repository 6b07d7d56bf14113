import pytest

from plagscan.models import SentimentResult
from plagscan.sentiment import AfinnSentimentAnalyzer


@pytest.fixture(scope="module")
def analyzer():
    return AfinnSentimentAnalyzer()


def test_scores_positive_and_negative_words(analyzer):
    result = analyzer.analyze("The ending was awesome, but the food was disgusting.")

    assert "awesome" in result.positive
    assert "disgusting" in result.negative
    assert result.score == 1
    assert result.comparative == pytest.approx(1 / 9)
    assert result.tokens[0] == "the"


def test_strongly_positive_text(analyzer):
    result = analyzer.analyze("Superb, outstanding work")

    assert result.score > 0
    assert result.negative == []


def test_neutral_text_scores_zero(analyzer):
    result = analyzer.analyze("The quick brown fox jumps.")

    assert result.score == 0
    assert result.positive == []
    assert result.negative == []


@pytest.mark.parametrize("value", [None, "", 17])
def test_invalid_input_gives_zero_result(analyzer, value):
    assert analyzer.analyze(value) == SentimentResult()
