import pytest

from sentibot.services import sentiment_service


def test_classify_positive():
    result = sentiment_service.classify("I love this")
    assert result.label == "positive"
    assert result.score > 0


def test_classify_negative():
    result = sentiment_service.classify("I hate this")
    assert result.label == "negative"
    assert result.score < 0


def test_classify_empty_is_neutral_zero():
    result = sentiment_service.classify("")
    assert result.label == "neutral"
    assert result.score == 0


def test_classify_normalizes_before_scoring():
    assert sentiment_service.score("   I LOVE THIS  ") == sentiment_service.score("i love this")


@pytest.mark.parametrize("value, label", [(0.3, "positive"), (-0.01, "negative"), (0.0, "neutral")])
def test_label_for_uses_sign(value, label):
    assert sentiment_service.label_for(value) == label


def test_reaction_lines():
    assert sentiment_service.reaction("positive") == "I'm glad to hear that!"
    assert sentiment_service.reaction("negative") == "I'm sorry to hear that."
    assert sentiment_service.reaction("neutral") == "I see."
