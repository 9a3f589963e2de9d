"""Lexicon polarity classifier.

Counts how many entries of the positive and negative word lists occur in the
utterance (substring containment, case-sensitive) and compares the two counts.
Ties, including `0 == 0`, resolve to `neutral`.
"""

from modechat.nlp.lexicon import NEGATIVE_WORDS, POSITIVE_WORDS, count_contained


def classify_sentiment(text: str) -> str:
    positive = count_contained(text, POSITIVE_WORDS)
    negative = count_contained(text, NEGATIVE_WORDS)

    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"
