"""Complexity tier and user-expertise heuristics.

Complexity:
- `high` when the utterance is longer than 200 characters or has more than 40
  whitespace-separated tokens.
- `medium` when longer than 100 characters or more than 20 tokens.
- `low` otherwise.
The high tier is always checked first, so a long utterance is `high` whatever
its token count.

Expertise:
- Counts whole-word, case-insensitive occurrences of `TECHNICAL_TERMS`.
  More than two occurrences means `expert`, anything else `beginner`.
- This is a vocabulary proxy, not a skill assessment.
"""

from modechat.nlp.lexicon import TECHNICAL_TERMS, count_whole_words, tokenize


HIGH_CHAR_LIMIT = 200
HIGH_TOKEN_LIMIT = 40
MEDIUM_CHAR_LIMIT = 100
MEDIUM_TOKEN_LIMIT = 20
EXPERT_TERM_THRESHOLD = 2


def assess_complexity(text: str) -> str:
    text = text or ""
    length = len(text)
    token_count = len(tokenize(text))

    if length > HIGH_CHAR_LIMIT or token_count > HIGH_TOKEN_LIMIT:
        return "high"
    if length > MEDIUM_CHAR_LIMIT or token_count > MEDIUM_TOKEN_LIMIT:
        return "medium"
    return "low"


def count_technical_terms(text: str) -> int:
    return count_whole_words(text, TECHNICAL_TERMS)


def infer_expertise(text: str) -> str:
    if count_technical_terms(text) > EXPERT_TERM_THRESHOLD:
        return "expert"
    return "beginner"
