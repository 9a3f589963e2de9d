"""Primary-intent classifier producing one label per utterance.

Intent classification logic:
- The utterance is stripped and lower-cased once.
- Rules live in `INTENT_RULES`, an ordered table of `(label, predicate)` pairs.
  The first predicate that matches decides the label; later rules are never
  consulted.
- Order: question, greeting, help_request, problem_report, farewell,
  task_request, then the `general_statement` default.
- Question starters must be whole words ("whatever" is not a question).
  Greeting, farewell and task starters are plain prefixes, so "history"
  counts as a greeting and "thanksgiving" as a farewell.

Tie-break:
- "Hi, can you help me?" is a `question`: the question rule runs before the
  greeting rule even though both patterns are present.

Interaction with core:
- `classify_intent` feeds `ClassificationResult.intent`.
- `infer_communicative_intent` only feeds the pipeline trace.

Failure handling:
- Empty/blank input falls through every rule to `general_statement`.
"""

from modechat.nlp.lexicon import (
    FAREWELL_STARTERS,
    GREETING_STARTERS,
    HELP_MARKERS,
    PROBLEM_MARKERS,
    QUESTION_STARTERS,
    TASK_MARKERS,
    TASK_STARTERS,
    contains_any,
    starts_with_any,
)


DEFAULT_INTENT = "general_statement"


def _is_question(text: str) -> bool:
    return "?" in text or starts_with_any(text, QUESTION_STARTERS, word_boundary=True)


def _is_greeting(text: str) -> bool:
    return starts_with_any(text, GREETING_STARTERS)


def _is_help_request(text: str) -> bool:
    return contains_any(text, HELP_MARKERS)


def _is_problem_report(text: str) -> bool:
    return contains_any(text, PROBLEM_MARKERS)


def _is_farewell(text: str) -> bool:
    return starts_with_any(text, FAREWELL_STARTERS)


def _is_task_request(text: str) -> bool:
    return starts_with_any(text, TASK_STARTERS) or contains_any(text, TASK_MARKERS)


# ---------------------------------------------------------
# Ordered decision table (first match wins)
# ---------------------------------------------------------

INTENT_RULES = (
    ("question", _is_question),
    ("greeting", _is_greeting),
    ("help_request", _is_help_request),
    ("problem_report", _is_problem_report),
    ("farewell", _is_farewell),
    ("task_request", _is_task_request),
)


def classify_intent(text: str) -> str:
    """
    Classify an utterance into exactly one intent label.

    Edge cases:
    - Substring rules (help, problem, task) can fire on embedded words, for
      example "makeup" counts as a task marker.
    """

    normalized = (text or "").strip().lower()

    for label, predicate in INTENT_RULES:
        if predicate(normalized):
            return label

    return DEFAULT_INTENT


# =========================================================
# COMMUNICATIVE INTENT (trace only)
# =========================================================

COMMUNICATIVE_RULES = (
    ("questioning", lambda t: "?" in t),
    ("requesting", lambda t: "please" in t or "can you" in t),
    ("opinion_seeking", lambda t: "think" in t or "opinion" in t),
)


def infer_communicative_intent(text: str) -> str:
    """Coarse speech-act label reported in the trace; raw text, no folding."""
    text = text or ""
    for label, predicate in COMMUNICATIVE_RULES:
        if predicate(text):
            return label
    return "informing"
