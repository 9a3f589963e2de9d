"""Template synthesizer: picks one template per turn and renders it.

Selection model:
    Every mode owns an ordered table of `(category, predicate)` rows in
    `MODE_RULES`. Rows are tested top to bottom against a `SynthesisInputs`
    view of the turn; the first match names the template category. Non-general
    tables close with a default row so each mode answers in its own voice.
    `general` (and any mode whose table yields nothing) uses `GENERAL_RULES`,
    whose last row always matches, so every combination renders text.

Base response family:
    The `BASE_FAMILY` category is resolved from keywords in the lower-cased
    utterance (reasoning, creative, problem-solving, analytical, else
    conversational). General mode uses it for the deep-dive strategies.

Rendering:
    `str.format` with `excerpt`, `issues` and `corrected` fields. The excerpt is
    the raw utterance cut to `EXCERPT_LIMIT` characters plus `...`.

Determinism:
    No randomness; identical inputs always render identical text.
"""

from dataclasses import dataclass

from modechat.core.strategy import DEEP_DIVE_STRATEGIES
from modechat.nlp.grammar_checker import correct_grammar, detect_grammar_issues
from modechat.nlp.lexicon import (
    ANALYTICAL_MARKERS,
    CREATIVE_MARKERS,
    PROBLEM_SOLVING_MARKERS,
    REASONING_MARKERS,
    contains_any,
)
from modechat.prompting.templates import TEMPLATE_BANK


EXCERPT_LIMIT = 100
EXCERPT_MARKER = "..."
SHORT_FOLLOWUP_CHARS = 20

BASE_FAMILY = "base_family"


@dataclass(frozen=True)
class SynthesisInputs:
    """Everything template selection may look at for one turn."""

    utterance: str
    mode: str
    intent: str
    sentiment: str
    topics: tuple[str, ...]
    strategy: str
    emotional_context: str = "neutral"
    has_prior_user_turn: bool = False


def excerpt(text: str, limit: int = EXCERPT_LIMIT) -> str:
    """Return `text` cut to `limit` characters, marking the cut with `...`."""
    text = text or ""
    if len(text) > limit:
        return text[:limit] + EXCERPT_MARKER
    return text


# =========================================================
# BASE RESPONSE FAMILY
# =========================================================

BASE_FAMILY_RULES = (
    ("reasoning", REASONING_MARKERS),
    ("creative", CREATIVE_MARKERS),
    ("problem_solving", PROBLEM_SOLVING_MARKERS),
    ("analytical", ANALYTICAL_MARKERS),
)


def select_base_family(utterance: str) -> str:
    """Return the base-response category for an utterance."""
    lowered = (utterance or "").lower()
    for category, markers in BASE_FAMILY_RULES:
        if contains_any(lowered, markers):
            return category
    return "conversational"


# =========================================================
# DECISION TABLES
# =========================================================

def _always(s: SynthesisInputs) -> bool:
    return True


GENERAL_RULES = (
    (BASE_FAMILY, lambda s: s.strategy in DEEP_DIVE_STRATEGIES),
    ("greeting", lambda s: s.intent == "greeting"),
    ("farewell", lambda s: s.intent == "farewell"),
    ("question", lambda s: s.intent == "question"),
    ("positive", lambda s: s.sentiment == "positive"),
    (
        "clarify",
        lambda s: s.has_prior_user_turn and len(s.utterance) < SHORT_FOLLOWUP_CHARS,
    ),
    (BASE_FAMILY, lambda s: s.strategy == "supportive_clarifying"),
    ("default", _always),
)

MODE_RULES = {
    "study": (
        ("question", lambda s: s.intent == "question"),
        ("help", lambda s: s.intent == "help_request"),
        ("default", _always),
    ),
    "writing": (
        ("task", lambda s: s.intent == "task_request"),
        ("craft", lambda s: "writing" in s.topics),
        ("default", _always),
    ),
    "support": (
        ("frustration", lambda s: s.emotional_context == "frustrated"),
        ("issue", lambda s: s.intent == "problem_report"),
        ("frustration", lambda s: s.sentiment == "negative"),
        ("default", _always),
    ),
    "resume": (
        ("task", lambda s: s.intent == "task_request"),
        ("default", _always),
    ),
    "grammar": (
        ("correction", lambda s: bool(detect_grammar_issues(s.utterance))),
        ("default", _always),
    ),
    "travel": (
        ("question", lambda s: s.intent == "question"),
        ("default", _always),
    ),
    "game": (
        ("task", lambda s: s.intent == "task_request"),
        ("default", _always),
    ),
    "mental": (
        ("negative", lambda s: s.sentiment == "negative"),
        ("default", _always),
    ),
}


def _first_match(rules, inputs: SynthesisInputs) -> str | None:
    for category, predicate in rules:
        if predicate(inputs):
            return category
    return None


def select_template_key(inputs: SynthesisInputs) -> tuple[str, str]:
    """
    Return the `(mode, category)` key of the template to render.

    Edge cases:
    - Modes without a table, and tables that match nothing, fall back to the
      general tree.
    - `BASE_FAMILY` is always resolved under the general bank.
    """

    mode_rules = MODE_RULES.get(inputs.mode)
    if mode_rules is not None:
        category = _first_match(mode_rules, inputs)
        if category is not None and category != BASE_FAMILY:
            return inputs.mode, category

    category = _first_match(GENERAL_RULES, inputs) or "default"
    if category == BASE_FAMILY:
        category = select_base_family(inputs.utterance)
    return "general", category


def render_template(template: str, utterance: str) -> str:
    """Interpolate the utterance-derived fields into `template`."""
    issues = detect_grammar_issues(utterance)
    return template.format(
        excerpt=excerpt(utterance),
        issues=", ".join(issues),
        corrected=correct_grammar(utterance),
    )


def build_response(inputs: SynthesisInputs) -> str:
    """Select and render the response text for one turn."""
    key = select_template_key(inputs)
    return render_template(TEMPLATE_BANK[key], inputs.utterance)
