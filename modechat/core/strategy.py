"""Response-strategy selection.

Decision model:
    `STRATEGY_RULES` is an ordered table of `(strategy, predicate)` pairs over a
    `StrategyInputs` view of one turn. The first matching predicate wins and the
    last row always matches, so selection is total.

    1. high complexity + expert      -> technical_detailed
    2. high complexity + beginner    -> explanatory_progressive
    3. "?" in the utterance          -> direct_informative
    4. frustrated or confused        -> supportive_clarifying
    5. anything else                 -> conversational_adaptive

Determinism:
    Pure function of its inputs.
"""

from dataclasses import dataclass

from modechat.core.types import ClassificationResult, ConversationState


DEFAULT_STRATEGY = "conversational_adaptive"

DEEP_DIVE_STRATEGIES = frozenset({"technical_detailed", "explanatory_progressive"})


@dataclass(frozen=True)
class StrategyInputs:
    utterance: str
    complexity: str
    expertise: str
    emotional_context: str


STRATEGY_RULES = (
    (
        "technical_detailed",
        lambda s: s.complexity == "high" and s.expertise == "expert",
    ),
    (
        "explanatory_progressive",
        lambda s: s.complexity == "high" and s.expertise == "beginner",
    ),
    ("direct_informative", lambda s: "?" in s.utterance),
    (
        "supportive_clarifying",
        lambda s: s.emotional_context in ("frustrated", "confused"),
    ),
    (DEFAULT_STRATEGY, lambda s: True),
)


def select_strategy(
    utterance: str,
    classification: ClassificationResult,
    state: ConversationState,
) -> str:
    """Return the response strategy for one turn."""
    inputs = StrategyInputs(
        utterance=utterance or "",
        complexity=classification.complexity,
        expertise=classification.expertise,
        emotional_context=state.emotional_context,
    )

    for strategy, predicate in STRATEGY_RULES:
        if predicate(inputs):
            return strategy

    return DEFAULT_STRATEGY


def select_rhetorical_approach(emotional_context: str) -> str:
    """Tone label for the trace; does not influence template choice."""
    if emotional_context == "frustrated":
        return "empathetic_supportive"
    if emotional_context == "excited":
        return "enthusiastic_collaborative"
    return "balanced_informative"
