"""Data contracts shared by the classification pipeline and its callers.

Architectural role:
    Defines the value objects that flow between the classifiers in
    `modechat.nlp`, the state tracker in `modechat.memory`, the strategy
    selector, and the template synthesizer. `engine.respond_with_trace` returns
    a `PipelineTrace` built from these objects.

Label vocabularies:
    Labels are plain lower-case strings. The tuples below are the closed sets
    each classifier draws from, in declaration order.

Determinism:
    The data classes are frozen and carry no behaviour. Determinism depends on
    the classifier modules that populate them, not on this module.
"""

from dataclasses import dataclass, field
from datetime import datetime


DOMAINS = (
    "science_technology",
    "arts_humanities",
    "business_economics",
    "health_medicine",
    "education_learning",
    "social_political",
)
GENERAL_DOMAIN = "general"

INTENTS = (
    "question",
    "greeting",
    "help_request",
    "problem_report",
    "farewell",
    "task_request",
    "general_statement",
)

SENTIMENTS = ("positive", "negative", "neutral")

COMPLEXITIES = ("high", "medium", "low")

EXPERTISE_LEVELS = ("expert", "beginner")

EMOTIONAL_CONTEXTS = (
    "excited",
    "frustrated",
    "confused",
    "seeking_support",
    "neutral",
)

STRATEGIES = (
    "technical_detailed",
    "explanatory_progressive",
    "direct_informative",
    "supportive_clarifying",
    "conversational_adaptive",
)

TOPICS = ("technology", "education", "writing", "career", "wellness")

ROLES = ("user", "assistant")


@dataclass(frozen=True)
class Turn:
    """One entry of the caller-owned conversation history.

    Attributes:
        content: Raw message text.
        role: `user` or `assistant`.
        timestamp: When the turn was recorded; optional for callers that
            replay histories without timing information.
    """

    content: str
    role: str = "user"
    timestamp: datetime | None = None


@dataclass(frozen=True)
class ClassificationResult:
    """Per-turn output of the independent classifiers.

    Attributes:
        domains: Matched knowledge domains in declaration order, or
            `("general",)` when nothing matched.
        intent: Single primary intent label.
        sentiment: Polarity label.
        complexity: `high`, `medium` or `low`.
        expertise: `expert` or `beginner`.
    """

    domains: tuple[str, ...] = (GENERAL_DOMAIN,)
    intent: str = "general_statement"
    sentiment: str = "neutral"
    complexity: str = "low"
    expertise: str = "beginner"


@dataclass(frozen=True)
class ConversationState:
    """Rolling context recomputed from history on every turn.

    Attributes:
        working_memory: Content of the last five turns, oldest first.
        long_term_patterns: Content of the last ten turns, oldest first.
        emotional_context: Label derived from the current utterance only.
    """

    working_memory: tuple[str, ...] = ()
    long_term_patterns: tuple[str, ...] = ()
    emotional_context: str = "neutral"


@dataclass(frozen=True)
class ConversationContext:
    """Caller-supplied context for one `generate_response` call."""

    history: tuple = ()
    mode: str = "general"


@dataclass(frozen=True)
class PipelineTrace:
    """Observability record of the intermediate decisions for one turn.

    Never rendered into the response text. Every field is derived
    deterministically from the inputs.
    """

    mode: str
    classification: ClassificationResult
    state: ConversationState
    strategy: str
    topics: tuple[str, ...] = ()
    communicative_intent: str = "informing"
    rhetorical_approach: str = "balanced_informative"
    keywords: tuple[str, ...] = ()
    conversational_flow: bool = False
    topic_continuity: bool = False
    reasoning: tuple[str, ...] = field(default_factory=tuple)
    synthesis: str = ""
