"""Core orchestration of the response-synthesis pipeline.

Architectural role:
    Provides the single entry point used by the CLI and HTTP adapters to turn
    one utterance, the caller-owned history, and the selected mode into
    response text.

Control-flow model:
    1. Normalize the utterance and resolve the mode.
    2. Run the independent classifiers (domain, intent, sentiment,
       complexity/expertise) and the topic tagger.
    3. Recompute the conversation state from history and utterance.
    4. Select the response strategy.
    5. Render the mode-specific template.
    6. Optionally assemble a `PipelineTrace` of the intermediate decisions.

Error handling strategy:
    Every stage has an exhaustive default branch, so well-formed text cannot
    make the pipeline raise. `None` is treated as the empty utterance and
    unknown modes resolve to `general`. Catching unexpected runtime faults and
    substituting an apology is left to the adapters.

Side effects:
    None besides the optional `pipeline_debug` log line. The history is read,
    never mutated, and no state survives between calls, so concurrent callers
    need no locking.

Determinism:
    Identical `(utterance, history, mode)` always yields byte-identical text
    and an identical trace.
"""

import logging
from collections.abc import Mapping

from modechat.core.config import DEBUG_PIPELINE
from modechat.core.modes import resolve_mode
from modechat.core.strategy import select_rhetorical_approach, select_strategy
from modechat.core.types import (
    ClassificationResult,
    ConversationContext,
    ConversationState,
    PipelineTrace,
)
from modechat.memory.conversation_state import (
    build_conversation_state,
    has_user_turn,
)
from modechat.nlp.complexity_estimator import assess_complexity, infer_expertise
from modechat.nlp.domain_classifier import classify_domains
from modechat.nlp.intent_classifier import classify_intent, infer_communicative_intent
from modechat.nlp.sentiment_classifier import classify_sentiment
from modechat.nlp.topic_tagger import extract_topics
from modechat.prompting.response_builder import (
    SynthesisInputs,
    build_response,
    excerpt,
)


logger = logging.getLogger(__name__)

KEYWORD_MIN_LENGTH = 4


def _normalize_utterance(utterance) -> str:
    """Coerce caller input into the raw utterance string."""
    if utterance is None:
        return ""
    if isinstance(utterance, str):
        return utterance
    return str(utterance)


def classify(utterance: str) -> ClassificationResult:
    """Run the independent per-utterance classifiers.

    Args:
        utterance: Raw user text.

    Returns:
        Fresh `ClassificationResult`.

    Edge cases:
        - Empty or whitespace-only input resolves to
          `general / general_statement / neutral / low / beginner`.
    """
    utterance = _normalize_utterance(utterance)

    return ClassificationResult(
        domains=tuple(classify_domains(utterance)),
        intent=classify_intent(utterance),
        sentiment=classify_sentiment(utterance),
        complexity=assess_complexity(utterance),
        expertise=infer_expertise(utterance),
    )


def extract_keywords(utterance: str) -> tuple[str, ...]:
    """Lower-cased words of at least `KEYWORD_MIN_LENGTH` characters, in order."""
    return tuple(
        word
        for word in utterance.lower().split()
        if len(word) >= KEYWORD_MIN_LENGTH
    )


def _build_trace(
    utterance: str,
    history,
    mode: str,
    classification: ClassificationResult,
    state: ConversationState,
    strategy: str,
    topics: tuple[str, ...],
) -> PipelineTrace:
    """Assemble the observability record for one turn.

    Important behavior:
        - Quotes the utterance through `excerpt`, so long input is cut at 100
          characters.
        - Carries no random scores; two identical calls produce equal traces.
    """
    communicative_intent = infer_communicative_intent(utterance)
    domains = ", ".join(classification.domains)
    has_history = bool(history)

    reasoning = (
        f'Analyzing user input: "{excerpt(utterance)}"',
        f"Detected knowledge domains: {domains}",
        f"Primary intent: {classification.intent}",
        f"Primary communicative intent: {communicative_intent}",
        f"Emotional context: {state.emotional_context}",
        f"Complexity: {classification.complexity}, expertise: {classification.expertise}",
        f"Selected strategy: {strategy} (mode: {mode})",
    )

    synthesis = (
        f"Based on multi-domain analysis ({domains}), the user's "
        f"{communicative_intent} requires a comprehensive response that "
        "addresses both explicit and implicit needs while maintaining "
        "contextual awareness and emotional intelligence."
    )

    return PipelineTrace(
        mode=mode,
        classification=classification,
        state=state,
        strategy=strategy,
        topics=topics,
        communicative_intent=communicative_intent,
        rhetorical_approach=select_rhetorical_approach(state.emotional_context),
        keywords=extract_keywords(utterance),
        conversational_flow=has_history,
        topic_continuity=has_history,
        reasoning=reasoning,
        synthesis=synthesis,
    )


def respond_with_trace(utterance, history=None, mode=None) -> tuple[str, PipelineTrace]:
    """Process one turn and return the response text with its trace.

    Args:
        utterance: Raw user message for this turn.
        history: Prior turns, oldest first (`Turn` objects or role/content
            mappings). Read only.
        mode: Mode id selected by the caller; unknown ids act as `general`.

    Returns:
        `(response_text, trace)`; the text is never empty.

    Determinism:
        Pure function of its arguments.
    """
    utterance = _normalize_utterance(utterance)
    history = tuple(history or ())
    active_mode = resolve_mode(mode)

    classification = classify(utterance)
    topics = tuple(extract_topics(utterance))
    state = build_conversation_state(history, utterance)
    strategy = select_strategy(utterance, classification, state)

    response = build_response(
        SynthesisInputs(
            utterance=utterance,
            mode=active_mode,
            intent=classification.intent,
            sentiment=classification.sentiment,
            topics=topics,
            strategy=strategy,
            emotional_context=state.emotional_context,
            has_prior_user_turn=has_user_turn(history),
        )
    )

    if DEBUG_PIPELINE:
        logger.info(
            "pipeline_debug utterance=%r mode=%s intent=%s sentiment=%s domains=%s complexity=%s expertise=%s emotion=%s strategy=%s topics=%s",
            excerpt(utterance),
            active_mode,
            classification.intent,
            classification.sentiment,
            ",".join(classification.domains),
            classification.complexity,
            classification.expertise,
            state.emotional_context,
            strategy,
            ",".join(topics) or "-",
        )

    trace = _build_trace(
        utterance,
        history,
        active_mode,
        classification,
        state,
        strategy,
        topics,
    )
    return response, trace


def respond(utterance, history=None, mode=None) -> str:
    """Return only the response text for one turn. See `respond_with_trace`."""
    response, _ = respond_with_trace(utterance, history, mode)
    return response


def generate_response(utterance, context=None) -> str:
    """Entry point taking a `ConversationContext` (or a history/mode mapping).

    Edge cases:
        - `context=None` means empty history in `general` mode.
        - Mappings may use `history` or `messages` for the turn list.
    """
    if context is None:
        return respond(utterance)

    if isinstance(context, ConversationContext):
        return respond(utterance, context.history, context.mode)

    if isinstance(context, Mapping):
        history = context.get("history")
        if history is None:
            history = context.get("messages")
        return respond(utterance, history, context.get("mode"))

    raise TypeError(f"Unsupported context type: {type(context).__name__}")
