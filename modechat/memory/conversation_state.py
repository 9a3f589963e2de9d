"""Rolling conversation state, recomputed from history on every turn.

Short-term vs long-term window:
    - Working memory is the content of the last `WORKING_MEMORY_SIZE` turns.
    - The long-term pattern buffer is the content of the last
      `LONG_TERM_BUFFER_SIZE` turns and only serves as a coarse signal.
    Both windows include turns of any role and keep chronological order.

Emotional context:
    Derived from the current utterance alone through an ordered keyword table
    matched case-sensitively against the raw text, so "Frustrated" at the start
    of a sentence does not count.
    Earlier emotional states are never carried forward.

History input:
    Entries may be `Turn` objects or mappings with `role`/`content` keys, the
    shape HTTP callers send. Entries without usable content are skipped.

Side effects:
    None. The caller's history sequence is only read, never mutated.
"""

from collections.abc import Mapping

from modechat.core.types import ConversationState, Turn


WORKING_MEMORY_SIZE = 5
LONG_TERM_BUFFER_SIZE = 10


# ---------------------------------------------------------
# Emotional context rules (raw text, case-sensitive, first match wins)
# ---------------------------------------------------------

EMOTION_RULES = (
    ("excited", lambda t: "!" in t and "amazing" in t),
    ("frustrated", lambda t: "frustrated" in t or "annoying" in t),
    ("confused", lambda t: "confused" in t or "don't understand" in t),
    ("seeking_support", lambda t: "help" in t or "please" in t),
)


def detect_emotional_context(text: str) -> str:
    """Return the emotional-context label for one utterance."""
    text = text or ""
    for label, predicate in EMOTION_RULES:
        if predicate(text):
            return label
    return "neutral"


def _coerce_turn(entry) -> Turn | None:
    """Convert one history entry into a `Turn`, or `None` when unusable."""
    if isinstance(entry, Turn):
        return entry

    if isinstance(entry, Mapping):
        content = entry.get("content")
        if content is None:
            return None
        return Turn(
            content=str(content),
            role=str(entry.get("role") or "user"),
            timestamp=entry.get("timestamp"),
        )

    return None


def normalize_history(history) -> list[Turn]:
    """Return the usable history entries as `Turn` objects in original order."""
    if not history:
        return []

    turns: list[Turn] = []
    for entry in history:
        turn = _coerce_turn(entry)
        if turn is not None:
            turns.append(turn)
    return turns


def build_conversation_state(history, utterance: str) -> ConversationState:
    """Derive `ConversationState` for the current turn.

    Args:
        history: Prior turns, oldest first. Not mutated.
        utterance: Raw text of the current user turn.

    Returns:
        A fresh `ConversationState`.
    """
    turns = normalize_history(history)

    return ConversationState(
        working_memory=tuple(t.content for t in turns[-WORKING_MEMORY_SIZE:]),
        long_term_patterns=tuple(t.content for t in turns[-LONG_TERM_BUFFER_SIZE:]),
        emotional_context=detect_emotional_context(utterance),
    )


def has_user_turn(history) -> bool:
    """Return whether any prior turn is a non-empty user message."""
    return any(
        t.role == "user" and t.content
        for t in normalize_history(history)
    )
