"""In-memory session buffer for interactive callers.

Purpose of this abstraction:
    Hold the append-only conversation history of one interactive session so an
    adapter (the CLI) can pass it to `engine.respond` on every turn. The
    pipeline itself never writes here; it only reads the history it is given.

Lifetime:
    Process-local only. Nothing is written to disk; clearing or exiting the
    session drops the history.

Bounding:
    At most `SESSION_LIMIT` turns are retained. The oldest turns are dropped
    first, which never affects the pipeline because it reads at most the last
    ten turns.

Thread safety:
    All mutations and snapshots happen under `session_lock`.
"""

import logging
import threading
from datetime import datetime

from modechat.core.config import SESSION_LIMIT
from modechat.core.types import Turn


logger = logging.getLogger(__name__)


session_turns: list[Turn] = []
current_mode = None
session_lock = threading.Lock()


def add_message(role, content):
    """Append one turn to the active session.

    Input:
        role: `user` or `assistant`.
        content: Message text. Empty content is ignored.

    Side effects:
        - Appends to `session_turns`.
        - Drops the oldest turns once `SESSION_LIMIT` is exceeded.
    """
    global session_turns

    if not content:
        return

    turn = Turn(content=str(content), role=str(role), timestamp=datetime.now())

    with session_lock:
        session_turns.append(turn)
        overflow = len(session_turns) - SESSION_LIMIT
        if overflow > 0:
            session_turns = session_turns[overflow:]
            logger.debug("Session buffer trimmed by %d turns", overflow)


def get_history():
    """Return a snapshot of the session history, oldest first."""
    with session_lock:
        return tuple(session_turns)


def discard_current_session():
    """Clear all turns. The selected mode is left unchanged."""
    global session_turns

    with session_lock:
        session_turns = []


def set_mode(mode_id):
    """Store the mode id the session passes on every turn."""
    global current_mode
    with session_lock:
        current_mode = mode_id


def get_mode():
    with session_lock:
        return current_mode
