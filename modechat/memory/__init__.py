"""Conversation memory package.

Architectural role:
    - `conversation_state`: pure recomputation of the rolling state (working
      memory, long-term pattern buffer, emotional context) for each turn.
    - `conversation_manager`: in-memory, append-only session buffer owned by
      interactive callers.

The pipeline depends only on `conversation_state`; it never mutates history.
"""
