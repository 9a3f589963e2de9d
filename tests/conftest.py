"""Shared pytest fixtures."""

from datetime import datetime

import pytest

import modechat.memory.conversation_manager as conversation_manager
from modechat.core.types import Turn


@pytest.fixture
def sample_turns() -> list[Turn]:
    """Twelve alternating turns, oldest first, numbered in their content."""
    turns = []
    for i in range(12):
        role = "user" if i % 2 == 0 else "assistant"
        turns.append(Turn(content=f"turn {i}", role=role, timestamp=datetime(2024, 1, 1, 12, i)))
    return turns


@pytest.fixture
def user_history() -> list[dict]:
    """A short history in the role/content mapping shape HTTP callers send."""
    return [
        {"role": "user", "content": "I need some help with my garden"},
        {"role": "assistant", "content": "Happy to help. What are you growing?"},
    ]


@pytest.fixture
def technical_utterance() -> str:
    """Over 200 characters with three technical terms and a 'how'."""
    return (
        "Could you walk me through how the algorithm inside our scheduling "
        "framework handles optimization when the input graph changes shape "
        "halfway through a run, and what trade-offs appear once the cache is "
        "cold and memory is tight"
    )


@pytest.fixture
def clean_session():
    """Reset the process-wide CLI session buffer around a test."""
    conversation_manager.discard_current_session()
    conversation_manager.set_mode(None)
    yield
    conversation_manager.discard_current_session()
    conversation_manager.set_mode(None)
