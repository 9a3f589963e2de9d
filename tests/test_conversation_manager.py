"""Tests for modechat/memory/conversation_manager.py."""

import pytest

import modechat.memory.conversation_manager as conversation_manager

pytestmark = pytest.mark.usefixtures("clean_session")


def test_add_message_appends_in_order():
    conversation_manager.add_message("user", "hello")
    conversation_manager.add_message("assistant", "hi there")

    history = conversation_manager.get_history()
    assert [t.content for t in history] == ["hello", "hi there"]
    assert history[0].timestamp is not None


def test_empty_content_is_ignored():
    conversation_manager.add_message("user", "")
    conversation_manager.add_message("user", None)
    assert conversation_manager.get_history() == ()


def test_session_limit_drops_oldest(monkeypatch):
    monkeypatch.setattr(conversation_manager, "SESSION_LIMIT", 3)
    for i in range(5):
        conversation_manager.add_message("user", f"m{i}")

    assert [t.content for t in conversation_manager.get_history()] == ["m2", "m3", "m4"]


def test_discard_keeps_mode():
    conversation_manager.set_mode("writing")
    conversation_manager.add_message("user", "hello")

    conversation_manager.discard_current_session()

    assert conversation_manager.get_history() == ()
    assert conversation_manager.get_mode() == "writing"
