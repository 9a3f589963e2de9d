"""Tests for modechat/core/modes.py."""

import pytest

from modechat.core.modes import MODE_IDS, get_mode, list_modes, resolve_mode


def test_registry_order_and_ids():
    assert MODE_IDS == (
        "general", "study", "writing", "support", "resume",
        "grammar", "travel", "game", "mental",
    )
    assert [m.id for m in list_modes()] == list(MODE_IDS)


def test_every_mode_has_title_description_and_examples():
    for mode in list_modes():
        assert mode.title
        assert mode.description
        assert len(mode.examples) == 3


def test_get_mode_strict():
    assert get_mode("travel").title == "Travel Planner"
    with pytest.raises(KeyError):
        get_mode("pirate")


@pytest.mark.parametrize(
    "mode_id, expected",
    [(None, "general"), ("", "general"), ("pirate", "general"), (" Study ", "study")],
)
def test_resolve_mode(mode_id, expected):
    assert resolve_mode(mode_id) == expected


def test_as_dict():
    assert get_mode("game").as_dict() == {
        "id": "game",
        "title": "Game Character Generator",
        "description": "Create dialogues and characters for games",
        "examples": ["Character creation", "Dialogue writing", "Story ideas"],
    }
