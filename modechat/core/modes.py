"""Static registry of assistant modes.

Architectural role:
    Declares the fixed set of modes a caller can pick before a session starts.
    The HTTP adapter lists them as models; the CLI lists them under `/mode`.

Resolution:
    - `get_mode` is strict and raises `KeyError` for unknown ids.
    - `resolve_mode` is lenient and maps unknown or empty ids to `general`,
      which is how the pipeline treats them.
"""

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mode:
    """One selectable mode record."""

    id: str
    title: str
    description: str
    examples: tuple[str, ...]

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "examples": list(self.examples),
        }


GENERAL_MODE = "general"

MODES = (
    Mode(
        "general",
        "General Assistant",
        "Multi-purpose AI helper for various tasks",
        ("Answer questions", "Explain concepts", "Help with decisions"),
    ),
    Mode(
        "study",
        "Study Helper",
        "Educational support and learning assistance",
        ("Explain topics", "Quiz preparation", "Homework help"),
    ),
    Mode(
        "writing",
        "Writing Assistant",
        "Help with writing, editing, and grammar",
        ("Improve text", "Grammar check", "Creative writing"),
    ),
    Mode(
        "support",
        "Customer Support",
        "Automated customer service helper",
        ("Answer FAQs", "Troubleshooting", "Product info"),
    ),
    Mode(
        "resume",
        "Resume Builder",
        "AI-powered resume creation and optimization",
        ("Resume writing", "Format suggestions", "Skills optimization"),
    ),
    Mode(
        "grammar",
        "Grammar Corrector",
        "Advanced grammar and style checking",
        ("Fix grammar", "Style improvements", "Clarity check"),
    ),
    Mode(
        "travel",
        "Travel Planner",
        "Plan trips and get travel recommendations",
        ("Trip planning", "Destination info", "Travel tips"),
    ),
    Mode(
        "game",
        "Game Character Generator",
        "Create dialogues and characters for games",
        ("Character creation", "Dialogue writing", "Story ideas"),
    ),
    Mode(
        "mental",
        "Mental Health Check-in",
        "Non-medical wellness and mood support",
        ("Mood tracking", "Wellness tips", "Mindfulness"),
    ),
)

_MODES_BY_ID = {mode.id: mode for mode in MODES}

MODE_IDS = tuple(_MODES_BY_ID)


def list_modes() -> list[Mode]:
    """Return every mode in declaration order."""
    return list(MODES)


def get_mode(mode_id: str) -> Mode:
    """Return the mode record for `mode_id`; raises `KeyError` when unknown."""
    return _MODES_BY_ID[mode_id]


def resolve_mode(mode_id) -> str:
    """Normalize a caller-supplied mode id, falling back to `general`."""
    if not mode_id:
        return GENERAL_MODE

    normalized = str(mode_id).strip().lower()
    if normalized in _MODES_BY_ID:
        return normalized

    logger.warning("Unknown mode %r, falling back to %s", mode_id, GENERAL_MODE)
    return GENERAL_MODE
