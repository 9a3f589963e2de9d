"""Minimal rule-based grammar checks used by the grammar mode.

Rules (case-sensitive, evaluated in order):
1. A standalone lower-case "i" with no standalone "I" anywhere in the text.
2. "your welcome" / "your here" where a contraction was meant.

Only these two slips are recognised.
"""

import re


_LOWER_I = re.compile(r"\bi\b")
_UPPER_I = re.compile(r"\bI\b")
_YOUR = re.compile(r"\b(your|you're)\b")

CONTRACTION_SLIPS = {
    "your welcome": "you're welcome",
    "your here": "you're here",
}


def detect_grammar_issues(text: str) -> list[str]:
    """Return human-readable descriptions of the issues found in `text`."""
    issues: list[str] = []

    if not text:
        return issues

    if _LOWER_I.search(text) and not _UPPER_I.search(text):
        issues.append("'i' should be capitalized as 'I'")

    if _YOUR.search(text) and any(slip in text for slip in CONTRACTION_SLIPS):
        issues.append("consider 'you're' instead of 'your' for contractions")

    return issues


def correct_grammar(text: str) -> str:
    """Apply the fixes for every rule in `detect_grammar_issues`."""
    corrected = _LOWER_I.sub("I", text or "")
    for slip, fix in CONTRACTION_SLIPS.items():
        corrected = corrected.replace(slip, fix)
    return corrected
