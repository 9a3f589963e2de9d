"""Tests for modechat/nlp/intent_classifier.py."""

import pytest

from modechat.core.types import INTENTS
from modechat.nlp.intent_classifier import (
    INTENT_RULES,
    classify_intent,
    infer_communicative_intent,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("What is recursion", "question"),
        ("is this right?", "question"),
        ("Can you support me", "question"),
        ("hello there", "greeting"),
        ("Good morning team", "greeting"),
        ("I need some help with my essay", "help_request"),
        ("There is an error in my code", "problem_report"),
        ("nothing is working today", "problem_report"),
        ("bye for now", "farewell"),
        ("Thanks a lot", "farewell"),
        ("please summarize this", "task_request"),
        ("write a poem about the sea", "task_request"),
        ("the weather was mild", "general_statement"),
    ],
)
def test_classify_intent(text, expected):
    assert classify_intent(text) == expected


def test_question_beats_greeting():
    assert classify_intent("Hi, can you help me?") == "question"


def test_help_beats_problem():
    assert classify_intent("help, my laptop is broken") == "help_request"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("history of rome", "greeting"),
        ("heyday of jazz", "greeting"),
        ("thanksgiving plans", "farewell"),
        ("byes in the tournament", "farewell"),
        ("pleased to meet you", "task_request"),
    ],
)
def test_greeting_farewell_and_task_starters_are_plain_prefixes(text, expected):
    assert classify_intent(text) == expected


def test_question_starter_needs_word_boundary():
    assert classify_intent("whatever you say") == "general_statement"


@pytest.mark.parametrize("text", ["", "   ", None])
def test_blank_input_is_general_statement(text):
    assert classify_intent(text) == "general_statement"


def test_rule_order_matches_declared_intents():
    assert [label for label, _ in INTENT_RULES] == list(INTENTS[:-1])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("is it ready?", "questioning"),
        ("please send it", "requesting"),
        ("can you send it", "requesting"),
        ("what do you think", "opinion_seeking"),
        ("the sky is blue", "informing"),
    ],
)
def test_infer_communicative_intent(text, expected):
    assert infer_communicative_intent(text) == expected
