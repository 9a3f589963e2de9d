"""Tests for modechat/nlp/domain_classifier.py."""

import pytest

from modechat.core.types import DOMAINS
from modechat.nlp.domain_classifier import classify_domains
from modechat.nlp.lexicon import DOMAIN_KEYWORDS


@pytest.mark.parametrize("text", ["", "   ", "nothing in particular here"])
def test_no_match_falls_back_to_general(text):
    assert classify_domains(text) == ["general"]


def test_multiple_domains_reported_in_declaration_order():
    assert classify_domains("I study biology and music") == [
        "science_technology",
        "arts_humanities",
        "education_learning",
    ]


def test_order_does_not_follow_text_order():
    assert classify_domains("politics before physics") == [
        "science_technology",
        "social_political",
    ]


def test_keyword_shared_by_two_domains():
    assert classify_domains("ongoing research") == [
        "science_technology",
        "education_learning",
    ]


def test_case_insensitive_short_keyword():
    assert classify_domains("the AI market") == [
        "science_technology",
        "business_economics",
    ]


def test_whole_word_only():
    assert classify_domains("she said it was an artist") == ["general"]


def test_multi_word_phrase():
    assert classify_domains("mental health matters") == ["health_medicine"]


def test_every_domain_label_has_keywords():
    assert tuple(DOMAIN_KEYWORDS) == DOMAINS


def test_every_domain_can_be_reported():
    text = "physics music market therapy exam politics"
    assert classify_domains(text) == list(DOMAINS)
