"""Tests for modechat/nlp/lexicon.py."""

from modechat.nlp.lexicon import (
    contains_any,
    count_contained,
    count_whole_words,
    match_whole_words,
    starts_with_any,
    tokenize,
    _whole_word_pattern,
)


def test_match_whole_words_case_insensitive():
    assert match_whole_words("Machine Learning is fun", ("machine learning",))


def test_match_whole_words_rejects_partial_word():
    assert not match_whole_words("an artist", ("art",))


def test_match_whole_words_empty_text():
    assert not match_whole_words("", ("anything",))


def test_count_whole_words_counts_repeats():
    assert count_whole_words("code, more code and CODE", ("code",)) == 3


def test_whole_word_pattern_compiled_once_per_vocabulary():
    first = _whole_word_pattern(("alpha", "beta"))
    assert _whole_word_pattern(["alpha", "beta"]) is first
    assert _whole_word_pattern(("beta", "alpha")) is not first


def test_contains_any_is_case_sensitive():
    assert contains_any("need help", ("help",))
    assert not contains_any("HELP", ("help",))


def test_count_contained_counts_distinct_markers():
    assert count_contained("good good great", ("good", "great", "bad")) == 2


def test_starts_with_any_plain_prefix():
    assert starts_with_any("hi there", ("hi",))
    assert starts_with_any("history", ("hi",))
    assert not starts_with_any("oh hi", ("hi",))
    assert not starts_with_any("", ("hi",))


def test_starts_with_any_word_boundary():
    assert starts_with_any("hi", ("hi",), word_boundary=True)
    assert starts_with_any("hi, friend", ("hi",), word_boundary=True)
    assert starts_with_any("what is it", ("what",), word_boundary=True)
    assert not starts_with_any("history", ("hi",), word_boundary=True)
    assert not starts_with_any("whatever", ("what",), word_boundary=True)


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("one  two\tthree\n") == ["one", "two", "three"]
    assert tokenize("") == []
