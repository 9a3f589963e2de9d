"""Tests for the environment helpers in modechat/core/config.py."""

import pytest

from modechat.core import config


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 200), ("", 200), ("50", 50), ("lots", 200)],
)
def test_env_int(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("MODECHAT_TEST_INT", raising=False)
    else:
        monkeypatch.setenv("MODECHAT_TEST_INT", raw)
    assert config._env_int("MODECHAT_TEST_INT", 200) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), (" TRUE ", True), ("1", False), ("", False)],
)
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("MODECHAT_TEST_FLAG", raw)
    assert config._env_flag("MODECHAT_TEST_FLAG") is expected
