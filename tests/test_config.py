"""Tests for ParserConfig."""

import pytest
from pydantic import ValidationError

from tomlette.config import DEFAULT_MAX_DEPTH, MAX_DEPTH_ENV, ParserConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(MAX_DEPTH_ENV, raising=False)


def test_defaults():
    assert ParserConfig().max_depth == DEFAULT_MAX_DEPTH

def test_rejects_non_positive_depth():
    with pytest.raises(ValidationError):
        ParserConfig(max_depth=0)

def test_is_frozen():
    config = ParserConfig()
    with pytest.raises(ValidationError):
        config.max_depth = 3

def test_reads_environment(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV, "8")
    assert ParserConfig().max_depth == 8

def test_env_prefix_is_case_insensitive(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV.lower(), "9")
    assert ParserConfig().max_depth == 9

def test_keyword_overrides_environment(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV, "8")
    assert ParserConfig(max_depth=3).max_depth == 3

def test_invalid_environment_value(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV, "deep")
    with pytest.raises(ValidationError, match="max_depth"):
        ParserConfig()

def test_unrelated_environment_ignored(monkeypatch):
    monkeypatch.setenv("TOMLETTE_UNKNOWN", "1")
    assert ParserConfig() == ParserConfig(max_depth=DEFAULT_MAX_DEPTH)
