"""Tests for the settings lookup order: secrets, environment, defaults."""

import pytest

import config


@pytest.fixture
def no_secrets(monkeypatch):
    monkeypatch.setattr(config.st, "secrets", {})


def test_secrets_take_precedence(monkeypatch):
    monkeypatch.setattr(config.st, "secrets", {"GEOCODER_TIMEOUT": 4})
    monkeypatch.setenv("GEOCODER_TIMEOUT", "7")

    assert config.get_setting("GEOCODER_TIMEOUT") == "4"


def test_environment_used_without_secrets(no_secrets, monkeypatch):
    monkeypatch.setenv("GEOCODER_TIMEOUT", "7")

    assert config.get_float("GEOCODER_TIMEOUT") == 7.0


def test_builtin_defaults(no_secrets, monkeypatch):
    monkeypatch.delenv("ASSUMED_SPEED_KMH", raising=False)
    monkeypatch.delenv("GEOCODER_LIMIT", raising=False)

    assert config.get_float("ASSUMED_SPEED_KMH") == 60.0
    assert config.get_int("GEOCODER_LIMIT") == 5


def test_explicit_default_wins_over_builtin(no_secrets, monkeypatch):
    monkeypatch.delenv("DEFAULT_LANGUAGE", raising=False)

    assert config.get_setting("DEFAULT_LANGUAGE", "fr") == "fr"


def test_unknown_setting_is_empty(no_secrets, monkeypatch):
    monkeypatch.delenv("NOT_A_SETTING", raising=False)

    assert config.get_setting("NOT_A_SETTING") == ""
