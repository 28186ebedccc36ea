"""Tests for the static translation dictionary."""

import pytest

from translations import LANGUAGES, TRANSLATIONS, is_rtl, translate


def test_every_language_defines_every_key():
    english_keys = set(TRANSLATIONS["en"])

    for language in LANGUAGES:
        assert set(TRANSLATIONS[language]) == english_keys, language


@pytest.mark.parametrize("language,expected", [
    ("en", "Welcome to ALI"),
    ("fr", "Bienvenue sur ALI"),
    ("ar", "مرحبًا بك في ALI"),
])
def test_translate_welcome(language, expected):
    assert translate(language, "welcome") == expected


def test_translate_fills_placeholders():
    assert translate("en", "order_sent", restaurant="Dar Tanjia") == "Order sent for Dar Tanjia! (frontend only)"
    assert translate("fr", "eta_value", hours=1, minutes=5) == "1 h 5 min"


def test_unknown_language_falls_back_to_english():
    assert translate("de", "home") == "Home"


def test_unknown_key_raises():
    with pytest.raises(KeyError):
        translate("en", "does_not_exist")


def test_only_arabic_is_right_to_left():
    assert is_rtl("ar")
    assert not is_rtl("en")
    assert not is_rtl("fr")
