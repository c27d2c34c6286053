"""Tests for the bilingual content table."""

import copy

import pytest

from blend_studio.catalog import FLAVOR_CATALOG, get_flavor, liquid_color
from blend_studio.exceptions import TranslationError
from blend_studio.translations import TRANSLATIONS, flavor_label, get_text, validate_translations


def test_shipped_table_is_complete():
    validate_translations(TRANSLATIONS)


def test_missing_key_is_reported():
    table = copy.deepcopy(TRANSLATIONS)
    del table["zh"]["chat_error"]

    with pytest.raises(TranslationError, match="zh: missing chat_error"):
        validate_translations(table)


def test_missing_nested_key_is_reported():
    table = copy.deepcopy(TRANSLATIONS)
    del table["en"]["flavors"]["nutty"]

    with pytest.raises(TranslationError, match="flavors.nutty"):
        validate_translations(table)


def test_missing_language_is_reported():
    with pytest.raises(TranslationError, match="zh"):
        validate_translations({"en": TRANSLATIONS["en"]})


def test_unknown_language_uses_english():
    assert get_text("fr") is TRANSLATIONS["en"]
    assert get_text("zh-CN") is TRANSLATIONS["zh"]


def test_every_catalog_flavor_has_labels():
    for flavor in FLAVOR_CATALOG:
        assert flavor_label(flavor.id, "en")
        assert flavor_label(flavor.id, "zh")


def test_catalog_lookup():
    assert get_flavor("citrus").icon == "sun"
    with pytest.raises(ValueError):
        get_flavor("espresso")


def test_liquid_color():
    assert liquid_color([]) == "stone-100"
    assert liquid_color(["berry", "nutty"]) == "#A1887F"
