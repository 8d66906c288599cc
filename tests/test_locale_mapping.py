"""Tests for the Xcode <-> Pontoon locale mapping."""

import pytest

from xliff_sync.locale_mapping import LOCALE_PAIRS, LocaleMapping, locale_mapping


@pytest.mark.parametrize("xcode_code, pontoon_code", LOCALE_PAIRS)
def test_pairs_round_trip(xcode_code, pontoon_code):
    assert locale_mapping.to_pontoon(xcode_code) == pontoon_code
    assert locale_mapping.to_xcode(pontoon_code) == xcode_code
    assert locale_mapping.to_xcode(locale_mapping.to_pontoon(xcode_code)) == xcode_code
    assert locale_mapping.to_pontoon(locale_mapping.to_xcode(pontoon_code)) == pontoon_code


@pytest.mark.parametrize("code", ["fr", "de", "zh-Hans", "pt-BR", "es-MX"])
def test_unmapped_codes_are_identity(code):
    assert locale_mapping.to_pontoon(code) == code
    assert locale_mapping.to_xcode(code) == code


def test_english_special_case_is_export_only():
    assert locale_mapping.to_pontoon("en") == "en-US"
    assert locale_mapping.to_xcode("en-US") == "en-US"
    assert locale_mapping.pontoon_mapping("en") is None


def test_known_mappings():
    assert locale_mapping.to_xcode("tl") == "fil"
    assert locale_mapping.to_xcode("zgh") == "tzm"
    assert locale_mapping.to_pontoon("sat-Olck") == "sat"


def test_mapping_if_present():
    assert locale_mapping.pontoon_mapping("ga") == "ga-IE"
    assert locale_mapping.pontoon_mapping("fr") is None
    assert locale_mapping.xcode_mapping("nb-NO") == "nb"
    assert locale_mapping.xcode_mapping("fr") is None


def test_directional_tables_are_inverses():
    assert locale_mapping.pontoon_to_xcode == {
        pontoon: xcode for xcode, pontoon in locale_mapping.xcode_to_pontoon.items()
    }


@pytest.mark.parametrize("pairs", [
    [("ga", "ga-IE"), ("gd", "ga-IE")],
    [("ga", "ga-IE"), ("ga", "gd")],
])
def test_non_bijective_table_is_rejected(pairs):
    with pytest.raises(ValueError):
        LocaleMapping(pairs)
