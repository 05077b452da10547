"""
Unit tests for tag extraction.

Tests tuple parsing and full name cleanup in
akafo.contexts.parsing.tag_extractor.
"""

import pytest

from akafo.contexts.parsing.menu_data_structure import MealAdditive, MealInformation
from akafo.contexts.parsing.tag_extractor import (
    extract_tags,
    parse_additive_tuple,
    parse_information_tuple,
)


@pytest.mark.unit
class TestParseInformationTuple:
    """Tests for parse_information_tuple function."""

    def test_multiple_codes(self):
        assert parse_information_tuple("(VG,V,G)") == {
            MealInformation.VEGAN,
            MealInformation.VEGETARISCH,
            MealInformation.MIT_GEFLUEGEL,
        }

    def test_single_code(self):
        assert parse_information_tuple("(VG)") == {MealInformation.VEGAN}

    def test_empty(self):
        assert parse_information_tuple("") == frozenset()

    def test_unknown_codes_dropped(self):
        """Codes missing from the lookup table are ignored, not errors."""
        assert parse_information_tuple("(S,XY,Q)") == {MealInformation.MIT_SCHWEIN}

    def test_every_code_maps(self):
        codes = ["A", "F", "G", "H", "L", "R", "S", "V", "VG", "W"]
        result = parse_information_tuple("(" + ",".join(codes) + ")")
        assert result == set(MealInformation)


@pytest.mark.unit
class TestParseAdditiveTuple:
    """Tests for parse_additive_tuple function."""

    def test_multiple_codes(self):
        assert parse_additive_tuple("(1,3)") == {
            MealAdditive.MIT_FARBSTOFF,
            MealAdditive.MIT_ANTIOXIDATIONSMITTEL,
        }

    def test_two_digit_code(self):
        assert parse_additive_tuple("(12)") == {MealAdditive.KOFFEINHALTIG}

    def test_empty(self):
        assert parse_additive_tuple("") == frozenset()

    def test_unknown_codes_dropped(self):
        assert parse_additive_tuple("(13,14,99)") == {MealAdditive.CHININHALTIG}

    def test_every_code_maps(self):
        result = parse_additive_tuple("(" + ",".join(str(n) for n in range(1, 14)) + ")")
        assert result == set(MealAdditive)


@pytest.mark.unit
class TestExtractTags:
    """Tests for extract_tags function."""

    def test_information_and_additives(self):
        result = extract_tags("Schnitzel (S) (1,3)")

        assert result.name == "Schnitzel"
        assert result.information == {MealInformation.MIT_SCHWEIN}
        assert result.additives == {
            MealAdditive.MIT_FARBSTOFF,
            MealAdditive.MIT_ANTIOXIDATIONSMITTEL,
        }

    def test_no_tags(self):
        result = extract_tags("Tagessuppe  ")

        assert result.name == "Tagessuppe"
        assert result.information == frozenset()
        assert result.additives == frozenset()

    def test_only_additives(self):
        result = extract_tags("Cola (12,9)")

        assert result.name == "Cola"
        assert result.information == frozenset()
        assert result.additives == {MealAdditive.KOFFEINHALTIG, MealAdditive.MIT_SUESSUNGSMITTELN}

    def test_only_information(self):
        result = extract_tags("Rinderbraten (R,A)")

        assert result.name == "Rinderbraten"
        assert result.information == {MealInformation.MIT_RIND, MealInformation.MIT_ALKOHOL}
        assert result.additives == frozenset()

    def test_tags_in_middle_of_name(self):
        """Removing the groups only trims the end, inner spacing stays."""
        result = extract_tags("Pizza (V) mit Salat (2)")

        assert result.name == "Pizza  mit Salat"
        assert result.information == {MealInformation.VEGETARISCH}
        assert result.additives == {MealAdditive.MIT_KONSERVIERUNGSSTOFF}

    def test_only_first_group_of_each_kind(self):
        result = extract_tags("Menü (S) (G)")

        assert result.information == {MealInformation.MIT_SCHWEIN}
        assert result.name == "Menü  (G)"

    def test_lowercase_parentheses_not_tags(self):
        result = extract_tags("Quark (hausgemacht)")

        assert result.name == "Quark (hausgemacht)"
        assert result.information == frozenset()

    def test_name_keeps_no_tag_group(self):
        result = extract_tags("Gemüsecurry (VG,X) (4)")

        assert "(" not in result.name
        assert result.information == {MealInformation.VEGAN}
        assert result.additives == {MealAdditive.MIT_GESCHMACKSVERSTAERKER}
