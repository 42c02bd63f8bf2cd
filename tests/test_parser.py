"""Tests for the address parser: numeric prefix, street name and subaddress segmenters."""

import pytest

from address_reconcile.parser import (
    AddressParseError,
    parse_address,
    parse_complete_street_name,
    parse_number,
    parse_number_suffix,
    parse_subaddress_identifiers,
)
from address_reconcile.recognizers import Directional, PostType, SubaddressType


# ============================================================================
# Known literals
# ============================================================================


def test_fraction_suffix_directional_and_post_type():
    a = parse_address("1865 1/2 NE BEAVILLA VIEW")
    assert a.number == 1865
    assert a.number_suffix == "1/2"
    assert a.directional == Directional.NORTHEAST
    assert a.street_name == "BEAVILLA"
    assert a.post_type == PostType.VIEW
    assert a.subaddress_identifier is None


def test_compound_post_type_folds_into_name():
    a = parse_address("1200 AZALEA DRIVE CUTOFF")
    assert a.street_name == "AZALEA DRIVE"
    assert a.post_type == PostType.DRIVE_CUTOFF


def test_parse_is_deterministic():
    text = "101 NW 6TH ST, STE 4"
    assert parse_address(text) == parse_address(text)


def test_case_and_whitespace_tolerant():
    assert parse_address("  1865   1/2 ne  beavilla view ") == parse_address("1865 1/2 NE BEAVILLA VIEW")


# ============================================================================
# Numeric prefix
# ============================================================================


class TestNumber:

    def test_number(self):
        assert parse_number("1865 1/2 NE") == (1865, " 1/2 NE")

    def test_must_start_with_digit(self):
        with pytest.raises(AddressParseError):
            parse_number("MAIN ST")

    def test_suffix_absent(self):
        assert parse_number_suffix(" NE BEAVILLA") == (None, " NE BEAVILLA")

    def test_dotted_directional_is_not_a_suffix(self):
        assert parse_number_suffix(" N.E. MAIN") == (None, " N.E. MAIN")

    def test_three_quarters(self):
        assert parse_number_suffix(" 3/4 MAIN") == ("3/4", "MAIN")


# ============================================================================
# Street name segmenter
# ============================================================================


class TestStreetName:

    def test_directional_before_lone_post_type_is_the_name(self):
        a = parse_address("100 N ST")
        assert a.directional is None
        assert a.street_name == "N"
        assert a.post_type == PostType.STREET

    def test_directional_name_before_subaddress(self):
        a = parse_address("100 N ST APT 4")
        assert a.directional is None
        assert a.street_name == "N"
        assert a.post_type == PostType.STREET
        assert a.subaddress_type == SubaddressType.APARTMENT
        assert a.subaddress_identifier == "4"

    def test_directional_before_compound_name(self):
        a = parse_address("100 N PARK VIEW")
        assert a.directional == Directional.NORTH
        assert a.street_name == "PARK"
        assert a.post_type == PostType.VIEW

    def test_missing_post_type_is_fatal(self):
        """名称之后没有后置类型：不把后续片段并入名称"""
        for text in ("100 N", "100 N MAIN", "100 MAIN APT 4", "100 MAIN #4", "100 MAIN, GRANTS PASS"):
            with pytest.raises(AddressParseError):
                parse_address(text)

    def test_multi_word_name(self):
        a = parse_address("455 ROGUE RIVER HWY")
        assert a.street_name == "ROGUE RIVER"
        assert a.post_type == PostType.HIGHWAY

    def test_first_word_always_in_name(self):
        street, rest = parse_complete_street_name("PARK VIEW LANE")
        assert street.street_name == "PARK VIEW"
        assert street.post_type == PostType.LANE
        assert rest == ""

    def test_missing_name_is_fatal(self):
        with pytest.raises(AddressParseError):
            parse_address("100")
        with pytest.raises(AddressParseError):
            parse_address("100 ,APT 4")

    def test_empty_input_is_fatal(self):
        with pytest.raises(AddressParseError):
            parse_address("")


# ============================================================================
# Subaddress segmenter
# ============================================================================


class TestSubaddress:

    def test_type_and_identifier(self):
        a = parse_address("100 MAIN ST APT 4")
        assert a.post_type == PostType.STREET
        assert a.subaddress_type == SubaddressType.APARTMENT
        assert a.subaddress_identifier == "4"

    def test_comma_before_subaddress(self):
        a = parse_address("101 NW 6TH ST, STE 4")
        assert a.street_name == "6TH"
        assert a.subaddress_type == SubaddressType.SUITE
        assert a.subaddress_identifier == "4"

    def test_hash_marker_stripped(self):
        a = parse_address("100 MAIN ST, #4")
        assert a.subaddress_type is None
        assert a.subaddress_identifier == "4"

    def test_markers_and_empty_elements(self):
        assert parse_subaddress_identifiers(" #4 & &5") == ("4 5", "")

    def test_bounded_by_comma(self):
        ident, rest = parse_subaddress_identifiers(" 4B, GRANTS PASS")
        assert ident == "4B"
        assert rest == ", GRANTS PASS"

    def test_trailing_city_after_comma_is_not_a_unit(self):
        a = parse_address("100 MAIN ST, GRANTS PASS")
        assert a.subaddress_identifier is None

    def test_trailer_after_post_type_is_a_subaddress(self):
        a = parse_address("100 MAIN ST TRLR 5")
        assert a.post_type == PostType.STREET
        assert a.subaddress_type == SubaddressType.TRAILER
        assert a.subaddress_identifier == "5"

    def test_building_and_floor_fields(self):
        a = parse_address("100 MAIN ST BLDG C")
        assert a.building == "C"
        assert a.subaddress_type is None
        b = parse_address("100 MAIN ST FL 2")
        assert b.floor == 2
        assert b.subaddress_identifier is None


def test_partial_label():
    a = parse_address("1865 1/2 NE BEAVILLA VIEW")
    assert a.label() == "1865 1/2 NE BEAVILLA VIEW"
