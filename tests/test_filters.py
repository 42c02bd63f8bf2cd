"""Tests for the closed filter-verb enum and its string boundary."""

import logging

import pytest

from address_reconcile.filters import FilterVerb, filter_addresses, filter_matches, parse_filter_verb
from address_reconcile.matcher import match_one, match_partial
from address_reconcile.models import MatchOutcome, PartialStructuredAddress
from address_reconcile.recognizers import AddressStatus, Directional, PostType


class TestParseFilterVerb:

    def test_known_verbs(self):
        assert parse_filter_verb("duplicate") == FilterVerb.DUPLICATE
        assert parse_filter_verb(" Pre-Directional ") == FilterVerb.PRE_DIRECTIONAL
        assert parse_filter_verb(FilterVerb.FLOOR) == FilterVerb.FLOOR

    def test_unknown_verb_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="address_reconcile.filters"):
            assert parse_filter_verb("duplicates") is None
        assert "Unknown filter verb" in caplog.text

    def test_full_vocabulary(self):
        assert {v.value for v in FilterVerb} == {
            "duplicate", "missing", "divergent", "matching", "subaddress", "floor",
            "building", "status", "label", "street_name", "pre_directional", "post_type",
        }


# ============================================================================
# Address filters
# ============================================================================


class TestFilterAddresses:

    @pytest.fixture
    def addresses(self, make_address):
        return [
            make_address(object_id=1),
            make_address(object_id=2, number=200, directional=Directional.NORTHEAST),
            make_address(object_id=3),
            make_address(object_id=4, street_name="ELM", post_type=PostType.AVENUE),
        ]

    def test_duplicate(self, addresses):
        assert [a.object_id for a in filter_addresses(addresses, "duplicate")] == [1, 3]

    def test_field_filters(self, addresses):
        assert [a.object_id for a in filter_addresses(addresses, "street_name", "elm")] == [4]
        assert [a.object_id for a in filter_addresses(addresses, "pre_directional", "n.e.")] == [2]
        assert [a.object_id for a in filter_addresses(addresses, "post_type", "Ave")] == [4]
        assert [a.object_id for a in filter_addresses(addresses, "label", "200 NE MAIN STREET")] == [2]

    def test_unknown_or_inapplicable_verb_is_empty(self, addresses, caplog):
        with caplog.at_level(logging.WARNING, logger="address_reconcile.filters"):
            assert filter_addresses(addresses, "bogus") == []
            assert filter_addresses(addresses, "missing") == []
            assert filter_addresses(addresses, "street_name") == []
        assert "does not apply" in caplog.text


# ============================================================================
# Match-record filters
# ============================================================================


class TestFilterMatches:

    @pytest.fixture
    def records(self, make_address):
        source = make_address()
        candidates = [
            make_address(object_id=1),
            make_address(object_id=2, floor=3),
            make_address(object_id=3, status=AddressStatus.RETIRED),
        ]
        return match_one(source, candidates) + match_one(make_address(number=5), candidates)

    def test_outcome_filters(self, records):
        assert len(filter_matches(records, "matching")) == 1
        assert [r.other_id for r in filter_matches(records, "divergent")] == [2, 3]
        assert [r.outcome for r in filter_matches(records, "missing")] == [MatchOutcome.MISSING]

    def test_mismatch_filters(self, records):
        assert [r.other_id for r in filter_matches(records, "floor")] == [2]
        assert [r.other_id for r in filter_matches(records, "status")] == [3]
        assert filter_matches(records, "building") == []

    def test_address_verbs_do_not_apply(self, records):
        assert filter_matches(records, "duplicate") == []

    def test_partial_records(self, make_address):
        records = match_partial(PartialStructuredAddress(number=100, street_name="MAIN"), [make_address()])
        assert len(filter_matches(records, "matching")) == 1
        assert filter_matches(records, "floor") == []
