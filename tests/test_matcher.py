"""Tests for the coincidence matcher and the partial matcher."""

from address_reconcile.matcher import coincident, match_one, match_partial, partial_coincident
from address_reconcile.models import MatchOutcome, MismatchKind, PartialStructuredAddress
from address_reconcile.recognizers import AddressStatus, Directional, PostType, SubaddressType


# ============================================================================
# Coincidence
# ============================================================================


class TestCoincident:

    def test_identical_addresses_match(self, make_address):
        m = coincident(make_address(), make_address())
        assert m.coincident
        assert m.outcome == MatchOutcome.MATCHING
        assert m.mismatches == ()

    def test_status_only_difference_is_divergent(self, make_address):
        a = make_address(status=AddressStatus.ACTIVE)
        b = make_address(status=AddressStatus.PENDING)
        m = coincident(a, b)
        assert m.outcome == MatchOutcome.DIVERGENT
        assert len(m.mismatches) == 1
        assert m.mismatches[0].kind == MismatchKind.STATUS
        assert m.mismatches[0].message == "ACTIVE not equal to PENDING"

    def test_mismatches_in_fixed_order(self, make_address):
        a = make_address(subaddress_type=SubaddressType.UNIT, floor=2, building="A", status=AddressStatus.RETIRED)
        b = make_address(floor=3, building="B")
        kinds = [m.kind for m in coincident(a, b).mismatches]
        assert kinds == [
            MismatchKind.SUBADDRESS_TYPE,
            MismatchKind.FLOOR,
            MismatchKind.BUILDING,
            MismatchKind.STATUS,
        ]

    def test_primary_key_difference_is_not_coincident(self, make_address):
        assert not coincident(make_address(), make_address(zip=97527)).coincident
        assert not coincident(make_address(), make_address(subaddress_identifier="4")).coincident
        assert not coincident(make_address(), make_address(directional=Directional.NORTH)).coincident

    def test_carry_fields_are_not_compared(self, make_address):
        a = make_address(object_id=1, longitude=-123.3, latitude=42.4)
        b = make_address(object_id=2)
        assert coincident(a, b).outcome == MatchOutcome.MATCHING


class TestMatchOne:

    def test_one_record_per_coincident_candidate(self, make_address):
        source = make_address(object_id=1, longitude=-123.3, latitude=42.4)
        candidates = [
            make_address(object_id=10),
            make_address(object_id=11, street_name="ELM"),
            make_address(object_id=12, floor=2),
        ]
        records = match_one(source, candidates)
        assert [r.other_id for r in records] == [10, 12]
        assert [r.outcome for r in records] == [MatchOutcome.MATCHING, MatchOutcome.DIVERGENT]
        assert records[1].floor == "None not equal to 2"
        assert records[0].self_id == 1
        assert (records[0].longitude, records[0].latitude) == (-123.3, 42.4)

    def test_no_coincident_candidate_yields_single_missing(self, make_address):
        records = match_one(make_address(), [make_address(number=101), make_address(number=102)])
        assert len(records) == 1
        assert records[0].outcome == MatchOutcome.MISSING
        assert records[0].address_label == "100 MAIN STREET"
        assert records[0].other_id is None

    def test_empty_pool(self, make_address):
        assert [r.outcome for r in match_one(make_address(), [])] == [MatchOutcome.MISSING]


# ============================================================================
# Partial matching
# ============================================================================


class TestPartialMatch:

    def test_unit_difference_is_divergent_and_exact_match_wins(self, make_address):
        partial = PartialStructuredAddress(number=100, street_name="MAIN")
        unit_a = make_address(object_id=1, subaddress_identifier="A")
        unit_b = make_address(object_id=2, subaddress_identifier="B")

        records = match_partial(partial, [unit_a, unit_b])
        assert [r.outcome for r in records] == [MatchOutcome.DIVERGENT, MatchOutcome.DIVERGENT]
        assert [r.other_id for r in records] == [1, 2]

        exact = make_address(object_id=3)
        records = match_partial(partial, [unit_a, unit_b, exact])
        assert len(records) == 1
        assert records[0].outcome == MatchOutcome.MATCHING
        assert records[0].other_id == 3

    def test_number_mismatch_is_missing(self, make_address):
        partial = PartialStructuredAddress(number=200, street_name="MAIN")
        assert partial_coincident(partial, make_address()) is None
        records = match_partial(partial, [make_address()])
        assert len(records) == 1
        assert records[0].outcome == MatchOutcome.MISSING
        assert records[0].address_label == "200 MAIN"

    def test_directional_is_a_hard_filter_when_present(self, make_address):
        partial = PartialStructuredAddress(number=100, street_name="MAIN", directional=Directional.NORTH)
        assert partial_coincident(partial, make_address()) is None
        assert partial_coincident(partial, make_address(directional=Directional.NORTH)).outcome == MatchOutcome.MATCHING

    def test_street_name_is_a_hard_filter(self, make_address):
        partial = PartialStructuredAddress(number=100, street_name="ELM")
        assert partial_coincident(partial, make_address()) is None
        records = match_partial(partial, [make_address()])
        assert [r.outcome for r in records] == [MatchOutcome.MISSING]

    def test_post_type_is_a_hard_filter_when_present(self, make_address):
        partial = PartialStructuredAddress(number=100, street_name="MAIN", post_type=PostType.AVENUE)
        assert partial_coincident(partial, make_address()) is None
        assert partial_coincident(partial, make_address(post_type=PostType.AVENUE)).outcome == MatchOutcome.MATCHING

    def test_absent_post_type_does_not_filter(self, make_address):
        """部分地址没有后置类型时不按后置类型过滤"""
        partial = PartialStructuredAddress(number=100, street_name="MAIN", post_type=None)
        assert partial_coincident(partial, make_address(post_type=PostType.STREET)).outcome == MatchOutcome.MATCHING
        assert partial_coincident(partial, make_address(post_type=PostType.AVENUE)).outcome == MatchOutcome.MATCHING

    def test_unknown_number_is_not_disqualifying(self, make_address):
        partial = PartialStructuredAddress(street_name="MAIN")
        assert partial_coincident(partial, make_address(number=999)).outcome == MatchOutcome.MATCHING

    def test_building_and_floor_demote(self, make_address):
        partial = PartialStructuredAddress(number=100, street_name="MAIN", building="A")
        assert partial_coincident(partial, make_address(building="B")).outcome == MatchOutcome.DIVERGENT
        floor_partial = PartialStructuredAddress(number=100, street_name="MAIN", floor=2)
        assert partial_coincident(floor_partial, make_address(floor=3)).outcome == MatchOutcome.DIVERGENT

    def test_unknown_address_matches_nothing(self, make_address):
        records = match_partial(PartialStructuredAddress(), [make_address()])
        assert [r.outcome for r in records] == [MatchOutcome.MISSING]
