from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from .models import MatchOutcome, MatchRecord, PartialMatchRecord, StructuredAddress
from .recognizers import recognize_directional, recognize_post_type

logger = logging.getLogger(__name__)


class FilterVerb(str, Enum):
    DUPLICATE = "duplicate"
    MISSING = "missing"
    DIVERGENT = "divergent"
    MATCHING = "matching"
    SUBADDRESS = "subaddress"
    FLOOR = "floor"
    BUILDING = "building"
    STATUS = "status"
    LABEL = "label"
    STREET_NAME = "street_name"
    PRE_DIRECTIONAL = "pre_directional"
    POST_TYPE = "post_type"


ADDRESS_VERBS = frozenset({
    FilterVerb.DUPLICATE,
    FilterVerb.LABEL,
    FilterVerb.STREET_NAME,
    FilterVerb.PRE_DIRECTIONAL,
    FilterVerb.POST_TYPE,
})

_OUTCOME_VERBS: Dict[FilterVerb, MatchOutcome] = {
    FilterVerb.MISSING: MatchOutcome.MISSING,
    FilterVerb.DIVERGENT: MatchOutcome.DIVERGENT,
    FilterVerb.MATCHING: MatchOutcome.MATCHING,
}


def parse_filter_verb(value: Union[str, FilterVerb, None]) -> Optional[FilterVerb]:
    """字符串边界：未知动词记 warning 并返回 None"""
    if isinstance(value, FilterVerb):
        return value
    key = (value or "").strip().lower().replace("-", "_")
    try:
        return FilterVerb(key)
    except ValueError:
        logger.warning("Unknown filter verb: %r", value)
        return None


def find_duplicates(addresses: Sequence[StructuredAddress]) -> List[StructuredAddress]:
    """标签出现多于一次的地址，按标签首次出现顺序分组返回"""
    groups: Dict[str, List[StructuredAddress]] = {}
    for address in addresses:
        groups.setdefault(address.label(), []).append(address)
    out: List[StructuredAddress] = []
    for members in groups.values():
        if len(members) > 1:
            out.extend(members)
    return out


def filter_addresses(addresses: Sequence[StructuredAddress],
                     verb: Union[str, FilterVerb, None],
                     value: Optional[str] = None) -> List[StructuredAddress]:
    fv = parse_filter_verb(verb)
    if fv is None:
        return []
    if fv not in ADDRESS_VERBS:
        logger.warning("Filter %r does not apply to addresses", fv.value)
        return []

    if fv == FilterVerb.DUPLICATE:
        return find_duplicates(addresses)

    if value is None:
        logger.warning("Filter %r requires a value", fv.value)
        return []
    target = " ".join(value.upper().split())

    if fv == FilterVerb.LABEL:
        return [a for a in addresses if a.label() == target]
    if fv == FilterVerb.STREET_NAME:
        return [a for a in addresses if a.street_name == target]
    if fv == FilterVerb.PRE_DIRECTIONAL:
        directional = recognize_directional(target)
        if directional is None:
            logger.warning("Unknown directional for filter: %r", value)
            return []
        return [a for a in addresses if a.directional == directional]
    if fv == FilterVerb.POST_TYPE:
        post_type = recognize_post_type(target)
        if post_type is None:
            logger.warning("Unknown post type for filter: %r", value)
            return []
        return [a for a in addresses if a.post_type == post_type]
    raise AssertionError(f"unhandled filter verb {fv}")


def filter_matches(records: Sequence[Union[MatchRecord, PartialMatchRecord]],
                   verb: Union[str, FilterVerb, None]) -> List[Union[MatchRecord, PartialMatchRecord]]:
    fv = parse_filter_verb(verb)
    if fv is None:
        return []
    if fv in ADDRESS_VERBS:
        logger.warning("Filter %r does not apply to match records", fv.value)
        return []

    if fv in _OUTCOME_VERBS:
        outcome = _OUTCOME_VERBS[fv]
        return [r for r in records if r.outcome == outcome]

    # 以下按次要字段差异筛选，只对完整匹配记录有意义
    if any(isinstance(r, PartialMatchRecord) for r in records):
        logger.warning("Filter %r does not apply to partial match records", fv.value)
        return []
    if fv == FilterVerb.SUBADDRESS:
        return [r for r in records if r.subaddress_type is not None]
    if fv == FilterVerb.FLOOR:
        return [r for r in records if r.floor is not None]
    if fv == FilterVerb.BUILDING:
        return [r for r in records if r.building is not None]
    if fv == FilterVerb.STATUS:
        return [r for r in records if r.status is not None]
    raise AssertionError(f"unhandled filter verb {fv}")
