from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple

from .conflicts import MismatchChecker
from .models import (
    AddressMatch,
    MatchOutcome,
    MatchRecord,
    PartialMatchRecord,
    PartialStructuredAddress,
    StructuredAddress,
)

logger = logging.getLogger(__name__)

# 主键字段：必须完全一致才可能是同一地点
PRIMARY_KEY_FIELDS: Tuple[str, ...] = (
    "number",
    "number_suffix",
    "directional",
    "pre_modifier",
    "pre_type",
    "separator",
    "street_name",
    "post_type",
    "subaddress_identifier",
    "zip",
    "postal_community",
    "state",
)

_checker = MismatchChecker()


def primary_key(address: StructuredAddress) -> tuple:
    return tuple(getattr(address, name) for name in PRIMARY_KEY_FIELDS)


def coincident(a: StructuredAddress, b: StructuredAddress) -> AddressMatch:
    """主键一致才比较次要字段；从不抛异常"""
    if primary_key(a) != primary_key(b):
        return AddressMatch(coincident=False)
    return AddressMatch(coincident=True, mismatches=tuple(_checker.check(a, b)))


def match_one(source: StructuredAddress, candidates: Iterable[StructuredAddress]) -> List[MatchRecord]:
    """
    每个主键一致的候选产生一条 Matching / Divergent 记录；
    一个都没有时产生且只产生一条 Missing 记录。
    """
    label = source.label()
    records: List[MatchRecord] = []
    for cand in candidates:
        m = coincident(source, cand)
        if not m.coincident:
            continue
        records.append(MatchRecord(
            outcome=m.outcome,
            address_label=label,
            self_id=source.object_id,
            other_id=cand.object_id,
            other_label=cand.label(),
            mismatches=m.mismatches,
            longitude=source.longitude,
            latitude=source.latitude,
        ))
    if not records:
        records.append(MatchRecord(
            outcome=MatchOutcome.MISSING,
            address_label=label,
            self_id=source.object_id,
            longitude=source.longitude,
            latitude=source.latitude,
        ))
    return records


def partial_coincident(partial: PartialStructuredAddress,
                       candidate: StructuredAddress) -> Optional[PartialMatchRecord]:
    """
    部分地址与一个完整候选逐项比较，只会降级不会升级：
    门牌号、方位词、街道名、后置类型（部分地址中存在时）是硬条件，不一致即 Missing（返回 None）；
    单元号、楼栋、楼层不一致只降为 Divergent。
    """
    if partial.is_empty():
        return None
    if partial.number is not None and partial.number != candidate.number:
        return None
    outcome = MatchOutcome.MATCHING

    if partial.directional is not None and partial.directional != candidate.directional:
        return None
    if partial.street_name is not None and partial.street_name != candidate.street_name:
        return None
    if partial.post_type is not None and partial.post_type != candidate.post_type:
        return None

    if partial.subaddress_identifier != candidate.subaddress_identifier:
        outcome = MatchOutcome.DIVERGENT
    if candidate.subaddress_identifier is None and partial.building != candidate.building:
        outcome = MatchOutcome.DIVERGENT
    if (candidate.subaddress_identifier is None and candidate.building is None
            and partial.floor != candidate.floor):
        outcome = MatchOutcome.DIVERGENT

    return PartialMatchRecord(
        outcome=outcome,
        address_label=partial.label(),
        other_label=candidate.label(),
        other_id=candidate.object_id,
        longitude=candidate.longitude,
        latitude=candidate.latitude,
    )


def match_partial(partial: PartialStructuredAddress,
                  candidates: Iterable[StructuredAddress]) -> List[PartialMatchRecord]:
    """丢弃 Missing；全部丢弃时给一条 Missing；存在 Matching 时只保留 Matching"""
    records: List[PartialMatchRecord] = []
    for cand in candidates:
        rec = partial_coincident(partial, cand)
        if rec is not None:
            records.append(rec)

    if not records:
        logger.debug("no candidate for partial address %r", partial.label())
        return [PartialMatchRecord(outcome=MatchOutcome.MISSING, address_label=partial.label())]

    exact = [r for r in records if r.outcome == MatchOutcome.MATCHING]
    if exact:
        return exact
    return records
