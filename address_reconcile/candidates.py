from __future__ import annotations
from typing import Dict, Iterable, List, Set, Tuple

from .models import PartialStructuredAddress, StructuredAddress


class CandidateIndex:
    """
    负责“候选召回”：候选池冻结为 tuple 后按门牌号建一次倒排索引，
    比较时只扫描门牌号相同的候选。只缩小扫描范围，不改变结果及其顺序。
    """

    def __init__(self, candidates: Iterable[StructuredAddress]):
        self.pool: Tuple[StructuredAddress, ...] = tuple(candidates)
        by_number: Dict[int, List[int]] = {}
        streets: Set[str] = set()
        for pos, cand in enumerate(self.pool):
            by_number.setdefault(cand.number, []).append(pos)
            streets.add(cand.street_label())
        # 位置按候选池顺序递增
        self._by_number: Dict[int, Tuple[int, ...]] = {k: tuple(v) for k, v in by_number.items()}
        self._streets = frozenset(streets)

    def __len__(self) -> int:
        return len(self.pool)

    def candidates_for(self, source: StructuredAddress) -> List[StructuredAddress]:
        return [self.pool[pos] for pos in self._by_number.get(source.number, ())]

    def candidates_for_partial(self, partial: PartialStructuredAddress) -> List[StructuredAddress]:
        # 门牌号未知时不能缩小范围
        if partial.number is None:
            return list(self.pool)
        return [self.pool[pos] for pos in self._by_number.get(partial.number, ())]

    def has_street(self, street_label: str) -> bool:
        return street_label in self._streets
