from __future__ import annotations
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar, Union

from .candidates import CandidateIndex
from .config import Config
from .corrections import PlaceNameCorrector, apply_corrections
from .filters import filter_matches, find_duplicates
from .matcher import coincident, match_one, match_partial
from .models import (
    MatchOutcome,
    MatchRecord,
    PartialMatchRecord,
    PartialStructuredAddress,
    StructuredAddress,
)
from .parser import parse_address
from .sources import PARTIAL_SCHEMAS, load_addresses, partial_address_of
from .tables import read_rows, write_match_report

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4

T = TypeVar("T")
R = TypeVar("R")

__all__ = [
    "DEFAULT_WORKERS",
    "ReconciliationPipeline",
    "reconcile",
    "reconcile_partial",
    "compare_chain",
    "orphan_streets",
    "find_duplicates",
]


def _ordered_map(fn: Callable[[T], List[R]], items: Sequence[T], workers: Optional[int]) -> List[R]:
    """固定大小线程池上的保序 map，结果按输入顺序拼接"""
    n = DEFAULT_WORKERS if workers is None else workers
    if n <= 1 or len(items) <= 1:
        chunks = [fn(item) for item in items]
    else:
        with ThreadPoolExecutor(max_workers=n) as ex:
            chunks = list(ex.map(fn, items))
    out: List[R] = []
    for chunk in chunks:
        out.extend(chunk)
    return out


def _as_index(candidates: Union[CandidateIndex, Iterable[StructuredAddress]]) -> CandidateIndex:
    if isinstance(candidates, CandidateIndex):
        return candidates
    return CandidateIndex(candidates)


def reconcile(sources: Sequence[StructuredAddress],
              candidates: Union[CandidateIndex, Iterable[StructuredAddress]],
              workers: Optional[int] = None) -> List[MatchRecord]:
    """每条源地址对候选池做 match_one，结果按源地址顺序合并"""
    index = _as_index(candidates)
    sources = tuple(sources)
    records = _ordered_map(lambda src: match_one(src, index.candidates_for(src)), sources, workers)
    logger.info("Reconciled %d sources against %d candidates -> %d records",
                len(sources), len(index), len(records))
    return records


def reconcile_partial(partials: Sequence[PartialStructuredAddress],
                      candidates: Union[CandidateIndex, Iterable[StructuredAddress]],
                      workers: Optional[int] = None) -> List[PartialMatchRecord]:
    index = _as_index(candidates)
    partials = tuple(partials)
    records = _ordered_map(lambda p: match_partial(p, index.candidates_for_partial(p)), partials, workers)
    logger.info("Reconciled %d partial sources against %d candidates -> %d records",
                len(partials), len(index), len(records))
    return records


def _match_against(source: Union[StructuredAddress, PartialStructuredAddress],
                   index: CandidateIndex) -> List[Any]:
    if isinstance(source, PartialStructuredAddress):
        return match_partial(source, index.candidates_for_partial(source))
    return match_one(source, index.candidates_for(source))


def compare_chain(sources: Sequence[Union[StructuredAddress, PartialStructuredAddress]],
                  pools: Sequence[Union[CandidateIndex, Iterable[StructuredAddress]]],
                  workers: Optional[int] = None) -> List[Any]:
    """
    依次尝试多个候选池：在前一个池中 Missing 的记录到下一个池重试，
    第一个给出非 Missing 结果的池胜出；全部 Missing 时保留最后一个池的 Missing 记录。
    """
    indexes = [_as_index(pool) for pool in pools]
    if not indexes:
        raise ValueError("compare_chain needs at least one candidate pool")

    def _chain(source):
        records: List[Any] = []
        for index in indexes:
            records = _match_against(source, index)
            if any(r.outcome != MatchOutcome.MISSING for r in records):
                break
        return records

    return _ordered_map(_chain, tuple(sources), workers)


def orphan_streets(addresses: Iterable[StructuredAddress],
                   other: Union[CandidateIndex, Iterable[StructuredAddress]]) -> List[str]:
    """addresses 中出现、other 中没有的完整街道名，按首次出现顺序"""
    index = _as_index(other)
    seen = set()
    out: List[str] = []
    for address in addresses:
        street = address.street_label()
        if street in seen:
            continue
        seen.add(street)
        if not index.has_street(street):
            out.append(street)
    return out


def _outcome_counts(records: Iterable[Any]) -> Dict[str, int]:
    counts = Counter(r.outcome.value for r in records)
    return {o.value: counts.get(o.value, 0) for o in MatchOutcome}


class ReconciliationPipeline:
    """批量核对主流程：读取 -> 映射 -> 地名纠正 -> 比对 -> 过滤 -> 报表输出。"""

    def __init__(self, cfg: Config):
        self.cfg = cfg
        if cfg.corrections_path:
            self.corrector = PlaceNameCorrector.from_file(cfg.corrections_path)
        else:
            self.corrector = PlaceNameCorrector()

    def load(self, path: Optional[str], schema: str) -> List[Any]:
        if not path:
            raise ValueError(f"no input path configured for schema {schema!r}")
        records, failures = load_addresses(read_rows(path), schema)
        if failures:
            logger.warning("%d rows of %s could not be mapped", len(failures), path)
        return records

    def run(self, filter_verb: Optional[str] = None) -> Dict[str, Any]:
        if self.cfg.target_schema in PARTIAL_SCHEMAS:
            raise ValueError(f"target schema {self.cfg.target_schema!r} does not yield structured addresses")

        sources = self.load(self.cfg.source_path, self.cfg.source_schema)
        targets = self.load(self.cfg.target_path, self.cfg.target_schema)
        n_corrected = apply_corrections(targets, self.corrector)

        if self.cfg.source_schema in PARTIAL_SCHEMAS:
            partials = [partial_address_of(r) for r in sources]
            records: List[Any] = reconcile_partial(partials, targets, workers=self.cfg.workers)
        else:
            n_corrected += apply_corrections(sources, self.corrector)
            records = reconcile(sources, targets, workers=self.cfg.workers)

        counts = _outcome_counts(records)
        if filter_verb:
            records = filter_matches(records, filter_verb)
        if self.cfg.report_path:
            write_match_report(records, self.cfg.report_path)

        return {
            "n_sources": len(sources),
            "n_targets": len(targets),
            "n_corrected": n_corrected,
            "n_records": len(records),
            "outcomes": counts,
        }

    def structure(self, text: str) -> StructuredAddress:
        """解析地址文本并用配置中的默认值补全为完整地址"""
        partial = parse_address(text)
        return StructuredAddress.from_partial(partial, **self.cfg.address_context())

    def compare_addresses(self, addr1: str, addr2: str) -> Dict[str, Any]:
        a = self.structure(addr1)
        b = self.structure(addr2)
        m = coincident(a, b)
        return {
            "outcome": m.outcome.value,
            "coincident": m.coincident,
            "mismatches": [{"kind": x.kind.value, "message": x.message} for x in m.mismatches],
            "addr1_parsed": a.to_dict(),
            "addr2_parsed": b.to_dict(),
        }

    def reconcile_texts(self, sources: Sequence[str], candidates: Sequence[str],
                        filter_verb: Optional[str] = None) -> List[MatchRecord]:
        src = [self.structure(t) for t in sources]
        cand = [self.structure(t) for t in candidates]
        apply_corrections(src + cand, self.corrector)
        records = reconcile(src, cand, workers=self.cfg.workers)
        if filter_verb:
            return filter_matches(records, filter_verb)
        return records
