from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from .base_data import load_correction_rules
from .models import StructuredAddress
from .recognizers import PostType, recognize_post_type

logger = logging.getLogger(__name__)

# 源数据中街道名与后置类型未拆开的已知地名：完整街道名 -> (街道名, 后置类型)
DEFAULT_CORRECTIONS: Dict[str, Tuple[str, Optional[str]]] = {
    "NE BEAVILLA VIEW": ("BEAVILLA", "VIEW"),
    "COLUMBIA CREST": ("COLUMBIA", "CREST"),
    "SE FORMOSA GARDENS": ("FORMOSA", "GARDENS"),
    "SE HILLTOP VIEW": ("HILLTOP", "VIEW"),
    "MARILEE ROW": ("MARILEE", "ROW"),
    "MEADOW GLEN": ("MEADOW", "GLEN"),
    "ROBERTSON CREST": ("ROBERTSON", "CREST"),
    "NE QUAIL CROSSING": ("QUAIL", "CROSSING"),
}


class PlaceNameCorrector:
    """完整街道名与规则完全一致时，原地改写街道名/后置类型。重复执行结果不变。"""

    def __init__(self, rules: Optional[Dict[str, Tuple[str, Optional[str]]]] = None):
        raw = DEFAULT_CORRECTIONS if rules is None else rules
        self.rules: Dict[str, Tuple[str, Optional[PostType]]] = {}
        for complete, (name, post) in raw.items():
            post_type = recognize_post_type(post) if post else None
            if post and post_type is None:
                raise ValueError(f"unknown post type {post!r} in correction for {complete!r}")
            self.rules[" ".join(complete.upper().split())] = (name.upper(), post_type)

    @classmethod
    def from_file(cls, path: str | Path, include_defaults: bool = True) -> "PlaceNameCorrector":
        rules: Dict[str, Tuple[str, Optional[str]]] = dict(DEFAULT_CORRECTIONS) if include_defaults else {}
        rules.update(load_correction_rules(path))
        return cls(rules)

    def rule_for(self, address: StructuredAddress) -> Optional[Tuple[str, Optional[PostType]]]:
        # 只按完整街道名匹配：SE MARILEE ROW、COLUMBIA CREST DRIVE 不受 MARILEE ROW / COLUMBIA CREST 规则影响
        return self.rules.get(address.street_label())

    def correct(self, address: StructuredAddress) -> bool:
        rule = self.rule_for(address)
        if rule is None:
            return False
        name, post_type = rule
        if address.street_name == name and address.post_type == post_type:
            return False
        logger.debug("correcting %r -> %s %s", address.street_label(), name, post_type)
        address.street_name = name
        address.post_type = post_type
        return True


def apply_corrections(addresses: Iterable[StructuredAddress],
                      corrector: Optional[PlaceNameCorrector] = None) -> int:
    """对一批地址执行地名纠正，返回被改写的条数"""
    corrector = corrector or PlaceNameCorrector()
    n = 0
    for address in addresses:
        if corrector.correct(address):
            n += 1
    if n:
        logger.info("Applied %d place-name corrections", n)
    return n
