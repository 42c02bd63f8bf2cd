from __future__ import annotations
from enum import Enum
from typing import Any, List

from .models import FieldMismatch, MismatchKind, StructuredAddress


def _show(val: Any) -> str:
    if val is None:
        return "None"
    if isinstance(val, Enum):
        return str(val.value)
    return str(val)


class MismatchChecker:
    """主键一致的两条地址，逐项比较次要字段，生成字段级差异"""

    def check(self, a: StructuredAddress, b: StructuredAddress) -> List[FieldMismatch]:
        mismatches: List[FieldMismatch] = []

        # 差异1：子地址类型
        if a.subaddress_type != b.subaddress_type:
            mismatches.append(self._mismatch(MismatchKind.SUBADDRESS_TYPE, a.subaddress_type, b.subaddress_type))

        # 差异2：楼层
        if a.floor != b.floor:
            mismatches.append(self._mismatch(MismatchKind.FLOOR, a.floor, b.floor))

        # 差异3：楼栋
        if a.building != b.building:
            mismatches.append(self._mismatch(MismatchKind.BUILDING, a.building, b.building))

        # 差异4：地址状态
        if a.status != b.status:
            mismatches.append(self._mismatch(MismatchKind.STATUS, a.status, b.status))
        return mismatches

    @staticmethod
    def _mismatch(kind: MismatchKind, from_val: Any, to_val: Any) -> FieldMismatch:
        return FieldMismatch(kind, f"{_show(from_val)} not equal to {_show(to_val)}")
