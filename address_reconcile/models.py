from __future__ import annotations
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .recognizers import AddressStatus, Directional, PostType, SubaddressType
from .utils import collapse_spaces


class MatchOutcome(str, Enum):
    MATCHING = "Matching"
    DIVERGENT = "Divergent"
    MISSING = "Missing"


class MismatchKind(str, Enum):
    # 声明顺序即差异报告顺序
    SUBADDRESS_TYPE = "subaddress_type"
    FLOOR = "floor"
    BUILDING = "building"
    STATUS = "status"


@dataclass
class StructuredAddress:
    """完整结构化地址（FGDC 字段 + NENA 楼栋/楼层）。门牌号与街道名必填。"""
    number: int
    street_name: str
    number_suffix: Optional[str] = None
    directional: Optional[Directional] = None
    pre_modifier: Optional[str] = None
    pre_type: Optional[str] = None
    separator: Optional[str] = None
    post_type: Optional[PostType] = None
    subaddress_type: Optional[SubaddressType] = None
    subaddress_identifier: Optional[str] = None
    floor: Optional[int] = None
    building: Optional[str] = None
    zip: Optional[int] = None
    postal_community: Optional[str] = None
    state: Optional[str] = None
    status: AddressStatus = AddressStatus.ACTIVE
    # 以下字段不参与比较，只随匹配结果带出
    object_id: Optional[int] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None

    def complete_address_number(self) -> str:
        if self.number_suffix:
            return f"{self.number} {self.number_suffix}"
        return str(self.number)

    def complete_street_name(self, abbreviate: bool = False) -> str:
        directional = None
        if self.directional is not None:
            directional = self.directional.abbreviate() if abbreviate else self.directional.value
        post_type = None
        if self.post_type is not None:
            post_type = self.post_type.abbreviate() if abbreviate else self.post_type.value
        return collapse_spaces([
            directional,
            self.pre_modifier,
            self.pre_type,
            self.separator,
            self.street_name,
            post_type,
        ])

    def complete_subaddress(self) -> Optional[str]:
        if self.subaddress_type is not None and self.subaddress_identifier:
            return f"{self.subaddress_type.abbreviate()} {self.subaddress_identifier}"
        if self.subaddress_identifier:
            return f"#{self.subaddress_identifier}"
        if self.subaddress_type is not None:
            return self.subaddress_type.abbreviate()
        if self.building:
            return f"BLDG {self.building}"
        return None

    def street_label(self) -> str:
        # 标签中方位词用缩写，后置类型用全称
        directional = self.directional.abbreviate() if self.directional is not None else None
        post_type = self.post_type.value if self.post_type is not None else None
        return collapse_spaces([
            directional,
            self.pre_modifier,
            self.pre_type,
            self.separator,
            self.street_name,
            post_type,
        ])

    def label(self) -> str:
        """门牌号 + 完整街道名 + 子地址，作为去重/身份键"""
        return collapse_spaces([self.complete_address_number(), self.street_label(), self.complete_subaddress()])

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            val = getattr(self, f.name)
            out[f.name] = val.value if isinstance(val, Enum) else val
        return out

    @classmethod
    def from_partial(cls, partial: "PartialStructuredAddress", **context: Any) -> "StructuredAddress":
        """
        把解析得到的部分地址提升为完整地址。
        context 补充部分地址中缺失的字段（zip / postal_community / state / status ...），
        部分地址里已有的值优先。门牌号或街道名缺失时抛 ValueError。
        """
        if partial.number is None or not partial.street_name:
            raise ValueError(f"cannot lift partial address without number and street name: {partial.label()!r}")
        values: Dict[str, Any] = dict(context)
        for f in fields(partial):
            val = getattr(partial, f.name)
            if val is not None:
                values[f.name] = val
        if values.get("status") is None:
            values.pop("status", None)
        return cls(**values)


@dataclass
class PartialStructuredAddress:
    """形状与 StructuredAddress 相同但所有字段可缺；全 None 表示“未知地址”，不是错误。"""
    number: Optional[int] = None
    street_name: Optional[str] = None
    number_suffix: Optional[str] = None
    directional: Optional[Directional] = None
    pre_modifier: Optional[str] = None
    pre_type: Optional[str] = None
    separator: Optional[str] = None
    post_type: Optional[PostType] = None
    subaddress_type: Optional[SubaddressType] = None
    subaddress_identifier: Optional[str] = None
    floor: Optional[int] = None
    building: Optional[str] = None
    zip: Optional[int] = None
    postal_community: Optional[str] = None
    state: Optional[str] = None
    status: Optional[AddressStatus] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def label(self) -> str:
        return collapse_spaces([
            self.number,
            self.number_suffix,
            self.directional.abbreviate() if self.directional is not None else None,
            self.pre_modifier,
            self.pre_type,
            self.separator,
            self.street_name,
            self.post_type.value if self.post_type is not None else None,
            self.subaddress_type.value if self.subaddress_type is not None else None,
            self.subaddress_identifier,
            f"BUILDING {self.building}" if self.building else None,
            f"FLOOR {self.floor}" if self.floor is not None else None,
        ])

    def to_dict(self) -> Dict[str, Any]:
        return {
            f.name: (getattr(self, f.name).value if isinstance(getattr(self, f.name), Enum) else getattr(self, f.name))
            for f in fields(self)
        }


@dataclass(frozen=True)
class FieldMismatch:
    kind: MismatchKind
    message: str


@dataclass(frozen=True)
class AddressMatch:
    """两条完整地址的原始比较结果：主键是否一致 + 次要字段差异"""
    coincident: bool
    mismatches: Tuple[FieldMismatch, ...] = ()

    @property
    def outcome(self) -> MatchOutcome:
        if not self.coincident:
            return MatchOutcome.MISSING
        if self.mismatches:
            return MatchOutcome.DIVERGENT
        return MatchOutcome.MATCHING


@dataclass(frozen=True)
class MatchRecord:
    outcome: MatchOutcome
    address_label: str
    self_id: Optional[int] = None
    other_id: Optional[int] = None
    other_label: Optional[str] = None
    mismatches: Tuple[FieldMismatch, ...] = ()
    longitude: Optional[float] = None
    latitude: Optional[float] = None

    def _mismatch(self, kind: MismatchKind) -> Optional[str]:
        for m in self.mismatches:
            if m.kind == kind:
                return m.message
        return None

    @property
    def subaddress_type(self) -> Optional[str]:
        return self._mismatch(MismatchKind.SUBADDRESS_TYPE)

    @property
    def floor(self) -> Optional[str]:
        return self._mismatch(MismatchKind.FLOOR)

    @property
    def building(self) -> Optional[str]:
        return self._mismatch(MismatchKind.BUILDING)

    @property
    def status(self) -> Optional[str]:
        return self._mismatch(MismatchKind.STATUS)

    def to_dict(self) -> Dict[str, Any]:
        # 扁平化，便于写 CSV / Excel 报表
        return {
            "match_status": self.outcome.value,
            "address_label": self.address_label,
            "self_id": self.self_id,
            "other_id": self.other_id,
            "other_label": self.other_label,
            "subaddress_type": self.subaddress_type,
            "floor": self.floor,
            "building": self.building,
            "status": self.status,
            "longitude": self.longitude,
            "latitude": self.latitude,
        }


@dataclass(frozen=True)
class PartialMatchRecord:
    outcome: MatchOutcome
    address_label: str
    other_label: Optional[str] = None
    other_id: Optional[int] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    mismatches: Tuple[FieldMismatch, ...] = field(default=())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_status": self.outcome.value,
            "address_label": self.address_label,
            "other_label": self.other_label,
            "other_id": self.other_id,
            "longitude": self.longitude,
            "latitude": self.latitude,
        }
