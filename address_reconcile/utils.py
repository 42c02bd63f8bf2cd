from __future__ import annotations
import json
import math
import re
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Optional

# ArcGIS 导出表中表示空值的写法
_NULL_MARKERS = {"", "<NULL>", "NULL", "NONE", "NAN"}


def normalize_text(text: Optional[str]) -> str:
    """清洗和标准化地址文本：去首尾空白、压缩空白、转大写"""
    if text is None:
        return ""
    t = text.strip()

    # 全角空格/逗号转半角
    t = t.replace("　", " ").replace("，", ",")

    # 压缩空白字符
    t = re.sub(r"\s+", " ", t)

    return t.upper()


def clean_value(val: Any) -> Any:
    """把 NaN / ArcGIS 空值标记统一为 None，字符串去首尾空白"""
    if val is None:
        return None
    if isinstance(val, float) and math.isnan(val):
        return None
    if isinstance(val, str):
        s = val.strip()
        if s.upper() in _NULL_MARKERS:
            return None
        return s
    return val


def collapse_spaces(parts: Any) -> str:
    return " ".join(str(p) for p in parts if p not in (None, ""))


class EnhancedJSONEncoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if is_dataclass(obj):
            return asdict(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, tuple):
            return list(obj)  # 将 tuple 转为 list
        return super().default(obj)
