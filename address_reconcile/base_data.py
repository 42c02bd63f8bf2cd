from __future__ import annotations
import json
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, TypeVar, Union

K = TypeVar("K")


def load_alias_map(path: str | Path) -> Dict[str, List[str]]:
    p = Path(path)
    return json.loads(p.read_text(encoding="utf-8"))


def build_reverse_alias_map(canonical_to_aliases: Dict[K, List[str]]) -> Dict[str, K]:
    """
    Return: alias_key(alias) -> canonical
    枚举作为 canonical 时以其 value 作为规范拼写
    """
    rev: Dict[str, K] = {}
    for canon, aliases in canonical_to_aliases.items():
        spelled = canon.value if isinstance(canon, Enum) else str(canon)
        rev[alias_key(spelled)] = canon
        for a in aliases:
            rev[alias_key(a)] = canon
    return rev


def alias_key(s: Optional[str]) -> str:
    # 忽略大小写、空白和句点：N.E. / ne / North East 归一
    return "".join((s or "").upper().replace(".", "").split())


def load_correction_rules(path: str | Path) -> Dict[str, Tuple[str, Union[str, None]]]:
    """
    读取地名纠正规则文件：
        {"NE BEAVILLA VIEW": ["BEAVILLA", "VIEW"], ...}
    Return: 完整街道名 -> (街道名, 后置类型)
    """
    raw = load_alias_map(path)
    rules: Dict[str, Tuple[str, Union[str, None]]] = {}
    for complete, parts in raw.items():
        if not parts or len(parts) > 2:
            raise ValueError(f"invalid correction rule for {complete!r}: {parts!r}")
        name = parts[0]
        post_type = parts[1] if len(parts) == 2 else None
        rules[" ".join(complete.upper().split())] = (name.upper(), post_type)
    return rules
