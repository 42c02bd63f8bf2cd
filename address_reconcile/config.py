from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .recognizers import AddressStatus, recognize_status


@dataclass
class Config:
    workers: int
    source_path: Optional[str]
    source_schema: str
    target_path: Optional[str]
    target_schema: str
    report_path: Optional[str]
    corrections_path: Optional[str] = None
    # 部分地址提升为完整地址时补充的上下文（zip / postal_community / state / status）
    defaults: Dict[str, Any] = field(default_factory=dict)

    def address_context(self) -> Dict[str, Any]:
        ctx = dict(self.defaults)
        if ctx.get("zip") is not None:
            ctx["zip"] = int(ctx["zip"])
        if ctx.get("status") is not None:
            status = recognize_status(str(ctx["status"]))
            if status is None:
                raise ValueError(f"Unknown default status: {ctx['status']!r}")
            ctx["status"] = status
        else:
            ctx["status"] = AddressStatus.ACTIVE
        return ctx


def _resolve(base: Path, value: Optional[str]) -> Optional[str]:
    # 相对路径相对于配置文件所在目录
    if not value:
        return None
    p = Path(value)
    if not p.is_absolute():
        p = base / p
    return str(p)


def load_config(path: str | Path) -> Config:
    p = Path(path)
    raw = json.loads(p.read_text(encoding="utf-8"))
    base = p.resolve().parent
    workers = int(raw["workers"])
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    return Config(
        workers=workers,
        source_path=_resolve(base, raw.get("source_path")),
        source_schema=str(raw["source_schema"]),
        target_path=_resolve(base, raw.get("target_path")),
        target_schema=str(raw["target_schema"]),
        report_path=_resolve(base, raw.get("report_path")),
        corrections_path=_resolve(base, raw.get("corrections_path")),
        defaults=dict(raw.get("defaults") or {}),
    )
