from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

MATCH_REPORT_COLUMNS: List[str] = [
    "match_status", "address_label", "self_id", "other_id", "other_label",
    "subaddress_type", "floor", "building", "status", "longitude", "latitude",
]
PARTIAL_REPORT_COLUMNS: List[str] = [
    "match_status", "address_label", "other_label", "other_id", "longitude", "latitude",
]
ADDRESS_COLUMNS: List[str] = [
    "object_id", "number", "number_suffix", "directional", "pre_modifier", "pre_type",
    "separator", "street_name", "post_type", "subaddress_type", "subaddress_identifier",
    "floor", "building", "zip", "postal_community", "state", "status",
    "longitude", "latitude",
]

_EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


def _is_excel(path: Path) -> bool:
    return path.suffix.lower() in _EXCEL_SUFFIXES


def _ensure_columns(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    result = df.copy()
    for col in columns:
        if col not in result.columns:
            result[col] = None
    return result[columns]


def _clean_value(val: Any) -> Any:
    if val is None:
        return None
    try:
        if pd.isna(val):
            return None
    except (TypeError, ValueError):
        pass
    return val


def _row_to_dict(row: pd.Series) -> Dict[str, Any]:
    return {k: _clean_value(v) for k, v in row.to_dict().items()}


def read_rows(path: str | Path, sheet_name: Any = 0) -> List[Dict[str, Any]]:
    """读取 CSV / Excel 为行字典列表；所有单元格按文本读入，空单元格为 None"""
    p = Path(path)
    if _is_excel(p):
        df = pd.read_excel(p, sheet_name=sheet_name, dtype=str, engine="openpyxl")
    else:
        df = pd.read_csv(p, dtype=str)
    rows = [_row_to_dict(row) for _, row in df.iterrows()]
    logger.info("Read %d rows from %s", len(rows), p)
    return rows


def write_rows(rows: Sequence[Dict[str, Any]], path: str | Path,
               columns: List[str], sheet_name: str = "report") -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df = _ensure_columns(pd.DataFrame(list(rows)), columns)
    if _is_excel(p):
        with pd.ExcelWriter(p, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=sheet_name, index=False)
    else:
        df.to_csv(p, index=False)
    logger.info("Wrote %d rows to %s", len(df), p)
    return p


def write_match_report(records: Iterable[Any], path: str | Path) -> Path:
    """MatchRecord / PartialMatchRecord 列表写成报表，列由第一条记录的类型决定"""
    rows = [r.to_dict() for r in records]
    columns = MATCH_REPORT_COLUMNS
    if rows and "self_id" not in rows[0]:
        columns = PARTIAL_REPORT_COLUMNS
    return write_rows(rows, path, columns)


def write_addresses(addresses: Iterable[Any], path: str | Path) -> Path:
    return write_rows([a.to_dict() for a in addresses], path, ADDRESS_COLUMNS, sheet_name="addresses")
