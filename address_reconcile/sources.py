from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .models import PartialStructuredAddress, StructuredAddress
from .parser import AddressParseError, parse_address
from .recognizers import (
    AddressStatus,
    recognize_directional,
    recognize_post_type,
    recognize_status,
    recognize_subaddress_type,
)
from .utils import clean_value

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class MappingError(ValueError):
    """原始记录无法映射为地址（门牌号 / 街道名 / 邮编缺失或非法）"""


@dataclass
class BusinessLicense:
    company_name: str
    address: PartialStructuredAddress
    license: str
    contact_name: Optional[str] = None
    dba: Optional[str] = None
    industry_code: Optional[int] = None
    industry_name: Optional[str] = None
    sector_code: Optional[int] = None
    sector_name: Optional[str] = None
    subsector_code: Optional[int] = None
    subsector_name: Optional[str] = None
    tourism: Optional[str] = None
    district: Optional[str] = None


def _text(row: Row, key: str) -> Optional[str]:
    val = clean_value(row.get(key))
    if val is None:
        return None
    if isinstance(val, float) and val.is_integer():
        val = int(val)
    return " ".join(str(val).upper().split()) or None


def _int(row: Row, key: str, required: bool = False) -> Optional[int]:
    val = clean_value(row.get(key))
    if val is None:
        if required:
            raise MappingError(f"missing required field {key!r}")
        return None
    try:
        f = float(val)
    except (TypeError, ValueError):
        raise MappingError(f"field {key!r} is not a number: {val!r}") from None
    if not f.is_integer():
        raise MappingError(f"field {key!r} is not an integer: {val!r}")
    return int(f)


def _float(row: Row, key: str) -> Optional[float]:
    val = clean_value(row.get(key))
    if val is None:
        return None
    try:
        return float(val)
    except (TypeError, ValueError):
        raise MappingError(f"field {key!r} is not a coordinate: {val!r}") from None


def _category(row: Row, key: str, recognize: Callable[[Optional[str]], Any]) -> Any:
    raw = _text(row, key)
    if raw is None:
        return None
    val = recognize(raw)
    if val is None:
        logger.debug("unrecognized %s %r treated as absent", key, raw)
    return val


def _status(row: Row, key: str) -> AddressStatus:
    raw = _text(row, key)
    if raw is None:
        return AddressStatus.ACTIVE
    status = recognize_status(raw)
    if status is None:
        logger.warning("Unrecognized address status %r, using OTHER", raw)
        return AddressStatus.OTHER
    return status


def _street_name(row: Row, key: str) -> str:
    name = _text(row, key)
    if not name:
        raise MappingError(f"missing required field {key!r}")
    return name


def _floor(row: Row, key: str) -> Optional[int]:
    # 源数据用 0 表示“无楼层”
    floor = _int(row, key)
    return None if floor == 0 else floor


def map_common(row: Row) -> StructuredAddress:
    """字段名与 StructuredAddress 一致的通用表"""
    return StructuredAddress(
        number=_int(row, "number", required=True),
        street_name=_street_name(row, "street_name"),
        number_suffix=_text(row, "number_suffix"),
        directional=_category(row, "directional", recognize_directional),
        pre_modifier=_text(row, "pre_modifier"),
        pre_type=_text(row, "pre_type"),
        separator=_text(row, "separator"),
        post_type=_category(row, "post_type", recognize_post_type),
        subaddress_type=_category(row, "subaddress_type", recognize_subaddress_type),
        subaddress_identifier=_text(row, "subaddress_identifier"),
        floor=_floor(row, "floor"),
        building=_text(row, "building"),
        zip=_int(row, "zip"),
        postal_community=_text(row, "postal_community"),
        state=_text(row, "state"),
        status=_status(row, "status"),
        object_id=_int(row, "object_id"),
        longitude=_float(row, "longitude"),
        latitude=_float(row, "latitude"),
    )


def map_josephine_county_2024(row: Row) -> StructuredAddress:
    """Josephine County 2024 ArcGIS 导出表（含可选的经纬度列）"""
    return StructuredAddress(
        number=_int(row, "add_number", required=True),
        street_name=_street_name(row, "st_name"),
        number_suffix=_text(row, "addnum_suf"),
        directional=_category(row, "st_predir", recognize_directional),
        pre_modifier=_text(row, "st_premod"),
        pre_type=_text(row, "st_pretyp"),
        separator=_text(row, "st_presep"),
        post_type=_category(row, "st_postyp", recognize_post_type),
        subaddress_type=_category(row, "unittype", recognize_subaddress_type),
        subaddress_identifier=_text(row, "unit"),
        floor=_floor(row, "floor"),
        building=_text(row, "building"),
        zip=_int(row, "post_code", required=True),
        postal_community=_text(row, "uninc_comm"),
        state=_text(row, "state"),
        status=_status(row, "status"),
        object_id=_int(row, "OBJECTID"),
        longitude=_float(row, "longitude"),
        latitude=_float(row, "latitude"),
    )


def map_business_license(row: Row) -> BusinessLicense:
    label = clean_value(row.get("street_address_label"))
    if label is None:
        raise MappingError("missing required field 'street_address_label'")
    try:
        address = parse_address(str(label))
    except AddressParseError as exc:
        raise MappingError(f"cannot parse street_address_label {label!r}: {exc}") from exc
    company = clean_value(row.get("company_name"))
    license_id = clean_value(row.get("license"))
    if company is None or license_id is None:
        raise MappingError("missing company_name or license")
    return BusinessLicense(
        company_name=str(company),
        address=address,
        license=str(license_id),
        contact_name=clean_value(row.get("contact_name")),
        dba=clean_value(row.get("dba")),
        industry_code=_int(row, "industry_code"),
        industry_name=clean_value(row.get("industry_name")),
        sector_code=_int(row, "sector_code"),
        sector_name=clean_value(row.get("sector_name")),
        subsector_code=_int(row, "subsector_code"),
        subsector_name=clean_value(row.get("subsector_name")),
        tourism=clean_value(row.get("tourism")),
        district=clean_value(row.get("district")),
    )


def map_free_text(row: Row) -> PartialStructuredAddress:
    """只有一列 address 的自由文本表"""
    text = clean_value(row.get("address"))
    if text is None:
        raise MappingError("missing required field 'address'")
    try:
        return parse_address(str(text))
    except AddressParseError as exc:
        raise MappingError(f"cannot parse address {text!r}: {exc}") from exc


SCHEMAS: Dict[str, Callable[[Row], Any]] = {
    "common": map_common,
    "josephine_county_2024": map_josephine_county_2024,
    "business_license": map_business_license,
    "free_text": map_free_text,
}

# 这些 schema 只能得到部分地址，走部分匹配
PARTIAL_SCHEMAS = frozenset({"business_license", "free_text"})


def get_mapper(schema: str) -> Callable[[Row], Any]:
    try:
        return SCHEMAS[schema]
    except KeyError:
        raise ValueError(f"Unknown source schema: {schema}") from None


def load_addresses(rows: Iterable[Row], schema: str) -> Tuple[List[Any], List[Tuple[int, str]]]:
    """
    逐行映射，单行失败不影响整批。
    Return: (成功映射的记录, [(行号, 错误信息), ...])
    """
    mapper = get_mapper(schema)
    records: List[Any] = []
    failures: List[Tuple[int, str]] = []
    for idx, row in enumerate(rows):
        try:
            records.append(mapper(row))
        except MappingError as exc:
            logger.warning("Skipping row %d (%s): %s", idx, schema, exc)
            failures.append((idx, str(exc)))
    logger.info("Loaded %d records from %s schema, %d failures", len(records), schema, len(failures))
    return records, failures


def partial_address_of(record: Any) -> PartialStructuredAddress:
    if isinstance(record, BusinessLicense):
        return record.address
    return record
