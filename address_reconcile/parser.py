from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .models import PartialStructuredAddress
from .recognizers import (
    COMPOUND_POST_TYPES,
    Directional,
    PostType,
    SubaddressType,
    recognize_directional,
    recognize_post_type,
    recognize_subaddress_type,
)
from .tokenizer import (
    AddressParseError,
    next_chunk,
    next_token,
    next_word,
    peek_chunk,
    peek_word,
    skip_comma,
)
from .utils import normalize_text

logger = logging.getLogger(__name__)

__all__ = [
    "AddressParseError",
    "StreetName",
    "parse_number",
    "parse_number_suffix",
    "parse_directional",
    "parse_complete_street_name",
    "parse_subaddress_type",
    "parse_subaddress_identifiers",
    "parse_address",
]


@dataclass
class StreetName:
    street_name: str
    directional: Optional[Directional] = None
    post_type: Optional[PostType] = None


def parse_number(text: str) -> Tuple[int, str]:
    """门牌号：输入必须以数字开头，否则抛 AddressParseError"""
    if not text.strip():
        raise AddressParseError("missing address number", text)
    token, rest = next_token(text)
    digits = ""
    for c in token:
        if not c.isdigit():
            break
        digits += c
    if not digits:
        raise AddressParseError(f"address must begin with a number: {text.strip()!r}", text)
    # 1865A 这类门牌：数字之后的字母留给后续步骤
    return int(digits), token[len(digits):] + rest


def parse_number_suffix(text: str) -> Tuple[Optional[str], str]:
    """
    分数后缀启发式：下一个片段长度 > 1、以数字开头且第二个字符不是字母数字（1/2、3/4）时整体取走。
    “以数字开头”是在“第二个字符不是字母数字”这一原有规则之外额外加的条件，
    用来挡住 N.E. 这类带句点的方位词（第二个字符是句点）。
    这只是针对数据中分数写法的约定，不是通用的门牌后缀语法；
    1865A、1865-B 之类的写法不会被识别为后缀。
    """
    chunk = peek_chunk(text)
    if chunk and len(chunk) > 1 and chunk[0].isdigit() and not (chunk[1].isascii() and chunk[1].isalnum()):
        suffix, rest = next_chunk(text)
        logger.debug("number suffix %r", suffix)
        return suffix, rest
    return None, text


def parse_directional(text: str) -> Tuple[Optional[Directional], str]:
    """
    方位词后面至少要留下“名称 + 后置类型”才会被取走。
    "100 N ST"、"100 N ST APT 4" 中 N 是街道名，ST 是后置类型。
    """
    word = peek_word(text)
    directional = recognize_directional(word)
    if directional is None:
        return None, text
    _, rest = next_word(text)
    following = peek_word(rest)
    if not following:
        logger.debug("lone directional %r kept as street name", word)
        return None, text
    _, after = next_word(rest)
    if recognize_post_type(following) is not None and recognize_post_type(peek_word(after)) is None:
        logger.debug("directional %r followed only by post type %r, kept as street name", word, following)
        return None, text
    return directional, rest


def _collect_post_types(text: str) -> Tuple[List[Tuple[str, PostType]], str]:
    run: List[Tuple[str, PostType]] = []
    while True:
        word = peek_word(text)
        if not word:
            break
        post_type = recognize_post_type(word)
        if post_type is None:
            break
        # TRLR / KEY 等既是后置类型又是子地址类型：已有后置类型时按子地址处理
        if run and recognize_subaddress_type(word) is not None:
            break
        _, text = next_word(text)
        run.append((word, post_type))
    return run, text


def parse_complete_street_name(text: str) -> Tuple[StreetName, str]:
    """
    可选方位词 + 街道名 + 可选后置类型。
    名称贪婪累积，每取一个词后向前看一个词，遇到后置类型即停止；第一个词总是名称。
    连续多个后置类型时只保留最后一个，前面的按原拼写并入名称；
    最后两个构成已登记的复合类型（DRIVE + CUTOFF）时保留复合值。
    名称之后必须出现后置类型，否则抛 AddressParseError（"100 MAIN APT 4" 不会把
    APT 4 并入名称）。
    """
    directional, text = parse_directional(text)

    if not peek_word(text):
        raise AddressParseError("missing street name", text)
    first, text = next_word(text)
    name_words = [first]

    while True:
        word = peek_word(text)
        if not word or recognize_post_type(word) is not None:
            break
        _, text = next_word(text)
        name_words.append(word)

    run, text = _collect_post_types(text)
    post_type: Optional[PostType] = None
    if run:
        post_type = run[-1][1]
        if len(run) > 1:
            compound = COMPOUND_POST_TYPES.get((run[-2][1], run[-1][1]))
            if compound is not None:
                post_type = compound
            name_words.extend(spelled for spelled, _ in run[:-1])
            logger.debug("compound post type %s folded into name -> %s", [w for w, _ in run], post_type)
    else:
        raise AddressParseError(f"no post type after street name {' '.join(name_words)!r}", text)

    return StreetName(" ".join(name_words), directional, post_type), text


def parse_subaddress_type(text: str) -> Tuple[Optional[SubaddressType], str]:
    word = peek_word(text)
    subaddress_type = recognize_subaddress_type(word)
    if subaddress_type is None:
        return None, text
    _, rest = next_word(text)
    return subaddress_type, rest


def parse_subaddress_identifiers(text: str) -> Tuple[Optional[str], str]:
    """逗号之前（没有逗号则到结尾）的片段作为单元号，去掉前导 # / &，丢弃空片段"""
    bounded, sep, rest = text.partition(",")
    elements = [chunk.lstrip("#&") for chunk in bounded.split()]
    elements = [e for e in elements if e]
    if not elements:
        return None, (sep + rest if sep else "")
    return " ".join(elements), (sep + rest if sep else "")


def _introduces_subaddress(text: str) -> bool:
    after = skip_comma(text)
    if after is text:
        return False
    chunk = peek_chunk(after)
    if chunk is None:
        return False
    if chunk.startswith("#"):
        return True
    return recognize_subaddress_type(peek_word(after)) is not None


def parse_address(text: str) -> PartialStructuredAddress:
    """
    单行地址 -> PartialStructuredAddress。
    门牌号 -> 分数后缀 -> 完整街道名 -> 可选子地址类型 -> 子地址编号。
    门牌号、街道名或后置类型缺失时抛 AddressParseError。
    """
    norm = normalize_text(text)
    number, rest = parse_number(norm)
    suffix, rest = parse_number_suffix(rest)
    street, rest = parse_complete_street_name(rest)

    if _introduces_subaddress(rest):
        rest = skip_comma(rest)
    subaddress_type, rest = parse_subaddress_type(rest)
    identifier, rest = parse_subaddress_identifiers(rest)

    address = PartialStructuredAddress(
        number=number,
        number_suffix=suffix,
        directional=street.directional,
        street_name=street.street_name,
        post_type=street.post_type,
        subaddress_type=subaddress_type,
        subaddress_identifier=identifier,
    )
    # BLDG / FLOOR 写入 NENA 楼栋、楼层字段
    if subaddress_type == SubaddressType.BUILDING and identifier:
        address.building = identifier
        address.subaddress_type = None
        address.subaddress_identifier = None
    elif subaddress_type == SubaddressType.FLOOR and identifier and identifier.isdigit():
        address.floor = int(identifier)
        address.subaddress_type = None
        address.subaddress_identifier = None
    logger.debug("parsed %r -> %s", norm, address)
    return address
