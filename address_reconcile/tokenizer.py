from __future__ import annotations
from typing import Optional, Tuple


class AddressParseError(ValueError):
    """单条地址无法解析（缺门牌号或街道名）。text 为出错时剩余的输入。"""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


def _is_word_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def next_token(text: str) -> Tuple[str, str]:
    """
    跳过前导空白，返回下一个最长的字母数字串及剩余输入。
    下一个字符是标点时返回 ("", rest)，rest 从该标点开始；只有输入为空时抛错。
    """
    s = text.lstrip()
    if not s:
        raise AddressParseError("unexpected end of input", text)
    end = 0
    while end < len(s) and _is_word_char(s[end]):
        end += 1
    return s[:end], s[end:]


def peek_token(text: str) -> Optional[str]:
    if not text.strip():
        return None
    token, _ = next_token(text)
    return token


def next_chunk(text: str) -> Tuple[str, str]:
    """返回下一个以空白分隔的片段（可含标点，如 1/2、#4）"""
    s = text.lstrip()
    if not s:
        raise AddressParseError("unexpected end of input", text)
    parts = s.split(None, 1)
    return parts[0], (parts[1] if len(parts) > 1 else "")


def peek_chunk(text: str) -> Optional[str]:
    if not text.strip():
        return None
    chunk, _ = next_chunk(text)
    return chunk


def next_word(text: str) -> Tuple[str, str]:
    """
    返回下一个词：以空白或逗号结束的片段（保留 O'BRIEN、AVE. 这类写法）。
    下一个字符就是逗号时返回 ("", rest)。
    """
    s = text.lstrip()
    if not s:
        raise AddressParseError("unexpected end of input", text)
    end = 0
    while end < len(s) and not s[end].isspace() and s[end] != ",":
        end += 1
    return s[:end], s[end:]


def peek_word(text: str) -> Optional[str]:
    if not text.strip():
        return None
    word, _ = next_word(text)
    return word


def skip_comma(text: str) -> str:
    s = text.lstrip()
    if s.startswith(","):
        return s[1:]
    return text
