"""类型、编码与路径格式转换。"""

from __future__ import annotations

import re

from loguru import logger

from ..config import DEFAULT_CONFIG, TextConfig
from ..exceptions import EncodingConversionError, HexadecimalFormatError, NumberFormatError
from ..models.results import ParseResult
from .patterns import HEXADECIMAL_PATTERN

# 只接受 ASCII 数字，拒绝 "1_000" 与全角、其他文字的数字
_INT_TEXT = re.compile(r"\s*[+-]?[0-9]+\s*")
_FLOAT_TEXT = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")


def to_int(text: str | None) -> int:
    if not isinstance(text, str) or _INT_TEXT.fullmatch(text) is None:
        raise NumberFormatError(f"无法转换为整数：{text!r}")
    try:
        return int(text)
    except (TypeError, ValueError) as exc:
        raise NumberFormatError(f"无法转换为整数：{text!r}") from exc


def try_to_int(text: str | None) -> ParseResult:
    try:
        return ParseResult(True, to_int(text))
    except NumberFormatError:
        logger.debug(f"try_to_int rejected {text!r}")
        return ParseResult(False)


def to_float(text: str | None) -> float:
    if not isinstance(text, str) or _FLOAT_TEXT.fullmatch(text) is None:
        raise NumberFormatError(f"无法转换为浮点数：{text!r}")
    try:
        return float(text)
    except (TypeError, ValueError) as exc:
        raise NumberFormatError(f"无法转换为浮点数：{text!r}") from exc


def try_to_float(text: str | None) -> ParseResult:
    try:
        return ParseResult(True, to_float(text))
    except NumberFormatError:
        logger.debug(f"try_to_float rejected {text!r}")
        return ParseResult(False)


def bytes_to_hex_string(data: bytes, separator: str | None = None) -> str:
    """字节转为大写十六进制对，用分隔符连接，例如 b"\\x1a\\x2b" -> "1A-2B"。"""

    if separator is None:
        separator = DEFAULT_CONFIG.hex_separator
    return separator.join(f"{value:02X}" for value in data)


def _encode(text: str | None, encoding: str) -> bytes:
    try:
        return (text or "").encode(encoding)
    except UnicodeEncodeError as exc:
        raise EncodingConversionError(f"无法按 {encoding} 编码：{text!r}") from exc


def to_utf7_bytes(text: str | None) -> bytes:
    return _encode(text, "utf-7")


def to_utf7(text: str | None, config: TextConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    return bytes_to_hex_string(to_utf7_bytes(text), config.hex_separator)


def to_utf8_bytes(text: str | None) -> bytes:
    return _encode(text, "utf-8")


def to_utf8(text: str | None, config: TextConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    return bytes_to_hex_string(to_utf8_bytes(text), config.hex_separator)


def to_utf32_bytes(text: str | None) -> bytes:
    """UTF-32 小端序，不带 BOM。"""

    return _encode(text, "utf-32-le")


def to_utf32(text: str | None, config: TextConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    return bytes_to_hex_string(to_utf32_bytes(text), config.hex_separator)


def to_unicode_bytes(text: str | None) -> bytes:
    """UTF-16 小端序，不带 BOM。"""

    return _encode(text, "utf-16-le")


def to_unicode(text: str | None, config: TextConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    return bytes_to_hex_string(to_unicode_bytes(text), config.hex_separator)


def to_big_endian_unicode_bytes(text: str | None) -> bytes:
    return _encode(text, "utf-16-be")


def to_big_endian_unicode(text: str | None, config: TextConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    return bytes_to_hex_string(to_big_endian_unicode_bytes(text), config.hex_separator)


def to_gbk_bytes(text: str | None, config: TextConfig | None = None) -> bytes:
    config = config or DEFAULT_CONFIG
    return _encode(text, config.gbk_encoding)


def to_gbk(text: str | None, config: TextConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    return bytes_to_hex_string(to_gbk_bytes(text, config), config.hex_separator)


def is_hexadecimal(text: str | None) -> bool:
    """非空且整串都是十六进制数字（奇数长度同样返回 True）。"""

    if not text:
        return False
    return HEXADECIMAL_PATTERN.fullmatch(text) is not None


def decode_hex(text: str | None) -> bytes:
    """按两位一组从左到右解码十六进制字符串。

    非十六进制或长度为奇数时抛出 HexadecimalFormatError，不会返回部分结果。
    """

    if not is_hexadecimal(text):
        raise HexadecimalFormatError(f"不是十六进制字符串：{text!r}")
    if len(text) % 2 != 0:
        raise HexadecimalFormatError(f"十六进制字符串长度为奇数：{text!r}")
    try:
        return bytes(int(text[index : index + 2], 16) for index in range(0, len(text), 2))
    except ValueError as exc:
        # 只有判断与解码的字母表不一致时才会走到这里
        raise HexadecimalFormatError(f"十六进制字节解析失败：{text!r}") from exc


def try_decode_hex(text: str | None) -> ParseResult:
    try:
        return ParseResult(True, decode_hex(text))
    except HexadecimalFormatError as exc:
        logger.debug(f"try_decode_hex rejected input: {exc}")
        return ParseResult(False)


def to_unix_path(path: str) -> str:
    """把 Windows 路径中的 '\\' 替换为 '/'。"""

    return path.replace("\\", "/")


def to_windows_path(path: str) -> str:
    """把 Unix 路径中的 '/' 替换为 '\\'。"""

    return path.replace("/", "\\")
