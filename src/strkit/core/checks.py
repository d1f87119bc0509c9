"""布尔判断。"""

from __future__ import annotations

import unicodedata

from ..models.symbol import SymbolCategory
from .conversion import is_hexadecimal
from .extraction import contains
from .patterns import WINDOWS_PATH_PATTERN, compiled

__all__ = [
    "contain_chinese_character",
    "is_chinese_character",
    "is_hexadecimal",
    "is_punctuation",
    "is_valid_windows_path",
]


def is_valid_windows_path(path: str | None) -> bool:
    """盘符路径或 UNC 路径（\\\\server\\share）。"""

    if not path:
        return False
    return WINDOWS_PATH_PATTERN.fullmatch(path) is not None


def is_punctuation(char: str) -> bool:
    """按 Unicode 通用类别（P*）判断单个字符是否为标点。"""

    if not char or len(char) != 1:
        return False
    return unicodedata.category(char).startswith("P")


def contain_chinese_character(text: str | None) -> bool:
    return contains(text, SymbolCategory.CHINESE_CHARACTER)


def is_chinese_character(char: str) -> bool:
    if not char or len(char) != 1:
        return False
    return compiled(SymbolCategory.CHINESE_CHARACTER).fullmatch(char) is not None
