"""文本规范化与删除工具。"""

from __future__ import annotations

from ..models.symbol import SymbolCategory
from .extraction import remove
from .patterns import compiled


def normalize_text(text: str | None) -> str:
    """规范化文本：删除空白与标点，保留其余字符的原有顺序。"""

    if not text:
        return ""
    without_blank = compiled(SymbolCategory.BLANK).sub("", text)
    return compiled(SymbolCategory.PUNCTUATION).sub("", without_blank)


def is_punctuation_only(text: str | None) -> bool:
    """判断一段文本是否只包含标点/空白。"""

    return not normalize_text(text)


def remove_blank(text: str | None) -> str | None:
    """删除空白字符（包括空格、制表符、换行符等）。"""

    return remove(text, SymbolCategory.BLANK)


def remove_space(text: str | None) -> str | None:
    """只删除半角空格，其他空白保留。"""

    return remove(text, SymbolCategory.SPACE)


def remove_numeric(text: str | None) -> str | None:
    return remove(text, SymbolCategory.NUMERIC)


def remove_alphabet(text: str | None) -> str | None:
    """删除字母（不区分大小写）。"""

    return remove(text, SymbolCategory.ALPHABET)


def remove_uppercase_alphabet(text: str | None) -> str | None:
    return remove(text, SymbolCategory.UPPERCASE_ALPHABET)


def remove_lowercase_alphabet(text: str | None) -> str | None:
    return remove(text, SymbolCategory.LOWERCASE_ALPHABET)


def remove_alphabet_numeric(text: str | None) -> str | None:
    return remove(text, SymbolCategory.ALPHABET_NUMERIC)


def remove_punctuation(text: str | None) -> str | None:
    return remove(text, SymbolCategory.PUNCTUATION)
