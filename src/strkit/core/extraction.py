"""按符号类别判断、提取与删除字符。

所有类别共用同一套算法：
- contains：是否存在至少一个匹配；
- extract：按出现顺序拼接全部匹配（丢弃边界）；
- try_extract：先判断再提取，失败时不返回任何部分结果；
- remove：删除全部匹配，其余字符保持原有顺序。
数值形态的提取（match_first/match_all）需要保留每个数值的边界，因此不做拼接。
"""

from __future__ import annotations

import re
from typing import List

from ..models.results import ExtractionResult
from ..models.symbol import SymbolCategory
from .patterns import FLOAT_PATTERN, INT_FLOAT_PATTERN, INT_PATTERN, compiled


def contains(text: str | None, category: SymbolCategory) -> bool:
    pattern = compiled(category)
    if not text:
        return False
    return pattern.search(text) is not None


def extract(text: str | None, category: SymbolCategory) -> str:
    """提取全部匹配并按顺序拼接，没有匹配时返回空串。"""

    pattern = compiled(category)
    if not text:
        return ""
    return "".join(match.group(0) for match in pattern.finditer(text))


def try_extract(text: str | None, category: SymbolCategory) -> ExtractionResult:
    """尝试提取：两遍处理，判断失败时直接返回 (False, "")。"""

    if not contains(text, category):
        return ExtractionResult(False, "")
    return ExtractionResult(True, extract(text, category))


def remove(text: str | None, category: SymbolCategory) -> str | None:
    """删除全部匹配；空串与 None 原样返回。

    多字符类别删除后可能拼出新的匹配（如 "（一（二））"），因此反复删除直到结果不再变化。
    """

    pattern = compiled(category)
    if not text:
        return text
    while True:
        removed = pattern.sub("", text)
        if removed == text:
            return removed
        text = removed


def extract_characters(text: str | None, category: SymbolCategory) -> str:
    return extract(text, category)


def _as_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def match_first(text: str | None, pattern: str | re.Pattern[str]) -> str:
    """返回第一个匹配，没有匹配时返回空串。"""

    if not text:
        return ""
    match = _as_pattern(pattern).search(text)
    return match.group(0) if match else ""


def match_last(text: str | None, pattern: str | re.Pattern[str]) -> str:
    matches = match_all(text, pattern)
    return matches[-1] if matches else ""


def match_all(text: str | None, pattern: str | re.Pattern[str]) -> List[str]:
    """按顺序返回全部匹配，每个匹配单独成项。"""

    if not text:
        return []
    return [match.group(0) for match in _as_pattern(pattern).finditer(text)]


# 数值形态
def extract_int(text: str | None) -> str:
    return match_first(text, INT_PATTERN)


def extract_ints(text: str | None) -> List[str]:
    return match_all(text, INT_PATTERN)


def extract_float(text: str | None) -> str:
    return match_first(text, FLOAT_PATTERN)


def extract_floats(text: str | None) -> List[str]:
    return match_all(text, FLOAT_PATTERN)


def extract_int_float(text: str | None) -> str:
    return match_first(text, INT_FLOAT_PATTERN)


def extract_int_floats(text: str | None) -> List[str]:
    return match_all(text, INT_FLOAT_PATTERN)


# 常用类别的便捷入口
def contain_alphabet(text: str | None) -> bool:
    return contains(text, SymbolCategory.ALPHABET)


def extract_alphabet(text: str | None) -> str:
    return extract(text, SymbolCategory.ALPHABET)


def try_extract_alphabet(text: str | None) -> ExtractionResult:
    return try_extract(text, SymbolCategory.ALPHABET)


def contain_uppercase_alphabet(text: str | None) -> bool:
    return contains(text, SymbolCategory.UPPERCASE_ALPHABET)


def extract_uppercase_alphabet(text: str | None) -> str:
    return extract(text, SymbolCategory.UPPERCASE_ALPHABET)


def try_extract_uppercase_alphabet(text: str | None) -> ExtractionResult:
    return try_extract(text, SymbolCategory.UPPERCASE_ALPHABET)


def contain_lowercase_alphabet(text: str | None) -> bool:
    return contains(text, SymbolCategory.LOWERCASE_ALPHABET)


def extract_lowercase_alphabet(text: str | None) -> str:
    return extract(text, SymbolCategory.LOWERCASE_ALPHABET)


def try_extract_lowercase_alphabet(text: str | None) -> ExtractionResult:
    return try_extract(text, SymbolCategory.LOWERCASE_ALPHABET)


def contain_numeric(text: str | None) -> bool:
    return contains(text, SymbolCategory.NUMERIC)


def extract_numeric(text: str | None) -> str:
    return extract(text, SymbolCategory.NUMERIC)


def try_extract_numeric(text: str | None) -> ExtractionResult:
    return try_extract(text, SymbolCategory.NUMERIC)


def extract_alphabet_numeric(text: str | None) -> str:
    return extract(text, SymbolCategory.ALPHABET_NUMERIC)


def extract_chinese_character(text: str | None) -> str:
    """提取汉字（不含标点、空格、序号与偏旁部首）。"""

    return extract(text, SymbolCategory.CHINESE_CHARACTER)


def try_extract_chinese_character(text: str | None) -> ExtractionResult:
    return try_extract(text, SymbolCategory.CHINESE_CHARACTER)


def extract_chinese(text: str | None) -> str:
    """提取中文（汉字、中文标点、数字序号、全角空格、偏旁部首与部分生僻字）。"""

    return extract(text, SymbolCategory.CHINESE)
