"""缩进与换行排版。"""

from __future__ import annotations

import re
from typing import Iterable, List

from ..config import DEFAULT_CONFIG, TextConfig


def _terminator_pattern(terminators: Iterable[str]) -> re.Pattern[str] | None:
    # 长的句末符号优先匹配
    ordered = sorted({item for item in terminators if item}, key=len, reverse=True)
    if not ordered:
        return None
    return re.compile("|".join(re.escape(item) for item in ordered))


def make_indent(indent_size: int | None = None, config: TextConfig | None = None) -> str:
    """生成缩进串：前缀标记 + 若干缩进单位 + 后缀标记。"""

    config = config or DEFAULT_CONFIG
    if indent_size is None:
        indent_size = config.indent_size
    return f"{config.indent_prefix}{config.indent_unit * max(indent_size, 0)}{config.indent_suffix}"


def add_indent(
    text: str | None,
    indent_size: int | None = None,
    config: TextConfig | None = None,
) -> str | None:
    if not text:
        return text
    return make_indent(indent_size, config) + text


def add_spaces_between_each_character(text: str | None, spacing: int = 1) -> str | None:
    if not text:
        return text
    return (" " * spacing).join(text)


def auto_period_wrap_indent(
    text: str | None,
    indent_size: int | None = None,
    config: TextConfig | None = None,
) -> str | None:
    """在首行和每个句号（中文或英文）之后换行，并为每一行添加首行缩进。

    最后一个句号之后的内容直接接在最后一次缩进之后，不再额外换行。
    """

    if not text:
        return text
    config = config or DEFAULT_CONFIG
    indent = make_indent(indent_size, config)
    pattern = _terminator_pattern(config.sentence_terminators)
    if pattern is None:
        return indent + text

    parts: List[str] = [indent]
    last_index = 0
    for match in pattern.finditer(text):
        end_index = match.end()
        parts.append(text[last_index:end_index])
        parts.append("\n")
        parts.append(indent)
        last_index = end_index
    parts.append(text[last_index:])
    return "".join(parts)


def force_wrap(text: str | None, maximum_character_in_line: int) -> str | None:
    """按固定字符数强制换行，最后一行可能更短。"""

    if not text:
        return text
    if maximum_character_in_line <= 0:
        raise ValueError(f"maximum_character_in_line must be positive, got {maximum_character_in_line}")
    step = maximum_character_in_line
    chunks = [text[index : index + step] for index in range(0, len(text), step)]
    return "\n".join(chunks)
