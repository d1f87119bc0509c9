"""提取与解析结果模型。"""

from typing import Any, NamedTuple


class ExtractionResult(NamedTuple):
    """尝试提取的结果：失败时 text 一定为空串，不会带出部分结果。"""

    success: bool
    text: str


class ParseResult(NamedTuple):
    """尝试转换的结果：失败时 value 为 None。"""

    success: bool
    value: Any = None
