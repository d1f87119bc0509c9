"""类别枚举与结果模型。"""

from .results import ExtractionResult, ParseResult
from .symbol import SymbolCategory

__all__ = [
    "ExtractionResult",
    "ParseResult",
    "SymbolCategory",
]
