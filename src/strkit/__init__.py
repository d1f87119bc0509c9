"""strkit：字符分类、提取与文本转换工具包。"""

from loguru import logger as _logger

from .config import DEFAULT_CONFIG, TextConfig
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .exceptions import (
    EncodingConversionError,
    HexadecimalFormatError,
    NumberFormatError,
    StrkitError,
    UnknownSymbolCategoryError,
)
from .logger import setup_logger
from .models import ExtractionResult, ParseResult, SymbolCategory

# 作为库使用时默认不输出日志，由宿主程序调用 setup_logger() 开启
_logger.disable(__name__)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "EncodingConversionError",
    "ExtractionResult",
    "HexadecimalFormatError",
    "NumberFormatError",
    "ParseResult",
    "StrkitError",
    "SymbolCategory",
    "TextConfig",
    "UnknownSymbolCategoryError",
    "setup_logger",
    *_core_all,
]
