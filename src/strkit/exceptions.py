"""strkit 异常层级。

所有异常都继承自 StrkitError；同时继承对应的内置异常，调用方按 ValueError/KeyError 捕获也能生效。
"""


class StrkitError(Exception):
    """strkit 所有异常的基类。"""
    pass


class UnknownSymbolCategoryError(StrkitError, KeyError):
    """符号类别不在封闭枚举内（属于编程错误，应当尽早失败）。"""
    pass


class NumberFormatError(StrkitError, ValueError):
    """字符串无法解析为数值。"""
    pass


class HexadecimalFormatError(StrkitError, ValueError):
    """字符串不是合法的十六进制字节串。"""
    pass


class EncodingConversionError(StrkitError, ValueError):
    """字符串无法按目标编码转换。"""
    pass
