"""全局配置与默认参数。"""

from dataclasses import dataclass


@dataclass
class TextConfig:
    """文本工具可调参数集合。

    注意：这里的数值只是默认值，调用方可以构造自己的实例传入各函数覆盖。
    """

    # 缩进的默认单位数量
    indent_size: int = 2
    # 缩进单位：默认使用全角空格，保证中文排版对齐
    indent_unit: str = "　"
    # 缩进外包标记，例如富文本中用于隐藏缩进的颜色标签
    indent_prefix: str = ""
    indent_suffix: str = ""
    # 句号换行时识别的句末符号
    sentence_terminators: tuple[str, ...] = ("。", ".")
    # 字节转十六进制字符串时的分隔符（与常见 "1A-2B" 格式一致）
    hex_separator: str = "-"
    # GBK 编码名称
    gbk_encoding: str = "gbk"
    # 日志级别与日志文件路径（None 表示只输出到控制台）
    log_level: str = "INFO"
    log_file: str | None = None


DEFAULT_CONFIG = TextConfig()
