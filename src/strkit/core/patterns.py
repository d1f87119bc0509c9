"""符号类别到正则表达式的映射表。

每个片段都是字符类的“内容”（不带方括号），组合类别由子类别片段拼接而成，
因此子类别匹配到的字符一定也能被所属的大类匹配。
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, Mapping

from ..exceptions import UnknownSymbolCategoryError
from ..models.symbol import SymbolCategory


def _char_class(*fragments: str) -> str:
    return "[" + "".join(fragments) + "]"


# 拉丁字母、数字与空白
UPPERCASE_LETTERS = "A-Z"
LOWERCASE_LETTERS = "a-z"
DIGITS = "0-9"

# 标点：英文常用标点与英文特殊标点合起来正好是 ASCII 全部 32 个标点
ENGLISH_PUNCTUATION = r"""!"'(),\-./:;?\[\]{}"""
ENGLISH_SPECIAL_PUNCTUATION = r"#$%&*+<=>@\\\^_`|~"
CHINESE_PUNCTUATION = "。，、；：？！“”‘’（）【】《》〈〉「」『』〔〕…—～·"
CHINESE_SPECIAL_PUNCTUATION = "＃＄％＆＊＋＜＝＞＠＼＾＿｀｜￥"
# General Punctuation 区块（去掉行/段分隔符与格式控制符）
ADVANCED_PUNCTUATION = r"\u2010-\u2027\u2030-\u205e"
# 竖排标点、兼容形式与小写变体
UNCOMMON_PUNCTUATION = r"\ufe10-\ufe19\ufe30-\ufe4f\ufe50-\ufe6b"
# CJK 符号和标点区块中的标点部分（不含全角空格、〇、々 等文字类字符）
CJK_PUNCTUATION = r"\u3001-\u3004\u3008-\u3020\u3030\u303d-\u303f\u30a0\u30fb"
FULLWIDTH_PUNCTUATION = r"\uff01-\uff0f\uff1a-\uff20\uff3b-\uff40\uff5b-\uff65"
LATIN1_PUNCTUATION = r"\u00a1\u00a7\u00ab\u00b6\u00b7\u00bb\u00bf"

# 特殊符号
BASIC_SPECIFIC_SYMBOL = "§№☆★○●◎◇◆□■△▲※→←↑↓〓"
# 货币符号与类字母符号
OTHER_SPECIFIC_SYMBOL = r"\u00a2-\u00a5\u20a0-\u20c0\u2100-\u214f"
# 箭头、杂项技术符号、几何图形、杂项符号、装饰符号
ADVANCED_SPECIFIC_SYMBOL = r"\u2190-\u21ff\u2300-\u23ff\u25a0-\u25ff\u2600-\u26ff\u2700-\u27bf"
# 制表框线与方块元素
PATTERN_SPECIFIC_SYMBOL = r"\u2500-\u259f"

# 数字序号
CIRCULAR_NUMERIC_NUMERICAL_ORDER = r"\u2460-\u2473\u24ea-\u24ff\u2776-\u2793\u3251-\u325f\u32b1-\u32bf"
BRACKETED_NUMERIC_NUMERICAL_ORDER = r"\u2474-\u2487"
DOT_NUMERICAL_ORDER = r"\u2488-\u249b"
# 实心（负像）圆圈数字，是圆圈序号的子集
PIE_NUMERICAL_ORDER = r"\u24eb-\u24f4\u24ff\u2776-\u277f\u278a-\u2793"
ROMAN_NUMERICAL_ORDER = r"\u2160-\u2188"
CIRCLED_CHINESE_NUMERICAL_ORDER = r"\u3280-\u3289"
PARENTHESIZED_CHINESE_NUMERICAL_ORDER = r"\u3220-\u3229"

# 数学符号
BASIC_MATHEMATICAL_OPERATOR = r"+\-*/=<>±×÷≠≤≥"
ADVANCED_MATHEMATICAL_OPERATOR = r"\u2200-\u22ff\u27c0-\u27ef\u2980-\u2aff"
MATHEMATICAL_UNIT = r"°‰‱′″℃℉\u3380-\u33df"

# 希腊/拉丁字母
GREEK_ALPHABET = r"\u0391-\u03a1\u03a3-\u03a9\u03b1-\u03c9"
LATIN_ALPHABET = r"\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u024f"

# 汉语拼音带调字母与注音符号
SPELLING_SYMBOL = "āáǎàēéěèīíǐìōóǒòūúǔùǖǘǚǜüêńňǹḿɑɡ"
PHONETIC_NOTATION_SYMBOL = r"\u3105-\u312f\u31a0-\u31bfˇˉˊˋ˙"

# 中文
CHINESE_CHARACTER = r"\u4e00-\u9fff"
# 扩展 A 区、兼容汉字、扩展 B-F 区与兼容补充、扩展 G 区
CHINESE_RARELY_USED_CHARACTERS = r"\u3400-\u4dbf\uf900-\ufaff\U00020000-\U0002fa1f\U00030000-\U0003134f"
# 康熙部首
CHINESE_BASIC_CHARACTER_RADICALS = r"\u2f00-\u2fd5"
# 部首补充与笔画
CHINESE_ADVANCED_CHARACTER_RADICALS = r"\u2e80-\u2ef3\u31c0-\u31e3"
CHINESE_LOWERCASE_NUMERALS = "〇一二三四五六七八九十百千万亿"
CHINESE_UPPERCASE_NUMERALS = "零壹贰貳叁參肆伍陆陸柒捌玖拾佰仟萬億"
ENCLOSED_CJK = r"\u3200-\u32ff"
IDEOGRAPHIC_SPACE = r"\u3000"

# 英文音标
ENGLISH_VOWEL_PHONETIC = "ɪæɑɒɔʊʌɜəɛ"
ENGLISH_AUXILIARY_PHONETIC = "ˈˌːˑ"
IPA_EXTENSIONS = r"\u0250-\u02af"
ENGLISH_CONSONANT_PHONETIC = "θðŋ"

# 日文
JAPANESE_HIRAGANA = r"\u3041-\u309f"
JAPANESE_KATAKANA = r"\u30a1-\u30fa\u30fc-\u30ff\u31f0-\u31ff\uff66-\uff9f"
JAPANESE_PUNCTUATION = r"\u3001\u3002\u300c-\u300f\u301c\u30a0\u30fb\uff61-\uff65"

# 韩文：兼容字母为基础字母，组合字母与圈字为进阶符号
KOREAN_SYLLABLES = r"\uac00-\ud7a3"
KOREAN_BASIC_SYMBOL = r"\u3131-\u318e"
KOREAN_ADVANCED_SYMBOL = r"\u1100-\u11ff\ua960-\ua97f\ud7b0-\ud7ff\u3200-\u321e\u3260-\u327f"

# 俄文
RUSSIAN_BASIC_ALPHABET = r"\u0410-\u044f"
RUSSIAN_ADVANCED_ALPHABET = r"\u0400-\u040f\u0450-\u04ff"

# 制表符与空白变体
BASIC_TABS = r"\t"
CONVENTIONAL_TABS = r"\t\n\v\f\r"
ADVANCED_TABS = r"\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"

# 中文序号是“数字 + 顿号”或括号形式，不是单字符类
_LOWERCASE_ORDER_DIGITS = "一二三四五六七八九十百"
_UPPERCASE_ORDER_DIGITS = "壹贰貳叁參肆伍陆陸柒捌玖拾佰"


_PATTERNS: Dict[SymbolCategory, str] = {
    SymbolCategory.ALPHABET: _char_class(UPPERCASE_LETTERS, LOWERCASE_LETTERS),
    SymbolCategory.UPPERCASE_ALPHABET: _char_class(UPPERCASE_LETTERS),
    SymbolCategory.LOWERCASE_ALPHABET: _char_class(LOWERCASE_LETTERS),
    SymbolCategory.NUMERIC: _char_class(DIGITS),
    SymbolCategory.ALPHABET_NUMERIC: _char_class(UPPERCASE_LETTERS, LOWERCASE_LETTERS, DIGITS),
    SymbolCategory.BLANK: r"\s",
    SymbolCategory.SPACE: " ",
    SymbolCategory.SPECIFIC_SYMBOL: _char_class(
        BASIC_SPECIFIC_SYMBOL,
        OTHER_SPECIFIC_SYMBOL,
        ADVANCED_SPECIFIC_SYMBOL,
        PATTERN_SPECIFIC_SYMBOL,
    ),
    SymbolCategory.BASIC_SPECIFIC_SYMBOL: _char_class(BASIC_SPECIFIC_SYMBOL),
    SymbolCategory.OTHER_SPECIFIC_SYMBOL: _char_class(OTHER_SPECIFIC_SYMBOL),
    SymbolCategory.ADVANCED_SPECIFIC_SYMBOL: _char_class(ADVANCED_SPECIFIC_SYMBOL),
    SymbolCategory.PATTERN_SPECIFIC_SYMBOL: _char_class(PATTERN_SPECIFIC_SYMBOL),
    SymbolCategory.PUNCTUATION: _char_class(
        ENGLISH_PUNCTUATION,
        ENGLISH_SPECIAL_PUNCTUATION,
        CHINESE_PUNCTUATION,
        CHINESE_SPECIAL_PUNCTUATION,
        ADVANCED_PUNCTUATION,
        UNCOMMON_PUNCTUATION,
        CJK_PUNCTUATION,
        FULLWIDTH_PUNCTUATION,
        LATIN1_PUNCTUATION,
    ),
    SymbolCategory.BASIC_PUNCTUATION: _char_class(ENGLISH_PUNCTUATION, CHINESE_PUNCTUATION),
    SymbolCategory.ADVANCED_PUNCTUATION: _char_class(ADVANCED_PUNCTUATION),
    SymbolCategory.UNCOMMON_PUNCTUATION: _char_class(UNCOMMON_PUNCTUATION),
    SymbolCategory.ENGLISH_PUNCTUATION: _char_class(ENGLISH_PUNCTUATION),
    SymbolCategory.CHINESE_PUNCTUATION: _char_class(CHINESE_PUNCTUATION),
    SymbolCategory.SPECIAL_PUNCTUATION: _char_class(
        ENGLISH_SPECIAL_PUNCTUATION, CHINESE_SPECIAL_PUNCTUATION
    ),
    SymbolCategory.ENGLISH_SPECIAL_PUNCTUATION: _char_class(ENGLISH_SPECIAL_PUNCTUATION),
    SymbolCategory.CHINESE_SPECIAL_PUNCTUATION: _char_class(CHINESE_SPECIAL_PUNCTUATION),
    SymbolCategory.NUMERIC_NUMERICAL_ORDER: _char_class(
        CIRCULAR_NUMERIC_NUMERICAL_ORDER,
        BRACKETED_NUMERIC_NUMERICAL_ORDER,
        DOT_NUMERICAL_ORDER,
    ),
    SymbolCategory.CIRCULAR_NUMERIC_NUMERICAL_ORDER: _char_class(CIRCULAR_NUMERIC_NUMERICAL_ORDER),
    SymbolCategory.BRACKETED_NUMERIC_NUMERICAL_ORDER: _char_class(BRACKETED_NUMERIC_NUMERICAL_ORDER),
    SymbolCategory.DOT_NUMERICAL_ORDER: _char_class(DOT_NUMERICAL_ORDER),
    SymbolCategory.ROMAN_NUMERICAL_ORDER: _char_class(ROMAN_NUMERICAL_ORDER),
    SymbolCategory.PIE_NUMERICAL_ORDER: _char_class(PIE_NUMERICAL_ORDER),
    SymbolCategory.CHINESE_LOWERCASE_NUMERICAL_ORDER: (
        _char_class(_LOWERCASE_ORDER_DIGITS) + "+、|" + _char_class(CIRCLED_CHINESE_NUMERICAL_ORDER)
    ),
    SymbolCategory.CHINESE_UPPERCASE_NUMERICAL_ORDER: _char_class(_UPPERCASE_ORDER_DIGITS) + "+、",
    SymbolCategory.BRACKETED_LOWERCASE_CHINESE_NUMERICAL_ORDER: (
        _char_class(PARENTHESIZED_CHINESE_NUMERICAL_ORDER)
        + "|[（(]"
        + _char_class(_LOWERCASE_ORDER_DIGITS)
        + "+[）)]"
    ),
    SymbolCategory.MATHEMATICAL_SYMBOL: _char_class(
        BASIC_MATHEMATICAL_OPERATOR, ADVANCED_MATHEMATICAL_OPERATOR, MATHEMATICAL_UNIT
    ),
    SymbolCategory.BASIC_MATHEMATICAL_OPERATOR: _char_class(BASIC_MATHEMATICAL_OPERATOR),
    SymbolCategory.ADVANCED_MATHEMATICAL_OPERATOR: _char_class(ADVANCED_MATHEMATICAL_OPERATOR),
    SymbolCategory.MATHEMATICAL_UNIT: _char_class(MATHEMATICAL_UNIT),
    SymbolCategory.GRECO_LATIN_SYMBOL: _char_class(GREEK_ALPHABET, LATIN_ALPHABET),
    SymbolCategory.GREEK_ALPHABET: _char_class(GREEK_ALPHABET),
    SymbolCategory.LATIN_ALPHABET: _char_class(LATIN_ALPHABET),
    SymbolCategory.SPELLING_PHONETIC_NOTATION_SYMBOL: _char_class(
        SPELLING_SYMBOL, PHONETIC_NOTATION_SYMBOL
    ),
    SymbolCategory.SPELLING_SYMBOL: _char_class(SPELLING_SYMBOL),
    SymbolCategory.PHONETIC_NOTATION_SYMBOL: _char_class(PHONETIC_NOTATION_SYMBOL),
    SymbolCategory.CHINESE_CHARACTER: _char_class(CHINESE_CHARACTER),
    # 中文：汉字、中文标点、空格、数字序号、偏旁部首与基本平面内的生僻字
    SymbolCategory.CHINESE: _char_class(
        CHINESE_CHARACTER,
        CHINESE_PUNCTUATION,
        CHINESE_SPECIAL_PUNCTUATION,
        CJK_PUNCTUATION,
        FULLWIDTH_PUNCTUATION,
        IDEOGRAPHIC_SPACE,
        ENCLOSED_CJK,
        CIRCULAR_NUMERIC_NUMERICAL_ORDER,
        BRACKETED_NUMERIC_NUMERICAL_ORDER,
        DOT_NUMERICAL_ORDER,
        CHINESE_BASIC_CHARACTER_RADICALS,
        CHINESE_ADVANCED_CHARACTER_RADICALS,
        r"\u3400-\u4dbf\uf900-\ufaff",
        "〇",
    ),
    SymbolCategory.CHINESE_NUMERALS_SYMBOL: _char_class(
        CHINESE_LOWERCASE_NUMERALS, CHINESE_UPPERCASE_NUMERALS
    ),
    SymbolCategory.CHINESE_LOWERCASE_NUMERALS: _char_class(CHINESE_LOWERCASE_NUMERALS),
    SymbolCategory.CHINESE_UPPERCASE_NUMERALS: _char_class(CHINESE_UPPERCASE_NUMERALS),
    SymbolCategory.CHINESE_RARELY_USED_CHARACTERS: _char_class(CHINESE_RARELY_USED_CHARACTERS),
    SymbolCategory.CHINESE_CHARACTER_RADICALS: _char_class(
        CHINESE_BASIC_CHARACTER_RADICALS, CHINESE_ADVANCED_CHARACTER_RADICALS
    ),
    SymbolCategory.CHINESE_BASIC_CHARACTER_RADICALS: _char_class(CHINESE_BASIC_CHARACTER_RADICALS),
    SymbolCategory.CHINESE_ADVANCED_CHARACTER_RADICALS: _char_class(
        CHINESE_ADVANCED_CHARACTER_RADICALS
    ),
    # 英文：字母、英文标点与空格，提取结果保留词间空格
    SymbolCategory.ENGLISH: _char_class(UPPERCASE_LETTERS, LOWERCASE_LETTERS, ENGLISH_PUNCTUATION, " "),
    SymbolCategory.ENGLISH_LOWERCASE_ALPHABET: _char_class(LOWERCASE_LETTERS),
    SymbolCategory.ENGLISH_UPPERCASE_ALPHABET: _char_class(UPPERCASE_LETTERS),
    SymbolCategory.ENGLISH_PHONETIC_ALPHABET: _char_class(
        IPA_EXTENSIONS,
        ENGLISH_CONSONANT_PHONETIC,
        ENGLISH_VOWEL_PHONETIC,
        ENGLISH_AUXILIARY_PHONETIC,
    ),
    SymbolCategory.ENGLISH_VOWEL_PHONETIC: _char_class(ENGLISH_VOWEL_PHONETIC),
    SymbolCategory.ENGLISH_AUXILIARY_PHONETIC: _char_class(ENGLISH_AUXILIARY_PHONETIC),
    SymbolCategory.JAPANESE: _char_class(
        JAPANESE_HIRAGANA, JAPANESE_KATAKANA, JAPANESE_PUNCTUATION
    ),
    SymbolCategory.JAPANESE_HIRAGANA: _char_class(JAPANESE_HIRAGANA),
    SymbolCategory.JAPANESE_KATAKANA: _char_class(JAPANESE_KATAKANA),
    SymbolCategory.JAPANESE_PUNCTUATION: _char_class(JAPANESE_PUNCTUATION),
    SymbolCategory.KOREAN: _char_class(
        KOREAN_SYLLABLES, KOREAN_BASIC_SYMBOL, KOREAN_ADVANCED_SYMBOL
    ),
    SymbolCategory.KOREAN_BASIC_SYMBOL: _char_class(KOREAN_BASIC_SYMBOL),
    SymbolCategory.KOREAN_ADVANCED_SYMBOL: _char_class(KOREAN_ADVANCED_SYMBOL),
    SymbolCategory.RUSSIAN_ALPHABET: _char_class(RUSSIAN_BASIC_ALPHABET, RUSSIAN_ADVANCED_ALPHABET),
    SymbolCategory.RUSSIAN_BASIC_ALPHABET: _char_class(RUSSIAN_BASIC_ALPHABET),
    SymbolCategory.RUSSIAN_ADVANCED_ALPHABET: _char_class(RUSSIAN_ADVANCED_ALPHABET),
    SymbolCategory.TABS: _char_class(CONVENTIONAL_TABS, ADVANCED_TABS),
    SymbolCategory.BASIC_TABS: _char_class(BASIC_TABS),
    SymbolCategory.CONVENTIONAL_TABS: _char_class(CONVENTIONAL_TABS),
    SymbolCategory.ADVANCED_TABS: _char_class(ADVANCED_TABS),
}

_missing = [category.name for category in SymbolCategory if category not in _PATTERNS]
if _missing:
    raise RuntimeError(f"symbol categories without a pattern: {', '.join(_missing)}")

PATTERN_TABLE: Mapping[SymbolCategory, str] = MappingProxyType(_PATTERNS)
"""只读、全覆盖的类别 → 正则文本映射。"""

COMPILED_PATTERNS: Mapping[SymbolCategory, re.Pattern[str]] = MappingProxyType(
    {category: re.compile(pattern) for category, pattern in _PATTERNS.items()}
)

# 数值形态：保留每个数值的边界，不做拼接
INT_PATTERN = re.compile(r"-?[0-9]+")
FLOAT_PATTERN = re.compile(r"-?[0-9]+\.[0-9]+")
INT_FLOAT_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

# 整串匹配（配合 fullmatch 使用）
HEXADECIMAL_PATTERN = re.compile(r"[0-9A-Fa-f]+")

_PATH_SEGMENT = r'[^\\/:*?"<>|\r\n]'
# 盘符路径（C:\dir\file）或 UNC 路径（\\server\share\dir）
WINDOWS_PATH_PATTERN = re.compile(
    rf"(?:[A-Za-z]:\\|\\\\{_PATH_SEGMENT}+\\{_PATH_SEGMENT}+(?:\\|$))(?:{_PATH_SEGMENT}+\\)*{_PATH_SEGMENT}*"
)


def lookup(category: SymbolCategory) -> str:
    """返回类别对应的正则文本；非枚举值视为编程错误，直接抛出。"""

    if not isinstance(category, SymbolCategory):
        raise UnknownSymbolCategoryError(category)
    return PATTERN_TABLE[category]


def compiled(category: SymbolCategory) -> re.Pattern[str]:
    if not isinstance(category, SymbolCategory):
        raise UnknownSymbolCategoryError(category)
    return COMPILED_PATTERNS[category]
