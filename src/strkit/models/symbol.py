"""符号类别枚举。"""

from __future__ import annotations

from enum import Enum

from ..exceptions import UnknownSymbolCategoryError


class SymbolCategory(str, Enum):
    """字符分类体系。

    类别之间可能存在包含关系（例如 PUNCTUATION 包含 BASIC_PUNCTUATION），
    每个类别在 core.patterns 中都有且仅有一个对应的正则。
    """

    # 拉丁字母、数字与空白
    ALPHABET = "alphabet"
    UPPERCASE_ALPHABET = "uppercase_alphabet"
    LOWERCASE_ALPHABET = "lowercase_alphabet"
    NUMERIC = "numeric"
    ALPHABET_NUMERIC = "alphabet_numeric"
    BLANK = "blank"
    SPACE = "space"

    # 特殊符号
    SPECIFIC_SYMBOL = "specific_symbol"
    BASIC_SPECIFIC_SYMBOL = "basic_specific_symbol"
    OTHER_SPECIFIC_SYMBOL = "other_specific_symbol"
    ADVANCED_SPECIFIC_SYMBOL = "advanced_specific_symbol"
    PATTERN_SPECIFIC_SYMBOL = "pattern_specific_symbol"

    # 标点符号
    PUNCTUATION = "punctuation"
    BASIC_PUNCTUATION = "basic_punctuation"
    ADVANCED_PUNCTUATION = "advanced_punctuation"
    UNCOMMON_PUNCTUATION = "uncommon_punctuation"
    ENGLISH_PUNCTUATION = "english_punctuation"
    CHINESE_PUNCTUATION = "chinese_punctuation"
    SPECIAL_PUNCTUATION = "special_punctuation"
    ENGLISH_SPECIAL_PUNCTUATION = "english_special_punctuation"
    CHINESE_SPECIAL_PUNCTUATION = "chinese_special_punctuation"

    # 序号
    NUMERIC_NUMERICAL_ORDER = "numeric_numerical_order"
    CIRCULAR_NUMERIC_NUMERICAL_ORDER = "circular_numeric_numerical_order"
    BRACKETED_NUMERIC_NUMERICAL_ORDER = "bracketed_numeric_numerical_order"
    DOT_NUMERICAL_ORDER = "dot_numerical_order"
    ROMAN_NUMERICAL_ORDER = "roman_numerical_order"
    PIE_NUMERICAL_ORDER = "pie_numerical_order"
    CHINESE_LOWERCASE_NUMERICAL_ORDER = "chinese_lowercase_numerical_order"
    CHINESE_UPPERCASE_NUMERICAL_ORDER = "chinese_uppercase_numerical_order"
    BRACKETED_LOWERCASE_CHINESE_NUMERICAL_ORDER = "bracketed_lowercase_chinese_numerical_order"

    # 数学符号
    MATHEMATICAL_SYMBOL = "mathematical_symbol"
    BASIC_MATHEMATICAL_OPERATOR = "basic_mathematical_operator"
    ADVANCED_MATHEMATICAL_OPERATOR = "advanced_mathematical_operator"
    MATHEMATICAL_UNIT = "mathematical_unit"

    # 希腊/拉丁字母
    GRECO_LATIN_SYMBOL = "greco_latin_symbol"
    GREEK_ALPHABET = "greek_alphabet"
    LATIN_ALPHABET = "latin_alphabet"

    # 拼音与注音
    SPELLING_PHONETIC_NOTATION_SYMBOL = "spelling_phonetic_notation_symbol"
    SPELLING_SYMBOL = "spelling_symbol"
    PHONETIC_NOTATION_SYMBOL = "phonetic_notation_symbol"

    # 中文
    CHINESE_CHARACTER = "chinese_character"
    CHINESE = "chinese"
    CHINESE_NUMERALS_SYMBOL = "chinese_numerals_symbol"
    CHINESE_LOWERCASE_NUMERALS = "chinese_lowercase_numerals"
    CHINESE_UPPERCASE_NUMERALS = "chinese_uppercase_numerals"
    CHINESE_RARELY_USED_CHARACTERS = "chinese_rarely_used_characters"
    CHINESE_CHARACTER_RADICALS = "chinese_character_radicals"
    CHINESE_BASIC_CHARACTER_RADICALS = "chinese_basic_character_radicals"
    CHINESE_ADVANCED_CHARACTER_RADICALS = "chinese_advanced_character_radicals"

    # 英文与音标
    ENGLISH = "english"
    ENGLISH_LOWERCASE_ALPHABET = "english_lowercase_alphabet"
    ENGLISH_UPPERCASE_ALPHABET = "english_uppercase_alphabet"
    ENGLISH_PHONETIC_ALPHABET = "english_phonetic_alphabet"
    ENGLISH_VOWEL_PHONETIC = "english_vowel_phonetic"
    ENGLISH_AUXILIARY_PHONETIC = "english_auxiliary_phonetic"

    # 日文
    JAPANESE = "japanese"
    JAPANESE_HIRAGANA = "japanese_hiragana"
    JAPANESE_KATAKANA = "japanese_katakana"
    JAPANESE_PUNCTUATION = "japanese_punctuation"

    # 韩文
    KOREAN = "korean"
    KOREAN_BASIC_SYMBOL = "korean_basic_symbol"
    KOREAN_ADVANCED_SYMBOL = "korean_advanced_symbol"

    # 俄文
    RUSSIAN_ALPHABET = "russian_alphabet"
    RUSSIAN_BASIC_ALPHABET = "russian_basic_alphabet"
    RUSSIAN_ADVANCED_ALPHABET = "russian_advanced_alphabet"

    # 制表符与空白变体
    TABS = "tabs"
    BASIC_TABS = "basic_tabs"
    CONVENTIONAL_TABS = "conventional_tabs"
    ADVANCED_TABS = "advanced_tabs"

    @classmethod
    def parse(cls, name: str) -> SymbolCategory:
        """按成员值或成员名（忽略大小写）解析类别。"""

        key = (name or "").strip().lower().replace("-", "_")
        for member in cls:
            if member.value == key:
                return member
        raise UnknownSymbolCategoryError(name)
