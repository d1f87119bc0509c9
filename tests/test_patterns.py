import pytest

from strkit import SymbolCategory, UnknownSymbolCategoryError
from strkit.core.patterns import PATTERN_TABLE, compiled, lookup

# 覆盖各个脚本与符号族的样本字符
SAMPLE = (
    "".join(chr(code) for code in range(0x20, 0x7F))
    + "\t\n　"
    + "。，、；：？！“”‘’（）【】《》「」『』…—～·"
    + "＃＄％＆＊＋＜＝＞＠￥"
    + "‐‰※︰﹏｡｢｣､･゠・"
    + "§№☆★○●→←¥€℃┌─┐"
    + "①⑳⓪⓫❶➀➊⑴⒇⒈⒛ⅠⅫ㈠㊀"
    + "±×÷≠≤≥∑∞°‱′″㎏"
    + "αβΩÀéøāǐǜḿㄅㄧˇˉ"
    + "你好中国㐀丽〇零壹⼀⺀㇀"
    + "ɪæəθðŋˈː"
    + "ぁこんカタカナｱ"
    + "ㄱㅏ가힣ᄀ"
    + "АЯаяЁёЖ"
)

FAMILIES = {
    SymbolCategory.ALPHABET: [SymbolCategory.UPPERCASE_ALPHABET, SymbolCategory.LOWERCASE_ALPHABET],
    SymbolCategory.ALPHABET_NUMERIC: [SymbolCategory.ALPHABET, SymbolCategory.NUMERIC],
    SymbolCategory.BLANK: [SymbolCategory.SPACE, SymbolCategory.TABS],
    SymbolCategory.SPECIFIC_SYMBOL: [
        SymbolCategory.BASIC_SPECIFIC_SYMBOL,
        SymbolCategory.OTHER_SPECIFIC_SYMBOL,
        SymbolCategory.ADVANCED_SPECIFIC_SYMBOL,
        SymbolCategory.PATTERN_SPECIFIC_SYMBOL,
    ],
    SymbolCategory.PUNCTUATION: [
        SymbolCategory.BASIC_PUNCTUATION,
        SymbolCategory.ADVANCED_PUNCTUATION,
        SymbolCategory.UNCOMMON_PUNCTUATION,
        SymbolCategory.ENGLISH_PUNCTUATION,
        SymbolCategory.CHINESE_PUNCTUATION,
        SymbolCategory.SPECIAL_PUNCTUATION,
        SymbolCategory.JAPANESE_PUNCTUATION,
    ],
    SymbolCategory.BASIC_PUNCTUATION: [
        SymbolCategory.ENGLISH_PUNCTUATION,
        SymbolCategory.CHINESE_PUNCTUATION,
    ],
    SymbolCategory.SPECIAL_PUNCTUATION: [
        SymbolCategory.ENGLISH_SPECIAL_PUNCTUATION,
        SymbolCategory.CHINESE_SPECIAL_PUNCTUATION,
    ],
    SymbolCategory.NUMERIC_NUMERICAL_ORDER: [
        SymbolCategory.CIRCULAR_NUMERIC_NUMERICAL_ORDER,
        SymbolCategory.BRACKETED_NUMERIC_NUMERICAL_ORDER,
        SymbolCategory.DOT_NUMERICAL_ORDER,
        SymbolCategory.PIE_NUMERICAL_ORDER,
    ],
    SymbolCategory.MATHEMATICAL_SYMBOL: [
        SymbolCategory.BASIC_MATHEMATICAL_OPERATOR,
        SymbolCategory.ADVANCED_MATHEMATICAL_OPERATOR,
        SymbolCategory.MATHEMATICAL_UNIT,
    ],
    SymbolCategory.GRECO_LATIN_SYMBOL: [SymbolCategory.GREEK_ALPHABET, SymbolCategory.LATIN_ALPHABET],
    SymbolCategory.SPELLING_PHONETIC_NOTATION_SYMBOL: [
        SymbolCategory.SPELLING_SYMBOL,
        SymbolCategory.PHONETIC_NOTATION_SYMBOL,
    ],
    SymbolCategory.CHINESE: [
        SymbolCategory.CHINESE_CHARACTER,
        SymbolCategory.CHINESE_PUNCTUATION,
        SymbolCategory.CHINESE_CHARACTER_RADICALS,
        SymbolCategory.NUMERIC_NUMERICAL_ORDER,
    ],
    SymbolCategory.CHINESE_NUMERALS_SYMBOL: [
        SymbolCategory.CHINESE_LOWERCASE_NUMERALS,
        SymbolCategory.CHINESE_UPPERCASE_NUMERALS,
    ],
    SymbolCategory.CHINESE_CHARACTER_RADICALS: [
        SymbolCategory.CHINESE_BASIC_CHARACTER_RADICALS,
        SymbolCategory.CHINESE_ADVANCED_CHARACTER_RADICALS,
    ],
    SymbolCategory.ENGLISH: [
        SymbolCategory.ENGLISH_LOWERCASE_ALPHABET,
        SymbolCategory.ENGLISH_UPPERCASE_ALPHABET,
        SymbolCategory.ENGLISH_PUNCTUATION,
    ],
    SymbolCategory.ENGLISH_PHONETIC_ALPHABET: [
        SymbolCategory.ENGLISH_VOWEL_PHONETIC,
        SymbolCategory.ENGLISH_AUXILIARY_PHONETIC,
    ],
    SymbolCategory.JAPANESE: [
        SymbolCategory.JAPANESE_HIRAGANA,
        SymbolCategory.JAPANESE_KATAKANA,
        SymbolCategory.JAPANESE_PUNCTUATION,
    ],
    SymbolCategory.KOREAN: [SymbolCategory.KOREAN_BASIC_SYMBOL, SymbolCategory.KOREAN_ADVANCED_SYMBOL],
    SymbolCategory.RUSSIAN_ALPHABET: [
        SymbolCategory.RUSSIAN_BASIC_ALPHABET,
        SymbolCategory.RUSSIAN_ADVANCED_ALPHABET,
    ],
    SymbolCategory.TABS: [
        SymbolCategory.BASIC_TABS,
        SymbolCategory.CONVENTIONAL_TABS,
        SymbolCategory.ADVANCED_TABS,
    ],
}


def test_pattern_table_is_total():
    assert set(PATTERN_TABLE) == set(SymbolCategory)
    for category in SymbolCategory:
        assert lookup(category)


def test_pattern_table_is_read_only():
    with pytest.raises(TypeError):
        PATTERN_TABLE[SymbolCategory.NUMERIC] = "x"


def test_lookup_rejects_values_outside_enum():
    with pytest.raises(UnknownSymbolCategoryError):
        lookup("numeric")
    with pytest.raises(KeyError):
        compiled(42)


def test_patterns_never_match_empty_string():
    for category in SymbolCategory:
        assert compiled(category).fullmatch("") is None


def test_sub_categories_are_subsets_of_their_family():
    for family, members in FAMILIES.items():
        family_pattern = compiled(family)
        for member in members:
            member_pattern = compiled(member)
            for char in SAMPLE:
                if member_pattern.fullmatch(char):
                    assert family_pattern.fullmatch(char), (family, member, char)


def test_every_category_matches_something_in_sample():
    sample = SAMPLE + "一、壹、（一）"
    for category in SymbolCategory:
        assert compiled(category).search(sample), category
