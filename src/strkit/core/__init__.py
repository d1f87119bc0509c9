"""分类、提取、转换与排版工具。"""

from .checks import contain_chinese_character, is_chinese_character, is_punctuation, is_valid_windows_path
from .conversion import (
    bytes_to_hex_string,
    decode_hex,
    is_hexadecimal,
    to_big_endian_unicode,
    to_big_endian_unicode_bytes,
    to_float,
    to_gbk,
    to_gbk_bytes,
    to_int,
    to_unicode,
    to_unicode_bytes,
    to_unix_path,
    to_utf7,
    to_utf7_bytes,
    to_utf8,
    to_utf8_bytes,
    to_utf32,
    to_utf32_bytes,
    to_windows_path,
    try_decode_hex,
    try_to_float,
    try_to_int,
)
from .extraction import (
    contain_alphabet,
    contain_lowercase_alphabet,
    contain_numeric,
    contain_uppercase_alphabet,
    contains,
    extract,
    extract_alphabet,
    extract_alphabet_numeric,
    extract_characters,
    extract_chinese,
    extract_chinese_character,
    extract_float,
    extract_floats,
    extract_int,
    extract_int_float,
    extract_int_floats,
    extract_ints,
    extract_lowercase_alphabet,
    extract_numeric,
    extract_uppercase_alphabet,
    match_all,
    match_first,
    match_last,
    remove,
    try_extract,
    try_extract_alphabet,
    try_extract_chinese_character,
    try_extract_lowercase_alphabet,
    try_extract_numeric,
    try_extract_uppercase_alphabet,
)
from .layout import add_indent, add_spaces_between_each_character, auto_period_wrap_indent, force_wrap, make_indent
from .patterns import PATTERN_TABLE, compiled, lookup
from .registry import TypeRegistry, to_type
from .text_utils import (
    is_punctuation_only,
    normalize_text,
    remove_alphabet,
    remove_alphabet_numeric,
    remove_blank,
    remove_lowercase_alphabet,
    remove_numeric,
    remove_punctuation,
    remove_space,
    remove_uppercase_alphabet,
)

__all__ = [
    "add_indent",
    "add_spaces_between_each_character",
    "auto_period_wrap_indent",
    "bytes_to_hex_string",
    "compiled",
    "contains",
    "contain_alphabet",
    "contain_chinese_character",
    "contain_lowercase_alphabet",
    "contain_numeric",
    "contain_uppercase_alphabet",
    "decode_hex",
    "extract",
    "extract_alphabet",
    "extract_alphabet_numeric",
    "extract_characters",
    "extract_chinese",
    "extract_chinese_character",
    "extract_float",
    "extract_floats",
    "extract_int",
    "extract_ints",
    "extract_int_float",
    "extract_int_floats",
    "extract_lowercase_alphabet",
    "extract_numeric",
    "extract_uppercase_alphabet",
    "force_wrap",
    "is_chinese_character",
    "is_hexadecimal",
    "is_punctuation",
    "is_punctuation_only",
    "is_valid_windows_path",
    "lookup",
    "make_indent",
    "match_all",
    "match_first",
    "match_last",
    "normalize_text",
    "PATTERN_TABLE",
    "remove",
    "remove_alphabet",
    "remove_alphabet_numeric",
    "remove_blank",
    "remove_lowercase_alphabet",
    "remove_numeric",
    "remove_punctuation",
    "remove_space",
    "remove_uppercase_alphabet",
    "to_big_endian_unicode",
    "to_big_endian_unicode_bytes",
    "to_float",
    "to_gbk",
    "to_gbk_bytes",
    "to_int",
    "to_type",
    "to_unicode",
    "to_unicode_bytes",
    "to_unix_path",
    "to_utf32",
    "to_utf32_bytes",
    "to_utf7",
    "to_utf7_bytes",
    "to_utf8",
    "to_utf8_bytes",
    "to_windows_path",
    "try_decode_hex",
    "try_extract",
    "try_extract_alphabet",
    "try_extract_chinese_character",
    "try_extract_lowercase_alphabet",
    "try_extract_numeric",
    "try_extract_uppercase_alphabet",
    "try_to_float",
    "try_to_int",
    "TypeRegistry",
]
