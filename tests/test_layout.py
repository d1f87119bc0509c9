import pytest

from strkit import (
    TextConfig,
    add_indent,
    add_spaces_between_each_character,
    auto_period_wrap_indent,
    force_wrap,
    make_indent,
)


def test_force_wrap():
    assert force_wrap("abcdef", 2) == "ab\ncd\nef"
    assert force_wrap("abcde", 2) == "ab\ncd\ne"
    assert force_wrap("abc", 5) == "abc"
    assert force_wrap("", 2) == ""
    assert force_wrap(None, 2) is None


def test_force_wrap_rejects_non_positive_width():
    with pytest.raises(ValueError):
        force_wrap("abc", 0)


def test_make_indent_uses_config_markup():
    config = TextConfig(indent_unit="_", indent_prefix="<i>", indent_suffix="</i>")
    assert make_indent(2, config) == "<i>__</i>"
    assert make_indent() == "　　"


def test_add_indent():
    assert add_indent("abc") == "　　abc"
    assert add_indent("abc", 1, TextConfig(indent_unit=" ")) == " abc"
    assert add_indent("") == ""


def test_add_spaces_between_each_character():
    assert add_spaces_between_each_character("abc") == "a b c"
    assert add_spaces_between_each_character("中文", spacing=2) == "中  文"
    assert add_spaces_between_each_character("") == ""


def test_auto_period_wrap_indent():
    config = TextConfig(indent_unit=">")
    text = "第一句。第二句.结尾"
    assert auto_period_wrap_indent(text, 1, config) == ">第一句。\n>第二句.\n>结尾"


def test_auto_period_wrap_indent_ending_with_period():
    config = TextConfig(indent_unit=">")
    assert auto_period_wrap_indent("一句。", 1, config) == ">一句。\n>"


def test_auto_period_wrap_indent_without_terminators():
    config = TextConfig(indent_unit=">", sentence_terminators=())
    assert auto_period_wrap_indent("a.b", 2, config) == ">>a.b"
    assert auto_period_wrap_indent("") == ""
