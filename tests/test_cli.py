import pytest

from strkit.cli import main


def test_cli_extracts_requested_category(capsys):
    main(["abc123", "-c", "numeric"])
    assert capsys.readouterr().out.strip() == "numeric: 123"


def test_cli_remove(capsys):
    main(["你好，世界", "-c", "punctuation", "--remove"])
    assert capsys.readouterr().out.strip() == "punctuation: 你好世界"


def test_cli_prints_only_matching_categories_by_default(capsys):
    main(["123"])
    lines = capsys.readouterr().out.splitlines()
    assert "numeric: 123" in lines
    assert all(not line.startswith("chinese_character") for line in lines)


def test_cli_list(capsys):
    main(["--list"])
    out = capsys.readouterr().out.splitlines()
    assert "chinese_character" in out
    assert "advanced_tabs" in out


def test_cli_unknown_category():
    with pytest.raises(SystemExit):
        main(["abc", "-c", "klingon"])
