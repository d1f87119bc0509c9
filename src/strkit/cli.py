"""按符号类别查看文本的提取或删除结果。"""

from __future__ import annotations

import argparse
from typing import List, Sequence

from .core.extraction import extract, remove
from .exceptions import UnknownSymbolCategoryError
from .models.symbol import SymbolCategory


def _parse_categories(names: Sequence[str]) -> List[SymbolCategory]:
    categories: List[SymbolCategory] = []
    for name in names:
        try:
            categories.append(SymbolCategory.parse(name))
        except UnknownSymbolCategoryError:
            raise SystemExit(f"未知的符号类别：{name}（使用 --list 查看全部类别）") from None
    return categories


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="strkit", description="字符分类提取")
    parser.add_argument("text", nargs="*", help="待处理文本（可空格分隔）")
    parser.add_argument(
        "-c",
        "--category",
        action="append",
        default=[],
        help="符号类别名，可重复；不指定时输出所有有结果的类别",
    )
    parser.add_argument("--remove", action="store_true", help="输出删除该类别后的文本")
    parser.add_argument("--list", action="store_true", help="列出全部符号类别")
    args = parser.parse_args(argv)

    if args.list:
        for category in SymbolCategory:
            print(category.value)
        return

    text = " ".join(args.text)
    if not text:
        text = input("请输入文本：")
    if not text:
        raise SystemExit("文本不能为空。")

    explicit = bool(args.category)
    categories = _parse_categories(args.category) if explicit else list(SymbolCategory)

    for category in categories:
        extracted = extract(text, category)
        if not explicit and not extracted:
            continue
        result = remove(text, category) if args.remove else extracted
        print(f"{category.value}: {result}")


if __name__ == "__main__":
    main()
