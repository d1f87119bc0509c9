"""按名称解析类型的注册表。

调用方显式登记可解析的类型，避免在运行时扫描全部已加载模块。
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from loguru import logger


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeRegistry:
    """统一管理“名称 → 类型”的登记。"""

    def __init__(self, types: Iterable[type] = ()) -> None:
        self._types: Dict[str, type] = {}
        for cls in types:
            self.register(cls)

    def register(self, cls: Optional[type] = None, name: str | None = None):
        """登记类型；不传 cls 时返回装饰器。

        关键逻辑说明：
        - 默认键为“模块名.限定名”，与精确查找一致；
        - 显式传入 name 时以 name 作为键，类名仍参与忽略大小写的兜底查找。
        """

        def _register(target: Type) -> Type:
            key = name or _qualified_name(target)
            self._types[key] = target
            return target

        if cls is None:
            return _register
        return _register(cls)

    def resolve(self, name: str | None) -> type | None:
        """先按登记键精确查找，再按类名忽略大小写查找，找不到返回 None。"""

        name = name or ""
        if name in self._types:
            return self._types[name]
        lowered = name.lower()
        for cls in self._types.values():
            if cls.__name__.lower() == lowered:
                return cls
        logger.debug(f"type name not registered: {name!r}")
        return None

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __len__(self) -> int:
        return len(self._types)


def to_type(name: str | None, registry: TypeRegistry) -> type | None:
    return registry.resolve(name)
