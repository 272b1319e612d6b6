"""
Static tag registry: attach a string label to a class or function and
query it later.

Tags are recorded explicitly at decoration time in a
:class:`TagRegistry`; nothing is discovered through introspection.

Examples:
    >>> registry = TagRegistry()
    >>> @registry.tag("Data Model")
    ... class Person:
    ...     pass
    >>> registry.scan(Person, int)
    [('Person', 'Data Model')]

Tags:
    tags, metadata, registry, util-suite
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TagRecord:
    """A tagged target and its label."""

    name: str
    value: str


class TagRegistry:
    """Maps tagged targets (classes, functions) to their label."""

    def __init__(self) -> None:
        self._tags: dict[Any, str] = {}

    def tag(self, value: str = "") -> Callable[[T], T]:
        """Decorator recording ``value`` for the decorated target."""

        def decorator(target: T) -> T:
            self._tags[target] = value
            return target

        return decorator

    def get(self, target: Any) -> str | None:
        return self._tags.get(target)

    def is_tagged(self, target: Any) -> bool:
        return target in self._tags

    def scan(self, *targets: Any) -> list[tuple[str, str]]:
        """``(name, value)`` for each tagged target, in argument order."""
        return [
            (_display_name(t), self._tags[t])
            for t in targets
            if t in self._tags
        ]

    def records(self) -> list[TagRecord]:
        return [TagRecord(_display_name(t), v) for t, v in self._tags.items()]

    def clear(self) -> None:
        self._tags.clear()

    def __len__(self) -> int:
        return len(self._tags)


def _display_name(target: Any) -> str:
    return getattr(target, "__name__", None) or type(target).__name__


_default_tags = TagRegistry()


def get_default_tags() -> TagRegistry:
    return _default_tags


def important(value: str = "") -> Callable[[T], T]:
    """Tag a target as important in the default registry."""
    return _default_tags.tag(value)


__all__ = [
    "TagRecord",
    "TagRegistry",
    "get_default_tags",
    "important",
]
