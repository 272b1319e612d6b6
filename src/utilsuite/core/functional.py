"""Small functional helpers over iterables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def partition_count(items: Iterable[T], predicate: Callable[[T], bool]) -> dict[bool, int]:
    """Count items matching and not matching ``predicate``.

    Both ``True`` and ``False`` keys are always present.

    Example:
        >>> partition_count([1, 2, 3, 4, 5, 6], lambda i: i % 2 == 0)
        {False: 3, True: 3}
    """
    counts = {False: 0, True: 0}
    for item in items:
        counts[bool(predicate(item))] += 1
    return counts


__all__ = ["partition_count"]
