"""
Closed shape union consumed by exhaustive pattern matching.

``Shape`` is exactly ``Circle | Rectangle``; consumers ``match`` on it and
close the match with :func:`typing.assert_never`, so a type checker flags
any new variant that is not handled.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import assert_never


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float


@dataclass(frozen=True, slots=True)
class Rectangle:
    width: float
    height: float


Shape = Circle | Rectangle


def _fmt(x: float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5"
    return str(int(x)) if float(x).is_integer() else str(x)


def describe_shape(shape: Shape) -> str:
    """Human-readable description, e.g. ``Circle(radius=2.5)``."""
    match shape:
        case Circle(radius=r):
            return f"Circle(radius={_fmt(r)})"
        case Rectangle(width=w, height=h):
            return f"Rectangle({_fmt(w)}x{_fmt(h)})"
        case _:
            assert_never(shape)


def area(shape: Shape) -> float:
    match shape:
        case Circle(radius=r):
            return math.pi * r * r
        case Rectangle(width=w, height=h):
            return w * h
        case _:
            assert_never(shape)


__all__ = ["Circle", "Rectangle", "Shape", "area", "describe_shape"]
