"""Arbitrary-precision numeric helpers."""

from __future__ import annotations


def big_fib(n: int) -> int:
    """n-th Fibonacci number, iteratively (``big_fib(0) == 0``).

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


__all__ = ["big_fib"]
