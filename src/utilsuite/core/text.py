"""
Text utilities: title casing and Levenshtein edit distance.

Both functions are pure and safe to call from any number of threads.

Examples:
    >>> title_case("java UTILITY suite demo")
    'Java Utility Suite Demo'
    >>> levenshtein("kitten", "sitting")
    3

Performance:
    - levenshtein: O(m*n) time, O(n) memory (two rolling rows)
    - title_case: O(len(text))

Tags:
    text, strings, edit-distance, levenshtein, util-suite
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def title_case(text: str | None) -> str | None:
    """Capitalize the first letter of each word and lower-case the rest.

    Words are separated by runs of whitespace and rejoined with single
    spaces.  ``None`` and blank strings are returned unchanged.
    """
    if text is None or not text.strip():
        return text
    return " ".join(word[0].upper() + word[1:].lower() for word in text.split())


def levenshtein(a: Sequence[Any] | None, b: Sequence[Any] | None) -> int:
    """Minimum number of single-symbol edits turning ``a`` into ``b``.

    Edits are insertions, deletions, and substitutions, each costing 1.
    Works on any sequences whose elements compare with ``==`` (strings,
    lists, tuples).  ``None`` is treated as an empty sequence.

    Args:
        a: Source sequence (length m)
        b: Target sequence (length n)

    Returns:
        Non-negative distance; 0 iff the sequences are equal element-wise.
    """
    if a is None:
        a = ""
    if b is None:
        b = ""

    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    # prev[j] holds the distance between a[:i-1] and b[:j]
    prev = list(range(n + 1))
    cur = [0] * (n + 1)
    for i in range(1, m + 1):
        cur[0] = i
        ai = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ai == b[j - 1] else 1
            cur[j] = min(cur[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost)
        prev, cur = cur, prev
    return prev[n]


__all__ = ["levenshtein", "title_case"]
