"""
Memoizing cache: compute each key at most once, even under concurrency.

Wraps a pure, deterministic function ``fn(key) -> value`` and exposes
:meth:`MemoizingCache.get`.  Results are committed on first successful
computation and live as long as the cache instance.  There is no eviction,
no capacity bound, and no TTL.

Architecture:
    ::

        MemoizingCache(fn)
          ├── .get(key)       ─ committed value, or compute-and-commit
          ├── .peek(key)      ─ committed value or None, never computes
          ├── key in cache    ─ committed?
          ├── len(cache)      ─ number of committed keys
          ├── .keys()         ─ snapshot of committed keys
          └── .stats()        ─ CacheStats (hits / misses / waits / failures)

        memoize(fn)           ─ decorator returning a one-argument callable
                                backed by a MemoizingCache (``.cache``)

Concurrency policy (strict single computation):
    A global lock guards two maps: committed values and in-flight
    computations.  The first caller for an uncommitted key registers an
    in-flight record and runs ``fn`` *outside* the lock; concurrent callers
    for the same key wait on that record and receive the same value.  Calls
    for other keys proceed independently, so ``fn`` may call ``get`` for a
    different key on the same cache without deadlocking.

    If ``fn`` raises, the exception propagates to the computing caller and
    to every waiter, and nothing is committed: the next ``get`` for that key
    computes again.

    A thread that re-enters ``get`` for the key it is currently computing
    gets :class:`~utilsuite.core.errors.RecursiveComputationError`.

Examples:
    >>> from utilsuite.core.cache import MemoizingCache, memoize
    >>> squares = MemoizingCache(lambda n: n * n)
    >>> squares.get(12)
    144
    >>> 12 in squares
    True

    >>> @memoize
    ... def fib(n):
    ...     return n if n < 2 else fib(n - 1) + fib(n - 2)
    >>> fib(80)
    23416728348467685

Tags:
    cache, memoization, concurrency, thread-safety, util-suite
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import RecursiveComputationError
from .logging import get_logger

logger = get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time counters for a :class:`MemoizingCache`.

    Attributes:
        hits: Lookups answered from a committed value
        misses: Lookups that started a computation
        waits: Lookups that waited on another thread's computation
        computations: Computations that committed a value
        failures: Computations that raised
        size: Number of committed keys
    """

    hits: int = 0
    misses: int = 0
    waits: int = 0
    computations: int = 0
    failures: int = 0
    size: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "waits": self.waits,
            "computations": self.computations,
            "failures": self.failures,
            "size": self.size,
        }


class _InFlight:
    """A computation in progress for one key."""

    __slots__ = ("owner", "done", "value", "error")

    def __init__(self, owner: int) -> None:
        self.owner = owner
        self.done = threading.Event()
        self.value: Any = None
        self.error: BaseException | None = None


class MemoizingCache(Generic[K, V]):
    """Thread-safe, unbounded, compute-once cache around a pure function.

    Args:
        fn: Pure, deterministic function of one hashable argument.
        name: Label used in log events (defaults to ``fn.__name__``).
    """

    def __init__(self, fn: Callable[[K], V], *, name: str | None = None) -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", "anonymous")
        self._lock = threading.Lock()
        self._values: dict[K, V] = {}
        self._inflight: dict[K, _InFlight] = {}
        self._hits = 0
        self._misses = 0
        self._waits = 0
        self._computations = 0
        self._failures = 0

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: K) -> V:
        """Return the committed value for ``key``, computing it if needed.

        Raises:
            RecursiveComputationError: If called from inside the computation
                of the same key.
            Exception: Whatever ``fn(key)`` raised; nothing is committed.
        """
        me = threading.get_ident()
        with self._lock:
            if key in self._values:
                self._hits += 1
                return self._values[key]

            flight = self._inflight.get(key)
            if flight is None:
                flight = _InFlight(owner=me)
                self._inflight[key] = flight
                self._misses += 1
                owner = True
            elif flight.owner == me:
                raise RecursiveComputationError(key)
            else:
                self._waits += 1
                owner = False

        if owner:
            return self._compute(key, flight)

        flight.done.wait()
        if flight.error is not None:
            # Shared instance; drop the computing thread's frames
            raise flight.error.with_traceback(None)
        return flight.value

    def _compute(self, key: K, flight: _InFlight) -> V:
        try:
            value = self._fn(key)
        except BaseException as exc:
            with self._lock:
                del self._inflight[key]
                self._failures += 1
            flight.error = exc
            flight.done.set()
            logger.debug(
                "cache.compute_failed",
                cache=self._name,
                key=repr(key),
                error=repr(exc),
            )
            raise

        with self._lock:
            self._values[key] = value
            del self._inflight[key]
            self._computations += 1
        flight.value = value
        flight.done.set()
        logger.debug("cache.computed", cache=self._name, key=repr(key))
        return value

    def peek(self, key: K) -> V | None:
        """Return the committed value for ``key`` or ``None``; never computes."""
        with self._lock:
            return self._values.get(key)

    def keys(self) -> list[K]:
        """Snapshot of committed keys, in commit order."""
        with self._lock:
            return list(self._values)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                waits=self._waits,
                computations=self._computations,
                failures=self._failures,
                size=len(self._values),
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"MemoizingCache(name={self._name!r}, size={len(self)})"


def memoize(fn: Callable[[K], V]) -> Callable[[K], V]:
    """Decorator: memoize a one-argument pure function.

    The returned callable exposes its backing cache as ``.cache``.

    Example:
        >>> @memoize
        ... def slow_square(n):
        ...     return n * n
        >>> slow_square(9)
        81
        >>> len(slow_square.cache)
        1
    """
    cache: MemoizingCache[K, V] = MemoizingCache(fn)

    @functools.wraps(fn)
    def wrapper(key: K) -> V:
        return cache.get(key)

    wrapper.cache = cache  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "CacheStats",
    "MemoizingCache",
    "memoize",
]
