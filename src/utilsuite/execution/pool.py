"""Named thread pools and time-boxed batch invocation.

WHY
───
A batch of independent lookups (e.g. memoized Fibonacci values) should
finish within a fixed budget.  ``invoke_all_timed`` submits every task,
waits up to the budget, and keeps only the results that arrived in time.
Tasks that did not finish are neither successes nor failures: they are
simply absent from the result list.

ARCHITECTURE
────────────
::

    new_named_pool("worker", 4)     ─ ThreadPoolExecutor, threads "worker-1a2b3c"
    invoke_all_timed(pool, tasks, 5000)
      ├── submit each zero-arg callable
      ├── concurrent.futures.wait(timeout=5.0)
      ├── cancel futures that have not started
      └── BatchOutcome  ─ results (submission order) + counters

Python threads cannot be interrupted: a task already running when the
budget expires keeps running in its worker, but its result is discarded.

Example::

    with new_named_pool("worker", 4) as pool:
        outcome = invoke_all_timed(pool, [lambda: fib(30), lambda: fib(31)], 5000)
    print(outcome.results, outcome.timed_out)
"""

from __future__ import annotations

import threading
import time
import uuid
from collections.abc import Callable, Iterable
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from utilsuite.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def new_named_pool(prefix: str, threads: int) -> ThreadPoolExecutor:
    """Fixed-size thread pool whose workers are named ``<prefix>-<6 hex>``.

    Raises:
        ValueError: If ``threads`` < 1 or ``prefix`` is empty
    """
    if threads < 1:
        raise ValueError(f"threads must be >= 1, got {threads}")
    if not prefix:
        raise ValueError("prefix must not be empty")

    def _name_thread() -> None:
        threading.current_thread().name = f"{prefix}-{uuid.uuid4().hex[:6]}"

    logger.debug("pool.created", prefix=prefix, threads=threads)
    return ThreadPoolExecutor(max_workers=threads, initializer=_name_thread)


@dataclass
class BatchOutcome(Generic[T]):
    """Aggregate result of a time-boxed batch."""

    results: list[T] = field(default_factory=list)
    submitted: int = 0
    failed: int = 0
    timed_out: int = 0
    duration_seconds: float = 0.0
    errors: list[str] = field(default_factory=list)

    @property
    def completed(self) -> int:
        """Tasks that finished in time without raising."""
        return len(self.results)

    def to_dict(self) -> dict[str, Any]:
        """Serialise for logging."""
        return {
            "submitted": self.submitted,
            "completed": self.completed,
            "failed": self.failed,
            "timed_out": self.timed_out,
            "duration_seconds": self.duration_seconds,
        }


def invoke_all_timed(
    executor: Executor,
    tasks: Iterable[Callable[[], T]],
    timeout_ms: float,
) -> BatchOutcome[T]:
    """Run ``tasks`` on ``executor`` and collect what finishes in time.

    Args:
        executor: Any ``concurrent.futures.Executor``
        tasks: Zero-argument callables
        timeout_ms: Budget for the whole batch, in milliseconds

    Returns:
        :class:`BatchOutcome` whose ``results`` hold, in submission order,
        the values of tasks that completed within the budget without
        raising.  Raising tasks are counted in ``failed``; unfinished ones
        in ``timed_out``.
    """
    if timeout_ms < 0:
        raise ValueError(f"timeout_ms must be non-negative, got {timeout_ms}")

    start = time.monotonic()
    futures: list[Future[T]] = [executor.submit(task) for task in tasks]
    wait(futures, timeout=timeout_ms / 1000.0)

    outcome: BatchOutcome[T] = BatchOutcome(submitted=len(futures))
    for future in futures:
        if not future.done():
            future.cancel()
            outcome.timed_out += 1
            continue
        if future.cancelled():
            outcome.timed_out += 1
            continue
        exc = future.exception()
        if exc is not None:
            outcome.failed += 1
            outcome.errors.append(repr(exc))
            continue
        outcome.results.append(future.result())

    outcome.duration_seconds = time.monotonic() - start
    log = logger.warning if outcome.timed_out or outcome.failed else logger.info
    log("pool.batch_complete", timeout_ms=timeout_ms, **outcome.to_dict())
    return outcome


__all__ = ["BatchOutcome", "invoke_all_timed", "new_named_pool"]
