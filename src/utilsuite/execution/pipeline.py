"""Async supply → map → fallback pipeline.

``supply_async_with_fallback`` runs a blocking ``supplier`` off the event
loop, maps its value, and turns any failure from either stage into a value
via ``fallback(exc)``.  The caller always gets a result unless
``fallback`` itself raises.

ARCHITECTURE
────────────
::

    supplier()  ── run_in_executor ──▶  value
    mapper(value)                  ──▶  result
          │ any Exception
          ▼
    fallback(exc)                  ──▶  result

Example::

    result = asyncio.run(
        supply_async_with_fallback(
            lambda: "payload",
            lambda s: "mapped:" + s.upper(),
            lambda exc: "fallback:" + str(exc),
        )
    )
    # "mapped:PAYLOAD"
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from concurrent.futures import Executor
from typing import TypeVar

from utilsuite.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def supply_async_with_fallback(
    supplier: Callable[[], T],
    mapper: Callable[[T], R],
    fallback: Callable[[Exception], R],
    executor: Executor | None = None,
) -> R:
    """Run ``supplier`` in ``executor``, map the value, recover with ``fallback``.

    Args:
        supplier: Blocking zero-argument callable producing the input
        mapper: Transformation applied to the supplier's value
        fallback: Called with the exception if the supplier or mapper raises
        executor: Executor for the supplier (``None`` → loop default)
    """
    loop = asyncio.get_running_loop()
    try:
        value = await loop.run_in_executor(executor, supplier)
        return mapper(value)
    except Exception as e:
        logger.warning("pipeline.fallback", error=str(e), error_type=type(e).__name__)
        return fallback(e)


def run_with_fallback(
    supplier: Callable[[], T],
    mapper: Callable[[T], R],
    fallback: Callable[[Exception], R],
    executor: Executor | None = None,
) -> R:
    """Blocking convenience wrapper: ``asyncio.run`` the pipeline."""
    return asyncio.run(supply_async_with_fallback(supplier, mapper, fallback, executor))


__all__ = ["run_with_fallback", "supply_async_with_fallback"]
