"""Execution helpers: named thread pools, timed batches, async pipelines."""

from .pipeline import run_with_fallback, supply_async_with_fallback
from .pool import BatchOutcome, invoke_all_timed, new_named_pool

__all__ = [
    "BatchOutcome",
    "invoke_all_timed",
    "new_named_pool",
    "run_with_fallback",
    "supply_async_with_fallback",
]
