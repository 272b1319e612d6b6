"""
Shared pytest fixtures and configuration for util-suite tests.

This module provides:
- Settings cache and environment isolation
- Registry cleanup fixtures
- Call-counting helpers for memoization tests
"""

import threading
from collections.abc import Callable
from typing import Any, Generator

import pytest

from utilsuite.core.config import clear_settings_cache
from utilsuite.core.registry import reset_default_registry


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark all tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "slow"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and any UTILSUITE_* variables around each test."""
    import os

    for key in list(os.environ):
        if key.startswith("UTILSUITE_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def clean_factory_registry() -> Generator[None, None, None]:
    """Reset the global factory registry before and after a test."""
    reset_default_registry()
    yield
    reset_default_registry()


class CallCounter:
    """Wraps a function and counts invocations, thread-safely."""

    def __init__(self, fn: Callable[[Any], Any]):
        self._fn = fn
        self._lock = threading.Lock()
        self.calls = 0
        self.args: list[Any] = []

    def __call__(self, key: Any) -> Any:
        with self._lock:
            self.calls += 1
            self.args.append(key)
        return self._fn(key)


@pytest.fixture
def counted() -> Callable[[Callable[[Any], Any]], CallCounter]:
    """Factory fixture: ``counted(fn)`` returns a CallCounter around ``fn``."""
    return CallCounter
