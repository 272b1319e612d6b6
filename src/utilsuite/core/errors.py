"""
Structured error types for util-suite.

Every failure the library itself originates is a :class:`UtilSuiteError`
carrying a category, structured context, and an optional chained cause.
Errors raised by *user-supplied* callables (the function wrapped by a
:class:`~utilsuite.core.cache.MemoizingCache`, a pipeline supplier, a batch
task) are never wrapped: they reach the caller as-is.

Architecture:
    ::

        UtilSuiteError (category, context, cause)
        ├── RegistryError            (REGISTRY)
        │   ├── FactoryNotFoundError
        │   └── DuplicateFactoryError
        ├── CacheError               (CACHE)
        │   └── RecursiveComputationError
        ├── FileIOError              (STORAGE)
        └── ConfigError              (CONFIG)

Examples:
    >>> err = FileIOError("Cannot read file").with_context(path="/tmp/x")
    >>> err.to_dict()["context"]
    {'path': '/tmp/x'}

Tags:
    error-handling, exception-hierarchy, error-context, util-suite
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and logging."""

    REGISTRY = "REGISTRY"    # Unknown or duplicate factory names
    CACHE = "CACHE"          # Misuse of the memoizing cache
    STORAGE = "STORAGE"      # File system reads and writes
    CONFIG = "CONFIG"        # Invalid settings
    INTERNAL = "INTERNAL"    # Bugs, unexpected state


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Attributes:
        operation: Name of the operation that failed
        path: File system path involved, if any
        key: Registry or cache key involved, if any
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    path: str | None = None
    key: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for name in ["operation", "path", "key"]:
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class UtilSuiteError(Exception):
    """
    Base exception for all util-suite errors.

    Subclasses set ``default_category`` so callers rarely pass one.

    Attributes:
        message: Human-readable description
        category: ErrorCategory for classification
        context: ErrorContext with structured metadata
        cause: Underlying exception, also set as ``__cause__``
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> UtilSuiteError:
        """
        Add context to this error (fluent API).

        Usage:
            raise FileIOError("Write failed").with_context(path=str(path))
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# REGISTRY ERRORS
# =============================================================================


class RegistryError(UtilSuiteError):
    """Factory registry lookup or registration failed."""

    default_category = ErrorCategory.REGISTRY


class FactoryNotFoundError(RegistryError):
    """No factory is registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None):
        available = available or []
        super().__init__(
            f"No factory registered for '{name}'. Available: {available or 'none'}",
            context=ErrorContext(key=name, metadata={"available": available}),
        )
        self.name = name
        self.available = available


class DuplicateFactoryError(RegistryError):
    """A factory is already registered under this name."""

    def __init__(self, name: str):
        super().__init__(
            f"A factory is already registered for '{name}'",
            context=ErrorContext(key=name),
        )
        self.name = name


# =============================================================================
# CACHE ERRORS
# =============================================================================


class CacheError(UtilSuiteError):
    """Misuse of a memoizing cache."""

    default_category = ErrorCategory.CACHE


class RecursiveComputationError(CacheError):
    """The computing function re-entered ``get`` for the key it is computing."""

    def __init__(self, key: Any):
        super().__init__(
            f"Recursive computation detected for key {key!r}",
            context=ErrorContext(key=repr(key)),
        )


# =============================================================================
# STORAGE / CONFIG ERRORS
# =============================================================================


class FileIOError(UtilSuiteError):
    """Reading or writing a file failed."""

    default_category = ErrorCategory.STORAGE


class ConfigError(UtilSuiteError):
    """Settings are missing or invalid."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "UtilSuiteError",
    "RegistryError",
    "FactoryNotFoundError",
    "DuplicateFactoryError",
    "CacheError",
    "RecursiveComputationError",
    "FileIOError",
    "ConfigError",
]
