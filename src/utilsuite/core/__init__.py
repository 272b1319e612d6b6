"""
util-suite core primitives.

Quick start::

    from utilsuite.core import MemoizingCache, levenshtein

    levenshtein("kitten", "sitting")        # 3
    squares = MemoizingCache(lambda n: n * n)
    squares.get(12)                          # 144
"""

from .cache import CacheStats, MemoizingCache, memoize
from .errors import (
    CacheError,
    ConfigError,
    DuplicateFactoryError,
    ErrorCategory,
    ErrorContext,
    FactoryNotFoundError,
    FileIOError,
    RecursiveComputationError,
    RegistryError,
    UtilSuiteError,
)
from .fileio import read_text, write_text
from .functional import partition_count
from .numeric import big_fib
from .registry import FactoryRegistry, register_factory
from .shapes import Circle, Rectangle, Shape, area, describe_shape
from .tags import TagRegistry, important
from .text import levenshtein, title_case

__all__ = [
    # text
    "levenshtein",
    "title_case",
    # cache
    "CacheStats",
    "MemoizingCache",
    "memoize",
    # registries
    "FactoryRegistry",
    "register_factory",
    "TagRegistry",
    "important",
    # shapes
    "Circle",
    "Rectangle",
    "Shape",
    "area",
    "describe_shape",
    # misc
    "big_fib",
    "partition_count",
    "read_text",
    "write_text",
    # errors
    "UtilSuiteError",
    "ErrorCategory",
    "ErrorContext",
    "RegistryError",
    "FactoryNotFoundError",
    "DuplicateFactoryError",
    "CacheError",
    "RecursiveComputationError",
    "FileIOError",
    "ConfigError",
]
