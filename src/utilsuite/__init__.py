"""
util-suite - language-level utilities.

Edit distance, a compute-once memoizing cache, named thread pools with
time-boxed batches, an async fallback pipeline, and a handful of small
helpers, plus a demo driver and CLI that tie them together.
"""

__version__ = "0.1.0"

from utilsuite.core import *  # noqa
