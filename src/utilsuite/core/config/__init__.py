"""Centralized configuration for util-suite.

Quick start::

    from utilsuite.core.config import get_settings

    settings = get_settings()
    print(settings.pool_size)   # 4
"""

from .settings import UtilSuiteSettings, clear_settings_cache, get_settings

__all__ = [
    "UtilSuiteSettings",
    "clear_settings_cache",
    "get_settings",
]
