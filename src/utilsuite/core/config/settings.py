"""
Centralized settings for util-suite.

:class:`UtilSuiteSettings` is the single validated source of truth for
logging, the demo thread pool, and the demo driver.  Every field can be
set through a ``UTILSUITE_*`` environment variable or a ``.env`` file.

Tags:
    util-suite, configuration, settings, pydantic, caching, validation
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigError

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_FORMATS = {"json", "console"}


class UtilSuiteSettings(BaseSettings):
    """util-suite centralized configuration.

    All fields can be set via ``UTILSUITE_*`` environment variables (e.g.
    ``UTILSUITE_POOL_SIZE=8``).  List fields take JSON
    (``UTILSUITE_FIB_INPUTS='[10, 20]'``).
    """

    model_config = SettingsConfigDict(
        env_prefix="UTILSUITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    # ── Thread pool ──────────────────────────────────────────────
    pool_size: int = Field(default=4, ge=1, le=256)
    pool_name_prefix: str = Field(default="worker", min_length=1)
    batch_timeout_ms: int = Field(default=5000, ge=1)

    # ── Demo ─────────────────────────────────────────────────────
    demo_output_path: str = Field(default="./demo-output.txt")
    fib_inputs: list[int] = Field(default_factory=lambda: [30, 31, 32])

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LEVELS:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {sorted(_VALID_LEVELS)}")
        return upper

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in _VALID_FORMATS:
            raise ValueError(f"Invalid log_format '{v}'. Must be one of: {sorted(_VALID_FORMATS)}")
        return lower

    @field_validator("fib_inputs")
    @classmethod
    def _validate_fib_inputs(cls, v: list[int]) -> list[int]:
        if any(n < 0 for n in v):
            raise ValueError("fib_inputs must be non-negative")
        return v

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, UtilSuiteSettings] = {}


def get_settings(*, _force_reload: bool = False) -> UtilSuiteSettings:
    """Load, validate, and cache a :class:`UtilSuiteSettings` instance.

    Raises:
        ConfigError: If any field fails validation.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = UtilSuiteSettings()
    except ValidationError as exc:
        raise ConfigError(
            f"Invalid util-suite settings: {exc.error_count()} error(s)",
            cause=exc,
        ).with_context(operation="load_settings") from exc

    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
