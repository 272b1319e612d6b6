"""
UTF-8 text file helpers.

``write_text`` creates or truncates the target (and its parent
directories); ``read_text`` returns the whole file.  Content round-trips
exactly: no newline translation in either direction.  Any ``OSError`` or
encoding failure is re-raised as
:class:`~utilsuite.core.errors.FileIOError` with the path in its context
and the original error chained.

Example::

    path = write_text("./demo-output.txt", "Hello")
    assert read_text(path) == "Hello"
"""

from __future__ import annotations

from pathlib import Path

from .errors import ErrorContext, FileIOError
from .logging import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"


def write_text(path: str | Path, content: str) -> Path:
    """Write ``content`` to ``path``, replacing any existing file.

    Line endings are written exactly as given.

    Returns:
        The resolved path written.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding=ENCODING, newline="") as f:
            f.write(content)
    except (OSError, UnicodeError) as exc:
        raise FileIOError(
            f"Cannot write file: {_reason(exc)}",
            context=ErrorContext(operation="write_text", path=str(target)),
            cause=exc,
        ) from exc
    logger.debug("fileio.written", path=str(target), chars=len(content))
    return target


def read_text(path: str | Path) -> str:
    """Read the whole of ``path`` as UTF-8 text, line endings untranslated."""
    target = Path(path)
    try:
        with open(target, "r", encoding=ENCODING, newline="") as f:
            return f.read()
    except (OSError, UnicodeError) as exc:
        raise FileIOError(
            f"Cannot read file: {_reason(exc)}",
            context=ErrorContext(operation="read_text", path=str(target)),
            cause=exc,
        ) from exc


def _reason(exc: OSError | UnicodeError) -> str:
    return getattr(exc, "strerror", None) or str(exc)


__all__ = ["read_text", "write_text"]
