"""Formatting of per-document failures for CLI output."""

from __future__ import annotations

from pathlib import Path

from htsx.convert import UnsupportedDocument
from htsx.errors import ConversionError
from htsx.reader import ReadError


def describe_failure(path: str | Path, exc: Exception) -> str:
    """Return a ``path:line:col: error: message`` line for *exc*."""
    if isinstance(exc, ConversionError):
        return f"{path}:{exc.start}: error: {exc.kind}: {exc.kind.description}"
    if isinstance(exc, ReadError):
        where = f"{path}:{exc.location}" if exc.location else str(path)
        return f"{where}: error: {exc.message}"
    if isinstance(exc, UnsupportedDocument):
        return f"{path}: skipped: not a .cssx or .htsx document"
    if isinstance(exc, UnicodeDecodeError):
        return f"{path}: error: not valid {exc.encoding} at byte {exc.start}: {exc.reason}"
    if isinstance(exc, OSError):
        return f"{path}: error: {exc.strerror or exc}"
    return f"{path}: error: {exc}"
