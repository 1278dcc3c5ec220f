"""Document driver: read a source file, run its pipeline, write the output.

``.cssx`` documents become ``.css`` and ``.htsx`` documents become ``.html``.
A document either converts completely or fails with the first error found;
no partial output is written.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from htsx.config import ConvertConfig
from htsx.css import recognize_stylesheet, render_stylesheet
from htsx.html import recognize_document, render_document
from htsx.reader import read_source

logger = logging.getLogger("htsx")


class UnsupportedDocument(Exception):
    """Raised for a path whose suffix names no known document kind."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path}: not a .cssx or .htsx document")


class DocumentKind(Enum):
    """Source suffix and output suffix of each document kind."""

    STYLESHEET = (".cssx", ".css")
    MARKUP = (".htsx", ".html")

    @property
    def source_suffix(self) -> str:
        return self.value[0]

    @property
    def output_suffix(self) -> str:
        return self.value[1]

    @classmethod
    def for_path(cls, path: str | Path) -> DocumentKind | None:
        suffix = Path(path).suffix
        for kind in cls:
            if kind.source_suffix == suffix:
                return kind
        return None


def convert_stylesheet(source: str, config: ConvertConfig | None = None) -> str:
    """Convert ``.cssx`` source text to CSS text."""
    config = config or ConvertConfig()
    nodes = read_source(source, max_depth=config.max_depth)
    items = recognize_stylesheet(nodes)
    logger.debug("recognized %d stylesheet item(s)", len(items))
    return render_stylesheet(items)


def convert_markup(source: str, config: ConvertConfig | None = None) -> str:
    """Convert ``.htsx`` source text to HTML text."""
    config = config or ConvertConfig()
    nodes = read_source(source, max_depth=config.max_depth)
    items = recognize_document(nodes)
    logger.debug("recognized %d markup item(s)", len(items))
    return render_document(items, pretty=config.pretty)


def convert_source(
    source: str, kind: DocumentKind, config: ConvertConfig | None = None
) -> str:
    if kind is DocumentKind.STYLESHEET:
        return convert_stylesheet(source, config)
    return convert_markup(source, config)


def output_path(
    path: str | Path, kind: DocumentKind, output_dir: str | Path | None = None
) -> Path:
    """Return where the converted form of *path* is written."""
    path = Path(path)
    target = path.with_suffix(kind.output_suffix)
    if output_dir is not None:
        target = Path(output_dir) / target.name
    return target


def convert_file(path: str | Path, config: ConvertConfig | None = None) -> Path:
    """Convert the document at *path* and return the written output path.

    Raises :class:`UnsupportedDocument`, :class:`~htsx.reader.ReadError` or
    :class:`~htsx.errors.ConversionError`; I/O errors propagate unchanged.
    """
    config = config or ConvertConfig()
    path = Path(path)
    kind = DocumentKind.for_path(path)
    if kind is None:
        raise UnsupportedDocument(path)

    logger.debug("converting %s as %s", path, kind.name.lower())
    source = path.read_text(encoding=config.encoding)
    text = convert_source(source, kind, config)

    target = output_path(path, kind, config.output_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding=config.encoding)
    logger.info("wrote %s", target)
    return target


def check_file(path: str | Path, config: ConvertConfig | None = None) -> int:
    """Read and recognize *path* without writing; return the item count.

    Raises the same errors as :func:`convert_file`.
    """
    config = config or ConvertConfig()
    path = Path(path)
    kind = DocumentKind.for_path(path)
    if kind is None:
        raise UnsupportedDocument(path)

    nodes = read_source(path.read_text(encoding=config.encoding), max_depth=config.max_depth)
    if kind is DocumentKind.STYLESHEET:
        return len(recognize_stylesheet(nodes))
    return len(recognize_document(nodes))
