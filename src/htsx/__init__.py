"""htsx: compile s-expression sources to CSS and HTML."""
from __future__ import annotations

__version__ = "0.1.0"

from htsx.config import ConvertConfig  # noqa: E402
from htsx.convert import (  # noqa: E402
    DocumentKind,
    UnsupportedDocument,
    convert_file,
    convert_markup,
    convert_source,
    convert_stylesheet,
)
from htsx.errors import ConversionError, MarkupError, StyleError  # noqa: E402
from htsx.reader import ReadError, read_source  # noqa: E402

__all__ = [
    "__version__",
    "ConvertConfig",
    "DocumentKind",
    "UnsupportedDocument",
    "convert_file",
    "convert_markup",
    "convert_source",
    "convert_stylesheet",
    "ConversionError",
    "StyleError",
    "MarkupError",
    "ReadError",
    "read_source",
]
