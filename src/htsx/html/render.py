"""Markup renderer with compact and pretty layouts."""

from __future__ import annotations

import io
from typing import Iterable, Protocol

from htsx.html.model import Attributes, Element, MarkupItem, Text, VoidElement

__all__ = ["INDENT_WIDTH", "write_item", "render_item", "render_document"]

INDENT_WIDTH = 4


class Writer(Protocol):
    def write(self, text: str, /) -> object: ...


def _open_tag(name: str, attributes: Attributes) -> str:
    parts = [f"<{name}"]
    for attribute, value in attributes.items():
        if value is None:
            parts.append(f" {attribute}")
        else:
            quoted = value.replace('"', "&quot;")
            parts.append(f' {attribute}="{quoted}"')
    parts.append(">")
    return "".join(parts)


def _write_compact(item: MarkupItem, out: Writer) -> None:
    if isinstance(item, Element):
        out.write(_open_tag(item.name, item.attributes))
        for child in item.children:
            _write_compact(child, out)
        out.write(f"</{item.name}>")
    elif isinstance(item, VoidElement):
        out.write(_open_tag(item.name, item.attributes))
    elif isinstance(item, Text):
        out.write(item.content)
    else:  # pragma: no cover
        raise TypeError(f"not a markup item: {item!r}")


def _write_pretty(item: MarkupItem, out: Writer, indent: int) -> None:
    pad = " " * indent
    if isinstance(item, Element):
        out.write(f"{pad}{_open_tag(item.name, item.attributes)}\n")
        for child in item.children:
            _write_pretty(child, out, indent + INDENT_WIDTH)
        out.write(f"{pad}</{item.name}>\n")
    elif isinstance(item, VoidElement):
        out.write(f"{pad}{_open_tag(item.name, item.attributes)}\n")
    elif isinstance(item, Text):
        out.write(f"{pad}{item.content}\n")
    else:  # pragma: no cover
        raise TypeError(f"not a markup item: {item!r}")


def write_item(item: MarkupItem, out: Writer, pretty: bool = False, indent: int = 0) -> None:
    """Write *item* to *out*.

    Compact output has no whitespace between nodes. Pretty output puts every
    node on its own line, indented four spaces per level; *indent* is ignored
    in compact mode.
    """
    if pretty:
        _write_pretty(item, out, indent)
    else:
        _write_compact(item, out)


def render_item(item: MarkupItem, pretty: bool = False, indent: int = 0) -> str:
    buf = io.StringIO()
    write_item(item, buf, pretty=pretty, indent=indent)
    return buf.getvalue()


def render_document(items: Iterable[MarkupItem], pretty: bool = False) -> str:
    buf = io.StringIO()
    for item in items:
        write_item(item, buf, pretty=pretty)
    return buf.getvalue()
