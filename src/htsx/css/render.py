"""Stylesheet renderer: IR to canonical CSS text.

Writers take any object with a text ``write`` method; exceptions raised by
that sink propagate unchanged.
"""

from __future__ import annotations

import io
from typing import Iterable, Protocol

from htsx.css.model import (
    And,
    AttributeValue,
    BareFeature,
    Charset,
    ClassName,
    Comment,
    Declaration,
    FeatureTest,
    FontFace,
    FontSource,
    From,
    Function,
    IdName,
    Import,
    Important,
    KeyframeRule,
    Keyframes,
    LocalRef,
    MediaBlock,
    MediaQuery,
    MediaType,
    Not,
    PercentStep,
    PlainText,
    QueryList,
    QuotedText,
    RemoteUrl,
    Rule,
    Selector,
    SelectorList,
    Sequence,
    StyleItem,
    SupportsBlock,
    To,
    TypeName,
    ValueList,
)

__all__ = [
    "INDENT_WIDTH",
    "write_value",
    "write_selector",
    "write_query",
    "write_item",
    "render_item",
    "render_stylesheet",
]

INDENT_WIDTH = 4


class Writer(Protocol):
    def write(self, text: str, /) -> object: ...


def _quote(text: str) -> str:
    """Return *text* as a double-quoted CSS string."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def write_value(value: AttributeValue, out: Writer) -> None:
    if isinstance(value, PlainText):
        out.write(value.text)
    elif isinstance(value, QuotedText):
        out.write(_quote(value.text))
    elif isinstance(value, ValueList):
        _write_joined(value.items, " ", out, write_value)
    elif isinstance(value, Function):
        out.write(f"{value.name}(")
        _write_joined(value.args, ", ", out, write_value)
        out.write(")")
    elif isinstance(value, Important):
        write_value(value.value, out)
        out.write(" !important")
    else:  # pragma: no cover
        raise TypeError(f"not an attribute value: {value!r}")


def write_selector(selector: Selector, out: Writer) -> None:
    if isinstance(selector, Sequence):
        _write_joined(selector.items, " ", out, write_selector)
    elif isinstance(selector, SelectorList):
        _write_joined(selector.items, ", ", out, write_selector)
    elif isinstance(selector, ClassName):
        out.write(f".{selector.name}")
    elif isinstance(selector, IdName):
        out.write(f"#{selector.name}")
    elif isinstance(selector, TypeName):
        out.write(selector.name)
    else:  # pragma: no cover
        raise TypeError(f"not a selector: {selector!r}")


def write_query(query: MediaQuery, out: Writer, top_level: bool = True) -> None:
    """Write a media query.

    Lists and ``and`` connectives are bare at top level and parenthesized
    when nested. ``not`` is the other way round: ``(not X)`` at top level,
    ``not X`` when nested. Feature tests always carry their parentheses.
    """
    if isinstance(query, QueryList):
        _open(out, top_level)
        _write_joined(query.items, ", ", out, _write_nested_query)
        _close(out, top_level)
    elif isinstance(query, And):
        _open(out, top_level)
        write_query(query.left, out, top_level=False)
        out.write(" and ")
        write_query(query.right, out, top_level=False)
        _close(out, top_level)
    elif isinstance(query, Not):
        out.write("(not " if top_level else "not ")
        write_query(query.query, out, top_level=False)
        if top_level:
            out.write(")")
    elif isinstance(query, FeatureTest):
        out.write(f"({query.name}: ")
        write_value(query.value, out)
        out.write(")")
    elif isinstance(query, (BareFeature, MediaType)):
        out.write(query.name)
    else:  # pragma: no cover
        raise TypeError(f"not a media query: {query!r}")


def _write_nested_query(query: MediaQuery, out: Writer) -> None:
    write_query(query, out, top_level=False)


def _open(out: Writer, top_level: bool) -> None:
    if not top_level:
        out.write("(")


def _close(out: Writer, top_level: bool) -> None:
    if not top_level:
        out.write(")")


def _write_joined(items: Iterable, separator: str, out: Writer, write_one) -> None:
    for i, item in enumerate(items):
        if i:
            out.write(separator)
        write_one(item, out)


def _pad(indent: int) -> str:
    return " " * indent


def _write_block(
    header: str, declarations: Iterable[Declaration], out: Writer, indent: int
) -> None:
    out.write(f"{_pad(indent)}{header} {{\n")
    for name, value in declarations:
        out.write(f"{_pad(indent + INDENT_WIDTH)}{name}: ")
        write_value(value, out)
        out.write(";\n")
    out.write(f"{_pad(indent)}}}\n")


def _write_font_source(source: FontSource, out: Writer) -> None:
    kind = "url" if isinstance(source, RemoteUrl) else "local"
    out.write(f"{kind}({_quote(source.path)}) format({_quote(source.format)})")


def _write_keyframe(rule: KeyframeRule, out: Writer, indent: int) -> None:
    if isinstance(rule, PercentStep):
        header = rule.percent
    elif isinstance(rule, From):
        header = "from"
    else:
        header = "to"
    _write_block(header, rule.declarations, out, indent)


def _write_nested(
    keyword: str, query: MediaQuery, items: Iterable[StyleItem], out: Writer, indent: int
) -> None:
    out.write(f"{_pad(indent)}{keyword} ")
    write_query(query, out, top_level=True)
    out.write(" {\n")
    for item in items:
        write_item(item, out, indent + INDENT_WIDTH)
    out.write(f"{_pad(indent)}}}\n")


def write_item(item: StyleItem, out: Writer, indent: int = 0) -> None:
    """Write one stylesheet item, indented by *indent* spaces."""
    pad = _pad(indent)
    if isinstance(item, Rule):
        selector = io.StringIO()
        write_selector(item.selector, selector)
        _write_block(selector.getvalue(), item.declarations, out, indent)
    elif isinstance(item, Charset):
        out.write(f"{pad}@charset {item.encoding};\n")
    elif isinstance(item, FontFace):
        inner = _pad(indent + INDENT_WIDTH)
        out.write(f"{pad}@font-face {{\n")
        out.write(f"{inner}font-family: {_quote(item.family)};\n")
        out.write(f"{inner}src: ")
        _write_joined(item.sources, ", ", out, _write_font_source)
        out.write(";\n")
        out.write(f"{pad}}}\n")
    elif isinstance(item, MediaBlock):
        _write_nested("@media", item.query, item.items, out, indent)
    elif isinstance(item, SupportsBlock):
        _write_nested("@supports", item.condition, item.items, out, indent)
    elif isinstance(item, Import):
        out.write(f"{pad}@import ")
        write_value(item.value, out)
        # The space is written even without a query: "@import x ;".
        out.write(" ")
        if item.query is not None:
            write_query(item.query, out, top_level=True)
        out.write(";\n")
    elif isinstance(item, Keyframes):
        out.write(f"{pad}@keyframes {item.name} {{\n")
        for rule in item.rules:
            _write_keyframe(rule, out, indent + INDENT_WIDTH)
        out.write(f"{pad}}}\n")
    elif isinstance(item, Comment):
        out.write(f"{pad}/* {item.text} */\n")
    else:  # pragma: no cover
        raise TypeError(f"not a stylesheet item: {item!r}")


def render_item(item: StyleItem, indent: int = 0) -> str:
    buf = io.StringIO()
    write_item(item, buf, indent)
    return buf.getvalue()


def render_stylesheet(items: Iterable[StyleItem]) -> str:
    """Render a whole stylesheet, items in order."""
    buf = io.StringIO()
    for item in items:
        write_item(item, buf)
    return buf.getvalue()
