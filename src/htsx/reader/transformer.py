"""Lark Transformer that converts s-expression source into generic nodes."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from htsx.model.node import Ident, Location, Node, Number, QuotedString, SList, Span
from htsx.reader.errors import ReadError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Nesting limit applied before any recognizer recurses into the tree.
DEFAULT_MAX_DEPTH = 256

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def _start_of(token: Token) -> Location:
    return Location(token.line, token.column, token.start_pos)


def _end_of(token: Token) -> Location:
    return Location(token.end_line, token.end_column, token.end_pos)


def _span(first: Token, last: Token) -> Span:
    return Span(_start_of(first), _end_of(last))


def _unescape(raw: str) -> str:
    """Strip surrounding quotes and resolve backslash escapes."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), raw[1:-1])


class SexprTransformer(Transformer):  # type: ignore[type-arg]
    """Build located generic nodes while the LALR parser reduces rules."""

    # ---- atoms ----

    def string(self, items: list[Token]) -> QuotedString:
        token = items[0]
        return QuotedString(_unescape(str(token)), _span(token, token))

    def number(self, items: list[Token]) -> Number:
        token = items[0]
        return Number(str(token), _span(token, token))

    def ident(self, items: list[Token]) -> Ident:
        token = items[0]
        return Ident(str(token), _span(token, token))

    # ---- structural ----

    def slist(self, items: list[object]) -> SList:
        open_paren, *children, close_paren = items
        return SList(tuple(children), _span(open_paren, close_paren))  # type: ignore[arg-type]

    def start(self, items: list[Node]) -> list[Node]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        transformer=SexprTransformer(),
    )


def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedCharacters):
        if exc.char == '"':
            return "unterminated string literal"
        return f"unexpected character {exc.char!r}"
    if isinstance(exc, UnexpectedEOF):
        return "unexpected end of input (unclosed list?)"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "unexpected end of input (unclosed list?)"
        if exc.token.type == "RPAR":
            return "unexpected ')' without a matching '('"
        return f"unexpected token {str(exc.token)!r}"
    return str(exc)  # pragma: no cover


def _position(exc: UnexpectedInput) -> tuple[int | None, int | None]:
    line = getattr(exc, "line", None)
    column = getattr(exc, "column", None)
    if not isinstance(line, int) or line < 1:
        return None, None
    if not isinstance(column, int) or column < 1:
        column = None
    return line, column


def check_depth(nodes: list[Node], max_depth: int) -> None:
    """Raise :class:`ReadError` if any list nests deeper than *max_depth*.

    The walk is iterative, so it is safe on arbitrarily deep trees.
    """
    stack: list[tuple[Node, int]] = [(node, 1) for node in reversed(nodes)]
    while stack:
        node, depth = stack.pop()
        if not isinstance(node, SList):
            continue
        if depth > max_depth:
            raise ReadError(
                f"lists nested deeper than {max_depth} levels",
                line=node.start.line,
                column=node.start.column,
            )
        stack.extend((child, depth + 1) for child in reversed(node.items))


def read_source(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Node]:
    """Read s-expression *source* into its top-level generic nodes."""
    try:
        nodes: list[Node] = _parser().parse(source)  # type: ignore[assignment]
    except UnexpectedInput as e:
        line, column = _position(e)
        raise ReadError(_describe(e), line=line, column=column) from e
    check_depth(nodes, max_depth)
    return nodes
