"""Generic tree model: located atoms and lists produced by the reader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Location:
    """A position in the source text.

    ``line`` and ``column`` are 1-based, ``offset`` is 0-based.
    """

    line: int
    column: int
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Span:
    """The start and end location of a node."""

    start: Location
    end: Location

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class _Located:
    """Mixin giving every node ``start`` and ``end`` shortcuts."""

    span: Span

    @property
    def start(self) -> Location:
        return self.span.start

    @property
    def end(self) -> Location:
        return self.span.end


@dataclass(frozen=True)
class Ident(_Located):
    """A bare identifier atom such as ``div`` or ``@media``."""

    text: str
    span: Span


@dataclass(frozen=True)
class Number(_Located):
    """An atom starting with a digit, e.g. ``12``, ``800px`` or ``50%``."""

    text: str
    span: Span


@dataclass(frozen=True)
class QuotedString(_Located):
    """A string literal with escapes already resolved."""

    text: str
    span: Span


@dataclass(frozen=True)
class SList(_Located):
    """A parenthesized list of child nodes."""

    items: tuple[Node, ...]
    span: Span

    def __len__(self) -> int:
        return len(self.items)

    @property
    def head(self) -> Node | None:
        return self.items[0] if self.items else None

    @property
    def rest(self) -> tuple[Node, ...]:
        return self.items[1:]


Node = Union[Ident, Number, QuotedString, SList]
Atom = Union[Ident, Number, QuotedString]

ATOMS = (Ident, Number, QuotedString)


def is_keyword(node: Node | None, *words: str) -> bool:
    """Return True if *node* is an identifier spelled as one of *words*."""
    return isinstance(node, Ident) and node.text in words
