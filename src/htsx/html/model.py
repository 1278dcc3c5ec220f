"""Markup IR: elements, void elements and text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# Attribute name -> value; ``None`` means the attribute is present without a
# value (``disabled``). Insertion order is render order.
Attributes = dict[str, Union[str, None]]


@dataclass(frozen=True)
class Element:
    """A tag with a closing tag, e.g. ``<p class="x">...</p>``."""

    name: str
    attributes: Attributes = field(default_factory=dict)
    children: tuple[MarkupItem, ...] = ()


@dataclass(frozen=True)
class VoidElement:
    """A tag without children or closing tag, e.g. ``<img src="a.png">``."""

    name: str
    attributes: Attributes = field(default_factory=dict)


@dataclass(frozen=True)
class Text:
    """Raw text content, passed through unescaped."""

    content: str


MarkupItem = Union[Element, VoidElement, Text]
