"""Stylesheet IR: values, selectors, media queries and top-level items.

Every class is a frozen dataclass and every sequence a tuple, so a built tree
renders the same way no matter how often it is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ---------------------------------------------------------------------------
# Attribute values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlainText:
    """A keyword or number rendered verbatim, e.g. ``red`` or ``12px``."""

    text: str


@dataclass(frozen=True)
class QuotedText:
    """A string value rendered inside double quotes."""

    text: str


@dataclass(frozen=True)
class ValueList:
    """Space-separated values, e.g. ``1px solid black``."""

    items: tuple[AttributeValue, ...]


@dataclass(frozen=True)
class Function:
    """A functional value such as ``rgb(0, 0, 0)``."""

    name: str
    args: tuple[AttributeValue, ...]


@dataclass(frozen=True)
class Important:
    """A value followed by ``!important``."""

    value: AttributeValue


AttributeValue = Union[PlainText, QuotedText, ValueList, Function, Important]

Declaration = tuple[str, AttributeValue]

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Sequence:
    """Compound selector joined by spaces, e.g. ``div .note``."""

    items: tuple[Selector, ...]


@dataclass(frozen=True)
class SelectorList:
    """Selector group joined by commas, e.g. ``h1, h2``."""

    items: tuple[Selector, ...]


@dataclass(frozen=True)
class ClassName:
    name: str


@dataclass(frozen=True)
class IdName:
    name: str


@dataclass(frozen=True)
class TypeName:
    name: str


Selector = Union[Sequence, SelectorList, ClassName, IdName, TypeName]

# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class QueryList:
    """Comma-separated queries; any one matching is enough."""

    items: tuple[MediaQuery, ...]


@dataclass(frozen=True)
class And:
    left: MediaQuery
    right: MediaQuery


@dataclass(frozen=True)
class Not:
    query: MediaQuery


@dataclass(frozen=True)
class FeatureTest:
    """A ``(name: value)`` media feature test."""

    name: str
    value: AttributeValue


@dataclass(frozen=True)
class BareFeature:
    """A media feature or type given by name alone, e.g. ``print``."""

    name: str


@dataclass(frozen=True)
class MediaType:
    """One of the built-in media types ``screen``, ``page`` or ``all``."""

    name: str


SCREEN = MediaType("screen")
PAGE = MediaType("page")
ALL = MediaType("all")

MEDIA_TYPES = {t.name: t for t in (SCREEN, PAGE, ALL)}

MediaQuery = Union[QueryList, And, Not, FeatureTest, BareFeature, MediaType]

# ---------------------------------------------------------------------------
# Keyframes and fonts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PercentStep:
    percent: str
    declarations: tuple[Declaration, ...]


@dataclass(frozen=True)
class From:
    declarations: tuple[Declaration, ...]


@dataclass(frozen=True)
class To:
    declarations: tuple[Declaration, ...]


KeyframeRule = Union[PercentStep, From, To]


@dataclass(frozen=True)
class RemoteUrl:
    path: str
    format: str


@dataclass(frozen=True)
class LocalRef:
    path: str
    format: str


FontSource = Union[RemoteUrl, LocalRef]

# ---------------------------------------------------------------------------
# Top-level items
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule:
    """A selector with its declarations in source order.

    Repeated property names are kept, in order.
    """

    selector: Selector
    declarations: tuple[Declaration, ...]


@dataclass(frozen=True)
class Charset:
    encoding: str


@dataclass(frozen=True)
class FontFace:
    family: str
    sources: tuple[FontSource, ...]


@dataclass(frozen=True)
class MediaBlock:
    query: MediaQuery
    items: tuple[StyleItem, ...]


@dataclass(frozen=True)
class Import:
    value: AttributeValue
    query: MediaQuery | None = None


@dataclass(frozen=True)
class Keyframes:
    name: str
    rules: tuple[KeyframeRule, ...]


@dataclass(frozen=True)
class SupportsBlock:
    condition: MediaQuery
    items: tuple[StyleItem, ...]


@dataclass(frozen=True)
class Comment:
    text: str


StyleItem = Union[
    Rule, Charset, FontFace, MediaBlock, Import, Keyframes, SupportsBlock, Comment
]
