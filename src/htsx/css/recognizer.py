"""Shape recognizer: generic nodes to stylesheet IR.

Lists are classified by their leading keyword and arity, checked top to
bottom; the first clause that matches wins. At-rules whose arguments do not
fit their pattern fall through to ordinary rule recognition.

Syntax example::

    (@charset "UTF-8")
    ((seq nav .item) (color red) (margin (0 auto)))
    (@media ((min-width 600px) and screen)
        (.wide (display block)))
    (@keyframes pulse (from (opacity 0)) (50% (opacity 1)) (to (opacity 0)))
"""

from __future__ import annotations

from typing import Iterable

from htsx.css.model import (
    MEDIA_TYPES,
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
from htsx.errors import StyleError, StyleErrorKind, not_allowed
from htsx.model.node import ATOMS, Ident, Node, Number, QuotedString, SList, is_keyword

__all__ = [
    "recognize_item",
    "recognize_rule",
    "recognize_selector",
    "recognize_value",
    "recognize_query",
    "recognize_keyframe",
    "recognize_font_source",
    "recognize_stylesheet",
]


def _error(kind: StyleErrorKind, node: Node) -> StyleError:
    return StyleError(kind, node.span)


def _empty(node: Node) -> StyleError:
    return _error(StyleErrorKind.EMPTY_LIST, node)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


def recognize_value(node: Node) -> AttributeValue:
    """Recognize a property value.

    ``(!important v)`` wraps *v*, ``(fn name args...)`` is a function call and
    any other list is a space-separated value list.
    """
    if isinstance(node, (Ident, Number)):
        return PlainText(node.text)
    if isinstance(node, QuotedString):
        return QuotedText(node.text)

    items = node.items
    if not items:
        raise _empty(node)
    if len(items) == 2 and is_keyword(items[0], "!important"):
        return Important(recognize_value(items[1]))
    if len(items) >= 2 and is_keyword(items[0], "fn") and isinstance(items[1], Ident):
        return Function(items[1].text, tuple(recognize_value(arg) for arg in items[2:]))
    return ValueList(tuple(recognize_value(item) for item in items))


def _declarations(
    nodes: Iterable[Node], *, strict_atoms: bool = False
) -> tuple[Declaration, ...]:
    """Recognize ``(property value)`` pairs in source order.

    A stray atom is an InvalidAttribute, or gets its own ``*NotAllowed`` kind
    when *strict_atoms* is set.
    """
    declarations: list[Declaration] = []
    for node in nodes:
        if isinstance(node, SList):
            if len(node) == 2 and isinstance(node.items[0], Ident):
                declarations.append((node.items[0].text, recognize_value(node.items[1])))
                continue
        elif strict_atoms:
            raise not_allowed(node)
        raise _error(StyleErrorKind.INVALID_ATTRIBUTE, node)
    return tuple(declarations)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


def recognize_selector(node: Node) -> Selector:
    """Recognize a selector: ``tag``, ``.class``, ``#id``, ``(seq ...)`` or ``(list ...)``."""
    if isinstance(node, Ident):
        if node.text.startswith("#"):
            return IdName(node.text[1:])
        if node.text.startswith("."):
            return ClassName(node.text[1:])
        return TypeName(node.text)
    if isinstance(node, (Number, QuotedString)):
        raise not_allowed(node)

    if not node.items:
        raise _empty(node)
    if is_keyword(node.head, "seq"):
        parts: list[Selector] = []
        for item in node.rest:
            if isinstance(item, SList):
                raise _error(StyleErrorKind.LIST_NOT_ALLOWED, item)
            parts.append(recognize_selector(item))
        return Sequence(tuple(parts))
    if is_keyword(node.head, "list"):
        return SelectorList(tuple(recognize_selector(item) for item in node.rest))
    raise _error(StyleErrorKind.EXPECTED_SEQ_OR_LIST, node)


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


def recognize_query(node: Node) -> MediaQuery:
    """Recognize a media query (also used for ``@supports`` conditions)."""
    if isinstance(node, Ident):
        return MEDIA_TYPES.get(node.text) or BareFeature(node.text)
    if isinstance(node, (Number, QuotedString)):
        raise not_allowed(node)

    items = node.items
    if not items:
        raise _empty(node)
    if len(items) == 3 and is_keyword(items[1], "and"):
        return And(recognize_query(items[0]), recognize_query(items[2]))
    if len(items) == 2 and is_keyword(items[0], "not"):
        return Not(recognize_query(items[1]))
    if len(items) == 2 and isinstance(items[0], Ident):
        return FeatureTest(items[0].text, recognize_value(items[1]))
    return QueryList(tuple(recognize_query(item) for item in items))


# ---------------------------------------------------------------------------
# Keyframes and fonts
# ---------------------------------------------------------------------------


def recognize_keyframe(node: Node) -> KeyframeRule:
    """Recognize one ``(from ...)``, ``(to ...)`` or ``(N% ...)`` keyframe step."""
    if not isinstance(node, SList):
        raise not_allowed(node)
    if not node.items:
        raise _empty(node)

    head = node.head
    if is_keyword(head, "from"):
        return From(_declarations(node.rest, strict_atoms=True))
    if is_keyword(head, "to"):
        return To(_declarations(node.rest, strict_atoms=True))
    if isinstance(head, (Ident, Number)):
        if not head.text.endswith("%"):
            raise _error(StyleErrorKind.EXPECTED_PERCENT, node)
        return PercentStep(head.text, _declarations(node.rest, strict_atoms=True))
    raise _error(StyleErrorKind.INVALID_ATTRIBUTE, node)


def recognize_font_source(node: Node) -> FontSource:
    """Recognize ``(url "path" format)`` or ``(local "path" format)``."""
    if not isinstance(node, SList):
        raise not_allowed(node)

    items = node.items
    if not items:
        raise _empty(node)
    if len(items) == 3 and isinstance(items[1], QuotedString) and isinstance(items[2], Ident):
        if is_keyword(items[0], "url"):
            return RemoteUrl(items[1].text, items[2].text)
        if is_keyword(items[0], "local"):
            return LocalRef(items[1].text, items[2].text)
    raise _error(StyleErrorKind.EXPECTED_FONT_VALUE, node)


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


def recognize_rule(node: Node) -> Rule:
    """Recognize ``(selector (property value)...)``."""
    if not isinstance(node, SList):
        raise not_allowed(node)
    if not node.items:
        raise _empty(node)
    declarations = _declarations(node.rest)
    return Rule(recognize_selector(node.items[0]), declarations)


def _items(nodes: Iterable[Node]) -> tuple[StyleItem, ...]:
    return tuple(recognize_item(node) for node in nodes)


def recognize_item(node: Node) -> StyleItem:
    """Recognize one top-level stylesheet item.

    Atoms become comments. Raises :class:`StyleError` on the first shape
    violation found anywhere in the item.
    """
    if isinstance(node, ATOMS):
        return Comment(node.text)

    items = node.items
    if not items:
        raise _empty(node)

    head, args = items[0], items[1:]
    if is_keyword(head, "@media") and args:
        return MediaBlock(recognize_query(args[0]), _items(args[1:]))
    if is_keyword(head, "@supports") and args:
        return SupportsBlock(recognize_query(args[0]), _items(args[1:]))
    if is_keyword(head, "@charset") and len(args) == 1 and isinstance(args[0], ATOMS):
        return Charset(args[0].text)
    if is_keyword(head, "@import") and len(args) in (1, 2):
        value = recognize_value(args[0])
        query = recognize_query(args[1]) if len(args) == 2 else None
        return Import(value, query)
    if is_keyword(head, "@keyframes") and args and isinstance(args[0], Ident):
        return Keyframes(args[0].text, tuple(recognize_keyframe(rule) for rule in args[1:]))
    if is_keyword(head, "@font-face") and args and isinstance(args[0], (Ident, QuotedString)):
        return FontFace(
            args[0].text, tuple(recognize_font_source(source) for source in args[1:])
        )
    return recognize_rule(node)


def recognize_stylesheet(nodes: Iterable[Node]) -> list[StyleItem]:
    """Recognize every top-level node of a stylesheet document, in order."""
    return [recognize_item(node) for node in nodes]
