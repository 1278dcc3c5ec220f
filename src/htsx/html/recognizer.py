"""Shape recognizer: generic nodes to markup IR.

Syntax example::

    (html
        (head (title "Hello"))
        ((body (class "main") hidden)
            (p "Some " (b "bold") " text")
            (!img (src "a.png") (alt "A"))))

``(name children...)`` is an element without attributes,
``((name attrs...) children...)`` an element with attributes and
``(!name attrs...)`` a void element.
"""

from __future__ import annotations

import logging
from typing import Iterable

from htsx.errors import MarkupError, MarkupErrorKind
from htsx.html.model import Attributes, Element, MarkupItem, Text, VoidElement
from htsx.model.node import ATOMS, Ident, Node, SList

__all__ = ["recognize_attributes", "recognize_item", "recognize_document"]

logger = logging.getLogger(__name__)

VOID_PREFIX = "!"


def recognize_attributes(nodes: Iterable[Node]) -> Attributes:
    """Recognize attributes in source order.

    An atom is a presence-only attribute; ``(name value)`` is a valued one.
    A repeated name overwrites the earlier value but keeps its position.
    """
    attributes: Attributes = {}
    for node in nodes:
        if isinstance(node, ATOMS):
            attributes[node.text] = None
        elif len(node) == 2 and isinstance(node.items[0], Ident) and isinstance(
            node.items[1], ATOMS
        ):
            attributes[node.items[0].text] = node.items[1].text
        else:
            logger.debug("invalid attribute shape at %s: %r", node.span, node.items)
            raise MarkupError(MarkupErrorKind.INVALID_ATTRIBUTE, node.span)
    return attributes


def _children(nodes: Iterable[Node]) -> tuple[MarkupItem, ...]:
    return tuple(recognize_item(node) for node in nodes)


def recognize_item(node: Node) -> MarkupItem:
    """Recognize one markup node.

    Raises :class:`MarkupError` on the first shape violation found anywhere
    in the subtree.
    """
    if isinstance(node, ATOMS):
        return Text(node.text)
    if not node.items:
        raise MarkupError(MarkupErrorKind.EMPTY_LIST, node.span)

    head, rest = node.items[0], node.items[1:]
    if isinstance(head, Ident) and head.text.startswith(VOID_PREFIX):
        return VoidElement(head.text[len(VOID_PREFIX):], recognize_attributes(rest))
    if isinstance(head, ATOMS):
        return Element(head.text, {}, _children(rest))

    tag: SList = head
    if not tag.items:
        raise MarkupError(MarkupErrorKind.EMPTY_LIST, tag.span)
    if not isinstance(tag.head, Ident):
        raise MarkupError(MarkupErrorKind.INVALID_TAG_NAME, tag.span)
    return Element(tag.head.text, recognize_attributes(tag.rest), _children(rest))


def recognize_document(nodes: Iterable[Node]) -> list[MarkupItem]:
    """Recognize every top-level node of a markup document, in order."""
    return [recognize_item(node) for node in nodes]
