"""Located conversion errors shared by the stylesheet and markup pipelines."""

from __future__ import annotations

from enum import Enum

from htsx.model.node import Ident, Location, Node, Number, QuotedString, Span


class ErrorKind(Enum):
    """Base for the per-pipeline error taxonomies.

    Member values are ``(name, description)`` pairs.
    """

    def __str__(self) -> str:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]


class StyleErrorKind(ErrorKind):
    LIST_NOT_ALLOWED = ("ListNotAllowed", "a list is not allowed here")
    STRING_NOT_ALLOWED = ("StringNotAllowed", "a string is not allowed here")
    IDENT_NOT_ALLOWED = ("IdentNotAllowed", "an identifier is not allowed here")
    NUMBER_NOT_ALLOWED = ("NumberNotAllowed", "a number is not allowed here")
    EXPECTED_SEQ_OR_LIST = (
        "ExpectedSeqOrList",
        "expected a selector list headed by 'seq' or 'list'",
    )
    EXPECTED_PERCENT = ("ExpectedPercent", "expected 'from', 'to' or a percentage")
    EXPECTED_FONT_VALUE = (
        "ExpectedFontValue",
        "expected (url \"path\" format) or (local \"path\" format)",
    )
    INVALID_ATTRIBUTE = ("InvalidAttribute", "expected a (property value) pair")
    EMPTY_LIST = ("EmptyList", "an empty list is not allowed here")


class MarkupErrorKind(ErrorKind):
    INVALID_ATTRIBUTE = (
        "InvalidAttribute",
        "expected an attribute name or a (name value) pair",
    )
    INVALID_TAG_NAME = ("InvalidTagName", "expected a tag name at the head of the list")
    EMPTY_LIST = ("EmptyList", "an empty list is not allowed here")


class ConversionError(Exception):
    """Raised when a generic node does not have the shape a pipeline expects.

    Attributes:
        kind: The taxonomy member naming the violation.
        span: Source span of the offending node.
    """

    def __init__(self, kind: ErrorKind, span: Span) -> None:
        self.kind = kind
        self.span = span
        super().__init__(f"{span}: {kind}: {kind.description}")

    @property
    def start(self) -> Location:
        return self.span.start

    @property
    def end(self) -> Location:
        return self.span.end


class StyleError(ConversionError):
    """A stylesheet shape error."""

    kind: StyleErrorKind


class MarkupError(ConversionError):
    """A markup shape error."""

    kind: MarkupErrorKind


def not_allowed(node: Node) -> StyleError:
    """Build the ``*NotAllowed`` error matching the kind of *node*."""
    if isinstance(node, Ident):
        kind = StyleErrorKind.IDENT_NOT_ALLOWED
    elif isinstance(node, Number):
        kind = StyleErrorKind.NUMBER_NOT_ALLOWED
    elif isinstance(node, QuotedString):
        kind = StyleErrorKind.STRING_NOT_ALLOWED
    else:
        kind = StyleErrorKind.LIST_NOT_ALLOWED
    return StyleError(kind, node.span)
