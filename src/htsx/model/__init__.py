"""htsx model layer -- generic tree re-exports."""

from htsx.model.node import (
    ATOMS,
    Atom,
    Ident,
    Location,
    Node,
    Number,
    QuotedString,
    SList,
    Span,
    is_keyword,
)

__all__ = [
    # locations
    "Location",
    "Span",
    # nodes
    "Ident",
    "Number",
    "QuotedString",
    "SList",
    "Node",
    "Atom",
    "ATOMS",
    "is_keyword",
]
