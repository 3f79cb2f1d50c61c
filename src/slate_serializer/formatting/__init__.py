"""Canonical document tree and the lookup tables that map HTML onto it."""

from slate_serializer.formatting.tree import (
    Value,
    Document,
    Block,
    Inline,
    Text,
    Node,
    empty_value,
    node_from_dict,
)
from slate_serializer.formatting.tables import (
    LookupTables,
    DEFAULT_TABLES,
    ELEMENTS,
    BLOCK_ELEMENTS,
    INLINE_ELEMENTS,
    MARK_ELEMENTS,
    VARIANT_ELEMENTS,
)

__all__ = [
    "Value",
    "Document",
    "Block",
    "Inline",
    "Text",
    "Node",
    "empty_value",
    "node_from_dict",
    "LookupTables",
    "DEFAULT_TABLES",
    "ELEMENTS",
    "BLOCK_ELEMENTS",
    "INLINE_ELEMENTS",
    "MARK_ELEMENTS",
    "VARIANT_ELEMENTS",
]
