"""Canonical document tree shared by all serializers.

This module defines the node types that make up a Slate value. Every
serializer produces and consumes these nodes, and ``to_dict`` /
``from_dict`` translate them to and from the nested mapping shape the
editor exchanges on the wire.
"""

from collections import abc
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


# =============================================================================
# Wire discriminants
# =============================================================================

DOCUMENT = "document"
BLOCK = "block"
INLINE = "inline"
TEXT = "text"

PARAGRAPH_TYPE = "paragraph"
IMAGE_TYPE = "image"


@dataclass
class Text:
    """A leaf run of text.

    Attributes:
        text: The text content (may be empty)
        marks: Mark name -> flag (e.g. {"bold": True})
    """

    text: str = ""
    marks: dict[str, bool] = field(default_factory=dict)

    @property
    def object(self) -> str:
        return TEXT

    @property
    def plain_text(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.marks)
        result["object"] = TEXT
        result["text"] = self.text
        return result


@dataclass
class Inline:
    """An inline element such as a link.

    Inline children are always Text nodes.

    Attributes:
        type: Semantic type (e.g. "link")
        data: Element attributes, in source order
        children: Text children
    """

    type: str
    data: dict[str, str] = field(default_factory=dict)
    children: list[Text] = field(default_factory=list)

    @property
    def object(self) -> str:
        return INLINE

    @property
    def plain_text(self) -> str:
        return "".join(child.text for child in self.children)

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": dict(self.data),
            "object": INLINE,
            "children": [child.to_dict() for child in self.children],
            "type": self.type,
        }


@dataclass
class Block:
    """A structural element (paragraph, list, table cell, figure, ...).

    Attributes:
        type: Semantic type (e.g. "paragraph", "ordered-list")
        data: Element attributes, in source order
        children: Nested blocks, inlines and text leaves
    """

    type: str = PARAGRAPH_TYPE
    data: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    @property
    def object(self) -> str:
        return BLOCK

    @property
    def plain_text(self) -> str:
        """Get the text content of all descendants without markup."""
        return "".join(child.plain_text for child in self.children)

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": dict(self.data),
            "object": BLOCK,
            "children": [child.to_dict() for child in self.children],
            "type": self.type,
        }


Node = Union[Block, Inline, Text]


@dataclass
class Document:
    """Root of the tree: an ordered list of top-level blocks."""

    children: list[Node] = field(default_factory=list)

    @property
    def object(self) -> str:
        return DOCUMENT

    def to_dict(self) -> dict[str, Any]:
        return {
            "object": DOCUMENT,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class Value:
    """A complete editor value wrapping one document."""

    document: Document = field(default_factory=Document)

    def to_dict(self) -> dict[str, Any]:
        return {"document": self.document.to_dict()}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Optional["Value"]:
        """Build a value from its wire mapping.

        Returns None when the mapping has no ``document`` key.

        Raises:
            ValueError: If the document or one of its nodes is malformed
        """
        _expect(raw, abc.Mapping, "value")
        if "document" not in raw:
            return None
        document = raw["document"] or {}
        _expect(document, abc.Mapping, "document")
        children = [node_from_dict(child) for child in _children_of(document)]
        return cls(document=Document(children=children))


def empty_value() -> Value:
    """Return the empty state: one paragraph holding one empty text."""
    return Value(
        document=Document(children=[Block(type=PARAGRAPH_TYPE, children=[Text("")])])
    )


def node_from_dict(raw: Mapping[str, Any]) -> Node:
    """Build a node from its wire mapping.

    Mappings without an ``object`` key are read as text when they carry a
    ``text`` key and as blocks otherwise.

    Raises:
        ValueError: If the node or any of its fields has the wrong shape
    """
    _expect(raw, abc.Mapping, "node")
    kind = raw.get("object")
    if kind is None:
        kind = TEXT if "text" in raw else BLOCK

    if kind == TEXT:
        return _text_from_dict(raw)

    data = raw.get("data") or {}
    _expect(data, abc.Mapping, "node data")
    node_type = raw.get("type") or PARAGRAPH_TYPE
    _expect(node_type, str, "node type")

    if kind == INLINE:
        return Inline(
            type=node_type,
            data={str(k): str(v) for k, v in data.items()},
            children=[_text_from_dict(child) for child in _children_of(raw)],
        )
    return Block(
        type=node_type,
        data={str(k): str(v) for k, v in data.items()},
        children=[node_from_dict(child) for child in _children_of(raw)],
    )


def _text_from_dict(raw: Mapping[str, Any]) -> Text:
    _expect(raw, abc.Mapping, "text node")
    text = raw.get("text") or ""
    _expect(text, str, "text")
    return Text(text=text, marks=_marks_of(raw))


def _children_of(raw: Mapping[str, Any]) -> list[Any]:
    children = raw.get("children") or []
    _expect(children, list, "children")
    return children


def _expect(item: Any, kind: type, what: str) -> None:
    if not isinstance(item, kind):
        raise ValueError(
            f"Malformed Slate value: {what} must be a {kind.__name__}, "
            f"got {type(item).__name__}"
        )


def _marks_of(raw: Mapping[str, Any]) -> dict[str, bool]:
    return {
        key: value
        for key, value in raw.items()
        if key not in ("object", "text") and isinstance(value, bool)
    }
