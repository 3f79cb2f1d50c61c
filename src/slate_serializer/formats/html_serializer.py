"""HTML serializer for Slate values."""

import logging
import re
from typing import Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, Tag
from bs4.element import PreformattedString

from slate_serializer.config import get_settings
from slate_serializer.formats.base import (
    ConversionError,
    Serializer,
    ValueLike,
    coerce_value,
)
from slate_serializer.formatting.tables import DEFAULT_TABLES, LookupTables
from slate_serializer.formatting.tree import (
    IMAGE_TYPE,
    Block,
    Document,
    Inline,
    Node,
    Text,
    Value,
    empty_value,
)

logger = logging.getLogger(__name__)

# Element or text node from the parsed tree
SourceNode = Union[Tag, NavigableString]


class HTMLSerializer(Serializer):
    """Convert HTML fragments to Slate values and back.

    Deserialization walks the parsed element tree and classifies every
    child with the lookup tables: block tags become nested blocks, inline
    tags become inline nodes, and anything else is flattened into text
    leaves carrying marks. Serialization renders blocks and inlines as
    tags and text leaves verbatim.

    Known lossy cases:
    - Marks are not written back as tags, so bold/italic/underline are
      dropped on the way out.
    - Only the mark of the directly enclosing tag and the leaf's own tag
      survive; marks of tags further up the chain are lost.
    """

    # Line breaks become newlines inside the surrounding text
    LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)

    # ASCII whitespace and NUL only; non-breaking spaces count as content
    BLANK_CHARS = " \t\n\v\f\r\x00"

    def __init__(
        self,
        tables: Optional[LookupTables] = None,
        parser: Optional[str] = None,
    ) -> None:
        """Initialize the serializer.

        Args:
            tables: Lookup tables (defaults when omitted)
            parser: BeautifulSoup tree builder name (defaults to settings)
        """
        settings = get_settings()
        self.tables = tables or DEFAULT_TABLES
        self.parser = parser or settings.html_parser

    @property
    def name(self) -> str:
        return "html"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".html", ".htm")

    # -------------------------------------------------------------------------
    # HTML -> Slate
    # -------------------------------------------------------------------------

    def deserialize(self, source: Optional[str]) -> Value:
        """Convert an HTML fragment into a Slate value.

        Args:
            source: HTML markup (None or blank gives the empty state)

        Returns:
            Value whose document holds one block per top-level element

        Raises:
            ConversionError: If the markup cannot be parsed at all
        """
        if not source or not source.strip():
            return empty_value()

        markup = self.LINE_BREAK_PATTERN.sub("\n", source)
        soup = self._parse(markup)
        # Builders like lxml wrap fragments in <html><body>
        root = soup.body or soup

        children: list[Node] = [
            self.element_to_node(element)
            for element in root.find_all(recursive=False)
        ]
        logger.debug("Deserialized %d top-level block(s) from HTML", len(children))
        return Value(document=Document(children=children))

    def _parse(self, markup: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(markup, self.parser, multi_valued_attributes=None)
        except FeatureNotFound as e:
            raise ConversionError(f"HTML parser not available: {self.parser}") from e
        except Exception as e:
            raise ConversionError(f"Failed to parse HTML: {e}") from e

    def element_to_node(self, element: Tag) -> Block:
        """Convert an element into a block, recursing into nested blocks."""
        node_type = self._element_type(element)

        children: list[Node] = []
        for child in _content_children(element):
            child_name = _tag_name(child)
            if self.tables.is_block(child_name):
                children.append(self.element_to_node(child))
            elif self.tables.is_inline(child_name):
                children.append(self.element_to_inline(child))
            else:
                if not _text_of(child).strip(self.BLANK_CHARS):
                    continue
                children.extend(self.element_to_texts(child))

        if not children and node_type != IMAGE_TYPE:
            children.append(Text(""))

        return Block(type=node_type, data=_attributes(element), children=children)

    def element_to_inline(self, element: Tag) -> Inline:
        """Convert an element into an inline node holding only text leaves."""
        children: list[Text] = []
        for child in _content_children(element):
            children.extend(self.element_to_texts(child))

        return Inline(
            type=self._element_type(element),
            data=_attributes(element),
            children=children,
        )

    def element_to_texts(self, element: SourceNode) -> list[Text]:
        """Convert a node into text leaves.

        A tag yields one leaf per child, each inheriting the tag's mark.
        A bare text node yields a single unmarked leaf.
        """
        if isinstance(element, Tag):
            mark = self.tables.mark_for(element.name)
            return [
                self.element_to_text(child, mark)
                for child in _content_children(element)
            ]
        return [self.element_to_text(element)]

    def element_to_text(
        self,
        element: SourceNode,
        inherited_mark: Optional[str] = None,
    ) -> Text:
        """Convert a node into a single text leaf.

        The leaf carries the inherited mark plus the mark of the node's
        own tag. The text is the node's full text content.
        """
        marks: dict[str, bool] = {}
        for mark in (inherited_mark, self.tables.mark_for(_tag_name(element))):
            if mark:
                marks[mark] = True
        return Text(text=_text_of(element), marks=marks)

    def _element_type(self, element: Tag) -> str:
        type_attr = element.get("type")
        node_type = self.tables.type_for(element.name, type_attr)
        if element.name + (type_attr or "") not in self.tables.elements:
            logger.debug("No type for <%s>, using %r", element.name, node_type)
        return node_type

    # -------------------------------------------------------------------------
    # Slate -> HTML
    # -------------------------------------------------------------------------

    def serialize(self, value: ValueLike) -> str:
        """Convert a Slate value into HTML markup.

        Args:
            value: A Value or its wire mapping

        Returns:
            HTML markup, or "" when the value has no document
        """
        resolved = coerce_value(value)
        if resolved is None:
            return ""
        return self.serialize_node(resolved.document)

    def serialize_node(self, node: Union[Document, Node]) -> str:
        """Render a node and its descendants as HTML."""
        if isinstance(node, Document):
            return "".join(self.serialize_node(child) for child in node.children)

        if isinstance(node, (Block, Inline)):
            children = "".join(self.serialize_node(child) for child in node.children)
            return self._render_element(node, children)

        # Marks are not written back
        return node.text

    def _render_element(self, node: Union[Block, Inline], children: str) -> str:
        tag_key = self.tables.tag_for(node.type)
        if node.type not in self.tables.tags_by_type:
            logger.debug("No tag for type %r, using <%s>", node.type, tag_key)

        attrs = [f'{key}="{value}"' for key, value in node.data.items()]

        # "ola" -> <ol type="a">
        tag, discriminator = self.tables.split_variant(tag_key)
        if discriminator is not None and "type" not in node.data:
            attrs.append(f'type="{discriminator}"')

        attr_text = f" {' '.join(attrs)}" if attrs else ""
        return f"<{tag}{attr_text}>{children}</{tag}>"


def _content_children(element: Tag) -> list[SourceNode]:
    """Children of an element, without comments, doctypes and the like."""
    return [
        child for child in element.children
        if not isinstance(child, PreformattedString)
    ]


def _tag_name(node: SourceNode) -> Optional[str]:
    return node.name if isinstance(node, Tag) else None


def _text_of(node: SourceNode) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def _attributes(element: Tag) -> dict[str, str]:
    return {str(name): str(value) for name, value in element.attrs.items()}
