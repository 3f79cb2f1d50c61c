"""Plain text serializer for Slate values."""

import logging
import re
from typing import Optional

from slate_serializer.formats.base import Serializer, ValueLike, coerce_value
from slate_serializer.formatting.tree import (
    PARAGRAPH_TYPE,
    Block,
    Document,
    Text,
    Value,
    empty_value,
)

logger = logging.getLogger(__name__)


class PlainSerializer(Serializer):
    """Convert plain text to Slate values and back.

    Paragraphs are separated by one or more blank lines. Lines inside a
    paragraph keep their newlines; leading and trailing whitespace on each
    line is dropped.
    """

    BLANK_LINE_PATTERN = re.compile(r"\n\s*\n")

    @property
    def name(self) -> str:
        return "plain"

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt",)

    def deserialize(self, source: Optional[str]) -> Value:
        """Convert plain text into a Slate value with one paragraph per group."""
        if not source or not source.strip():
            return empty_value()

        paragraphs = self.BLANK_LINE_PATTERN.split(source.strip())

        blocks: list[Block] = []
        for para in paragraphs:
            lines = [line.strip() for line in para.split("\n")]
            text = "\n".join(line for line in lines if line)
            if not text:
                continue
            blocks.append(Block(type=PARAGRAPH_TYPE, children=[Text(text)]))

        logger.debug("Deserialized %d paragraph(s) from plain text", len(blocks))
        return Value(document=Document(children=blocks))

    def serialize(self, value: ValueLike) -> str:
        """Join the first text of every top-level block with newlines."""
        resolved = coerce_value(value)
        if resolved is None:
            return ""
        return "\n".join(_first_text(node) for node in resolved.document.children)


def _first_text(node) -> str:
    if isinstance(node, Text):
        return node.text
    if not node.children:
        return ""
    first = node.children[0]
    # Only a text leaf contributes; nested blocks and inlines are not walked
    return first.text if isinstance(first, Text) else ""
