"""Lookup tables that drive the HTML serializer.

The tables map HTML tags to semantic node types and marks. They are
immutable once built and are passed explicitly into every conversion,
so one instance can be shared across threads.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


# Tag (optionally followed by its `type` attribute) -> semantic type.
# Declaration order matters: when several tags share a type, the first
# one listed is used when serializing back to HTML.
ELEMENTS: dict[str, str] = {
    "a": "link",
    "img": "image",
    "li": "list-item",
    "p": "paragraph",
    "div": "paragraph",
    "ol1": "ordered-list",
    "ola": "alpha-ordered-list",
    "ol": "ordered-list",
    "ul": "unordered-list",
    "table": "table",
    "tbody": "tbody",
    "tr": "tr",
    "td": "td",
    "text": "text",
    "hr": "hr",
    "figure": "figure",
    "figcaption": "figcaption",
}

BLOCK_ELEMENTS: tuple[str, ...] = (
    "figure", "figcaption", "hr", "img", "li", "p", "ol", "ul",
    "table", "tbody", "tr", "td",
)

INLINE_ELEMENTS: tuple[str, ...] = ("a",)

MARK_ELEMENTS: dict[str, str] = {
    "em": "italic",
    "strong": "bold",
    "u": "underline",
}

# Keys rendered as their base tag plus a type attribute ("ola" -> <ol type="a">)
VARIANT_ELEMENTS: tuple[str, ...] = ("ol1", "ola")

# Required entry used whenever a tag has no mapping
FALLBACK_TAG = "p"


@dataclass(frozen=True)
class LookupTables:
    """The four lookup tables plus a precomputed reverse mapping.

    Attributes:
        elements: Tag key -> semantic type, in declaration order
        block_elements: Tags converted into nested blocks
        inline_elements: Tags converted into inline nodes
        mark_elements: Tag -> mark name
        variant_elements: Tag keys made of a base tag plus a one-character
            type discriminator
        tags_by_type: Semantic type -> tag key (first declared wins)
    """

    elements: Mapping[str, str]
    block_elements: frozenset[str]
    inline_elements: frozenset[str]
    mark_elements: Mapping[str, str]
    variant_elements: frozenset[str] = frozenset(VARIANT_ELEMENTS)
    tags_by_type: Mapping[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if FALLBACK_TAG not in self.elements:
            raise ValueError(
                f"Lookup table 'elements' must contain a '{FALLBACK_TAG}' entry"
            )
        reverse: dict[str, str] = {}
        for tag, node_type in self.elements.items():
            reverse.setdefault(node_type, tag)
        object.__setattr__(self, "tags_by_type", MappingProxyType(reverse))

    @classmethod
    def create(
        cls,
        elements: Optional[Mapping[str, str]] = None,
        block_elements: Optional[Iterable[str]] = None,
        inline_elements: Optional[Iterable[str]] = None,
        mark_elements: Optional[Mapping[str, str]] = None,
        variant_elements: Optional[Iterable[str]] = None,
    ) -> "LookupTables":
        """Build tables, using the defaults for any table not given."""
        return cls(
            elements=MappingProxyType(dict(ELEMENTS if elements is None else elements)),
            block_elements=frozenset(
                BLOCK_ELEMENTS if block_elements is None else block_elements
            ),
            inline_elements=frozenset(
                INLINE_ELEMENTS if inline_elements is None else inline_elements
            ),
            mark_elements=MappingProxyType(
                dict(MARK_ELEMENTS if mark_elements is None else mark_elements)
            ),
            variant_elements=frozenset(
                VARIANT_ELEMENTS if variant_elements is None else variant_elements
            ),
        )

    def type_for(self, tag: str, type_attr: Optional[str] = None) -> str:
        """Resolve the semantic type of a tag, falling back to the paragraph entry."""
        key = tag + (type_attr or "")
        if key in self.elements:
            return self.elements[key]
        return self.elements[FALLBACK_TAG]

    def tag_for(self, node_type: str) -> str:
        """Resolve the tag key for a semantic type (first declared wins)."""
        return self.tags_by_type.get(node_type, FALLBACK_TAG)

    def mark_for(self, tag: Optional[str]) -> Optional[str]:
        if tag is None:
            return None
        return self.mark_elements.get(tag)

    def is_block(self, tag: Optional[str]) -> bool:
        return tag in self.block_elements

    def is_inline(self, tag: Optional[str]) -> bool:
        return tag in self.inline_elements

    def split_variant(self, tag_key: str) -> tuple[str, Optional[str]]:
        """Split a discriminated tag key into (base tag, discriminator).

        A key such as "ola" is the base tag "ol" plus the value of its
        `type` attribute. Only keys listed in `variant_elements` are split;
        any other key is returned unchanged with no discriminator.
        """
        if len(tag_key) > 1 and tag_key in self.variant_elements:
            return tag_key[:-1], tag_key[-1]
        return tag_key, None


DEFAULT_TABLES = LookupTables.create()
