"""Abstract base class for Slate value serializers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from slate_serializer.formatting.tree import Value


class ConversionError(Exception):
    """Input could not be parsed into a document tree."""

    pass


# Serializers accept either a built value or its wire mapping
ValueLike = Union[Value, Mapping[str, Any]]


class Serializer(ABC):
    """Abstract base class for format serializers.

    Each serializer converts its external format into a Slate value
    (deserialize) and a Slate value back into that format (serialize).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name (e.g., 'html')."""
        ...

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.html',))."""
        ...

    @abstractmethod
    def deserialize(self, source: Optional[str]) -> Value:
        """Convert external text into a Slate value.

        Args:
            source: Text in this serializer's format (None allowed)

        Returns:
            A freshly built Value
        """
        ...

    @abstractmethod
    def serialize(self, value: ValueLike) -> str:
        """Convert a Slate value into this serializer's format.

        Args:
            value: A Value or its wire mapping

        Returns:
            The rendered text, or "" when the value has no document
        """
        ...

    def read(self, path: Path) -> Value:
        """Read a file and deserialize its content."""
        return self.deserialize(path.read_text(encoding="utf-8"))

    def write(self, value: ValueLike, path: Path) -> None:
        """Serialize a value and write it to a file."""
        path.write_text(self.serialize(value), encoding="utf-8")


def coerce_value(value: ValueLike) -> Optional[Value]:
    """Normalize serializer input to a Value (None when there is no document)."""
    if isinstance(value, Value):
        return value
    return Value.from_dict(value)
