"""Format serializers for Slate Serializer."""

from pathlib import Path
from typing import Optional

from slate_serializer.formats.base import ConversionError, Serializer
from slate_serializer.formats.html_serializer import HTMLSerializer
from slate_serializer.formats.plain_serializer import PlainSerializer

__all__ = [
    "ConversionError",
    "Serializer",
    "HTMLSerializer",
    "PlainSerializer",
]

# Map format names to serializers
SERIALIZER_MAP: dict[str, type[Serializer]] = {
    "html": HTMLSerializer,
    "plain": PlainSerializer,
}

SUPPORTED_FORMATS = tuple(SERIALIZER_MAP.keys())

# Map file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".html": "html",
    ".htm": "html",
    ".txt": "plain",
}


def get_serializer(name: str) -> type[Serializer]:
    """Get the serializer class for a format name."""
    key = name.lower()
    if key not in SERIALIZER_MAP:
        raise ValueError(
            f"Unsupported format: {key}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return SERIALIZER_MAP[key]


def format_for_path(path: Path) -> Optional[str]:
    """Guess the format name from a file extension (None if unknown)."""
    return EXTENSION_MAP.get(path.suffix.lower())
