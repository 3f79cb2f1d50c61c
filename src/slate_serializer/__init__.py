"""Slate Serializer - convert HTML and plain text to and from Slate values."""

__version__ = "0.1.0"
