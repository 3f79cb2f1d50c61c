"""Pytest fixtures for Slate Serializer tests."""

import pytest
from pathlib import Path

from slate_serializer import config


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop the cached settings so environment changes take effect per test."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def numbered_text() -> str:
    """Four numbered two-line paragraphs separated by blank lines."""
    return """
      1. Number one
      Some text on the next line

      2. Number two
      Some text on the next line

      3. Number three
      Some text on the next line

      4. Number four
      Some text on the next line
    """


@pytest.fixture
def empty_state() -> dict:
    """Wire shape of the empty document."""
    return {
        "document": {
            "object": "document",
            "children": [
                {
                    "data": {},
                    "object": "block",
                    "type": "paragraph",
                    "children": [
                        {
                            "object": "text",
                            "text": "",
                        }
                    ],
                }
            ],
        }
    }


@pytest.fixture
def two_paragraph_value() -> dict:
    """Slate value with two paragraphs, as an editor would send it."""
    return {
        "document": {
            "object": "document",
            "children": [
                {
                    "object": "block",
                    "type": "paragraph",
                    "children": [{"text": "Some text and lalala"}],
                },
                {
                    "object": "block",
                    "type": "paragraph",
                    "children": [{"text": "Next line"}],
                },
            ],
        }
    }


@pytest.fixture
def tmp_html_file(tmp_path: Path) -> Path:
    """Create a temporary HTML file for testing."""
    file_path = tmp_path / "page.html"
    file_path.write_text(
        '<p>Hello <strong>world</strong></p><ol type="a"><li>x</li></ol>',
        encoding="utf-8",
    )
    return file_path
