"""Command-line interface for Slate Serializer."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from slate_serializer import __version__
from slate_serializer.config import get_settings
from slate_serializer.formats import (
    SUPPORTED_FORMATS,
    ConversionError,
    Serializer,
    format_for_path,
    get_serializer,
)

app = typer.Typer(
    name="slate-serializer",
    help="Convert HTML and plain text to and from Slate editor values.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Slate Serializer v{__version__}")
        raise typer.Exit()


def resolve_serializer(path: Path, format_name: Optional[str]) -> Serializer:
    """Pick a serializer from an explicit format, the file extension, or settings."""
    name = format_name or format_for_path(path) or get_settings().default_format
    return get_serializer(name)()


def emit(content: str, output: Optional[Path]) -> None:
    """Write content to a file, or print it when no output path is given."""
    if output is None:
        console.print(content, markup=False, highlight=False, soft_wrap=True)
    else:
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]Written:[/green] {output}")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Convert between external text formats and Slate values."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def deserialize(
    path: Path = typer.Argument(
        ...,
        help="HTML or plain text file to convert",
        exists=True,
        dir_okay=False,
    ),
    format_name: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Input format ({', '.join(SUPPORTED_FORMATS)}). Defaults to the file extension.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the Slate JSON here instead of printing it",
    ),
) -> None:
    """
    Convert a file into a Slate value (JSON).

    Examples:

        slate-serializer deserialize page.html

        slate-serializer deserialize notes.txt -o notes.json
    """
    try:
        serializer = resolve_serializer(path, format_name)
        value = serializer.read(path)
    except (ValueError, ConversionError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    indent = get_settings().json_indent
    emit(json.dumps(value.to_dict(), indent=indent, ensure_ascii=False), output)


@app.command()
def serialize(
    path: Path = typer.Argument(
        ...,
        help="Slate value JSON file to convert",
        exists=True,
        dir_okay=False,
    ),
    format_name: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format ({', '.join(SUPPORTED_FORMATS)}). "
        "Defaults to the output extension, then to the configured format.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result here instead of printing it",
    ),
) -> None:
    """
    Convert a Slate value (JSON) into HTML or plain text.

    Examples:

        slate-serializer serialize value.json

        slate-serializer serialize value.json -f plain

        slate-serializer serialize value.json -o page.html
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {path.name}: {e}")
        raise typer.Exit(1)

    if not isinstance(raw, dict):
        console.print(f"[red]Error:[/red] {path.name} does not hold a JSON object")
        raise typer.Exit(1)

    try:
        name = format_name or (format_for_path(output) if output else None)
        serializer = get_serializer(name or get_settings().default_format)()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        content = serializer.serialize(raw)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    emit(content, output)


if __name__ == "__main__":
    app()
