"""
tree-parser CLI utilities.

Shared helpers used by the CLI commands.
"""

import platform
from pathlib import Path

import typer

from tree_parser._version import get_version
from tree_parser.core.errors import InputError


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"tree-parser version {get_version()}")
        typer.echo(f"Python: {python_impl} {python_version}")
        raise typer.Exit()


def read_expression_file(path: Path) -> str:
    """
    Read an expression source file.

    Raises:
        InputError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read file '{path}': {e}") from e
