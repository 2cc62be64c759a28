"""
Expression commands for the tree-parser CLI.

- parse: read an expression file and print its tree
- eval: read an expression file and print its value
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from tree_parser.cli.utils import read_expression_file
from tree_parser.cli_ui import print_error
from tree_parser.core.errors import InputError, ParseError, make_parse_error_context
from tree_parser.core.expression_lang import evaluate, format_report, parse_expression
from tree_parser.core.ir import Expr, format_number

logger = logging.getLogger(__name__)


def _load_expression(file: Path, strict: bool | None) -> Expr:
    """Read and parse FILE, exiting with code 1 on failure."""
    try:
        source = read_expression_file(file)
    except InputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    try:
        expr = parse_expression(source, strict=strict)
    except ParseError as e:
        e.with_context(make_parse_error_context(file))
        print_error(str(e))
        raise typer.Exit(code=1)

    logger.debug("Parsed %s: %s", file, expr)
    return expr


def parse_command(
    file: Path = typer.Argument(..., help="File containing the expression"),  # noqa: B008
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Reject tokens left after a complete expression (default: from config)",
    ),
) -> None:
    """
    Parse an expression file and print its tree.
    """
    expr = _load_expression(file, strict)
    typer.echo(format_report(expr), nl=False)


def eval_command(
    file: Path = typer.Argument(..., help="File containing the expression"),  # noqa: B008
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Reject tokens left after a complete expression (default: from config)",
    ),
) -> None:
    """
    Parse an expression file and print its value.
    """
    expr = _load_expression(file, strict)
    result = evaluate(expr)
    typer.echo(f"Result: {format_number(result)}")
