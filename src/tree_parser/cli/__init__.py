"""
tree-parser CLI.

- expression.py: parse and eval commands
- utils.py: shared helpers

Usage:
    tree-parser parse <file>   - Read an expression from a file and print its tree
    tree-parser eval <file>    - Read an expression from a file and print its value
    tree-parser help           - Show usage
    tree-parser about          - Show project information
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from tree_parser._version import get_version
from tree_parser.cli.expression import eval_command, parse_command
from tree_parser.cli.utils import version_callback
from tree_parser.cli_ui import print_error, print_header
from tree_parser.core.errors import ConfigError
from tree_parser.core.logging import setup_logging
from tree_parser.core.manifest import load_config, set_config

__version__ = get_version()

HELP_TEXT = """Tree Parser CLI

Usage:
  tree-parser parse <file>   - Read an expression from a file and print its tree
  tree-parser eval <file>    - Read an expression from a file and print its value
  tree-parser help           - Show this help
  tree-parser about          - Show project information

Options:
  --config PATH              - Read settings from PATH instead of ./tree_parser.toml
  --verbose, -V              - Log debug output to stderr
  --version                  - Show version and environment information
"""

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="Tree Parser - parse, print and evaluate arithmetic expressions",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Log debug output to stderr",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        help="Config file (default: ./tree_parser.toml if present)",
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        settings = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    set_config(settings)
    level = "DEBUG" if verbose else settings.logging.level
    setup_logging(level, settings.logging.file)


# =============================================================================
# Expression Commands (imported from cli.expression)
# =============================================================================

app.command(name="parse")(parse_command)
app.command(name="eval")(eval_command)


# =============================================================================
# Information Commands
# =============================================================================


@app.command(name="help")
def help_command() -> None:
    """Show usage."""
    typer.echo(HELP_TEXT, nl=False)


@app.command()
def about() -> None:
    """Show project information."""
    print_header("Tree Parser - expression parser in Python", f"Version {__version__}")


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["__version__", "app", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
