"""
Rich output helpers for the tree-parser CLI.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "error": Style(color="red", bold=True),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print(Text(title, style=STYLES["title"]), soft_wrap=True)
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]), soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]), soft_wrap=True)
