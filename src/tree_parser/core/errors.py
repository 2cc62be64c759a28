"""
Error types for tree-parser expression parsing, input and configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TreeParserError(Exception):
    """Base exception for all tree-parser errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message

    def with_context(self, context: "ErrorContext") -> "TreeParserError":
        """Attach source context and return the same error."""
        self.context = context
        self.args = (self._format_message(),)
        return self


class ParseError(TreeParserError):
    """
    Raised when an expression cannot be parsed.

    Subclasses name the failure; all of them are terminal.
    """

    pass


class UnexpectedEnd(ParseError):
    """Input ended while a token was still required."""

    def __init__(self, context: Optional["ErrorContext"] = None):
        super().__init__("Unexpected end of input", context)


class UnexpectedToken(ParseError):
    """
    A token was present but is not valid at this position.

    Examples:
    - An operator where an operand was expected: ``2 + + 3``
    - A character that is not a digit, operator or parenthesis: ``2 + x``
    """

    def __init__(self, token: str, context: Optional["ErrorContext"] = None):
        self.token = token
        super().__init__(f"Unexpected token: {token!r}", context)


class MissingClosingParenthesis(ParseError):
    """An opening parenthesis was never closed."""

    def __init__(self, context: Optional["ErrorContext"] = None):
        super().__init__("Missing ')'", context)


class InputError(TreeParserError):
    """
    Raised when an expression source cannot be read.

    Examples:
    - File does not exist
    - File is not valid UTF-8
    """

    pass


class ConfigError(TreeParserError):
    """
    Raised when the configuration file is malformed.

    Examples:
    - Invalid TOML syntax
    - Wrong value type for a known key
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        file: Path to the file the expression was read from
        source: Optional expression text, shown under the location
    """

    file: Path
    source: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "Invalid expression in file 'expr.txt'"
        """
        location = f"Invalid expression in file '{self.file}'"
        if self.source is not None:
            return f"{location}\n    | {self.source.strip()}"
        return location


def make_parse_error_context(file: Path | str, source: str | None = None) -> ErrorContext:
    """
    Helper to build the context the CLI attaches to parse errors.

    Args:
        file: Source file path
        source: Optional expression text

    Returns:
        ErrorContext for the file
    """
    return ErrorContext(file=Path(file), source=source)
