"""
tree-parser - arithmetic expressions to trees.

Parses expressions over +, -, *, / and parentheses into an expression
tree, renders the tree as a diagram or infix string, and evaluates it.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    ConfigError,
    InputError,
    MissingClosingParenthesis,
    ParseError,
    TreeParserError,
    UnexpectedEnd,
    UnexpectedToken,
)
from .core.expression_lang import (
    Token,
    TokenKind,
    evaluate,
    format_report,
    format_tree,
    parse,
    parse_expression,
    print_tree,
    to_infix,
    tokenize,
)
from .core.ir import BinaryExpr, BinaryOp, Expr, Number

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    # Tree
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Number",
    # Operations
    "Token",
    "TokenKind",
    "evaluate",
    "format_report",
    "format_tree",
    "parse",
    "parse_expression",
    "print_tree",
    "to_infix",
    "tokenize",
    # Errors
    "TreeParserError",
    "ParseError",
    "UnexpectedEnd",
    "UnexpectedToken",
    "MissingClosingParenthesis",
    "InputError",
    "ConfigError",
]
