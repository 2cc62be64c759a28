"""
Text renderers for expression trees.

All functions here return strings; only print_tree writes, and only to
the stream it is given.
"""

from __future__ import annotations

import sys
from typing import TextIO

from tree_parser.core.ir.expressions import BinaryExpr, Expr

_BRANCH = "├── "
_LAST_BRANCH = "└── "
_PIPE = "│   "
_SPACE = "    "


def to_infix(expr: Expr) -> str:
    """Fully parenthesized infix form of an expression."""
    return expr.to_infix()


def tree_to_lines(expr: Expr, prefix: str = "", is_last: bool = True) -> list[str]:
    """One diagram line per node, depth first, left child before right."""
    connector = _LAST_BRANCH if is_last else _BRANCH
    lines = [prefix + connector + expr.label]
    if isinstance(expr, BinaryExpr):
        new_prefix = prefix + (_SPACE if is_last else _PIPE)
        children = expr.children
        for i, child in enumerate(children):
            lines.extend(tree_to_lines(child, new_prefix, i == len(children) - 1))
    return lines


def format_tree(expr: Expr) -> str:
    """Box-drawing diagram of an expression tree.

    Example for ``2 + 3``::

        └── +
            ├── 2
            └── 3
    """
    return "\n".join(tree_to_lines(expr))


def format_report(expr: Expr) -> str:
    """The ``parse`` command output: infix header followed by the diagram."""
    return f"\nExpression: {expr.to_infix()}\n\n{format_tree(expr)}\n\n"


def print_tree(expr: Expr, file: TextIO | None = None) -> None:
    """Write the report for an expression to a stream (stdout by default)."""
    stream = file if file is not None else sys.stdout
    stream.write(format_report(expr))
