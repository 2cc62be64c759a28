"""
Intermediate representation for tree-parser.

Re-exports the expression tree types.
"""

from .expressions import BinaryExpr, BinaryOp, Expr, Number, format_number

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Number",
    "format_number",
]
