"""
Expression tree types for tree-parser.

The parser produces a tree of two node kinds:
- Number: a 64-bit float leaf
- BinaryExpr: an operator (+, -, *, /) owning a left and a right subtree

Nodes are frozen pydantic models: immutable after construction and
compared by value.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# Number formatting
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Render a float as the shortest round-tripping decimal, no exponent.

    Integral values drop the fractional part (``2.0`` -> ``"2"``).
    Infinities render as ``inf``/``-inf`` and NaN as ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric leaf."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.to_infix()

    @property
    def label(self) -> str:
        """Text shown for this node in a tree diagram."""
        return format_number(self.value)

    def to_infix(self) -> str:
        return format_number(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.to_infix()

    @property
    def label(self) -> str:
        """Text shown for this node in a tree diagram."""
        return self.op.value

    @property
    def children(self) -> tuple[Expr, Expr]:
        return (self.left, self.right)

    def to_infix(self) -> str:
        """Fully parenthesized infix form, e.g. ``(1 + (2 * 3))``."""
        return f"({self.left.to_infix()} {self.op.value} {self.right.to_infix()})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | BinaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
