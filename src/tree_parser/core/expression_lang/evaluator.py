"""
Expression evaluator for tree-parser.

Walks an expression tree bottom-up and combines values with IEEE-754
double arithmetic. Pure evaluation: no I/O, no side effects. Division
by zero yields an infinity or NaN, it is not an error.
"""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Callable

from tree_parser.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Number

logger = logging.getLogger(__name__)


def _div(left: float, right: float) -> float:
    """IEEE-754 division: a zero divisor gives an infinity or NaN."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    # Sign of the infinity follows both operands, including a signed zero divisor.
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


# One entry per BinaryOp member; the model rejects any other operator.
_BIN_OPS: dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.ADD: operator.add,
    BinaryOp.SUB: operator.sub,
    BinaryOp.MUL: operator.mul,
    BinaryOp.DIV: _div,
}


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree to a float.

    Both operands of every binary node are evaluated, left first.

    Args:
        expr: Parsed expression tree.

    Returns:
        The computed value.
    """
    result = _interpret(expr)
    logger.debug("Evaluated %s = %r", expr, result)
    return result


def _interpret(expr: Expr) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Number):
        return expr.value
    return _interpret_binary(expr)


def _interpret_binary(expr: BinaryExpr) -> float:
    """Evaluate a binary expression."""
    left = _interpret(expr.left)
    right = _interpret(expr.right)
    return _BIN_OPS[expr.op](left, right)
