"""
Recursive descent parser for tree-parser expressions.

Grammar (precedence low to high):
    expr    → term (("+" | "-") term)*
    term    → factor (("*" | "/") factor)*
    factor  → NUMBER | "(" expr ")"

The two binary levels share one operator-chain routine driven by
_PRECEDENCE_LEVELS; each level folds its operands to the left, so
``8 - 3 - 2`` parses as ``(8 - 3) - 2``.

By default parsing stops after the first complete expression and any
remaining tokens are ignored (``2 + 3 ) )`` parses as ``2 + 3``). Pass
``strict=True`` or install a config with ``parser.strict`` set to reject
leftover tokens instead.
"""

from __future__ import annotations

import logging

from tree_parser.core.errors import MissingClosingParenthesis, UnexpectedEnd, UnexpectedToken
from tree_parser.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from tree_parser.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Number
from tree_parser.core.manifest import get_parser_config

logger = logging.getLogger(__name__)

# Lowest precedence first; the level after the last one is a factor.
_PRECEDENCE_LEVELS: tuple[dict[str, BinaryOp], ...] = (
    {BinaryOp.ADD.value: BinaryOp.ADD, BinaryOp.SUB.value: BinaryOp.SUB},
    {BinaryOp.MUL.value: BinaryOp.MUL, BinaryOp.DIV.value: BinaryOp.DIV},
)


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def match_operator(self, operators: dict[str, BinaryOp]) -> BinaryOp | None:
        tok = self.current
        if tok is not None and tok.kind == TokenKind.SYMBOL and tok.value in operators:
            self.advance()
            return operators[tok.value]
        return None

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """Top-level: the lowest precedence level."""
        return self.parse_level(0)

    def parse_level(self, level: int) -> Expr:
        """operand (op operand)* for the operators of one precedence level."""
        if level == len(_PRECEDENCE_LEVELS):
            return self.parse_factor()

        operators = _PRECEDENCE_LEVELS[level]
        left = self.parse_level(level + 1)
        while (op := self.match_operator(operators)) is not None:
            right = self.parse_level(level + 1)
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_factor(self) -> Expr:
        """NUMBER | '(' expr ')'"""
        tok = self.current
        if tok is None:
            raise UnexpectedEnd()
        self.advance()

        # Parenthesized expression
        if tok.kind == TokenKind.SYMBOL and tok.value == "(":
            expr = self.parse_expr()
            closing = self.current
            if closing is None or closing.value != ")":
                raise MissingClosingParenthesis()
            self.advance()
            return expr

        if tok.kind == TokenKind.NUMBER:
            return Number(value=float(tok.value))

        raise UnexpectedToken(tok.value)


def parse(tokens: list[Token], *, strict: bool = False) -> Expr:
    """Parse a token list into an expression tree.

    Args:
        tokens: Tokens from :func:`tokenize`.
        strict: Reject tokens left over after a complete expression.

    Returns:
        Parsed expression tree.

    Raises:
        UnexpectedEnd: Input ended where an operand was required.
        UnexpectedToken: A token is not valid at its position.
        MissingClosingParenthesis: A '(' was not closed.
    """
    parser = _Parser(tokens)
    expr = parser.parse_expr()

    leftover = parser.current
    if leftover is not None:
        if strict:
            raise UnexpectedToken(leftover.value)
        logger.debug(
            "Ignoring %d token(s) after expression, starting at %r",
            len(tokens) - parser.pos,
            leftover.value,
        )

    return expr


def parse_expression(source: str, *, strict: bool | None = None) -> Expr:
    """Parse an expression string into an expression tree.

    Args:
        source: Expression string (e.g., "3 + 5 * (2 - 8) / 4")
        strict: Reject trailing tokens. ``None`` uses the config installed with
            ``set_config()``, or ``False`` when none is installed.

    Returns:
        Parsed expression tree.

    Raises:
        ParseError: If the expression is invalid.
    """
    if strict is None:
        strict = get_parser_config().strict

    tokens = tokenize(source)
    logger.debug("Tokenized %d token(s) from %r", len(tokens), source)
    return parse(tokens, strict=strict)
