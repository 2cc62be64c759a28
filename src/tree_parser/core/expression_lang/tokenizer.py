"""
Tokenizer for tree-parser expressions.

Converts an expression string into a flat sequence of tokens: runs of
ASCII digits become NUMBER tokens, every other non-whitespace character
becomes a single-character SYMBOL token. Tokenization never fails;
unsupported characters are rejected later by the parser.
"""

from __future__ import annotations

from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for the expression language."""

    NUMBER = auto()
    SYMBOL = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value")

    def __init__(self, kind: TokenKind, value: str) -> None:
        self.kind = kind
        self.value = value

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r})"


_DIGITS = frozenset("0123456789")


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    tokens: list[Token] = []
    digits: list[str] = []

    for c in source:
        if c.isspace():
            continue
        if c in _DIGITS:
            digits.append(c)
            continue
        if digits:
            tokens.append(Token(TokenKind.NUMBER, "".join(digits)))
            digits.clear()
        tokens.append(Token(TokenKind.SYMBOL, c))

    if digits:
        tokens.append(Token(TokenKind.NUMBER, "".join(digits)))
    return tokens
