"""
tree-parser arithmetic expression language.

Tokenizer, parser, evaluator and renderers for expressions over
+, -, *, /, decimal integers and parentheses.

Usage:
    from tree_parser.core.expression_lang import evaluate, parse_expression

    expr = parse_expression("2 + 3 * 4")
    result = evaluate(expr)
    # result == 14.0
"""

from tree_parser.core.expression_lang.evaluator import evaluate
from tree_parser.core.expression_lang.parser import parse, parse_expression
from tree_parser.core.expression_lang.render import (
    format_report,
    format_tree,
    print_tree,
    to_infix,
)
from tree_parser.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
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
]
