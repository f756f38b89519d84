"""Infix to postfix conversion (shunting-yard).

The operator stack holds operators, functions and left parentheses. A
function sitting on the stack is popped ahead of any incoming operator, and
right after the ')' closing its argument, so a call always comes out as a
single postfix unit: 'sqrt(16) + 1' → '16 sqrt 1 +'.
"""

from __future__ import annotations

import logging
from typing import Sequence

from termcalc.errors import MismatchedParen
from termcalc.models import Token, TokenKind, format_tokens
from termcalc.operators import is_right_assoc, precedence

logger = logging.getLogger(__name__)


def _should_pop(top: Token, incoming: str) -> bool:
    """Whether the stack top must be emitted before pushing operator ``incoming``."""
    if top.kind is TokenKind.FUNCTION:
        return True
    if top.kind is not TokenKind.OPERATOR:
        return False
    prec_top, prec_in = precedence(top.symbol), precedence(incoming)
    if prec_top > prec_in:
        return True
    return prec_top == prec_in and not is_right_assoc(incoming)


def to_postfix(tokens: Sequence[Token]) -> list[Token]:
    """Reorder an infix token sequence into postfix order.

    Raises:
        MismatchedParen: a ')' has no matching '(' or a '(' is never closed.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        kind = token.kind

        if kind is TokenKind.NUMBER:
            output.append(token)
        elif kind is TokenKind.FUNCTION:
            stack.append(token)
        elif kind is TokenKind.OPERATOR:
            while stack and _should_pop(stack[-1], token.symbol):
                output.append(stack.pop())
            stack.append(token)
        elif kind is TokenKind.LPAREN:
            stack.append(token)
        elif kind is TokenKind.RPAREN:
            while stack and stack[-1].kind is not TokenKind.LPAREN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParen("unmatched ')'")
            stack.pop()
            if stack and stack[-1].kind is TokenKind.FUNCTION:
                output.append(stack.pop())

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.LPAREN:
            raise MismatchedParen("unclosed '('")
        output.append(top)

    logger.debug("Postfix: %s", format_tokens(output))
    return output
