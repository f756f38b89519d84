"""Tokenizer — raw expression text to a list of Token.

Recognised classes:
    numbers      digits with at most one '.', e.g. 3, 2.5, .75, 5.
    identifiers  runs of ASCII letters; 'Ans' becomes the previous result,
                 anything else a function name (checked at evaluation)
    operators    + - * / % ^
    parens       ( )

There is no sign on literals: '-5' is an operator followed by a number.
"""

from __future__ import annotations

import logging
import math
import string

from termcalc.errors import InvalidCharacter, NumberOutOfRange, TooManyTokens
from termcalc.models import LEFT_PAREN, OPERATOR_SYMBOLS, RIGHT_PAREN, Token

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 100
ANS_IDENTIFIER = "Ans"

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


def _scan_number(expr: str, start: int) -> int:
    """Return the index just past the numeric literal starting at ``start``."""
    i = start
    seen_dot = False
    while i < len(expr):
        ch = expr[i]
        if ch in _DIGITS:
            i += 1
        elif ch == "." and not seen_dot:
            seen_dot = True
            i += 1
        else:
            break
    return i


def _scan_identifier(expr: str, start: int) -> int:
    i = start
    while i < len(expr) and expr[i] in _LETTERS:
        i += 1
    return i


def tokenize(
    expr: str,
    last_result: float = 0.0,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> list[Token]:
    """Split ``expr`` into tokens.

    Args:
        expr: Infix expression, e.g. "3 + sqrt(4 * 2)".
        last_result: Value substituted for the 'Ans' identifier.
        max_tokens: Capacity; exceeding it raises TooManyTokens.

    Raises:
        InvalidCharacter: a character fits no token class.
        NumberOutOfRange: a literal is too large for a finite float.
        TooManyTokens: more than ``max_tokens`` tokens were produced.
    """
    tokens: list[Token] = []

    def emit(token: Token) -> None:
        if len(tokens) >= max_tokens:
            raise TooManyTokens(max_tokens)
        tokens.append(token)

    i = 0
    n = len(expr)
    while i < n:
        ch = expr[i]

        if ch.isspace():
            i += 1
            continue

        if ch in _DIGITS or (ch == "." and i + 1 < n and expr[i + 1] in _DIGITS):
            end = _scan_number(expr, i)
            literal = expr[i:end]
            value = float(literal)
            if not math.isfinite(value):
                raise NumberOutOfRange(literal, i)
            emit(Token.number(value))
            i = end
        elif ch in _LETTERS:
            end = _scan_identifier(expr, i)
            name = expr[i:end]
            if name == ANS_IDENTIFIER:
                if not math.isfinite(last_result):
                    raise NumberOutOfRange(name, i)
                emit(Token.number(last_result))
            else:
                emit(Token.function(name))
            i = end
        elif ch == "(":
            emit(LEFT_PAREN)
            i += 1
        elif ch == ")":
            emit(RIGHT_PAREN)
            i += 1
        elif ch in OPERATOR_SYMBOLS:
            emit(Token.operator(ch))
            i += 1
        else:
            logger.debug("Rejecting %r at position %d", ch, i)
            raise InvalidCharacter(ch, i)

    logger.debug("Tokenized %r into %d tokens", expr, len(tokens))
    return tokens
