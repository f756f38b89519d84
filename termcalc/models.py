"""Data models for termcalc.

TokenKind, Token, HistoryEntry — the typed structures that flow through
tokenizer → converter → evaluator → shell.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from termcalc.errors import InvalidToken

OPERATOR_SYMBOLS = "+-*/%^"


class TokenKind(str, Enum):
    """Token variants."""

    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class Token:
    """A single lexical unit of an expression.

    Only the field matching ``kind`` is meaningful: ``value`` for numbers,
    ``symbol`` for operators (the operator character) and functions (the
    function name). Build tokens through the classmethods; they raise
    InvalidToken when a value breaks the invariants of its kind.
    """

    kind: TokenKind
    value: float = 0.0
    symbol: str = ""

    @classmethod
    def number(cls, value: float) -> Token:
        value = float(value)
        if not math.isfinite(value):
            raise InvalidToken(f"number token must be finite, got {value!r}")
        return cls(TokenKind.NUMBER, value=value)

    @classmethod
    def operator(cls, symbol: str) -> Token:
        if len(symbol) != 1 or symbol not in OPERATOR_SYMBOLS:
            raise InvalidToken(f"not an operator: {symbol!r}")
        return cls(TokenKind.OPERATOR, symbol=symbol)

    @classmethod
    def function(cls, name: str) -> Token:
        if not name:
            raise InvalidToken("function name must not be empty")
        return cls(TokenKind.FUNCTION, symbol=name)

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return _fmt_number(self.value)
        if self.kind is TokenKind.LPAREN:
            return "("
        if self.kind is TokenKind.RPAREN:
            return ")"
        return self.symbol


LEFT_PAREN = Token(TokenKind.LPAREN)
RIGHT_PAREN = Token(TokenKind.RPAREN)


def _fmt_number(x: float) -> str:
    """Shortest readable form: integers without a trailing '.0'."""
    if x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


def format_tokens(tokens) -> str:
    """Space-separated rendering of a token sequence, e.g. '3 4 2 * +'."""
    return " ".join(str(t) for t in tokens)


@dataclass
class HistoryEntry:
    """One line evaluated by a session."""

    expression: str
    result: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
