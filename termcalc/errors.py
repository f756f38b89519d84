"""Exception taxonomy for the evaluation pipeline.

Each pipeline stage raises its own family:

    TokenizeError  -- tokenize()
    ConvertError   -- to_postfix()
    EvalError      -- eval_postfix(), apply_operator(), apply_function()

All of them derive from EvaluationError, which is what callers catch.
"""

from __future__ import annotations

from typing import Optional


class EvaluationError(Exception):
    """Base class for every failure raised by the pipeline."""

    kind = "evaluation-error"


# --- Tokenizer ---


class TokenizeError(EvaluationError):
    kind = "tokenize-error"


class InvalidCharacter(TokenizeError):
    """A character matches none of the recognised token classes."""

    kind = "invalid-character"

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"invalid character {char!r} at position {position}")


class TooManyTokens(TokenizeError):
    """The expression produced more tokens than the configured capacity."""

    kind = "too-many-tokens"

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"expression exceeds {limit} tokens")


class InvalidToken(TokenizeError):
    """A token was built with a value its kind does not allow."""

    kind = "invalid-token"


class NumberOutOfRange(TokenizeError):
    """A numeric literal does not fit in a finite float."""

    kind = "number-out-of-range"

    def __init__(self, literal: str, position: int) -> None:
        self.literal = literal
        self.position = position
        super().__init__(f"literal at position {position} is out of range")


# --- Converter ---


class ConvertError(EvaluationError):
    kind = "convert-error"


class MismatchedParen(ConvertError):
    kind = "mismatched-paren"

    def __init__(self, message: str = "mismatched parentheses") -> None:
        super().__init__(message)


# --- Evaluator ---


class EvalError(EvaluationError):
    kind = "eval-error"


class StackUnderflow(EvalError):
    """An operator or function was applied without enough operands."""

    kind = "stack-underflow"

    def __init__(self, symbol: str, needed: int, available: int) -> None:
        self.symbol = symbol
        self.needed = needed
        self.available = available
        super().__init__(
            f"{symbol!r} needs {needed} operand(s), found {available}"
        )


class MalformedExpression(EvalError):
    """Evaluation finished with a stack depth other than one."""

    kind = "malformed-expression"

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"expected 1 value on the stack, found {depth}")


class DivisionByZero(EvalError):
    kind = "division-by-zero"

    def __init__(self, op: str) -> None:
        self.op = op
        super().__init__(f"division by zero in {op!r}")


class DomainError(EvalError):
    """A function or operator was applied outside its domain."""

    kind = "domain-error"

    def __init__(self, name: str, value: float, reason: Optional[str] = None) -> None:
        self.name = name
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"{name}({value!r}) is undefined{detail}")


class UnknownFunction(EvalError):
    kind = "unknown-function"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown function {name!r}")


class UnknownOperator(EvalError):
    kind = "unknown-operator"

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"unknown operator {symbol!r}")
