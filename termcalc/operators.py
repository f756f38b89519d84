"""Binary operator table and arithmetic.

Precedence and associativity drive the converter; apply_operator() is what
the evaluator calls for every operator token.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from termcalc.errors import DivisionByZero, UnknownOperator


@dataclass(frozen=True)
class OperatorInfo:
    precedence: int
    right_assoc: bool = False


OPERATORS: dict[str, OperatorInfo] = {
    "+": OperatorInfo(1),
    "-": OperatorInfo(1),
    "*": OperatorInfo(2),
    "/": OperatorInfo(2),
    "%": OperatorInfo(2),
    "^": OperatorInfo(3, right_assoc=True),
}


def precedence(symbol: str) -> int:
    info = OPERATORS.get(symbol)
    if info is None:
        raise UnknownOperator(symbol)
    return info.precedence


def is_right_assoc(symbol: str) -> bool:
    info = OPERATORS.get(symbol)
    if info is None:
        raise UnknownOperator(symbol)
    return info.right_assoc


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and float(x).is_integer() and x % 2 == 1


def _int_mod(a: float, b: float) -> float:
    """Truncating integer remainder; the sign follows the dividend.

    Non-finite operands have no integer truncation, so they yield NaN.
    """
    if math.isfinite(b) and int(b) == 0:
        raise DivisionByZero("%")
    if not (math.isfinite(a) and math.isfinite(b)):
        return math.nan
    ia, ib = int(a), int(b)
    r = abs(ia) % abs(ib)
    return float(-r if ia < 0 else r)


def _power(a: float, b: float) -> float:
    """IEEE 754 pow: overflow gives ±inf, a zero base with a negative
    exponent gives ±inf, a negative base with a fractional exponent gives NaN.
    """
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0:
            # -0.0 keeps its sign only for odd integer exponents.
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


def apply_operator(op: str, a: float, b: float) -> float:
    """Apply binary operator ``op`` to the left operand ``a`` and right operand ``b``.

    Results follow IEEE float arithmetic, so overflow yields ±inf and
    undefined powers yield NaN.

    Raises:
        DivisionByZero: ``/`` with ``b == 0``, or ``%`` with ``trunc(b) == 0``.
        UnknownOperator: ``op`` is not in the operator table.
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise DivisionByZero("/")
        return a / b
    if op == "%":
        return _int_mod(a, b)
    if op == "^":
        return _power(a, b)
    raise UnknownOperator(op)
