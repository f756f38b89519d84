"""Single-argument function registry.

Names are resolved at evaluation time: the tokenizer accepts any identifier
and apply_function() raises UnknownFunction for names missing from the
registry. Trigonometric functions take their argument in degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from termcalc.errors import DomainError, UnknownFunction

# 171! no longer fits in a double; larger arguments give inf.
MAX_FACTORIAL_ARG = 170


def degrees_to_radians(deg: float) -> float:
    return deg * math.pi / 180.0


def factorial(n: int) -> float:
    """Product 2..n as a float; 1.0 for n in {0, 1}."""
    res = 1.0
    for i in range(2, n + 1):
        res *= i
    return res


def _sqrt(a: float) -> float:
    if a < 0:
        raise DomainError("sqrt", a, "negative argument")
    return math.sqrt(a)


def _ln(a: float) -> float:
    if a <= 0:
        raise DomainError("ln", a, "argument must be positive")
    return math.log(a)


def _log10(a: float) -> float:
    if a <= 0:
        raise DomainError("log", a, "argument must be positive")
    return math.log10(a)


def _exp(a: float) -> float:
    try:
        return math.exp(a)
    except OverflowError:
        return math.inf


def _fact(a: float) -> float:
    if a < 0 or not float(a).is_integer():
        raise DomainError("fact", a, "argument must be a non-negative integer")
    if a > MAX_FACTORIAL_ARG:
        return math.inf
    return factorial(int(a))


def _trig(fn: Callable[[float], float]) -> Callable[[float], float]:
    # math.sin and friends raise on infinities where C returns NaN.
    def apply(a: float) -> float:
        if not math.isfinite(a):
            return math.nan
        return fn(degrees_to_radians(a))
    return apply


@dataclass(frozen=True)
class FunctionSpec:
    """A registered function and its human-readable description."""

    name: str
    description: str
    domain: str
    apply: Callable[[float], float]


_REGISTRY: dict[str, FunctionSpec] = {
    spec.name: spec
    for spec in (
        FunctionSpec("sqrt", "Square root", "a >= 0", _sqrt),
        FunctionSpec("abs", "Absolute value", "all reals", abs),
        FunctionSpec("ln", "Natural logarithm", "a > 0", _ln),
        FunctionSpec("log", "Base-10 logarithm", "a > 0", _log10),
        FunctionSpec("exp", "e raised to a", "all reals", _exp),
        FunctionSpec("fact", "Factorial", "non-negative integers", _fact),
        FunctionSpec("sin", "Sine (degrees)", "all reals", _trig(math.sin)),
        FunctionSpec("cos", "Cosine (degrees)", "all reals", _trig(math.cos)),
        FunctionSpec("tan", "Tangent (degrees)", "all reals", _trig(math.tan)),
    )
}


def list_functions() -> list[FunctionSpec]:
    """All registered functions, in registration order."""
    return list(_REGISTRY.values())


def is_function(name: str) -> bool:
    return name in _REGISTRY


def apply_function(name: str, a: float) -> float:
    """Apply the registered function ``name`` to ``a``.

    Raises:
        UnknownFunction: ``name`` is not registered.
        DomainError: ``a`` lies outside the function's domain.
    """
    spec = _REGISTRY.get(name)
    if spec is None:
        raise UnknownFunction(name)
    return float(spec.apply(a))
