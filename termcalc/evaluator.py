"""Postfix evaluator — reduces a postfix token sequence to one float."""

from __future__ import annotations

import logging
from typing import Sequence

from termcalc.errors import MalformedExpression, StackUnderflow
from termcalc.functions import apply_function
from termcalc.models import Token, TokenKind
from termcalc.operators import apply_operator

logger = logging.getLogger(__name__)


def eval_postfix(tokens: Sequence[Token]) -> float:
    """Evaluate a postfix sequence with a value stack.

    Operators pop the right operand first, then the left one. Overflow and
    undefined powers follow IEEE arithmetic and come back as inf or NaN.

    Raises:
        StackUnderflow: an operator or function lacks operands.
        MalformedExpression: the stack does not end with exactly one value.
        EvalError: any error from apply_operator() or apply_function().
    """
    stack: list[float] = []

    for token in tokens:
        kind = token.kind

        if kind is TokenKind.NUMBER:
            stack.append(token.value)
        elif kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise StackUnderflow(token.symbol, 2, len(stack))
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(token.symbol, a, b))
        elif kind is TokenKind.FUNCTION:
            if not stack:
                raise StackUnderflow(token.symbol, 1, 0)
            a = stack.pop()
            stack.append(apply_function(token.symbol, a))
        else:
            # Parentheses never survive conversion.
            raise MalformedExpression(len(stack))

    if len(stack) != 1:
        logger.debug("Evaluation ended with stack %r", stack)
        raise MalformedExpression(len(stack))
    return stack[0]
