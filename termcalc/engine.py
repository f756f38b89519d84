"""Evaluation entry point and session state.

evaluate() runs the whole pipeline:

    text → tokenize() → to_postfix() → eval_postfix() → float

The first failing stage raises an EvaluationError subclass and the later
stages never run. Session threads the previous result ('Ans') from one line
to the next and keeps an in-memory history.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from termcalc.config import CalcConfig
from termcalc.converter import to_postfix
from termcalc.errors import EvaluationError
from termcalc.evaluator import eval_postfix
from termcalc.models import HistoryEntry
from termcalc.tokenizer import DEFAULT_MAX_TOKENS, tokenize

logger = logging.getLogger(__name__)


def evaluate(
    expression: str,
    last_result: float = 0.0,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> float:
    """Evaluate an infix expression.

    Args:
        expression: e.g. "(3 + 4) * 2" or "sqrt(Ans) + 1".
        last_result: Value of 'Ans'. Never modified here.
        max_tokens: Token capacity for the expression.

    Returns:
        The numeric result.

    Raises:
        EvaluationError: TokenizeError, ConvertError or EvalError subclass.
    """
    tokens = tokenize(expression, last_result, max_tokens=max_tokens)
    postfix = to_postfix(tokens)
    return eval_postfix(postfix)


@dataclass
class Session:
    """Interactive state: the running 'Ans' value and the most recent lines.

    History keeps at most ``config.history_size`` entries; older ones drop off.
    """

    config: CalcConfig = field(default_factory=CalcConfig)
    last_result: float = 0.0
    history: Deque[HistoryEntry] = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.history = deque(self.history, maxlen=self.config.history_size)

    def evaluate(self, expression: str) -> float:
        """Evaluate ``expression`` against the current 'Ans'.

        'Ans' advances only when the evaluation succeeds; failures are
        recorded in the history and re-raised.
        """
        try:
            result = evaluate(expression, self.last_result, max_tokens=self.config.max_tokens)
        except EvaluationError as e:
            logger.debug("Evaluation of %r failed: %s (%s)", expression, e, e.kind)
            self.history.append(HistoryEntry(expression=expression, error=e.kind))
            raise
        self.history.append(HistoryEntry(expression=expression, result=result))
        self.last_result = result
        return result
