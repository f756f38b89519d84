"""termcalc — arithmetic expression calculator for the terminal.

Evaluates infix expressions with + - * / % ^, parentheses, single-argument
functions (sqrt, abs, ln, log, exp, fact, sin, cos, tan) and 'Ans' for the
previous result. Expressions go through tokenize → to_postfix → eval_postfix.

Usage:
    python -m termcalc repl                  # Interactive calculator
    python -m termcalc eval "(3 + 4) * 2"    # One-shot evaluation
    python -m termcalc rpn "2 ^ 3 ^ 2"       # Inspect the postfix form
"""

from termcalc.engine import Session, evaluate
from termcalc.errors import EvaluationError

__all__ = ["evaluate", "Session", "EvaluationError"]
