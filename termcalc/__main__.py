"""CLI for the termcalc expression calculator.

Usage:
    python -m termcalc repl                    # Interactive calculator
    python -m termcalc eval "(3 + 4) * 2"      # One-shot evaluation
    python -m termcalc eval "Ans / 2" --ans 10 # Supply a previous result
    python -m termcalc rpn "2 ^ 3 ^ 2"         # Show tokens and postfix form
    python -m termcalc functions               # List available functions
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from termcalc.config import CalcConfig
from termcalc.converter import to_postfix
from termcalc.display import (
    format_result,
    render_banner,
    render_error,
    render_functions,
    render_history,
    render_result,
    render_tokens,
)
from termcalc.engine import Session, evaluate
from termcalc.errors import EvaluationError
from termcalc.logutil import configure_logging
from termcalc.tokenizer import tokenize

app = typer.Typer(
    name="termcalc",
    help="Terminal arithmetic expression calculator",
    no_args_is_help=True,
)
out = Console()
console = Console(stderr=True)

_QUIT = ("q", "Q")
_CLEAR = ("c", "C")
_HISTORY = ("h", "H")


def _config(ctx: typer.Context) -> CalcConfig:
    return ctx.obj if isinstance(ctx.obj, CalcConfig) else CalcConfig.from_env()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", min=1, help="Token capacity per expression"),
) -> None:
    """Terminal arithmetic expression calculator."""
    # TERMCALC_VERBOSE=1 still applies when the flag is absent.
    config = CalcConfig.from_env().override(max_tokens=max_tokens, verbose=verbose or None)
    configure_logging(config.verbose, console=console)
    ctx.obj = config


@app.command("repl")
def cmd_repl(
    ctx: typer.Context,
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, help="Fractional digits to print"),
) -> None:
    """Start the interactive calculator."""
    config = _config(ctx).override(precision=precision)
    session = Session(config=config)

    render_banner(out)
    while True:
        try:
            line = out.input("\nEnter expression: ")
        except (EOFError, KeyboardInterrupt):
            out.print()
            line = "q"

        line = line.strip()
        if line in _QUIT:
            out.print("Goodbye!")
            break
        if line in _CLEAR:
            out.clear()
            continue
        if line in _HISTORY:
            render_history(session.history, config.precision, out)
            continue
        if not line:
            continue

        try:
            result = session.evaluate(line)
        except EvaluationError as e:
            render_error(e, out, verbose=config.verbose)
            continue
        render_result(result, config.precision, out)


@app.command("eval")
def cmd_eval(
    ctx: typer.Context,
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '(3 + 4) * 2')"),
    ans: float = typer.Option(0.0, "--ans", help="Value substituted for 'Ans'"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, help="Fractional digits to print"),
) -> None:
    """Evaluate a single expression."""
    config = _config(ctx).override(precision=precision)
    try:
        result = evaluate(expression, ans, max_tokens=config.max_tokens)
    except EvaluationError as e:
        render_error(e, console, verbose=config.verbose)
        raise typer.Exit(1)
    out.print(format_result(result, config.precision), highlight=False)


@app.command("rpn")
def cmd_rpn(
    ctx: typer.Context,
    expression: str = typer.Argument(help="Expression to convert (e.g., '2 ^ 3 ^ 2')"),
    ans: float = typer.Option(0.0, "--ans", help="Value substituted for 'Ans'"),
) -> None:
    """Show the token sequence and postfix form of an expression."""
    config = _config(ctx)
    try:
        tokens = tokenize(expression, ans, max_tokens=config.max_tokens)
        postfix = to_postfix(tokens)
    except EvaluationError as e:
        render_error(e, console, verbose=config.verbose)
        raise typer.Exit(1)
    render_tokens(tokens, postfix, out)


@app.command("functions")
def cmd_functions() -> None:
    """List the available functions."""
    render_functions(out)


if __name__ == "__main__":
    app()
