"""Rich rendering for the termcalc shell.

Results go to the stdout console; errors, tables and status lines go to
whichever console the caller passes in.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from termcalc.errors import EvaluationError
from termcalc.functions import is_function, list_functions
from termcalc.models import HistoryEntry, Token, TokenKind, format_tokens

BANNER = [
    "[bold]=== Terminal Calculator ===[/bold]",
    "Supports full expressions (e.g., (3 + 2) * 5 - 1 / 2)",
    "Unary functions: sqrt, log, sin, fact, etc. | Use 'Ans' for last result",
    "Type 'q' to quit, 'c' to clear screen, 'h' for history.",
]

_KIND_STYLES = {
    TokenKind.NUMBER: "cyan",
    TokenKind.OPERATOR: "yellow",
    TokenKind.FUNCTION: "green",
    TokenKind.LPAREN: "dim",
    TokenKind.RPAREN: "dim",
}


def format_result(value: float, precision: int) -> str:
    """Fixed-point rendering, e.g. 11.0 → '11.000000' for precision 6."""
    text = f"{value:.{precision}f}"
    # Avoid printing '-0.000000' for tiny negative values.
    if text.lstrip("-").strip("0.") == "" and text.startswith("-"):
        text = text[1:]
    return text


def render_banner(console: Console) -> None:
    for line in BANNER:
        console.print(line)


def render_result(value: float, precision: int, console: Console) -> None:
    console.print(f"Result: {format_result(value, precision)}", highlight=False)


def render_error(err: EvaluationError, console: Console, verbose: bool = False) -> None:
    """Print the generic failure line; the error kind is shown only when verbose."""
    console.print("[red]Error:[/red] Invalid expression")
    if verbose:
        console.print(f"  [dim]{err.kind}: {escape(str(err))}[/dim]")


def render_tokens(tokens: Sequence[Token], postfix: Sequence[Token], console: Console) -> None:
    """Show the infix tokens and their postfix ordering."""
    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", min_width=10)
    table.add_column("Token")

    for i, tok in enumerate(tokens):
        kind = tok.kind.value
        if tok.kind is TokenKind.FUNCTION and not is_function(tok.symbol):
            kind = "function (unknown)"
        style = _KIND_STYLES[tok.kind]
        table.add_row(str(i), f"[{style}]{kind}[/{style}]", escape(str(tok)))

    console.print()
    console.print(table)
    console.print(f"[bold]Postfix:[/bold] {escape(format_tokens(postfix))}", highlight=False)


def render_functions(console: Console) -> None:
    table = Table(title="Functions", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=6)
    table.add_column("Description", min_width=20)
    table.add_column("Domain")

    for spec in list_functions():
        table.add_row(spec.name, spec.description, spec.domain)

    console.print()
    console.print(table)
    console.print()


def render_history(history: Sequence[HistoryEntry], precision: int, console: Console) -> None:
    if not history:
        console.print("[yellow]No history yet.[/yellow]")
        return

    table = Table(title="History", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Expression")
    table.add_column("Result", justify="right")

    for i, entry in enumerate(history, start=1):
        if entry.ok:
            outcome = f"[green]{format_result(entry.result, precision)}[/green]"
        else:
            outcome = f"[red]{entry.error}[/red]"
        table.add_row(str(i), escape(entry.expression), outcome)

    console.print(table)
