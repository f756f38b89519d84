"""CLI tests for the termcalc Typer app (repl, eval, rpn, functions)."""

import pytest
from typer.testing import CliRunner

from termcalc.__main__ import app
from termcalc.display import format_result

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("TERMCALC_MAX_TOKENS", "TERMCALC_PRECISION", "TERMCALC_HISTORY_SIZE", "TERMCALC_VERBOSE"):
        monkeypatch.delenv(key, raising=False)


# --- eval ---

def test_eval_prints_fixed_precision():
    result = runner.invoke(app, ["eval", "3 + 4 * 2"])
    assert result.exit_code == 0
    assert "11.000000" in result.output


def test_eval_with_ans():
    result = runner.invoke(app, ["eval", "Ans + 1", "--ans", "10"])
    assert result.exit_code == 0
    assert "11.000000" in result.output


def test_eval_precision_option():
    result = runner.invoke(app, ["eval", "1 / 3", "--precision", "3"])
    assert result.exit_code == 0
    assert "0.333" in result.output
    assert "0.3333" not in result.output


def test_eval_error_exit_code():
    result = runner.invoke(app, ["eval", "5 / 0"])
    assert result.exit_code == 1
    assert "Invalid expression" in result.output


def test_eval_verbose_shows_error_kind():
    result = runner.invoke(app, ["--verbose", "eval", "5 / 0"])
    assert result.exit_code == 1
    assert "division-by-zero" in result.output


def test_eval_max_tokens_option():
    result = runner.invoke(app, ["--max-tokens", "2", "eval", "1 + 1"])
    assert result.exit_code == 1


def test_eval_precision_from_env(monkeypatch):
    monkeypatch.setenv("TERMCALC_PRECISION", "1")
    result = runner.invoke(app, ["eval", "2.25 * 2"])
    assert result.exit_code == 0
    assert "4.5" in result.output
    assert "4.50" not in result.output


def test_eval_overflow_prints_inf():
    result = runner.invoke(app, ["eval", "10 ^ 400"])
    assert result.exit_code == 0
    assert "inf" in result.output


# --- rpn / functions ---

def test_rpn_shows_postfix():
    result = runner.invoke(app, ["rpn", "2 ^ 3 ^ 2"])
    assert result.exit_code == 0
    assert "Postfix: 2 3 2 ^ ^" in result.output


def test_rpn_marks_unknown_functions():
    result = runner.invoke(app, ["rpn", "foo(1)"])
    assert result.exit_code == 0
    assert "unknown" in result.output


def test_rpn_mismatched_paren():
    result = runner.invoke(app, ["rpn", "(1 + 2"])
    assert result.exit_code == 1
    assert "Invalid expression" in result.output


def test_functions_lists_registry():
    result = runner.invoke(app, ["functions"])
    assert result.exit_code == 0
    for name in ("sqrt", "fact", "tan"):
        assert name in result.output


# --- repl ---

def test_repl_session():
    result = runner.invoke(app, ["repl"], input="2 + 3\nAns * 2\n1 / 0\nAns + 1\nq\n")
    assert result.exit_code == 0
    assert "Terminal Calculator" in result.output
    assert "Result: 5.000000" in result.output
    assert "Result: 10.000000" in result.output
    assert "Error: Invalid expression" in result.output
    # Ans survives the failed line.
    assert "Result: 11.000000" in result.output
    assert "Goodbye!" in result.output


def test_repl_history():
    result = runner.invoke(app, ["repl"], input="6 * 7\nh\nQ\n")
    assert result.exit_code == 0
    assert "History" in result.output
    assert "42.000000" in result.output


def test_repl_clear_and_blank_lines():
    result = runner.invoke(app, ["repl"], input="\nc\n1 + 1\nq\n")
    assert result.exit_code == 0
    assert "Result: 2.000000" in result.output


def test_repl_quits_on_end_of_input():
    result = runner.invoke(app, ["repl"], input="3 * 3\n")
    assert result.exit_code == 0
    assert "Result: 9.000000" in result.output
    assert "Goodbye!" in result.output


# --- formatting ---

def test_format_result():
    assert format_result(11, 6) == "11.000000"
    assert format_result(1 / 3, 2) == "0.33"
    assert format_result(-1e-9, 6) == "0.000000"
    assert format_result(-0.5, 1) == "-0.5"
    assert format_result(float("inf"), 6) == "inf"
    assert format_result(float("-inf"), 6) == "-inf"
