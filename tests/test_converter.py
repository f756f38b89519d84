"""Tests for shunting-yard conversion to postfix."""

import pytest

from termcalc.converter import to_postfix
from termcalc.errors import MismatchedParen
from termcalc.models import format_tokens
from termcalc.tokenizer import tokenize


def rpn(expr):
    return format_tokens(to_postfix(tokenize(expr)))


# --- Precedence and associativity ---

def test_mul_before_add():
    assert rpn("3 + 4 * 2") == "3 4 2 * +"


def test_left_associative_subtraction():
    assert rpn("8 - 3 - 2") == "8 3 - 2 -"


def test_modulo_shares_mul_precedence():
    assert rpn("7 % 4 * 2") == "7 4 % 2 *"


def test_power_is_right_associative():
    assert rpn("2 ^ 3 ^ 2") == "2 3 2 ^ ^"


def test_power_binds_tighter_than_mul():
    assert rpn("2 * 3 ^ 2") == "2 3 2 ^ *"


# --- Parentheses ---

def test_parentheses_override_precedence():
    assert rpn("(3 + 4) * 2") == "3 4 + 2 *"


def test_parentheses_are_not_emitted():
    assert "(" not in rpn("((1 + 2))") and ")" not in rpn("((1 + 2))")


def test_unclosed_paren():
    with pytest.raises(MismatchedParen):
        rpn("(3 + 4")


def test_unmatched_close_paren():
    with pytest.raises(MismatchedParen):
        rpn("3 + 4)")


def test_close_before_open():
    with pytest.raises(MismatchedParen):
        rpn(")(")


# --- Functions ---

def test_function_call_is_one_unit():
    assert rpn("sqrt(16) + 1") == "16 sqrt 1 +"


def test_function_argument_expression():
    assert rpn("sqrt(9 + 16)") == "9 16 + sqrt"


def test_nested_functions():
    assert rpn("sqrt(sqrt(16))") == "16 sqrt sqrt"


def test_function_after_operator():
    assert rpn("2 * sqrt(9)") == "2 9 sqrt *"


def test_function_without_parens_binds_next_operand():
    assert rpn("sqrt 16 + 1") == "16 sqrt 1 +"


def test_empty_call_leaves_bare_function():
    assert rpn("sqrt()") == "sqrt"


def test_input_is_not_mutated():
    tokens = tokenize("(1 + 2) * 3")
    before = list(tokens)
    to_postfix(tokens)
    assert tokens == before
