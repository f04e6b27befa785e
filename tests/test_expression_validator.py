import pytest

from core import ExpressionValidator


@pytest.mark.parametrize("expression", [
    "2+3",
    "(2+3)*4",
    "sin(x)",
    "((1))",
    "1E+5",
    "7",
])
def test_valid_expressions(expression):
    assert ExpressionValidator.is_correct_expression(expression)


@pytest.mark.parametrize("expression", [
    "",
    "(2+3",
    "2+3)",
    ")(1",
    "2+",
    "sin(",
    "x*x",
    "2*(",
    "1E+",
])
def test_invalid_expressions(expression):
    assert not ExpressionValidator.is_correct_expression(expression)


def test_length_limit():
    at_limit = "1" * 255
    assert ExpressionValidator.is_correct_expression(at_limit)
    assert not ExpressionValidator.is_correct_expression(at_limit + "1")


def test_bracket_balance_never_negative():
    assert ExpressionValidator.is_correct_brackets("(()())")
    assert not ExpressionValidator.is_correct_brackets("())(()")
    assert ExpressionValidator.is_correct_brackets("")


def test_structural_errors_are_not_detected():
    assert ExpressionValidator.is_correct_expression("2++3")
    assert ExpressionValidator.is_correct_expression("()1")
