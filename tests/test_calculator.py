from __future__ import annotations

from fractions import Fraction

import pytest

from calculator import Calculator, evaluate
from contracts import (
    DivisionByZero,
    EmptyExpression,
    InvalidNumber,
    InvalidOperator,
    MalformedExpression,
)


@pytest.mark.parametrize("expression, expected", [
    # basic operations
    ("2 + 3", 5),
    ("10 - 4", 6),
    ("3 * 4", 12),
    ("15 / 3", 5),
    # precedence
    ("1 + 2 * 3", 7),
    ("3 * 2 + 1", 7),
    ("8 / 2 + 3", 7),
    ("2 + 8 / 2", 6),
    ("10 - 2 * 3", 4),
    ("20 / 4 + 2 * 3", 11),
    ("2 + 3 * 4 - 1", 13),
    ("5 * 2 + 3 * 4", 22),
    ("20 - 4 * 2 + 6", 18),
    # left associativity
    ("1 + 2 - 3 + 4", 4),
    ("10 - 3 - 2", 5),
    ("24 / 2 / 3", 4),
    ("20 / 4 / 2", 2.5),
    ("2 * 3 / 2", 3),
    ("8 / 2 * 3 + 1", 13),
    ("2 + 3 * 4 / 2 - 1", 7),
    # negative numbers
    ("3 * -2 + 6", 0),
    ("-5 + 3", -2),
    ("10 + -4", 6),
    ("-8 / -2", 4),
    ("-3 * -4", 12),
    ("+7 - 2", 5),
])
def test_evaluate(expression, expected):
    assert evaluate(expression) == expected


def test_single_number():
    assert evaluate("42") == 42
    assert evaluate("-42") == -42


def test_fractional_results_are_not_rounded():
    assert evaluate("7 / 2") == 3.5
    assert evaluate("100 / 3") == pytest.approx(33.333333333333336)


def test_large_numbers_beyond_32_bits():
    assert evaluate("2147483647 + 1") == 2147483648
    assert evaluate("-2147483648 - 1") == -2147483649


def test_large_products_stay_exact():
    assert evaluate("9223372036854775807 * 10") == 92233720368547758070


def test_minus_followed_by_space_is_not_a_negative_number():
    with pytest.raises(MalformedExpression):
        evaluate("- 5")
    with pytest.raises(InvalidNumber):
        evaluate("- 5 + 3")


@pytest.mark.parametrize("expression", [None, "", "   "])
def test_empty_expression(expression):
    with pytest.raises(EmptyExpression):
        evaluate(expression)


@pytest.mark.parametrize("expression", ["5 3", "5 +", "+ 5", "5 /", "5 + 3 +", "+ + 5"])
def test_malformed_expression(expression):
    with pytest.raises(MalformedExpression):
        evaluate(expression)


@pytest.mark.parametrize("expression", ["5.5 + 3", "abc + 5", "5 + def"])
def test_invalid_number(expression):
    with pytest.raises(InvalidNumber):
        evaluate(expression)


def test_invalid_operator():
    with pytest.raises(InvalidOperator) as exc_info:
        evaluate("5 @ 3")

    assert exc_info.value.token == "@"
    assert "'@'" in str(exc_info.value)


@pytest.mark.parametrize("expression", ["5 / 0", "10 + 3 / 0", "0 / 0", "1 / -0"])
def test_division_by_zero(expression):
    with pytest.raises(DivisionByZero):
        evaluate(expression)


def test_repeated_evaluation_is_identical():
    results = {evaluate("1 + 2 * 3 / 4 - 5") for _ in range(10)}

    assert results == {-2.5}


def test_to_rpn():
    assert Calculator().to_rpn("1 + 2 * 3") == ["1", "2", "3", "*", "+"]


def test_to_rpn_validates_first():
    with pytest.raises(InvalidOperator):
        Calculator().to_rpn("1 ^ 2")


def test_explain_collects_tokens_rpn_and_steps():
    ev = Calculator().explain("8 / 2 * 3 + 1")

    assert ev.tokens == ["8", "/", "2", "*", "3", "+", "1"]
    assert ev.rpn == ["8", "2", "/", "3", "*", "1", "+"]
    assert ev.value == 13
    assert ev.is_exact is True
    assert ev.steps == ["8 / 2 = 4", "4 * 3 = 12", "12 + 1 = 13"]


def test_explain_marks_rounded_results_inexact():
    assert Calculator().explain("7 / 2").is_exact is True
    assert Calculator().explain("1 / 3").is_exact is False


def test_explain_single_number_has_no_steps():
    ev = Calculator().explain("-42")

    assert ev.value == -42
    assert ev.steps == []


def test_calculator_accepts_custom_stages():
    class _CommaTokenizer:
        def tokenize(self, expression):
            if not expression:
                raise EmptyExpression()
            return [t.strip() for t in expression.split(",")]

    calc = Calculator(tokenizer=_CommaTokenizer())

    assert calc.evaluate("1,+,2,*,3") == 7


def test_rejected_expression_is_logged(caplog):
    with caplog.at_level("INFO", logger="shunt_calc.calculator"):
        with pytest.raises(DivisionByZero):
            evaluate("1 / 0")

    assert "Rejected '1 / 0'" in caplog.text


def test_calculator_explain_uses_custom_evaluator():
    class _TracingEvaluator:
        def __init__(self):
            self.seen = []

        def evaluate(self, postfix):
            return 0

        def evaluate_with_steps(self, postfix):
            self.seen.append(postfix)
            return Fraction(5, 2), ["traced"]

    evaluator = _TracingEvaluator()
    ev = Calculator(evaluator=evaluator).explain("1 + 1")

    assert evaluator.seen == [["1", "1", "+"]]
    assert ev.value == 2.5
    assert ev.steps == ["traced"]


def test_calculator_rejects_evaluator_without_steps():
    class _ValueOnlyEvaluator:
        def evaluate(self, postfix):
            return 1

    with pytest.raises(TypeError):
        Calculator(evaluator=_ValueOnlyEvaluator())
