"""
Adapter: RPNEvaluator
Implements the Evaluator port — single left-to-right pass over a postfix
sequence with a value stack of Fractions.

Fractions keep every intermediate result exact: integer operands never
overflow and division keeps its fractional part until the very end.

evaluate()            — returns int if the result is integral, float otherwise
evaluate_with_steps() — exact Fraction plus human readable steps
"""
from __future__ import annotations

import math
from fractions import Fraction
from typing import Union

from contracts import (
    DivisionByZero,
    InsufficientOperands,
    InvalidOperator,
    MalformedRpn,
    is_number_token,
)

# Operator symbol → operation on Fractions (left, right)
_OP_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: _safe_div(a, b),
}


def _safe_div(a: Fraction, b: Fraction) -> Fraction:
    if b == 0:
        raise DivisionByZero()
    return a / b


def to_number(value: Fraction) -> Union[int, float]:
    """Fraction → int when integral, float otherwise (±inf past the float range)."""
    if value.denominator == 1:
        return int(value)
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class RPNEvaluator:
    """Stack-based postfix evaluator; holds no state between calls."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, postfix: list[str]) -> Union[int, float]:
        value, _ = self.evaluate_with_steps(postfix)
        return to_number(value)

    # -- Extras ------------------------------------------------------------

    def evaluate_with_steps(self, postfix: list[str]) -> tuple[Fraction, list[str]]:
        """Returns (exact value, list of steps such as "3 * -2 = -6")."""
        stack: list[Fraction] = []
        steps: list[str] = []

        for token in postfix:
            if is_number_token(token):
                stack.append(Fraction(int(token)))
                continue

            fn = _OP_FUNCS.get(token)
            if fn is None:
                raise InvalidOperator(token)
            if len(stack) < 2:
                raise InsufficientOperands(token)

            # Second pop is the left operand
            right = stack.pop()
            left = stack.pop()
            result = fn(left, right)
            steps.append(f"{_fmt(left)} {token} {_fmt(right)} = {_fmt(result)}")
            stack.append(result)

        if len(stack) != 1:
            raise MalformedRpn(len(stack))
        return stack[0], steps


def _fmt(v: Fraction) -> str:
    """Readable Fraction."""
    if v.denominator == 1:
        return str(int(v))
    return f"{v.numerator}/{v.denominator}"
