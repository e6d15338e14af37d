"""
Port: Evaluator
Responsibility: stack-based evaluation of a postfix token sequence.
"""
from fractions import Fraction
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, postfix: list[str]) -> Union[int, float]:
        """
        Evaluates an RPN sequence to a single number.
        Returns int for integral results, float otherwise.
        Raises InsufficientOperands, DivisionByZero or MalformedRpn.
        """
        ...

    def evaluate_with_steps(self, postfix: list[str]) -> tuple[Fraction, list[str]]:
        """
        Evaluates an RPN sequence exactly.
        Returns (value, steps), one readable step per applied operator,
        e.g. "3 * -2 = -6". Raises the same errors as evaluate().
        """
        ...
