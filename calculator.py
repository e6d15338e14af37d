"""
calculator.py — evaluation pipeline: tokenize → validate → convert → evaluate.

    >>> evaluate("3 * -2 + 6")
    0
    >>> evaluate("20 / 4 / 2")
    2.5

Every stage is a port (see ports/) with a stateless default adapter, so a
single Calculator instance is safe to share between threads and requests.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from adapters.converter.shunting_yard import ShuntingYardConverter
from adapters.evaluator.rpn_evaluator import RPNEvaluator, to_number
from adapters.tokenizer.whitespace_tokenizer import WhitespaceTokenizer
from adapters.validator.token_validator import TokenValidator
from contracts import CalculatorError, Evaluation
from ports.converter import Converter
from ports.evaluator import Evaluator
from ports.tokenizer import Tokenizer
from ports.validator import Validator

logger = logging.getLogger("shunt_calc.calculator")


class Calculator:
    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        validator: Validator | None = None,
        converter: Converter | None = None,
        evaluator: Evaluator | None = None,
    ) -> None:
        if evaluator is not None and not isinstance(evaluator, Evaluator):
            raise TypeError(f"{type(evaluator).__name__} does not implement the Evaluator port")
        self._tokenizer = tokenizer or WhitespaceTokenizer()
        self._validator = validator or TokenValidator()
        self._converter = converter or ShuntingYardConverter()
        self._evaluator = evaluator or RPNEvaluator()

    def to_rpn(self, expression: Optional[str]) -> list[str]:
        """Tokenizes, validates and converts; returns the postfix tokens."""
        tokens = self._tokenizer.tokenize(expression)
        self._validator.validate(tokens)
        return self._converter.to_postfix(tokens)

    def evaluate(self, expression: Optional[str]) -> Union[int, float]:
        try:
            rpn = self.to_rpn(expression)
            return self._evaluator.evaluate(rpn)
        except CalculatorError as exc:
            logger.info("Rejected %r: %s", expression, exc)
            raise

    def explain(self, expression: Optional[str]) -> Evaluation:
        """Like evaluate(), but returns tokens, postfix and every applied step."""
        try:
            tokens = self._tokenizer.tokenize(expression)
            self._validator.validate(tokens)
            rpn = self._converter.to_postfix(tokens)
            exact, steps = self._evaluator.evaluate_with_steps(rpn)
        except CalculatorError as exc:
            logger.info("Rejected %r: %s", expression, exc)
            raise

        value = to_number(exact)
        return Evaluation(
            expression=expression,
            tokens=tokens,
            rpn=rpn,
            value=value,
            is_exact=isinstance(value, int) or value == exact,
            steps=steps,
        )


_DEFAULT = Calculator()


def evaluate(expression: Optional[str]) -> Union[int, float]:
    """Evaluates a space separated infix expression of integers and + - * /."""
    return _DEFAULT.evaluate(expression)
