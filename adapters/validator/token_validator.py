"""
Adapter: TokenValidator
Implements the Validator port — structural and lexical checks of an infix
token sequence before conversion.

Grammar (no parentheses, no prefix operators):
  expr   = NUMBER (OP NUMBER)*
  NUMBER = ['+' | '-'] DIGIT+
  OP     = '+' | '-' | '*' | '/'

A sign is part of a number only inside a single token: "-5" is a number,
"- 5" is an operator followed by a number.
"""
from __future__ import annotations

from contracts import (
    EmptyExpression,
    InvalidNumber,
    InvalidOperator,
    MalformedExpression,
    is_number_token,
    is_operator_token,
)


class TokenValidator:
    """Pure check; raises on the first violation, left to right."""

    def validate(self, tokens: list[str]) -> None:
        if not tokens:
            raise EmptyExpression("Expression cannot be empty")

        if len(tokens) % 2 == 0:
            raise MalformedExpression(
                "Invalid expression format - must have odd number of tokens "
                "alternating number/operator/number..."
            )

        for i, token in enumerate(tokens):
            if i % 2 == 0:
                if not is_number_token(token):
                    raise InvalidNumber(token)
            elif not is_operator_token(token):
                raise InvalidOperator(token)
