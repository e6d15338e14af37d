"""
Port: Validator
Responsibility: structural and lexical checks of an infix token sequence.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Validator(Protocol):
    def validate(self, tokens: list[str]) -> None:
        """
        Checks that tokens alternate number/operator/number... with odd length.
        Raises on the first violation found in a left-to-right scan:
          - EmptyExpression for an empty list
          - MalformedExpression for an even token count
          - InvalidNumber(token) for a bad token at an even index
          - InvalidOperator(token) for a bad token at an odd index
        Returns None when the sequence is well formed.
        """
        ...
