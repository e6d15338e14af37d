"""
Port: Converter
Responsibility: infix → postfix (RPN) conversion.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Converter(Protocol):
    def to_postfix(self, tokens: list[str]) -> list[str]:
        """
        Converts a validated infix token sequence to postfix order,
        resolving precedence and left-associativity.
        For an input of length 2n+1 the output has exactly 2n+1 tokens.
        """
        ...
