"""
Port: Tokenizer
Responsibility: splitting a raw expression string into textual tokens.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, expression: Optional[str]) -> list[str]:
        """
        Splits an expression into an ordered list of tokens.
        Tokens carry no position metadata.
        Raises EmptyExpression for None, empty or whitespace-only input.
        """
        ...
