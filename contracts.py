"""
contracts.py — Single source of truth for every data type in ShuntCalc.
All modules import tokens, results and errors ONLY from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokens ──────────────────────────────────────

class TokenKind(str, Enum):
    NUMBER = "number"      # "42", "-5", "+7"
    OPERATOR = "operator"  # "+", "-", "*", "/"


OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/"})

# Higher binds tighter; equal precedence pops (left-associative)
PRECEDENCE: dict[str, int] = {"+": 1, "-": 1, "*": 2, "/": 2}

_ASCII_DIGITS = frozenset("0123456789")


def is_number_token(token: str) -> bool:
    """Signed base-10 integer: optional '+'/'-' followed by ASCII digits only."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all(ch in _ASCII_DIGITS for ch in body)


def is_operator_token(token: str) -> bool:
    return token in OPERATORS


def classify_token(token: str) -> Optional[TokenKind]:
    """Returns the token kind, or None for anything outside the grammar."""
    if is_operator_token(token):
        return TokenKind.OPERATOR
    if is_number_token(token):
        return TokenKind.NUMBER
    return None


# ─────────────────────────── Errors ──────────────────────────────────────

class CalculatorError(ValueError):
    """Base class for every failure raised by the evaluation pipeline."""

    code = "CALCULATOR_ERROR"

    def __init__(self, message: str, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token


class EmptyExpression(CalculatorError):
    code = "EMPTY_EXPRESSION"

    def __init__(self, message: str = "Expression cannot be null or empty") -> None:
        super().__init__(message)


class MalformedExpression(CalculatorError):
    code = "MALFORMED_EXPRESSION"

    def __init__(
        self,
        message: str = "Invalid expression format - must alternate number/operator/number...",
        token: Optional[str] = None,
    ) -> None:
        super().__init__(message, token)


class InvalidNumber(MalformedExpression):
    code = "INVALID_NUMBER"

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid number format: {token!r}", token)


class InvalidOperator(MalformedExpression):
    code = "INVALID_OPERATOR"

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid operator: {token!r}", token)


class InsufficientOperands(CalculatorError):
    code = "INSUFFICIENT_OPERANDS"

    def __init__(self, token: Optional[str] = None) -> None:
        super().__init__("Invalid expression - insufficient operands", token)


class DivisionByZero(CalculatorError, ZeroDivisionError):
    code = "DIVISION_BY_ZERO"

    def __init__(self) -> None:
        super().__init__("Division by zero is not allowed", "/")


class MalformedRpn(CalculatorError):
    code = "MALFORMED_RPN"

    def __init__(self, remaining: int) -> None:
        super().__init__(
            f"Invalid expression - malformed RPN ({remaining} values left on stack)"
        )
        self.remaining = remaining


# ─────────────────────────── Evaluation ──────────────────────────────────

Number = Union[int, float]


class Evaluation(BaseModel):
    """Full trace of one pipeline run."""
    model_config = ConfigDict(frozen=True)

    expression: str
    tokens: list[str]
    rpn: list[str]
    value: Number
    is_exact: bool = True                            # False when value is a rounded float
    steps: list[str] = Field(default_factory=list)   # e.g. "3 * -2 = -6"
