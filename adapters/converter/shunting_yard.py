"""
Adapter: ShuntingYardConverter
Implements the Converter port — Dijkstra's Shunting Yard algorithm,
restricted to binary left-associative operators without parentheses.

  1 + 2 * 3   →  1 2 3 * +
  20 / 4 / 2  →  20 4 / 2 /
"""
from __future__ import annotations

import logging

from contracts import PRECEDENCE, is_operator_token

logger = logging.getLogger("shunt_calc.converter")


def precedence(op: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    return PRECEDENCE.get(op, 0)


class ShuntingYardConverter:
    """Infix → postfix in one linear pass."""

    def to_postfix(self, tokens: list[str]) -> list[str]:
        output: list[str] = []
        op_stack: list[str] = []

        for token in tokens:
            if not is_operator_token(token):
                output.append(token)
                continue
            # ">=" pops equal precedence first: a - b - c == (a - b) - c
            while op_stack and precedence(op_stack[-1]) >= precedence(token):
                output.append(op_stack.pop())
            op_stack.append(token)

        while op_stack:
            output.append(op_stack.pop())

        logger.debug("Postfix of %s -> %s", tokens, output)
        return output
