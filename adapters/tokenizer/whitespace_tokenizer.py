"""
Adapter: WhitespaceTokenizer
Implements the Tokenizer port — splits on runs of whitespace.

Tokens are not classified here; "5.5", "@" and "abc" all come out as
ordinary tokens and are rejected later by the validator.
"""
from __future__ import annotations

import logging
from typing import Optional

from contracts import EmptyExpression

logger = logging.getLogger("shunt_calc.tokenizer")


class WhitespaceTokenizer:
    """Stateless whitespace splitter."""

    def tokenize(self, expression: Optional[str]) -> list[str]:
        if expression is None or not expression.strip():
            raise EmptyExpression()
        # str.split() with no separator collapses runs and drops empty fragments
        tokens = expression.split()
        logger.debug("Tokenized %r -> %s", expression, tokens)
        return tokens
