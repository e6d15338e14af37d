"""
schemas.py — FastAPI request/response models.
Kept apart from contracts.py so the API can evolve independently.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., max_length=10_000)


class EvaluateResponse(BaseModel):
    expression: str
    value: Union[int, float]
    rpn: list[str]
    steps: list[str]
    is_exact: bool


class ErrorResponse(BaseModel):
    error: str                   # e.g. "DIVISION_BY_ZERO", "INVALID_NUMBER"
    detail: str
    token: Optional[str] = None  # offending token, where there is one


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
