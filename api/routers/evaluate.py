"""
Router: POST /evaluate

Runs the full pipeline (tokenize → validate → convert → evaluate) and returns
the value together with the postfix form and the applied steps.
CalculatorError is translated to 422 by the handler registered in api/main.py.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_calculator
from api.schemas import ErrorResponse, EvaluateRequest, EvaluateResponse
from calculator import Calculator

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post(
    "",
    response_model=EvaluateResponse,
    responses={422: {"model": ErrorResponse}},
)
def evaluate_expression(
    body: EvaluateRequest,
    calculator: Calculator = Depends(get_calculator),
) -> EvaluateResponse:
    ev = calculator.explain(body.expression)
    return EvaluateResponse(
        expression=ev.expression,
        value=ev.value,
        rpn=ev.rpn,
        steps=ev.steps,
        is_exact=ev.is_exact,
    )
