"""
api/main.py — FastAPI entry point.

The calculator is stateless, so one instance is created at startup and
shared by every request.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import evaluate
from api.schemas import ErrorResponse, HealthResponse
from calculator import Calculator
from config import Settings
from contracts import CalculatorError

logger = logging.getLogger("shunt_calc")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.calculator = Calculator()

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Global error handler
    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        body = ErrorResponse(error=exc.code, detail=exc.message, token=exc.token)
        return JSONResponse(status_code=422, content=body.model_dump())

    logger.info("%s API ready.", settings.app_title)
    return app


app = create_app()
