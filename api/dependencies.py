"""
dependencies.py — FastAPI Dependency Injection.
Each dependency returns the shared component from Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from calculator import Calculator


def get_calculator(request: Request) -> Calculator:
    return request.app.state.calculator
