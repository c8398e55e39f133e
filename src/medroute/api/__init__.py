"""
MedRoute HTTP service (FastAPI).

Run with:
    uvicorn medroute.api.main:app
"""
from __future__ import annotations

from .main import app, create_app

__all__ = ["app", "create_app"]
