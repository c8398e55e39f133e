"""Response schemas for the API."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class RecommendationResponse(BaseModel):
    """Routing recommendation plus its content hash."""
    recommendation: dict[str, Any]
    recommendation_hash: str = Field(..., alias="recommendationHash")

    model_config = {"populate_by_name": True}


class AnalysisResponse(BaseModel):
    """Legal analysis only."""
    legal_analysis: dict[str, Any] = Field(..., alias="legalAnalysis")

    model_config = {"populate_by_name": True}


class StateResponse(BaseModel):
    """A Brazilian federative unit."""
    code: str
    name: str


class HealthResponse(BaseModel):
    """Liveness probe response."""
    healthy: bool
    version: str
    agencies_loaded: int


class ErrorResponse(BaseModel):
    """Structured error response (MedRouteError.to_dict)."""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    field: Optional[str] = None
