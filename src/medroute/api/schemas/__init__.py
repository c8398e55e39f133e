"""Pydantic request and response schemas for the MedRoute API."""
from __future__ import annotations

from .requests import ComplaintRequest, LocationInput, PatientAttributesInput
from .responses import (
    AnalysisResponse,
    ErrorResponse,
    HealthResponse,
    RecommendationResponse,
    StateResponse,
)

__all__ = [
    # Requests
    "ComplaintRequest",
    "LocationInput",
    "PatientAttributesInput",
    # Responses
    "AnalysisResponse",
    "ErrorResponse",
    "HealthResponse",
    "RecommendationResponse",
    "StateResponse",
]
