"""Complaint analysis and recommendation endpoints."""
from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from ...canon import content_hash
from ...engine import ComplaintPipeline
from ...models import MedicationComplaint
from ..dependencies import get_pipeline
from ..schemas import (
    AnalysisResponse,
    ComplaintRequest,
    ErrorResponse,
    RecommendationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Recommendations"])


@router.post(
    "/recommendations",
    response_model=RecommendationResponse,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
async def create_recommendation(
    request: ComplaintRequest,
    pipeline: ComplaintPipeline = Depends(get_pipeline),
):
    """
    Analyze a complaint and return where to complain, in what order.

    The response carries a content hash of the recommendation: the same
    complaint always produces the same hash.
    """
    start_time = time.perf_counter()

    complaint = MedicationComplaint.from_dict(request.to_complaint_dict())
    recommendation = pipeline.run(complaint)
    payload = recommendation.to_dict()
    recommendation_hash = content_hash(payload)

    logger.info(
        "Recommendation complete",
        extra={
            "issue_type": complaint.issue_type.value,
            "urgency": recommendation.urgency_level.value,
            "primary_agency": recommendation.primary_agency.id,
            "recommendation_hash": recommendation_hash[:16],
            "duration_ms": round((time.perf_counter() - start_time) * 1000, 3),
        },
    )

    return RecommendationResponse(
        recommendation=payload,
        recommendation_hash=recommendation_hash,
    )


@router.post(
    "/analysis",
    response_model=AnalysisResponse,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
async def analyze_complaint(
    request: ComplaintRequest,
    pipeline: ComplaintPipeline = Depends(get_pipeline),
):
    """Return only the legal analysis: rights, legal basis and documents."""
    complaint = MedicationComplaint.from_dict(request.to_complaint_dict())
    legal = pipeline.analyze(complaint)
    return AnalysisResponse(legal_analysis=legal.to_dict())
