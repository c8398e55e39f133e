"""
MedRoute Engine

Legal analysis, escalation and recommendation building.

Usage:
    from medroute.directory import load_directory
    from medroute.engine import ComplaintPipeline

    pipeline = ComplaintPipeline(load_directory())
    recommendation = pipeline.run(complaint)
"""
from __future__ import annotations

from .escalation import (
    escalation_reason,
    evaluate_escalation,
    should_escalate,
)
from .legal_analysis import (
    ISSUE_HANDLERS,
    LegalAnalysisEngine,
    Ruling,
    analyze,
    urgency_justification,
)
from .pipeline import (
    ComplaintPipeline,
    recommend_complaint,
)
from .recommendation_builder import (
    RecommendationBuilder,
    recommend,
)

__all__ = [
    # Legal analysis
    "ISSUE_HANDLERS",
    "LegalAnalysisEngine",
    "Ruling",
    "analyze",
    "urgency_justification",
    # Escalation
    "escalation_reason",
    "evaluate_escalation",
    "should_escalate",
    # Recommendation
    "RecommendationBuilder",
    "recommend",
    # Pipeline
    "ComplaintPipeline",
    "recommend_complaint",
]
