"""
MedRoute Complaint Pipeline

Runs the full flow for one complaint:

    complaint -> legal analysis -> recommendation

Both stages share one directory instance, loaded and validated at startup.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..directory import AgencyDirectory
from ..models import LegalAnalysis, MedicationComplaint, Recommendation
from .legal_analysis import LegalAnalysisEngine
from .recommendation_builder import RecommendationBuilder

logger = logging.getLogger(__name__)


@dataclass
class ComplaintPipeline:
    """
    Legal analysis followed by recommendation building.

    Usage:
        pipeline = ComplaintPipeline(load_directory())
        recommendation = pipeline.run_from_dict({
            "medicationName": "Insulina",
            "issueType": "shortage",
            "urgency": "high",
        })
    """

    directory: AgencyDirectory
    analysis_engine: LegalAnalysisEngine = field(init=False)
    builder: RecommendationBuilder = field(init=False)

    def __post_init__(self) -> None:
        self.analysis_engine = LegalAnalysisEngine(self.directory)
        self.builder = RecommendationBuilder(self.directory)

    def analyze(self, complaint: MedicationComplaint) -> LegalAnalysis:
        """Run only the legal analysis stage."""
        legal = self.analysis_engine.analyze(complaint)
        logger.debug(
            "Legal analysis: issue=%s has_right=%s competent=%s",
            complaint.issue_type.value, legal.has_right, legal.competent_agency_id,
        )
        return legal

    def run(self, complaint: MedicationComplaint) -> Recommendation:
        """
        Analyze and route a complaint.

        Raises:
            InvalidComplaintError: If the complaint is invalid
            DirectoryConfigurationError: If an agency reference is dangling
        """
        legal = self.analyze(complaint)
        recommendation = self.builder.build(complaint, legal)
        logger.debug(
            "Recommendation built: primary=%s secondary=%s steps=%d escalation=%s",
            recommendation.primary_agency.id,
            [a.id for a in recommendation.secondary_agencies],
            len(recommendation.steps),
            recommendation.escalation.recommended,
        )
        return recommendation

    def run_from_dict(self, data: Mapping[str, Any]) -> Recommendation:
        """Parse the camelCase complaint shape and run the pipeline."""
        complaint = MedicationComplaint.from_dict(data)
        logger.debug(
            "Complaint parsed: issue=%s urgency=%s",
            complaint.issue_type.value, complaint.urgency.value,
        )
        return self.run(complaint)


def recommend_complaint(
    complaint: MedicationComplaint,
    directory: AgencyDirectory,
) -> Recommendation:
    """
    Analyze and route a complaint.

    Convenience function that creates a temporary pipeline.
    """
    return ComplaintPipeline(directory).run(complaint)
