"""
MedRoute Models

All domain models for the MedRoute complaint routing framework.

    from medroute.models import (
        # Enums
        IssueType, Urgency, Confidence, AgencyRole,
        # Input
        MedicationComplaint, PatientAttributes, Location,
        # Reference data
        Agency, ContactInfo, ServiceLink, FederativeUnit,
        # Output
        LegalAnalysis, EstimatedCost,
        Recommendation, RecommendationStep, EscalationRecommendation,
    )
"""
from __future__ import annotations

from .enums import (
    COMPETENT_ROLES,
    AgencyRole,
    Confidence,
    IssueType,
    Urgency,
)
from .complaint import (
    Location,
    MedicationComplaint,
    PatientAttributes,
)
from .agency import (
    Agency,
    ContactInfo,
    FederativeUnit,
    ServiceLink,
)
from .analysis import (
    EstimatedCost,
    LegalAnalysis,
)
from .recommendation import (
    EscalationRecommendation,
    Recommendation,
    RecommendationStep,
)

__all__ = [
    # Enums
    "COMPETENT_ROLES",
    "AgencyRole",
    "Confidence",
    "IssueType",
    "Urgency",
    # Complaint
    "Location",
    "MedicationComplaint",
    "PatientAttributes",
    # Agency
    "Agency",
    "ContactInfo",
    "FederativeUnit",
    "ServiceLink",
    # Analysis
    "EstimatedCost",
    "LegalAnalysis",
    # Recommendation
    "EscalationRecommendation",
    "Recommendation",
    "RecommendationStep",
]
