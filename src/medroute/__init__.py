"""
MedRoute - Medication Access Complaint Routing

MedRoute tells a citizen with a medication problem whether current Brazilian
law grants a right to remedy, which agencies to approach, and in what order.
It produces RECOMMENDATIONS, not filings: the citizen decides.

Core Principle: "The citizen decides. MedRoute routes and documents."

Key Features:
- Rights analysis per issue type with cited legal basis
- Agency routing from a validated reference directory
- Ordered action plan with documents, links and time estimates
- Separate prosecutorial escalation track
- Deterministic output, hashable for reproducibility checks

Quick Start:
    from medroute import ComplaintPipeline, load_directory

    pipeline = ComplaintPipeline(load_directory())
    recommendation = pipeline.run_from_dict({
        "medicationName": "Insulina NPH",
        "issueType": "shortage",
        "urgency": "high",
        "patientAttributes": {"hasChronicCondition": True},
    })

    print(recommendation.primary_agency.acronym)
    for step in recommendation.steps:
        print(step.order, step.title)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Enums
    AgencyRole,
    Confidence,
    IssueType,
    Urgency,
    # Complaint
    Location,
    MedicationComplaint,
    PatientAttributes,
    # Agency
    Agency,
    ContactInfo,
    FederativeUnit,
    ServiceLink,
    # Output
    EscalationRecommendation,
    EstimatedCost,
    LegalAnalysis,
    Recommendation,
    RecommendationStep,
)

# =============================================================================
# Directory and Engines
# =============================================================================
from .directory import (
    AgencyDirectory,
    DirectoryLoader,
    load_directory,
    load_directory_from_string,
)
from .engine import (
    ComplaintPipeline,
    LegalAnalysisEngine,
    RecommendationBuilder,
    analyze,
    evaluate_escalation,
    recommend,
    recommend_complaint,
)

# =============================================================================
# Utilities
# =============================================================================
from .canon import (
    canonical_json,
    content_hash,
    content_hash_short,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    AgencyNotFoundError,
    DirectoryConfigurationError,
    DirectoryLoadError,
    DirectoryVersionMismatch,
    InvalidComplaintError,
    MedRouteError,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Enums
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
    # Output
    "EscalationRecommendation",
    "EstimatedCost",
    "LegalAnalysis",
    "Recommendation",
    "RecommendationStep",
    # Directory
    "AgencyDirectory",
    "DirectoryLoader",
    "load_directory",
    "load_directory_from_string",
    # Engines
    "ComplaintPipeline",
    "LegalAnalysisEngine",
    "RecommendationBuilder",
    "analyze",
    "evaluate_escalation",
    "recommend",
    "recommend_complaint",
    # Utilities
    "canonical_json",
    "content_hash",
    "content_hash_short",
    # Exceptions
    "MedRouteError",
    "InvalidComplaintError",
    "DirectoryConfigurationError",
    "DirectoryLoadError",
    "DirectoryVersionMismatch",
    "AgencyNotFoundError",
]
