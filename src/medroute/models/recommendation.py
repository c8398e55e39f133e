"""
MedRoute Recommendation Models

Models for the final output of MedRoute: where to complain and in what order.

Key components:
- RecommendationStep: One action in the ordered plan
- EscalationRecommendation: Parallel referral to the prosecutorial body
- Recommendation: The complete, immutable result for one complaint

Core Principle: "The citizen decides. MedRoute routes and documents."
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .agency import Agency, ServiceLink
from .analysis import LegalAnalysis
from .enums import Urgency


# =============================================================================
# Recommendation Step
# =============================================================================

@dataclass(frozen=True)
class RecommendationStep:
    """
    A single action in the recommended plan.

    Attributes:
        order: Position in the plan, starting at 1
        title: Short imperative title
        description: What to do
        agency_label: Agency acronym or phase label ("Preparação", ...)
        documents: Documents to bring, if any
        links: Online services to use, if any
        estimated_time: How long the step usually takes
    """
    order: int
    title: str
    description: str
    agency_label: str
    documents: Optional[tuple[str, ...]] = None
    links: Optional[tuple[ServiceLink, ...]] = None
    estimated_time: Optional[str] = None

    def __post_init__(self) -> None:
        if self.order < 1:
            raise ValueError(f"Step order must be >= 1, got {self.order}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {
            "order": self.order,
            "title": self.title,
            "description": self.description,
            "agency": self.agency_label,
        }
        if self.documents is not None:
            result["documents"] = list(self.documents)
        if self.links is not None:
            result["links"] = [link.to_dict() for link in self.links]
        if self.estimated_time is not None:
            result["estimatedTime"] = self.estimated_time
        return result


# =============================================================================
# Escalation
# =============================================================================

@dataclass(frozen=True)
class EscalationRecommendation:
    """Whether to add a parallel prosecutorial escalation, and why."""
    recommended: bool
    reason: str = ""
    agency: Optional[Agency] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "recommended": self.recommended,
            "reason": self.reason,
            "agency": self.agency.to_dict() if self.agency else None,
        }


# =============================================================================
# Recommendation
# =============================================================================

@dataclass(frozen=True)
class Recommendation:
    """
    Complete routing recommendation for one complaint.

    Either every field is populated or no Recommendation is built.
    """
    primary_agency: Agency
    secondary_agencies: tuple[Agency, ...]
    steps: tuple[RecommendationStep, ...]
    estimated_time: str
    urgency_level: Urgency
    additional_info: str
    legal_analysis: LegalAnalysis
    escalation: EscalationRecommendation

    def __post_init__(self) -> None:
        secondary_ids = [a.id for a in self.secondary_agencies]
        if self.primary_agency.id in secondary_ids:
            raise ValueError("Primary agency cannot also be a secondary agency")
        if len(secondary_ids) != len(set(secondary_ids)):
            raise ValueError("Secondary agencies must be unique")
        orders = [s.order for s in self.steps]
        if orders != list(range(1, len(orders) + 1)):
            raise ValueError(f"Step orders must run 1..n without gaps, got {orders}")

    @property
    def agency_ids(self) -> list[str]:
        """Primary then secondary agency ids."""
        return [self.primary_agency.id] + [a.id for a in self.secondary_agencies]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the interchange contract consumed by presentation code."""
        return {
            "primaryAgency": self.primary_agency.to_dict(),
            "secondaryAgencies": [a.to_dict() for a in self.secondary_agencies],
            "steps": [s.to_dict() for s in self.steps],
            "estimatedTime": self.estimated_time,
            "urgencyLevel": self.urgency_level.value,
            "additionalInfo": self.additional_info,
            "legalAnalysis": self.legal_analysis.to_dict(),
            "escalationRecommendation": self.escalation.to_dict(),
        }
