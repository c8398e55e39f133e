"""
MedRoute Legal Analysis Models

Output of the legal analysis engine: one LegalAnalysis per complaint.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from .enums import Confidence


@dataclass(frozen=True)
class EstimatedCost:
    """Expected out-of-pocket cost range for pursuing the remedy."""
    min: Decimal
    max: Decimal
    currency: str = "BRL"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary. Amounts as strings to preserve precision."""
        return {
            "min": str(self.min),
            "max": str(self.max),
            "currency": self.currency,
        }


@dataclass(frozen=True)
class LegalAnalysis:
    """
    Rights determination for a single complaint.

    Attributes:
        has_right: Whether current law grants a right to remedy
        legal_basis: Cited statutes/regulations (non-empty when has_right)
        reasoning: Plain-language explanation
        required_documents: Documents supporting the claim
        competent_agency_id: Directory id of the agency with primary jurisdiction
        recommended_procedure: What the citizen should file and where
        urgency_justification: Expedited-handling note, only for high/emergency
        confidence: Strength of the legal basis
        estimated_cost: Out-of-pocket cost range, None when free or not applicable
    """
    has_right: bool
    legal_basis: tuple[str, ...]
    reasoning: str
    required_documents: tuple[str, ...]
    competent_agency_id: str
    recommended_procedure: str
    urgency_justification: Optional[str] = None
    confidence: Confidence = Confidence.MEDIUM
    estimated_cost: Optional[EstimatedCost] = None

    def __post_init__(self) -> None:
        if self.has_right and not self.legal_basis:
            raise ValueError("A confirmed right must cite at least one legal basis")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {
            "hasRight": self.has_right,
            "legalBasis": list(self.legal_basis),
            "reasoning": self.reasoning,
            "requiredDocuments": list(self.required_documents),
            "competentAgencyId": self.competent_agency_id,
            "recommendedProcedure": self.recommended_procedure,
            "confidence": self.confidence.value,
            "estimatedCost": self.estimated_cost.to_dict() if self.estimated_cost else None,
        }
        if self.urgency_justification:
            result["urgencyJustification"] = self.urgency_justification
        return result
