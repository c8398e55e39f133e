"""
MedRoute Enumerations

All enumeration types used throughout the MedRoute system.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Issue Types
# =============================================================================

class IssueType(str, Enum):
    """Kind of medication-access problem reported by the citizen."""
    SHORTAGE = "shortage"                  # Medication unavailable (SUS or market)
    QUALITY = "quality"                    # Defective product
    ADVERSE_REACTION = "adverse_reaction"
    REGISTRATION = "registration"          # Not registered with the regulator
    PRICE = "price"                        # Abusive or unregulated pricing
    ACCESSIBILITY = "accessibility"        # Coverage denial, access barriers
    IMPORT = "import"                      # Personal-use importation
    OTHER = "other"


# =============================================================================
# Urgency
# =============================================================================

_URGENCY_SEVERITY = {
    "low": 0,
    "medium": 1,
    "high": 2,
    "emergency": 3,
}


class Urgency(str, Enum):
    """
    Urgency declared for the complaint, ordered by severity.

    Comparison operators follow severity, not alphabetical order.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"

    @property
    def severity(self) -> int:
        """Integer rank (low=0 ... emergency=3)."""
        return _URGENCY_SEVERITY[self.value]

    @property
    def is_elevated(self) -> bool:
        """True for high and emergency."""
        return self.severity >= _URGENCY_SEVERITY["high"]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Urgency):
            return NotImplemented
        return self.severity >= other.severity


# =============================================================================
# Legal Analysis Confidence
# =============================================================================

class Confidence(str, Enum):
    """How firmly the cited legal basis supports the rights determination."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# Directory Roles
# =============================================================================

class AgencyRole(str, Enum):
    """
    Functional roles the engines route to.

    The directory file binds each role to a concrete agency id, so the
    engines never hard-code agency identifiers.
    """
    SAFETY_REGULATOR = "safety_regulator"                  # ANVISA
    HEALTH_MINISTRY = "health_ministry"                    # MS
    MARKET_REGULATOR = "market_regulator"                  # CADE
    CONSUMER_PROTECTION = "consumer_protection"            # PROCON
    PUBLIC_HEALTH_PROSECUTOR = "public_health_prosecutor"  # MPT
    ESCALATION = "escalation"                              # MPE


# Role whose agency receives each issue type as competent agency. The
# directory check requires the bound agency to carry the issue type in
# its jurisdiction tags.
COMPETENT_ROLES: dict[IssueType, AgencyRole] = {
    IssueType.SHORTAGE: AgencyRole.HEALTH_MINISTRY,
    IssueType.ACCESSIBILITY: AgencyRole.HEALTH_MINISTRY,
    IssueType.QUALITY: AgencyRole.SAFETY_REGULATOR,
    IssueType.ADVERSE_REACTION: AgencyRole.SAFETY_REGULATOR,
    IssueType.REGISTRATION: AgencyRole.SAFETY_REGULATOR,
    IssueType.IMPORT: AgencyRole.SAFETY_REGULATOR,
    IssueType.OTHER: AgencyRole.SAFETY_REGULATOR,
    IssueType.PRICE: AgencyRole.MARKET_REGULATOR,
}
