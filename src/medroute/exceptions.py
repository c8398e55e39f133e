"""
MedRoute Exception Hierarchy

Domain-specific exceptions for medication-access complaint routing.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: MR_<CATEGORY>_<SPECIFIC>

Two families matter to callers:
- InvalidComplaintError: the input was invalid (user-facing, never retried)
- DirectoryConfigurationError: the reference data is broken (fatal, startup-time)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class MedRouteError(Exception):
    """
    Base exception for all MedRoute errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (MR_*)
        details: Additional context about the error
        field_name: Offending input field, if applicable
    """
    message: str
    code: str = "MR_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    field_name: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.field_name:
            parts.append(f"(field: {self.field_name})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.field_name:
            result["field"] = self.field_name
        return result


# =============================================================================
# Complaint Errors
# =============================================================================

@dataclass
class InvalidComplaintError(MedRouteError):
    """Complaint is missing a required field or uses a value outside its enumeration."""
    code: str = "MR_INVALID_COMPLAINT"


# =============================================================================
# Directory Errors
# =============================================================================

@dataclass
class DirectoryConfigurationError(MedRouteError):
    """Agency directory reference data is inconsistent."""
    code: str = "MR_DIRECTORY_CONFIG_ERROR"


@dataclass
class DirectoryLoadError(DirectoryConfigurationError):
    """Failed to read or parse the agency directory file."""
    code: str = "MR_DIRECTORY_LOAD_ERROR"


@dataclass
class DirectoryVersionMismatch(DirectoryConfigurationError):
    """Directory file schema version doesn't match expected version."""
    code: str = "MR_DIRECTORY_VERSION_MISMATCH"


@dataclass
class AgencyNotFoundError(DirectoryConfigurationError):
    """Referenced agency id has no record in the directory."""
    code: str = "MR_AGENCY_NOT_FOUND"
