"""
MedRoute Directory Schemas

Pydantic models for validating agency directory YAML/JSON files.

These schemas define the structure of the reference data loaded at
startup. They map to the domain models in medroute.models.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

IssueTypeValue = Literal[
    "shortage", "quality", "adverse_reaction", "registration",
    "price", "accessibility", "import", "other",
]

AgencyRoleValue = Literal[
    "safety_regulator", "health_ministry", "market_regulator",
    "consumer_protection", "public_health_prosecutor", "escalation",
]


# =============================================================================
# Agency Schemas
# =============================================================================

class ServiceLinkSchema(BaseModel):
    """Schema for an online service offered by an agency."""
    name: str = Field(..., description="Service name")
    url: str = Field(..., description="Service URL")
    description: str = Field("", description="What the service does")
    is_primary: bool = Field(False, description="Main entry point for complaints")


class ContactSchema(BaseModel):
    """Schema for agency contact channels."""
    website: str = Field(..., description="Official website")
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    @field_validator("phone", mode="before")
    @classmethod
    def coerce_phone(cls, v: Any) -> Any:
        """Short numbers like 136 are parsed by YAML as integers."""
        if isinstance(v, int):
            return str(v)
        return v


class AgencySchema(BaseModel):
    """Schema for a single agency record."""
    id: str = Field(..., min_length=1, description="Unique identifier")
    name: str = Field(..., min_length=1)
    acronym: str = Field(..., min_length=1)
    description: str = Field("")
    responsibilities: list[str] = Field(default_factory=list)
    jurisdiction_tags: list[IssueTypeValue] = Field(
        default_factory=list,
        description="Issue types this agency can receive",
    )
    processing_time_estimate: str = Field(..., min_length=1)
    required_documents: list[str] = Field(default_factory=list)
    contact: ContactSchema
    online_services: list[ServiceLinkSchema] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",
    }


class FederativeUnitSchema(BaseModel):
    """Schema for a Brazilian state entry."""
    code: str = Field(..., min_length=2, max_length=2)
    name: str = Field(..., min_length=1)

    @field_validator("code")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()


# =============================================================================
# Directory Pack Schema (Top-Level)
# =============================================================================

class DirectoryPackSchema(BaseModel):
    """
    Top-level schema for an agency directory YAML/JSON file.
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    agencies: list[AgencySchema] = Field(..., min_length=1)
    roles: dict[AgencyRoleValue, str] = Field(
        ...,
        description="Role -> agency id bindings used by the engines",
    )
    states: list[FederativeUnitSchema] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_directory_pack(data: dict[str, Any]) -> DirectoryPackSchema:
    """
    Validate a directory dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return DirectoryPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check if a directory file's schema version is compatible (major version match)."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
