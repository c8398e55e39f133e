"""
MedRoute Agency Models

Reference records for the government and oversight bodies a complaint
can be routed to. Built once by the directory loader, read-only afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import IssueType


@dataclass(frozen=True)
class ServiceLink:
    """An online service offered by an agency."""
    name: str
    url: str
    description: str = ""
    is_primary: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "url": self.url,
            "description": self.description,
            "isPrimary": self.is_primary,
        }


@dataclass(frozen=True)
class ContactInfo:
    """Public contact channels of an agency."""
    website: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting absent channels."""
        result: dict[str, Any] = {"website": self.website}
        if self.phone:
            result["phone"] = self.phone
        if self.email:
            result["email"] = self.email
        if self.address:
            result["address"] = self.address
        return result


@dataclass(frozen=True)
class Agency:
    """
    A government or oversight body that can receive complaints.

    Attributes:
        id: Unique key (e.g., "anvisa")
        name: Full name
        acronym: Display acronym (e.g., "ANVISA")
        description: What the agency does
        responsibilities: Responsibility bullet points
        jurisdiction_tags: Issue types this agency can receive
        required_documents: Documents the agency asks for
        processing_time_estimate: Stated average processing time
        contact: Contact channels
        online_services: Online services, primary ones flagged
    """
    id: str
    name: str
    acronym: str
    description: str
    contact: ContactInfo
    processing_time_estimate: str
    responsibilities: tuple[str, ...] = ()
    jurisdiction_tags: frozenset[IssueType] = field(default_factory=frozenset)
    required_documents: tuple[str, ...] = ()
    online_services: tuple[ServiceLink, ...] = ()

    @property
    def primary_services(self) -> tuple[ServiceLink, ...]:
        """Online services flagged as primary entry points."""
        return tuple(s for s in self.online_services if s.is_primary)

    def handles(self, issue_type: IssueType) -> bool:
        """Check if this agency has jurisdiction over an issue type."""
        return issue_type in self.jurisdiction_tags

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "acronym": self.acronym,
            "description": self.description,
            "responsibilities": list(self.responsibilities),
            # Sorted for deterministic output
            "jurisdictionTags": sorted(tag.value for tag in self.jurisdiction_tags),
            "requiredDocuments": list(self.required_documents),
            "processingTimeEstimate": self.processing_time_estimate,
            "contact": self.contact.to_dict(),
            "onlineServices": [s.to_dict() for s in self.online_services],
        }


@dataclass(frozen=True)
class FederativeUnit:
    """A Brazilian state (UF), used by presentation-side lookups."""
    code: str
    name: str

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary."""
        return {"code": self.code, "name": self.name}
