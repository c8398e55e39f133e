"""
MedRoute Complaint Models

The structured input to the pipeline: one MedicationComplaint per request.

Key components:
- PatientAttributes: Patient facts that affect rights and escalation
- Location: State/city, carried through for presentation and lookups
- MedicationComplaint: The immutable complaint record
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..exceptions import InvalidComplaintError
from .enums import IssueType, Urgency


# =============================================================================
# Patient Attributes
# =============================================================================

@dataclass(frozen=True)
class PatientAttributes:
    """
    Patient facts relevant to the rights analysis.

    Attributes:
        has_chronic_condition: Patient has a chronic condition
        is_pregnant: Patient is pregnant
        is_citizen: Patient is a Brazilian citizen (default True)
        age: Optional age, carried but never branched upon
    """
    has_chronic_condition: bool = False
    is_pregnant: bool = False
    is_citizen: bool = True
    age: Optional[int] = None

    @property
    def is_vulnerable(self) -> bool:
        """Chronic patients and pregnant patients get special protection."""
        return self.has_chronic_condition or self.is_pregnant

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> PatientAttributes:
        """Build from the camelCase interchange shape, applying defaults."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidComplaintError(
                message="patientAttributes must be an object",
                field_name="patientAttributes",
            )

        flags = {}
        for key, attr, default in (
            ("hasChronicCondition", "has_chronic_condition", False),
            ("isPregnant", "is_pregnant", False),
            ("isCitizen", "is_citizen", True),
        ):
            value = data.get(key, default)
            if value is None:
                value = default
            if not isinstance(value, bool):
                raise InvalidComplaintError(
                    message=f"{key} must be a boolean",
                    field_name=f"patientAttributes.{key}",
                    details={"value": repr(value)},
                )
            flags[attr] = value

        age = data.get("age")
        if age is not None and (isinstance(age, bool) or not isinstance(age, int) or age < 0):
            raise InvalidComplaintError(
                message="age must be a non-negative integer",
                field_name="patientAttributes.age",
                details={"value": repr(age)},
            )

        return cls(age=age, **flags)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {
            "hasChronicCondition": self.has_chronic_condition,
            "isPregnant": self.is_pregnant,
            "isCitizen": self.is_citizen,
        }
        if self.age is not None:
            result["age"] = self.age
        return result


# =============================================================================
# Location
# =============================================================================

@dataclass(frozen=True)
class Location:
    """Where the citizen lives. Not used for routing decisions."""
    state: str = ""
    city: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary."""
        return {"state": self.state, "city": self.city}


# =============================================================================
# Medication Complaint
# =============================================================================

@dataclass(frozen=True)
class MedicationComplaint:
    """
    A citizen's structured report of a medication-access problem.

    Construction validates the fields the core depends on, so every
    MedicationComplaint that exists is routable.

    Attributes:
        medication_name: Name of the medication (non-empty)
        issue_type: Kind of problem
        urgency: Declared urgency
        description: Free text, opaque to the core
        patient: Patient attributes (defaults applied)
        location: State and city
    """
    medication_name: str
    issue_type: IssueType
    urgency: Urgency
    description: str = ""
    patient: PatientAttributes = field(default_factory=PatientAttributes)
    location: Location = field(default_factory=Location)

    def __post_init__(self) -> None:
        if not isinstance(self.medication_name, str) or not self.medication_name.strip():
            raise InvalidComplaintError(
                message="medicationName is required",
                field_name="medicationName",
            )
        if not isinstance(self.description, str):
            raise InvalidComplaintError(
                message="description must be a string",
                field_name="description",
            )
        # Coerce raw strings so callers may pass "quality" or IssueType.QUALITY
        object.__setattr__(self, "issue_type", _coerce_enum(IssueType, self.issue_type, "issueType"))
        object.__setattr__(self, "urgency", _coerce_enum(Urgency, self.urgency, "urgency"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MedicationComplaint:
        """
        Build a complaint from the camelCase interchange shape.

        Args:
            data: Dictionary with medicationName, issueType, urgency,
                description, patientAttributes and location

        Returns:
            Validated MedicationComplaint

        Raises:
            InvalidComplaintError: If a required field is missing or invalid
        """
        if not isinstance(data, Mapping):
            raise InvalidComplaintError(message="Complaint must be an object")

        for required in ("medicationName", "issueType", "urgency"):
            if data.get(required) is None:
                raise InvalidComplaintError(
                    message=f"{required} is required",
                    field_name=required,
                )

        location_data = data.get("location") or {}
        if not isinstance(location_data, Mapping):
            raise InvalidComplaintError(
                message="location must be an object",
                field_name="location",
            )

        return cls(
            medication_name=data["medicationName"],
            issue_type=data["issueType"],
            urgency=data["urgency"],
            description=_optional_text(data.get("description"), "description"),
            patient=PatientAttributes.from_dict(data.get("patientAttributes")),
            location=Location(
                state=_optional_text(location_data.get("state"), "location.state"),
                city=_optional_text(location_data.get("city"), "location.city"),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "medicationName": self.medication_name,
            "issueType": self.issue_type.value,
            "urgency": self.urgency.value,
            "description": self.description,
            "patientAttributes": self.patient.to_dict(),
            "location": self.location.to_dict(),
        }


def _coerce_enum(enum_cls: type, value: Any, field_name: str) -> Any:
    """Convert a raw value into enum_cls or raise InvalidComplaintError."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidComplaintError(
            message=f"Unknown {field_name}: {value!r}",
            field_name=field_name,
            details={"allowed": [member.value for member in enum_cls]},
        )


def _optional_text(value: Any, field_name: str) -> str:
    """Optional free-text field: None becomes "", anything else must be a string."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidComplaintError(
            message=f"{field_name} must be a string",
            field_name=field_name,
        )
    return value
