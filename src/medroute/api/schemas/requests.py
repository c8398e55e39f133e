"""Request schemas for the API."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class PatientAttributesInput(BaseModel):
    """Patient facts relevant to the rights analysis."""
    has_chronic_condition: Optional[bool] = Field(default=None, alias="hasChronicCondition")
    is_pregnant: Optional[bool] = Field(default=None, alias="isPregnant")
    is_citizen: Optional[bool] = Field(default=None, alias="isCitizen")
    age: Optional[int] = Field(default=None, description="Carried but never used for routing")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class LocationInput(BaseModel):
    """Where the citizen lives."""
    state: str = Field(default="", description="UF code, e.g., 'SP'")
    city: str = ""

    model_config = {"extra": "forbid"}


class ComplaintRequest(BaseModel):
    """
    A medication-access complaint.

    Enumerated fields are plain strings here; the domain model validates them
    so unknown values come back as MR_INVALID_COMPLAINT errors.
    """
    medication_name: str = Field(..., alias="medicationName", description="Medication name")
    issue_type: str = Field(
        ...,
        alias="issueType",
        description="shortage|quality|adverse_reaction|registration|price|accessibility|import|other",
    )
    urgency: str = Field(..., description="low|medium|high|emergency")
    description: str = ""
    patient_attributes: Optional[PatientAttributesInput] = Field(default=None, alias="patientAttributes")
    location: Optional[LocationInput] = None

    model_config = {
        "populate_by_name": True,
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "medicationName": "Insulina NPH",
                    "issueType": "shortage",
                    "urgency": "high",
                    "description": "Falta na farmácia da UBS há três semanas",
                    "patientAttributes": {
                        "hasChronicCondition": True,
                        "isPregnant": False,
                        "isCitizen": True,
                    },
                    "location": {"state": "SP", "city": "Campinas"},
                },
            ]
        },
    }

    def to_complaint_dict(self) -> dict[str, Any]:
        """camelCase dict accepted by MedicationComplaint.from_dict."""
        return self.model_dump(by_alias=True, exclude_none=True)
