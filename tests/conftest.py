"""
Pytest configuration and fixtures for MedRoute tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import copy
from typing import Any

import pytest
import yaml

from medroute.directory import DEFAULT_DIRECTORY_PATH, AgencyDirectory, load_directory
from medroute.engine import ComplaintPipeline, LegalAnalysisEngine, RecommendationBuilder
from medroute.models import (
    Agency,
    ContactInfo,
    IssueType,
    Location,
    MedicationComplaint,
    PatientAttributes,
    ServiceLink,
    Urgency,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_complaint(
    issue_type: IssueType = IssueType.QUALITY,
    urgency: Urgency = Urgency.LOW,
    medication_name: str = "Losartana 50mg",
    description: str = "",
    has_chronic_condition: bool = False,
    is_pregnant: bool = False,
    is_citizen: bool = True,
    age: int = None,
    state: str = "SP",
    city: str = "São Paulo",
) -> MedicationComplaint:
    """Create a MedicationComplaint with default patient attributes."""
    return MedicationComplaint(
        medication_name=medication_name,
        issue_type=issue_type,
        urgency=urgency,
        description=description,
        patient=PatientAttributes(
            has_chronic_condition=has_chronic_condition,
            is_pregnant=is_pregnant,
            is_citizen=is_citizen,
            age=age,
        ),
        location=Location(state=state, city=city),
    )


def make_complaint_dict(**overrides: Any) -> dict[str, Any]:
    """Create the camelCase complaint payload accepted by from_dict and the API."""
    data: dict[str, Any] = {
        "medicationName": "Losartana 50mg",
        "issueType": "quality",
        "urgency": "low",
        "description": "Comprimidos com coloração alterada",
        "patientAttributes": {
            "hasChronicCondition": False,
            "isPregnant": False,
            "isCitizen": True,
        },
        "location": {"state": "SP", "city": "São Paulo"},
    }
    data.update(overrides)
    return data


def make_agency(
    id: str,
    acronym: str = None,
    jurisdiction_tags: frozenset = frozenset(),
    processing_time_estimate: str = "10 dias úteis",
    online_services: tuple = (),
) -> Agency:
    """Create an Agency with required fields."""
    return Agency(
        id=id,
        name=f"Agency {id}",
        acronym=acronym or id.upper(),
        description=f"{id} description",
        contact=ContactInfo(website=f"https://{id}.example.gov.br"),
        processing_time_estimate=processing_time_estimate,
        jurisdiction_tags=frozenset(jurisdiction_tags),
        online_services=online_services,
    )


def make_service(name: str, is_primary: bool = True) -> ServiceLink:
    """Create a ServiceLink."""
    return ServiceLink(name=name, url=f"https://example.gov.br/{name.lower()}", is_primary=is_primary)


def directory_data() -> dict[str, Any]:
    """Fresh, mutable copy of the bundled directory file."""
    with open(DEFAULT_DIRECTORY_PATH, "r", encoding="utf-8") as f:
        return copy.deepcopy(yaml.safe_load(f))


# All issue type / urgency combinations, for property-style tests
ALL_ISSUE_TYPES = list(IssueType)
ALL_URGENCIES = list(Urgency)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def directory() -> AgencyDirectory:
    """The bundled agency directory."""
    return load_directory()


@pytest.fixture
def analysis_engine(directory: AgencyDirectory) -> LegalAnalysisEngine:
    return LegalAnalysisEngine(directory)


@pytest.fixture
def builder(directory: AgencyDirectory) -> RecommendationBuilder:
    return RecommendationBuilder(directory)


@pytest.fixture
def pipeline(directory: AgencyDirectory) -> ComplaintPipeline:
    return ComplaintPipeline(directory)
