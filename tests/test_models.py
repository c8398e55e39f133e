"""
MedRoute Model Tests

Tests for the domain models: complaint parsing, enums and output records.
"""
from __future__ import annotations

from decimal import Decimal

import pytest

from medroute import (
    Confidence,
    EscalationRecommendation,
    EstimatedCost,
    InvalidComplaintError,
    IssueType,
    LegalAnalysis,
    MedicationComplaint,
    PatientAttributes,
    Recommendation,
    RecommendationStep,
    Urgency,
)
from tests.conftest import make_agency, make_complaint, make_complaint_dict, make_service


def make_legal(**overrides) -> LegalAnalysis:
    values = dict(
        has_right=True,
        legal_basis=("Lei A", "Lei B", "Lei C"),
        reasoning="Você tem direito.",
        required_documents=("RG",),
        competent_agency_id="anvisa",
        recommended_procedure="Abra um processo.",
    )
    values.update(overrides)
    return LegalAnalysis(**values)


class TestUrgency:
    """Tests for Urgency ordering."""

    def test_severity_order(self) -> None:
        assert Urgency.LOW < Urgency.MEDIUM < Urgency.HIGH < Urgency.EMERGENCY
        assert Urgency.EMERGENCY >= Urgency.HIGH
        assert not Urgency.MEDIUM > Urgency.HIGH

    @pytest.mark.parametrize("urgency,elevated", [
        (Urgency.LOW, False),
        (Urgency.MEDIUM, False),
        (Urgency.HIGH, True),
        (Urgency.EMERGENCY, True),
    ])
    def test_is_elevated(self, urgency: Urgency, elevated: bool) -> None:
        assert urgency.is_elevated is elevated

    def test_string_values(self) -> None:
        assert IssueType.ADVERSE_REACTION.value == "adverse_reaction"
        assert IssueType("import") is IssueType.IMPORT
        assert len(IssueType) == 8


class TestPatientAttributes:
    """Tests for PatientAttributes defaults and parsing."""

    def test_defaults(self) -> None:
        patient = PatientAttributes.from_dict(None)
        assert patient.is_citizen is True
        assert patient.has_chronic_condition is False
        assert patient.is_pregnant is False
        assert patient.age is None

    def test_missing_keys_use_defaults(self) -> None:
        patient = PatientAttributes.from_dict({"isPregnant": True})
        assert patient.is_pregnant is True
        assert patient.is_citizen is True
        assert patient.is_vulnerable is True

    def test_non_boolean_flag_rejected(self) -> None:
        with pytest.raises(InvalidComplaintError) as exc_info:
            PatientAttributes.from_dict({"isCitizen": "sim"})
        assert exc_info.value.field_name == "patientAttributes.isCitizen"

    @pytest.mark.parametrize("age", [-1, "30", True, 4.5])
    def test_invalid_age_rejected(self, age) -> None:
        with pytest.raises(InvalidComplaintError):
            PatientAttributes.from_dict({"age": age})


class TestMedicationComplaint:
    """Tests for MedicationComplaint validation."""

    def test_from_dict(self) -> None:
        complaint = MedicationComplaint.from_dict(make_complaint_dict(issueType="price", urgency="high"))
        assert complaint.issue_type is IssueType.PRICE
        assert complaint.urgency is Urgency.HIGH
        assert complaint.location.state == "SP"

    def test_coerces_string_enums(self) -> None:
        complaint = MedicationComplaint(
            medication_name="Dipirona",
            issue_type="shortage",
            urgency="emergency",
        )
        assert complaint.issue_type is IssueType.SHORTAGE
        assert complaint.urgency is Urgency.EMERGENCY

    def test_unknown_issue_type_rejected(self) -> None:
        with pytest.raises(InvalidComplaintError) as exc_info:
            MedicationComplaint.from_dict(make_complaint_dict(issueType="counterfeit"))
        error = exc_info.value
        assert error.code == "MR_INVALID_COMPLAINT"
        assert error.field_name == "issueType"
        assert "shortage" in error.details["allowed"]

    def test_unknown_urgency_rejected(self) -> None:
        with pytest.raises(InvalidComplaintError):
            MedicationComplaint.from_dict(make_complaint_dict(urgency="critical"))

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_medication_name_rejected(self, name: str) -> None:
        with pytest.raises(InvalidComplaintError) as exc_info:
            MedicationComplaint.from_dict(make_complaint_dict(medicationName=name))
        assert exc_info.value.field_name == "medicationName"

    @pytest.mark.parametrize("field", ["medicationName", "issueType", "urgency"])
    def test_missing_required_field_rejected(self, field: str) -> None:
        data = make_complaint_dict()
        del data[field]
        with pytest.raises(InvalidComplaintError) as exc_info:
            MedicationComplaint.from_dict(data)
        assert exc_info.value.field_name == field

    def test_optional_sections_default(self) -> None:
        complaint = MedicationComplaint.from_dict({
            "medicationName": "Dipirona",
            "issueType": "other",
            "urgency": "low",
        })
        assert complaint.patient == PatientAttributes()
        assert complaint.location.state == ""

    def test_null_optional_text_becomes_empty(self) -> None:
        complaint = MedicationComplaint.from_dict(make_complaint_dict(
            description=None, location={"state": None, "city": None},
        ))
        assert complaint.description == ""
        assert complaint.location.state == ""
        assert complaint.location.city == ""

    @pytest.mark.parametrize("overrides,field", [
        ({"description": 42}, "description"),
        ({"location": {"state": 35}}, "location.state"),
        ({"location": {"city": ["Campinas"]}}, "location.city"),
    ])
    def test_non_string_text_rejected(self, overrides: dict, field: str) -> None:
        with pytest.raises(InvalidComplaintError) as exc_info:
            MedicationComplaint.from_dict(make_complaint_dict(**overrides))
        assert exc_info.value.field_name == field

    def test_non_string_description_rejected_on_construction(self) -> None:
        with pytest.raises(InvalidComplaintError) as exc_info:
            MedicationComplaint("Dipirona", IssueType.OTHER, Urgency.LOW, description=None)
        assert exc_info.value.field_name == "description"

    def test_to_dict_round_trip_shape(self) -> None:
        complaint = make_complaint(IssueType.IMPORT, Urgency.MEDIUM, age=42)
        data = complaint.to_dict()
        assert data["issueType"] == "import"
        assert data["patientAttributes"]["age"] == 42
        assert MedicationComplaint.from_dict(data) == complaint

    def test_error_to_dict(self) -> None:
        error = InvalidComplaintError(message="bad", field_name="urgency")
        assert error.to_dict() == {"code": "MR_INVALID_COMPLAINT", "message": "bad", "field": "urgency"}
        assert "MR_INVALID_COMPLAINT" in str(error)


class TestLegalAnalysis:
    """Tests for LegalAnalysis invariants and serialization."""

    def test_right_requires_legal_basis(self) -> None:
        with pytest.raises(ValueError):
            make_legal(legal_basis=())

    def test_no_right_may_have_empty_basis(self) -> None:
        legal = make_legal(has_right=False, legal_basis=())
        assert legal.legal_basis == ()

    def test_to_dict_omits_absent_justification(self) -> None:
        data = make_legal().to_dict()
        assert data["hasRight"] is True
        assert data["competentAgencyId"] == "anvisa"
        assert data["confidence"] == Confidence.MEDIUM.value
        assert "urgencyJustification" not in data
        assert data["estimatedCost"] is None

    def test_estimated_cost_serializes_decimals_as_strings(self) -> None:
        legal = make_legal(estimated_cost=EstimatedCost(min=Decimal("100"), max=Decimal("1000")))
        assert legal.to_dict()["estimatedCost"] == {"min": "100", "max": "1000", "currency": "BRL"}


class TestRecommendation:
    """Tests for Recommendation structural invariants."""

    def _steps(self, *orders: int) -> tuple[RecommendationStep, ...]:
        return tuple(
            RecommendationStep(order=o, title=f"Passo {o}", description="", agency_label="X")
            for o in orders
        )

    def _build(self, primary, secondaries, steps) -> Recommendation:
        return Recommendation(
            primary_agency=primary,
            secondary_agencies=tuple(secondaries),
            steps=steps,
            estimated_time="10 dias úteis",
            urgency_level=Urgency.LOW,
            additional_info="",
            legal_analysis=make_legal(),
            escalation=EscalationRecommendation(recommended=False),
        )

    def test_step_order_must_start_at_one(self) -> None:
        with pytest.raises(ValueError):
            RecommendationStep(order=0, title="x", description="", agency_label="X")

    def test_gaps_rejected(self) -> None:
        with pytest.raises(ValueError):
            self._build(make_agency("a"), [], self._steps(1, 3))

    def test_primary_in_secondaries_rejected(self) -> None:
        primary = make_agency("a")
        with pytest.raises(ValueError):
            self._build(primary, [primary], self._steps(1))

    def test_duplicate_secondaries_rejected(self) -> None:
        with pytest.raises(ValueError):
            self._build(make_agency("a"), [make_agency("b"), make_agency("b")], self._steps(1))

    def test_step_to_dict_uses_interchange_keys(self) -> None:
        step = RecommendationStep(
            order=2,
            title="Verifique",
            description="d",
            agency_label="ANVISA",
            links=(make_service("Consulta"),),
            estimated_time="15-30 minutos",
        )
        data = step.to_dict()
        assert data["agency"] == "ANVISA"
        assert data["estimatedTime"] == "15-30 minutos"
        assert data["links"][0]["isPrimary"] is True
        assert "documents" not in data

    def test_agency_ids(self) -> None:
        rec = self._build(make_agency("a"), [make_agency("b"), make_agency("c")], self._steps(1, 2))
        assert rec.agency_ids == ["a", "b", "c"]
        assert rec.to_dict()["escalationRecommendation"] == {
            "recommended": False,
            "reason": "",
            "agency": None,
        }
