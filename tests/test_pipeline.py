"""
MedRoute Pipeline Tests

Tests for the complaint -> analysis -> recommendation flow and the
canonical hashing used to check reproducibility.
"""
from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from medroute import (
    ComplaintPipeline,
    InvalidComplaintError,
    IssueType,
    Urgency,
    canonical_json,
    content_hash,
    content_hash_short,
    recommend_complaint,
)
from medroute.directory import AgencyDirectory
from tests.conftest import make_complaint, make_complaint_dict


class TestComplaintPipeline:
    """Tests for ComplaintPipeline."""

    def test_run_from_dict(self, pipeline: ComplaintPipeline) -> None:
        rec = pipeline.run_from_dict(make_complaint_dict(issueType="adverse_reaction", urgency="high"))
        assert rec.primary_agency.id == "anvisa"
        assert rec.urgency_level is Urgency.HIGH
        assert rec.legal_analysis.urgency_justification

    def test_invalid_input_raises_before_analysis(self, pipeline: ComplaintPipeline) -> None:
        with pytest.raises(InvalidComplaintError):
            pipeline.run_from_dict(make_complaint_dict(issueType="fraud"))

    def test_run_matches_module_function(self, directory: AgencyDirectory, pipeline: ComplaintPipeline) -> None:
        complaint = make_complaint(IssueType.ACCESSIBILITY, Urgency.MEDIUM, has_chronic_condition=True)
        assert pipeline.run(complaint) == recommend_complaint(complaint, directory)

    def test_analyze_only(self, pipeline: ComplaintPipeline) -> None:
        legal = pipeline.analyze(make_complaint(IssueType.REGISTRATION))
        assert legal.has_right is True
        assert legal.competent_agency_id == "anvisa"

    def test_logs_each_stage(self, pipeline: ComplaintPipeline, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="medroute"):
            pipeline.run_from_dict(make_complaint_dict())
        messages = [r.getMessage() for r in caplog.records if r.name == "medroute.engine.pipeline"]
        assert len(messages) == 3
        assert messages[0].startswith("Complaint parsed")
        assert messages[1].startswith("Legal analysis")
        assert messages[2].startswith("Recommendation built")

    def test_output_serializes(self, pipeline: ComplaintPipeline) -> None:
        data = pipeline.run_from_dict(make_complaint_dict(issueType="import")).to_dict()
        assert data["legalAnalysis"]["estimatedCost"] == {"min": "100", "max": "1000", "currency": "BRL"}
        assert data["steps"][0]["order"] == 1
        assert data["escalationRecommendation"]["recommended"] is True
        canonical_json(data)


class TestCanonicalJson:
    """Tests for deterministic serialization."""

    def test_sorted_compact(self) -> None:
        assert canonical_json({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    def test_keeps_non_ascii(self) -> None:
        assert canonical_json({"uf": "São Paulo"}) == '{"uf":"São Paulo"}'

    def test_special_types(self) -> None:
        assert canonical_json({"v": Decimal("1.50"), "u": Urgency.HIGH}) == '{"u":"high","v":"1.50"}'
        assert canonical_json({"s": frozenset({"b", "a"})}) == '{"s":["a","b"]}'

    def test_models_serialize_via_to_dict(self) -> None:
        complaint = make_complaint()
        assert canonical_json(complaint) == canonical_json(complaint.to_dict())

    def test_hash_is_key_order_independent(self) -> None:
        assert content_hash({"a": 1, "b": 2}) == content_hash({"b": 2, "a": 1})
        assert len(content_hash({"a": 1})) == 64
        assert content_hash_short({"a": 1}) == content_hash({"a": 1})[:12]

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            canonical_json({"x": object()})
