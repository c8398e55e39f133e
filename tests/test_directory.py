"""
MedRoute Agency Directory Tests

Tests that verify:
1. The bundled directory loads and passes the startup invariant check
2. Lookups are deterministic
3. Broken reference data is rejected with DirectoryConfigurationError
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from medroute.directory import (
    AgencyDirectory,
    DirectoryLoader,
    check_schema_version,
    load_directory,
    load_directory_from_string,
    validate_directory_integrity,
)
from medroute.exceptions import (
    AgencyNotFoundError,
    DirectoryConfigurationError,
    DirectoryLoadError,
    DirectoryVersionMismatch,
)
from medroute.models import AgencyRole, IssueType
from tests.conftest import directory_data, make_agency


class TestBundledDirectory:
    """Tests for the shipped agencies.yaml."""

    def test_loads_all_agencies(self, directory: AgencyDirectory) -> None:
        assert directory.agency_ids == ["anvisa", "ms", "cade", "procon", "mpe", "mpt"]
        assert len(directory) == 6

    def test_every_issue_type_has_jurisdiction(self, directory: AgencyDirectory) -> None:
        for issue_type in IssueType:
            assert directory.find_by_jurisdiction(issue_type), issue_type

    def test_every_role_is_bound(self, directory: AgencyDirectory) -> None:
        for role in AgencyRole:
            assert directory.agency_id_for_role(role) in directory

    def test_role_bindings(self, directory: AgencyDirectory) -> None:
        assert directory.agency_for_role(AgencyRole.SAFETY_REGULATOR).acronym == "ANVISA"
        assert directory.agency_for_role(AgencyRole.HEALTH_MINISTRY).acronym == "MS"
        assert directory.agency_for_role(AgencyRole.MARKET_REGULATOR).acronym == "CADE"
        assert directory.agency_for_role(AgencyRole.CONSUMER_PROTECTION).acronym == "PROCON"
        assert directory.agency_for_role(AgencyRole.PUBLIC_HEALTH_PROSECUTOR).acronym == "MPT"
        assert directory.agency_for_role(AgencyRole.ESCALATION).acronym == "MPE"

    def test_states(self, directory: AgencyDirectory) -> None:
        codes = [s.code for s in directory.states]
        assert len(codes) == 27
        assert "SP" in codes and "DF" in codes

    def test_phone_numbers_are_strings(self, directory: AgencyDirectory) -> None:
        assert directory.get_agency("ms").contact.phone == "136"

    def test_validate_passes(self, directory: AgencyDirectory) -> None:
        directory.validate()

    def test_schema_version(self) -> None:
        assert check_schema_version(directory_data())


class TestLookups:
    """Tests for get_agency and find_by_jurisdiction."""

    def test_get_agency(self, directory: AgencyDirectory) -> None:
        anvisa = directory.get_agency("anvisa")
        assert anvisa.name == "Agência Nacional de Vigilância Sanitária"
        assert anvisa.primary_services

    def test_get_unknown_agency_is_fatal(self, directory: AgencyDirectory) -> None:
        with pytest.raises(AgencyNotFoundError) as exc_info:
            directory.get_agency("inmetro")
        assert isinstance(exc_info.value, DirectoryConfigurationError)
        assert exc_info.value.code == "MR_AGENCY_NOT_FOUND"

    def test_find_agency_returns_none(self, directory: AgencyDirectory) -> None:
        assert directory.find_agency("inmetro") is None

    def test_find_by_jurisdiction_file_order(self, directory: AgencyDirectory) -> None:
        ids = [a.id for a in directory.find_by_jurisdiction(IssueType.SHORTAGE)]
        assert ids == ["ms", "mpe", "mpt"]

    def test_find_by_jurisdiction_accepts_string(self, directory: AgencyDirectory) -> None:
        ids = [a.id for a in directory.find_by_jurisdiction("price")]
        assert ids == ["cade", "procon"]

    def test_lookups_are_stable(self, directory: AgencyDirectory) -> None:
        first = directory.find_by_jurisdiction(IssueType.QUALITY)
        second = directory.find_by_jurisdiction(IssueType.QUALITY)
        assert first == second

    def test_roles_are_read_only(self, directory: AgencyDirectory) -> None:
        with pytest.raises(TypeError):
            directory.roles[AgencyRole.ESCALATION] = "anvisa"


class TestIntegrityValidation:
    """Tests for the startup invariant check."""

    def test_uncovered_issue_type(self, directory: AgencyDirectory) -> None:
        agencies = [a for a in directory.agencies if a.id != "cade" and a.id != "procon"]
        roles = dict(directory.roles)
        roles[AgencyRole.MARKET_REGULATOR] = "anvisa"
        roles[AgencyRole.CONSUMER_PROTECTION] = "anvisa"
        errors = validate_directory_integrity(agencies, roles)
        assert errors == [
            "No agency has jurisdiction over issue type 'price'",
            "Role 'market_regulator' bound to 'anvisa' which has no jurisdiction over 'price'",
        ]

    def test_dangling_role(self, directory: AgencyDirectory) -> None:
        roles = dict(directory.roles)
        roles[AgencyRole.ESCALATION] = "mpf"
        with pytest.raises(DirectoryConfigurationError) as exc_info:
            AgencyDirectory(directory.agencies, roles)
        assert "Role 'escalation' references non-existent agency 'mpf'" in exc_info.value.details["errors"]

    def test_missing_role(self, directory: AgencyDirectory) -> None:
        roles = dict(directory.roles)
        del roles[AgencyRole.CONSUMER_PROTECTION]
        errors = validate_directory_integrity(directory.agencies, roles)
        assert errors == ["Role 'consumer_protection' is not bound to any agency"]

    def test_duplicate_ids(self, directory: AgencyDirectory) -> None:
        agencies = list(directory.agencies) + [make_agency("anvisa")]
        errors = validate_directory_integrity(agencies, directory.roles)
        assert errors == ["Duplicate agency ID: 'anvisa'"]

    def test_all_problems_reported(self) -> None:
        with pytest.raises(DirectoryConfigurationError) as exc_info:
            AgencyDirectory([make_agency("solo", jurisdiction_tags={IssueType.OTHER})], {})
        errors = exc_info.value.details["errors"]
        assert len(errors) == len(AgencyRole) + len(IssueType) - 1

    def test_competent_role_outside_jurisdiction(self) -> None:
        """Another agency still covers price, but the routed one cannot receive it."""
        data = directory_data()
        cade = next(a for a in data["agencies"] if a["id"] == "cade")
        cade["jurisdiction_tags"] = []
        with pytest.raises(DirectoryConfigurationError) as exc_info:
            DirectoryLoader().load_data(data)
        assert exc_info.value.details["errors"] == [
            "Role 'market_regulator' bound to 'cade' which has no jurisdiction over 'price'"
        ]

    def test_rebinding_within_jurisdiction_accepted(self, directory: AgencyDirectory) -> None:
        roles = dict(directory.roles)
        roles[AgencyRole.MARKET_REGULATOR] = "procon"
        roles[AgencyRole.HEALTH_MINISTRY] = "mpe"
        rebound = AgencyDirectory(directory.agencies, roles)
        assert rebound.agency_for_role(AgencyRole.MARKET_REGULATOR).id == "procon"

    def test_rebinding_outside_jurisdiction_rejected(self, directory: AgencyDirectory) -> None:
        roles = dict(directory.roles)
        roles[AgencyRole.SAFETY_REGULATOR] = "procon"
        errors = validate_directory_integrity(directory.agencies, roles)
        assert errors == [
            f"Role 'safety_regulator' bound to 'procon' which has no jurisdiction over '{issue}'"
            for issue in ("adverse_reaction", "registration", "import", "other")
        ]

    def test_accepts_single_pass_iterable(self, directory: AgencyDirectory) -> None:
        agencies = (agency for agency in directory.agencies)
        assert validate_directory_integrity(agencies, directory.roles) == []

    def test_unknown_role_key(self, directory: AgencyDirectory) -> None:
        roles = {role.value: agency_id for role, agency_id in directory.roles.items()}
        roles["ombudsman"] = "ms"
        with pytest.raises(DirectoryConfigurationError) as exc_info:
            AgencyDirectory(directory.agencies, roles)
        assert exc_info.value.details["role"] == "ombudsman"

    def test_role_keys_may_be_strings(self, directory: AgencyDirectory) -> None:
        roles = {role.value: agency_id for role, agency_id in directory.roles.items()}
        assert AgencyDirectory(directory.agencies, roles).roles == directory.roles


class TestDirectoryLoader:
    """Tests for loading YAML/JSON reference data."""

    def test_load_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "agencies.yaml"
        path.write_text(yaml.safe_dump(directory_data(), allow_unicode=True), encoding="utf-8")
        assert load_directory(path).agency_ids == load_directory().agency_ids

    def test_load_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "agencies.json"
        path.write_text(json.dumps(directory_data(), ensure_ascii=False), encoding="utf-8")
        assert len(load_directory(path)) == 6

    def test_load_from_string(self) -> None:
        content = yaml.safe_dump(directory_data(), allow_unicode=True)
        assert len(load_directory_from_string(content)) == 6

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryLoadError):
            load_directory(tmp_path / "missing.yaml")

    def test_malformed_yaml(self) -> None:
        with pytest.raises(DirectoryLoadError):
            load_directory_from_string("agencies: [unclosed")

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(DirectoryLoadError):
            load_directory_from_string("- just\n- a list\n")

    def test_version_mismatch(self) -> None:
        data = directory_data()
        data["schema_version"] = "2.0.0"
        with pytest.raises(DirectoryVersionMismatch):
            DirectoryLoader().load_data(data)

    def test_version_check_can_be_relaxed(self) -> None:
        data = directory_data()
        data["schema_version"] = "2.0.0"
        assert len(DirectoryLoader(strict_version=False).load_data(data)) == 6

    def test_unknown_jurisdiction_tag(self) -> None:
        data = directory_data()
        data["agencies"][4]["jurisdiction_tags"].append("emergency")
        with pytest.raises(DirectoryConfigurationError) as exc_info:
            DirectoryLoader().load_data(data)
        assert exc_info.value.code == "MR_DIRECTORY_CONFIG_ERROR"
        json.dumps(exc_info.value.to_dict())

    def test_unknown_field_rejected(self) -> None:
        data = directory_data()
        data["agencies"][0]["processing_time"] = "30 dias"
        with pytest.raises(DirectoryConfigurationError):
            DirectoryLoader().load_data(data)

    def test_role_pointing_to_missing_agency(self) -> None:
        data = directory_data()
        data["roles"]["escalation"] = "mpf"
        with pytest.raises(DirectoryConfigurationError) as exc_info:
            DirectoryLoader().load_data(data)
        assert any("mpf" in e for e in exc_info.value.details["errors"])

    def test_issue_type_without_agency(self) -> None:
        data = directory_data()
        for agency in data["agencies"]:
            agency["jurisdiction_tags"] = [t for t in agency["jurisdiction_tags"] if t != "import"]
        with pytest.raises(DirectoryConfigurationError) as exc_info:
            DirectoryLoader().load_data(data)
        assert exc_info.value.details["errors"] == [
            "No agency has jurisdiction over issue type 'import'",
            "Role 'safety_regulator' bound to 'anvisa' which has no jurisdiction over 'import'",
        ]
