"""
MedRoute Agency Directory

Read-only, in-memory table of the oversight bodies complaints are routed to.

Key features:
- Lookup by id and by issue-type jurisdiction
- Role bindings (consumer protection, escalation, ...) resolved to agencies
- Startup invariant check: construction fails on inconsistent data

The directory is built once at process start and passed into the engines.
It is never mutated afterwards, so it can be shared across threads.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from ..exceptions import AgencyNotFoundError, DirectoryConfigurationError
from ..models import COMPETENT_ROLES, Agency, AgencyRole, FederativeUnit, IssueType


# =============================================================================
# Integrity Validation
# =============================================================================

def validate_directory_integrity(
    agencies: Iterable[Agency],
    roles: Mapping[AgencyRole, str],
) -> list[str]:
    """
    Collect reference integrity problems.

    Catches:
    - Duplicate agency ids
    - Roles without a binding
    - Roles bound to a non-existent agency
    - Issue types no agency has jurisdiction over
    - Competent roles bound to an agency outside that issue type's jurisdiction

    Returns:
        List of problem descriptions (empty when consistent)
    """
    agencies = tuple(agencies)
    errors: list[str] = []

    by_id: dict[str, Agency] = {}
    for agency in agencies:
        if agency.id in by_id:
            errors.append(f"Duplicate agency ID: '{agency.id}'")
        else:
            by_id[agency.id] = agency

    for role in AgencyRole:
        agency_id = roles.get(role)
        if agency_id is None:
            errors.append(f"Role '{role.value}' is not bound to any agency")
        elif agency_id not in by_id:
            errors.append(f"Role '{role.value}' references non-existent agency '{agency_id}'")

    covered = {tag for agency in agencies for tag in agency.jurisdiction_tags}
    for issue_type in IssueType:
        if issue_type not in covered:
            errors.append(f"No agency has jurisdiction over issue type '{issue_type.value}'")

    for issue_type, role in COMPETENT_ROLES.items():
        agency = by_id.get(roles.get(role))
        if agency is not None and not agency.handles(issue_type):
            errors.append(
                f"Role '{role.value}' bound to '{agency.id}' which has no "
                f"jurisdiction over '{issue_type.value}'"
            )

    return errors


def _raise_on_errors(errors: list[str]) -> None:
    if errors:
        raise DirectoryConfigurationError(
            message=f"Agency directory is misconfigured: {len(errors)} problem(s)",
            details={"errors": errors},
        )


# =============================================================================
# Agency Directory
# =============================================================================

class AgencyDirectory:
    """
    Immutable lookup over the loaded agency records.

    Usage:
        directory = load_directory()

        anvisa = directory.get_agency("anvisa")
        for agency in directory.find_by_jurisdiction(IssueType.PRICE):
            print(agency.acronym)

        escalation = directory.agency_for_role(AgencyRole.ESCALATION)
    """

    def __init__(
        self,
        agencies: Iterable[Agency],
        roles: Mapping[AgencyRole, str],
        states: Iterable[FederativeUnit] = (),
    ):
        """
        Build and validate the directory.

        Raises:
            DirectoryConfigurationError: If the reference data is inconsistent
        """
        agency_list = tuple(agencies)
        role_map: dict[AgencyRole, str] = {}
        for role, agency_id in roles.items():
            try:
                role_map[AgencyRole(role)] = agency_id
            except ValueError:
                raise DirectoryConfigurationError(
                    message=f"Unknown agency role: {role!r}",
                    details={"role": str(role), "allowed": [r.value for r in AgencyRole]},
                )

        _raise_on_errors(validate_directory_integrity(agency_list, role_map))

        self._agencies: tuple[Agency, ...] = agency_list
        self._by_id: Mapping[str, Agency] = MappingProxyType({a.id: a for a in agency_list})
        self._roles: Mapping[AgencyRole, str] = MappingProxyType(role_map)
        self._states: tuple[FederativeUnit, ...] = tuple(states)
        self._by_issue: Mapping[IssueType, tuple[Agency, ...]] = MappingProxyType({
            issue_type: tuple(a for a in agency_list if a.handles(issue_type))
            for issue_type in IssueType
        })

    def validate(self) -> None:
        """
        Re-run the startup invariant check.

        Raises:
            DirectoryConfigurationError: If the reference data is inconsistent
        """
        _raise_on_errors(validate_directory_integrity(self._agencies, self._roles))

    def get_agency(self, agency_id: str) -> Agency:
        """
        Get an agency by id.

        Raises:
            AgencyNotFoundError: If no agency has this id (programming error)
        """
        agency = self._by_id.get(agency_id)
        if agency is None:
            raise AgencyNotFoundError(
                message=f"Agency not found: {agency_id}",
                details={"agency_id": agency_id, "available": list(self._by_id)},
            )
        return agency

    def find_agency(self, agency_id: str) -> Optional[Agency]:
        """Get an agency by id, or None."""
        return self._by_id.get(agency_id)

    def find_by_jurisdiction(self, issue_type: IssueType) -> tuple[Agency, ...]:
        """Agencies that can receive this issue type, in directory order."""
        return self._by_issue[IssueType(issue_type)]

    def agency_id_for_role(self, role: AgencyRole) -> str:
        """Get the agency id bound to a role."""
        return self._roles[role]

    def agency_for_role(self, role: AgencyRole) -> Agency:
        """Get the agency bound to a role."""
        return self.get_agency(self._roles[role])

    @property
    def agencies(self) -> tuple[Agency, ...]:
        """All agencies in directory order."""
        return self._agencies

    @property
    def agency_ids(self) -> list[str]:
        """All agency ids in directory order."""
        return [a.id for a in self._agencies]

    @property
    def roles(self) -> Mapping[AgencyRole, str]:
        """Read-only role bindings."""
        return self._roles

    @property
    def states(self) -> tuple[FederativeUnit, ...]:
        """Brazilian states, for presentation-side lookups."""
        return self._states

    def __len__(self) -> int:
        return len(self._agencies)

    def __iter__(self) -> Iterator[Agency]:
        return iter(self._agencies)

    def __contains__(self, agency_id: object) -> bool:
        return agency_id in self._by_id

    def __repr__(self) -> str:
        return f"AgencyDirectory(agencies={self.agency_ids})"
