"""
MedRoute Directory Loader

Loads and validates the agency directory from YAML or JSON files.

Converts Pydantic schema models to MedRoute domain models and builds an
AgencyDirectory, which runs the startup invariant check.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import (
    DirectoryConfigurationError,
    DirectoryLoadError,
    DirectoryVersionMismatch,
)
from ..models import (
    Agency,
    AgencyRole,
    ContactInfo,
    FederativeUnit,
    IssueType,
    ServiceLink,
)
from .agency_directory import AgencyDirectory
from .schema import (
    SCHEMA_VERSION,
    AgencySchema,
    DirectoryPackSchema,
    check_schema_version,
    validate_directory_pack,
)

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_PATH = Path(__file__).parent.parent / "data" / "agencies.yaml"


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_agency(schema: AgencySchema) -> Agency:
    """Convert AgencySchema to Agency model."""
    return Agency(
        id=schema.id,
        name=schema.name,
        acronym=schema.acronym,
        description=schema.description,
        responsibilities=tuple(schema.responsibilities),
        jurisdiction_tags=frozenset(IssueType(tag) for tag in schema.jurisdiction_tags),
        required_documents=tuple(schema.required_documents),
        processing_time_estimate=schema.processing_time_estimate,
        contact=ContactInfo(
            website=schema.contact.website,
            phone=schema.contact.phone,
            email=schema.contact.email,
            address=schema.contact.address,
        ),
        online_services=tuple(
            ServiceLink(
                name=s.name,
                url=s.url,
                description=s.description,
                is_primary=s.is_primary,
            )
            for s in schema.online_services
        ),
    )


def _convert_directory_pack(schema: DirectoryPackSchema) -> AgencyDirectory:
    """Convert DirectoryPackSchema to a validated AgencyDirectory."""
    return AgencyDirectory(
        agencies=[_convert_agency(a) for a in schema.agencies],
        roles={AgencyRole(role): agency_id for role, agency_id in schema.roles.items()},
        states=[FederativeUnit(code=s.code, name=s.name) for s in schema.states],
    )


# =============================================================================
# Directory Loader
# =============================================================================

class DirectoryLoader:
    """
    Loads agency directories from YAML or JSON files.

    Usage:
        loader = DirectoryLoader()
        directory = loader.load("path/to/agencies.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject files with incompatible schema versions
        """
        self.strict_version = strict_version

    def load(self, path: Union[str, Path]) -> AgencyDirectory:
        """
        Load an agency directory from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Validated AgencyDirectory

        Raises:
            DirectoryLoadError: If file cannot be read or parsed
            DirectoryVersionMismatch: If schema version incompatible
            DirectoryConfigurationError: If validation or integrity checks fail
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise DirectoryLoadError(
                message=f"Failed to load agency directory: {e}",
                details={"path": str(path), "error": str(e)},
            )

        directory = self.load_data(data, source=str(path))
        logger.info(
            "Loaded agency directory from %s (%d agencies)",
            path, len(directory),
        )
        return directory

    def load_data(self, data: Any, source: str = "<memory>") -> AgencyDirectory:
        """
        Build a directory from already-parsed data.

        Args:
            data: Dictionary loaded from YAML/JSON
            source: Where the data came from, for error messages
        """
        if not isinstance(data, dict):
            raise DirectoryLoadError(
                message="Agency directory must be a mapping at the top level",
                details={"path": source},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise DirectoryVersionMismatch(
                message=f"Schema version mismatch: directory has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_directory_pack(data)
        except ValidationError as e:
            raise DirectoryConfigurationError(
                message=f"Agency directory validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False, include_context=False), "path": source},
            )

        return _convert_directory_pack(schema)

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_directory(path: Optional[Union[str, Path]] = None) -> AgencyDirectory:
    """
    Load an agency directory, defaulting to the bundled reference data.

    Args:
        path: Path to YAML or JSON file (None = bundled agencies.yaml)
    """
    return DirectoryLoader().load(path or DEFAULT_DIRECTORY_PATH)


def load_directory_from_string(
    content: str,
    format: str = "yaml",
) -> AgencyDirectory:
    """
    Load an agency directory from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DirectoryLoadError(
            message=f"Failed to parse agency directory: {e}",
            details={"format": format},
        )

    return DirectoryLoader().load_data(data)
