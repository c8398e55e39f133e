"""
MedRoute Agency Directory

Schema validation, loading and lookup for the agency reference data.

The directory is a YAML or JSON file listing the oversight bodies,
the role bindings the engines route through, and the Brazilian states
used by presentation-side lookups.

Usage:
    from medroute.directory import load_directory

    # Bundled reference data
    directory = load_directory()

    # Custom file (validated the same way)
    directory = load_directory("config/agencies.yaml")

    anvisa = directory.get_agency("anvisa")
"""
from __future__ import annotations

from .agency_directory import (
    AgencyDirectory,
    validate_directory_integrity,
)
from .loader import (
    DEFAULT_DIRECTORY_PATH,
    DirectoryLoader,
    load_directory,
    load_directory_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    AgencySchema,
    ContactSchema,
    DirectoryPackSchema,
    FederativeUnitSchema,
    ServiceLinkSchema,
    check_schema_version,
    validate_directory_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Directory
    "AgencyDirectory",
    "validate_directory_integrity",
    # Loader
    "DEFAULT_DIRECTORY_PATH",
    "DirectoryLoader",
    "load_directory",
    "load_directory_from_string",
    # Validation
    "validate_directory_pack",
    "check_schema_version",
    # Schemas
    "DirectoryPackSchema",
    "AgencySchema",
    "ContactSchema",
    "ServiceLinkSchema",
    "FederativeUnitSchema",
]
