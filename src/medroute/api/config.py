"""
Service configuration.

Read once from the environment at import time. The core library takes no
configuration; these values only affect the HTTP service.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..directory import DEFAULT_DIRECTORY_PATH

# =============================================================================
# Configuration
# =============================================================================

MR_DIRECTORY_PATH = Path(os.getenv("MR_DIRECTORY_PATH") or DEFAULT_DIRECTORY_PATH)
MR_LOG_LEVEL = os.getenv("MR_LOG_LEVEL", "INFO")
MR_DOCS_ENABLED = os.getenv("MR_DOCS_ENABLED", "true").lower() == "true"
MR_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "MR_CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173",
    ).split(",")
    if origin.strip()
]


def log_level(name: Optional[str] = None) -> int:
    """Resolve a level name such as "debug" to its logging constant (INFO if unknown)."""
    return getattr(logging, (name or MR_LOG_LEVEL).upper(), logging.INFO)
