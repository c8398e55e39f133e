"""API routers."""
from __future__ import annotations

from . import agencies, recommendations

__all__ = ["agencies", "recommendations"]
