"""
Request-scoped access to the objects built at startup.

The lifespan handler stores the directory and pipeline on app.state; routes
receive them through these dependencies instead of module globals.
"""
from __future__ import annotations

from fastapi import Request

from ..directory import AgencyDirectory
from ..engine import ComplaintPipeline


def get_directory(request: Request) -> AgencyDirectory:
    return request.app.state.directory


def get_pipeline(request: Request) -> ComplaintPipeline:
    return request.app.state.pipeline
