"""Agency directory endpoints."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from ...directory import AgencyDirectory
from ...models import IssueType
from ..dependencies import get_directory
from ..schemas import StateResponse

router = APIRouter(tags=["Agencies"])


@router.get("/agencies", response_model=list[dict[str, Any]])
async def list_agencies(directory: AgencyDirectory = Depends(get_directory)):
    """List every agency in directory order."""
    return [agency.to_dict() for agency in directory]


@router.get("/agencies/jurisdiction/{issue_type}", response_model=list[dict[str, Any]])
async def agencies_for_issue(
    issue_type: IssueType,
    directory: AgencyDirectory = Depends(get_directory),
):
    """Agencies that can receive complaints of this issue type."""
    return [agency.to_dict() for agency in directory.find_by_jurisdiction(issue_type)]


@router.get("/agencies/{agency_id}", response_model=dict[str, Any])
async def get_agency(agency_id: str, directory: AgencyDirectory = Depends(get_directory)):
    """Get one agency with contacts, documents and online services."""
    agency = directory.find_agency(agency_id)
    if agency is None:
        raise HTTPException(
            status_code=404,
            detail=f"Agency '{agency_id}' not found. Available: {directory.agency_ids}",
        )
    return agency.to_dict()


@router.get("/states", response_model=list[StateResponse])
async def list_states(directory: AgencyDirectory = Depends(get_directory)):
    """Brazilian states (UFs), for location pickers."""
    return [StateResponse(code=s.code, name=s.name) for s in directory.states]
