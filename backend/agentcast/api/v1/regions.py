"""Regions API endpoints."""
from typing import Optional
from fastapi import APIRouter, Query

from agentcast.geography import ALL_COUNTIES, get_hierarchy
from agentcast.schemas.region import (
    CountyListResponse,
    StateListResponse,
    StateResponse,
    SubAreaListResponse,
    TownListResponse,
)

router = APIRouter(prefix="/regions", tags=["Regions"])


@router.get("/states", response_model=StateListResponse)
async def list_states():
    """All states, flagged with whether county-level data is available."""
    hierarchy = get_hierarchy()
    items = [
        StateResponse(code=code, name=name, has_county_data=hierarchy.has_county_data(code))
        for code, name in hierarchy.list_states()
    ]
    return StateListResponse(items=items, total=len(items))


@router.get("/{state}/counties", response_model=CountyListResponse)
async def list_counties(state: str):
    hierarchy = get_hierarchy()
    code = hierarchy.normalize_state_code(state)
    counties = hierarchy.list_counties(code)
    return CountyListResponse(state=code, items=counties, total=len(counties))


@router.get("/{state}/towns", response_model=TownListResponse)
async def list_towns(
    state: str,
    county: Optional[str] = Query(None, description='County name, or "all"'),
):
    """
    Towns for a state, optionally narrowed to one county.

    Unknown states or counties return an empty list.
    """
    hierarchy = get_hierarchy()
    code = hierarchy.normalize_state_code(state)
    towns = hierarchy.resolve_towns(code, county or ALL_COUNTIES)
    return TownListResponse(state=code, county=county, items=towns, total=len(towns))


@router.get("/{state}/towns/{town}/areas", response_model=SubAreaListResponse)
async def list_sub_areas(state: str, town: str):
    hierarchy = get_hierarchy()
    code = hierarchy.normalize_state_code(state)
    areas = hierarchy.resolve_sub_areas(code, town)
    return SubAreaListResponse(state=code, town=town, items=areas, total=len(areas))
