"""Coverage area API endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.auth.jwt import get_current_agent
from agentcast.database import get_db
from agentcast.geography import ALL_COUNTIES, get_hierarchy
from agentcast.models import Agent, AgentCoverageArea
from agentcast.schemas.preference import CoverageResponse, CoverageUpdate
from agentcast.services.coverage_selection import CoverageSelection, TownKey
from agentcast.services.preferences import NotificationPreferenceStore
from agentcast.utils.audit import log_audit_event

router = APIRouter(prefix="/coverage", tags=["Coverage Areas"])


def _area_label(area: AgentCoverageArea) -> str:
    if area.city:
        return TownKey(area.city, area.neighborhood).display()
    region = get_hierarchy().region_path(area.state, area.county)
    return " / ".join(region.path())


def _build_response(areas: list[AgentCoverageArea], warnings: list[str] = None) -> CoverageResponse:
    return CoverageResponse(
        items=areas,
        labels=[_area_label(area) for area in areas],
        warnings=warnings or [],
        total=len(areas),
    )


@router.get("/me", response_model=CoverageResponse)
async def get_my_coverage(
    current_agent: Agent = Depends(get_current_agent),
    db: AsyncSession = Depends(get_db),
):
    store = NotificationPreferenceStore(db)
    return _build_response(await store.get_coverage(current_agent.id))


@router.put("/me", response_model=CoverageResponse)
async def replace_my_coverage(
    data: CoverageUpdate,
    current_agent: Agent = Depends(get_current_agent),
    db: AsyncSession = Depends(get_db),
):
    """
    Replace the caller's coverage with a single state's selection.

    With ``whole_state`` the whole state is covered. With a county and no
    towns the whole county is covered. An empty selection clears coverage.
    """
    hierarchy = get_hierarchy()
    known_towns = set(hierarchy.resolve_towns(data.state))
    keys = [TownKey.from_legacy(town, known_towns) for town in data.towns if town.strip()]
    keys.extend(TownKey(item.town.strip(), item.sub_area.strip()) for item in data.sub_areas)

    selection = CoverageSelection.from_keys(
        data.state, keys, county=data.county, include_sub_areas=True, hierarchy=hierarchy
    )
    if data.manual_towns:
        selection.add_manual_towns(data.manual_towns)

    if data.whole_state:
        rows = [{"state": selection.state}]
    elif selection.towns:
        rows = selection.to_coverage_rows()
    elif selection.county != ALL_COUNTIES:
        rows = [{"state": selection.state, "county": selection.county}]
    else:
        rows = []

    warnings = []
    for row in rows:
        message = hierarchy.validate_location(row["state"], row.get("county"), row.get("city"))
        if message:
            warnings.append(message)

    store = NotificationPreferenceStore(db)
    areas = await store.replace_coverage(current_agent.id, rows)

    log_audit_event(
        "coverage.replaced",
        actor=current_agent,
        details={"state": selection.state, "county": selection.county, "areas": len(areas)},
    )
    return _build_response(areas, warnings)
