"""Notification preference API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.auth.jwt import get_current_agent
from agentcast.database import get_db
from agentcast.exceptions import PriceValidationError
from agentcast.models import Agent
from agentcast.schemas.preference import (
    NotificationPreferenceResponse,
    NotificationPreferenceUpdate,
)
from agentcast.services.preferences import NotificationPreferenceStore
from agentcast.utils.audit import log_audit_event

router = APIRouter(prefix="/preferences", tags=["Notification Preferences"])


@router.get("/me", response_model=NotificationPreferenceResponse)
async def get_my_preferences(
    current_agent: Agent = Depends(get_current_agent),
    db: AsyncSession = Depends(get_db),
):
    """Get the caller's preferences; a default row is created on first read."""
    store = NotificationPreferenceStore(db)
    return await store.get(current_agent.id)


@router.put("/me", response_model=NotificationPreferenceResponse)
async def update_my_preferences(
    data: NotificationPreferenceUpdate,
    current_agent: Agent = Depends(get_current_agent),
    db: AsyncSession = Depends(get_db),
):
    """
    Update category subscriptions, price range and property types.

    Only supplied fields change. Price errors are reported before anything
    is written.
    """
    changes = data.model_dump(exclude_unset=True)
    store = NotificationPreferenceStore(db)
    try:
        preference = await store.update(current_agent.id, changes)
    except PriceValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "type": "price_validation",
                "field": e.field,
                "message": e.message,
            },
        )

    log_audit_event(
        "preferences.updated",
        actor=current_agent,
        details={"fields": sorted(changes)},
    )
    return preference
