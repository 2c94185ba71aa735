"""Onboarding API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.auth.jwt import get_current_agent
from agentcast.database import get_db
from agentcast.exceptions import OnboardingTransitionError
from agentcast.models import Agent
from agentcast.schemas.onboarding import OnboardingStateResponse
from agentcast.services import onboarding

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


def _state(step: onboarding.OnboardingStep) -> OnboardingStateResponse:
    complete = onboarding.is_complete(step)
    return OnboardingStateResponse(
        step=step,
        next_step=None if complete else onboarding.advance(step),
        progress=onboarding.progress(step),
        is_complete=complete,
    )


async def _move(agent: Agent, db: AsyncSession, transition) -> OnboardingStateResponse:
    current = onboarding.OnboardingStep(agent.onboarding_step)
    try:
        target = transition(current)
    except OnboardingTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    agent.onboarding_step = target.value
    await db.commit()
    return _state(target)


@router.get("", response_model=OnboardingStateResponse)
async def get_onboarding_state(current_agent: Agent = Depends(get_current_agent)):
    return _state(onboarding.OnboardingStep(current_agent.onboarding_step))


@router.post("/advance", response_model=OnboardingStateResponse)
async def advance_onboarding(
    current_agent: Agent = Depends(get_current_agent),
    db: AsyncSession = Depends(get_db),
):
    """Move to the next step. Fails with 409 once onboarding is complete."""
    return await _move(current_agent, db, onboarding.advance)


@router.post("/back", response_model=OnboardingStateResponse)
async def go_back_onboarding(
    current_agent: Agent = Depends(get_current_agent),
    db: AsyncSession = Depends(get_db),
):
    return await _move(current_agent, db, onboarding.go_back)
