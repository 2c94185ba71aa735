"""Pydantic schemas for the onboarding flow."""
from typing import Optional
from pydantic import BaseModel

from agentcast.services.onboarding import OnboardingStep


class OnboardingStateResponse(BaseModel):
    step: OnboardingStep
    next_step: Optional[OnboardingStep] = None
    progress: float
    is_complete: bool
