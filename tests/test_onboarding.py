import pytest

from agentcast.exceptions import OnboardingTransitionError
from agentcast.services.onboarding import (
    OnboardingStep,
    advance,
    can_transition,
    go_back,
    progress,
)


def test_steps_advance_in_order():
    step = OnboardingStep.WELCOME
    visited = [step]
    while step is not OnboardingStep.COMPLETE:
        step = advance(step)
        visited.append(step)
    assert [s.value for s in visited] == ["welcome", "profile", "preferences", "notifications", "complete"]


def test_complete_is_terminal():
    with pytest.raises(OnboardingTransitionError):
        advance(OnboardingStep.COMPLETE)
    with pytest.raises(OnboardingTransitionError):
        go_back(OnboardingStep.COMPLETE)
    assert not can_transition(OnboardingStep.COMPLETE, OnboardingStep.NOTIFICATIONS)


def test_cannot_go_back_from_welcome():
    with pytest.raises(OnboardingTransitionError):
        go_back(OnboardingStep.WELCOME)


def test_can_transition_only_to_neighbours():
    assert can_transition(OnboardingStep.PROFILE, OnboardingStep.PREFERENCES)
    assert can_transition(OnboardingStep.PROFILE, OnboardingStep.WELCOME)
    assert not can_transition(OnboardingStep.WELCOME, OnboardingStep.NOTIFICATIONS)
    assert not can_transition(OnboardingStep.PROFILE, OnboardingStep.PROFILE)


def test_progress():
    assert progress(OnboardingStep.WELCOME) == 0.0
    assert progress(OnboardingStep.PREFERENCES) == 0.5
    assert progress(OnboardingStep.COMPLETE) == 1.0
