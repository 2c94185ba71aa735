"""Onboarding flow as an explicit state machine."""
import enum

from agentcast.exceptions import OnboardingTransitionError


class OnboardingStep(str, enum.Enum):
    WELCOME = "welcome"
    PROFILE = "profile"
    PREFERENCES = "preferences"
    NOTIFICATIONS = "notifications"
    COMPLETE = "complete"


ONBOARDING_ORDER: list[OnboardingStep] = list(OnboardingStep)


def step_index(step: OnboardingStep) -> int:
    return ONBOARDING_ORDER.index(OnboardingStep(step))


def is_complete(step: OnboardingStep) -> bool:
    return OnboardingStep(step) is OnboardingStep.COMPLETE


def can_transition(current: OnboardingStep, target: OnboardingStep) -> bool:
    """Only single steps forward or back are allowed; ``complete`` is terminal."""
    if is_complete(current):
        return False
    return abs(step_index(target) - step_index(current)) == 1


def advance(step: OnboardingStep) -> OnboardingStep:
    if is_complete(step):
        raise OnboardingTransitionError("Onboarding is already complete")
    return ONBOARDING_ORDER[step_index(step) + 1]


def go_back(step: OnboardingStep) -> OnboardingStep:
    index = step_index(step)
    if is_complete(step):
        raise OnboardingTransitionError("Onboarding is already complete")
    if index == 0:
        raise OnboardingTransitionError("Already at the first onboarding step")
    return ONBOARDING_ORDER[index - 1]


def progress(step: OnboardingStep) -> float:
    """Fraction of the flow finished, 0.0 at welcome and 1.0 once complete."""
    return step_index(step) / (len(ONBOARDING_ORDER) - 1)
