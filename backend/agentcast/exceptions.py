"""Domain exceptions raised by the targeting services."""


class AgentcastError(Exception):
    """Base class for service errors."""


class PriceValidationError(AgentcastError, ValueError):
    """A price bound failed validation before anything was written."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class QueueSubmissionError(AgentcastError):
    """The job batch could not be handed to the queue. Nothing was queued."""

    def __init__(self, message: str, job_count: int = 0):
        super().__init__(message)
        self.job_count = job_count


class OnboardingTransitionError(AgentcastError):
    """An onboarding step change is not allowed from the current step."""
