"""Model exports."""
from agentcast.models.agent import Agent
from agentcast.models.preference import AgentCoverageArea, NotificationPreference
from agentcast.models.email_job import EmailJob

__all__ = [
    "Agent",
    "NotificationPreference",
    "AgentCoverageArea",
    "EmailJob",
]
