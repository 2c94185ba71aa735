"""Auth module exports."""
from agentcast.auth.jwt import (
    create_access_token,
    verify_token,
    get_current_agent,
)

__all__ = [
    "create_access_token",
    "verify_token",
    "get_current_agent",
]
