"""Agent directory: resolves agent ids to delivery addresses."""
import logging
import uuid
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.models import Agent

logger = logging.getLogger("agentcast.directory")


@dataclass(frozen=True)
class Recipient:
    agent_id: uuid.UUID
    email: str
    name: Optional[str] = None


async def resolve_recipients(
    db: AsyncSession,
    agent_ids: Iterable[uuid.UUID],
) -> tuple[list[Recipient], list[uuid.UUID]]:
    """Look up active agents with an email address.

    Returns the resolved recipients (ordered by email) and the ids that could
    not be resolved, which callers report instead of failing.
    """
    ids = set(agent_ids)
    if not ids:
        return [], []

    result = await db.execute(
        select(Agent)
        .where(Agent.id.in_(ids))
        .where(Agent.is_active.is_(True))
        .where(Agent.email.is_not(None))
        .order_by(Agent.email)
    )
    recipients = [
        Recipient(agent.id, agent.email, agent.full_name or None)
        for agent in result.scalars().all()
        if agent.email and agent.email.strip()
    ]
    missing = sorted(ids - {recipient.agent_id for recipient in recipients}, key=str)
    if missing:
        logger.warning(f"Dropped {len(missing)} recipients without an active address")
    return recipients, missing
