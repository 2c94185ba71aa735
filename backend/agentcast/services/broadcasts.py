"""Broadcast workflow: match recipients, resolve addresses, dispatch."""
import logging
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.config import get_settings
from agentcast.geography import GeographicHierarchy, get_hierarchy
from agentcast.models import Agent
from agentcast.services.categories import NotificationCategory
from agentcast.services.directory import resolve_recipients
from agentcast.services.dispatcher import (
    BroadcastDispatcher,
    BroadcastMessage,
    DispatchOptions,
    DispatchResult,
)
from agentcast.services.job_queue_base import JobQueue
from agentcast.services.matching import BroadcastCriteria, MatchingService
from agentcast.services.price_range import PriceInput, PriceRangePreference, parse_price

settings = get_settings()
logger = logging.getLogger("agentcast.broadcasts")


def _clean_names(values: Iterable[str]) -> tuple[str, ...]:
    cleaned = []
    for value in values or ():
        value = value.strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return tuple(cleaned)


def build_criteria(
    category: NotificationCategory,
    state: Optional[str] = None,
    counties: Iterable[str] = (),
    cities: Iterable[str] = (),
    min_price: PriceInput = None,
    max_price: PriceInput = None,
    property_types: Iterable[str] = (),
    hierarchy: Optional[GeographicHierarchy] = None,
) -> BroadcastCriteria:
    """Validate raw filter input. Raises PriceValidationError on bad prices."""
    hierarchy = hierarchy or get_hierarchy()
    low = parse_price(min_price, "min_price", settings.MAX_PRICE)
    high = parse_price(max_price, "max_price", settings.MAX_PRICE)
    PriceRangePreference.check_order(low, high, False, False)

    return BroadcastCriteria(
        category=NotificationCategory(category),
        state=hierarchy.normalize_state_code(state) if state and state.strip() else None,
        counties=_clean_names(counties),
        cities=_clean_names(cities),
        min_price=low,
        max_price=high,
        property_types=_clean_names(property_types),
    )


class BroadcastService:
    def __init__(
        self,
        db: AsyncSession,
        queue: JobQueue,
        hierarchy: Optional[GeographicHierarchy] = None,
    ):
        self.db = db
        self.matching = MatchingService(db, hierarchy)
        self.dispatcher = BroadcastDispatcher(queue)

    async def preview(self, criteria: BroadcastCriteria, sender: Agent) -> int:
        """Number of agents a broadcast would reach. Nothing is queued."""
        recipients = await self.matching.find_recipients(criteria, sender_id=sender.id)
        return len(recipients)

    async def send(
        self,
        criteria: BroadcastCriteria,
        sender: Agent,
        subject: str,
        body: str,
        send_copy_to_self: bool = False,
        reply_to: Optional[str] = None,
    ) -> DispatchResult:
        agent_ids = await self.matching.find_recipients(criteria, sender_id=sender.id)
        recipients, missing = await resolve_recipients(self.db, agent_ids)

        message = BroadcastMessage(
            category=criteria.category,
            subject=subject.strip(),
            body=body,
            criteria_lines=tuple(criteria.summary_lines()),
        )
        options = DispatchOptions(
            reply_to=reply_to or sender.email,
            send_copy_to_self=send_copy_to_self,
            sender_email=sender.email,
        )
        result = await self.dispatcher.enqueue(recipients, message, options, omitted=missing)
        logger.info(
            f"Broadcast from {sender.id}: {result.status.value}, "
            f"{result.recipient_count} recipients, {result.queued} jobs"
        )
        return result
