"""Notification preference store: per-agent flags, price range and coverage.

Writes are idempotent upserts keyed by agent id; the last write wins.
"""
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.config import get_settings
from agentcast.models import AgentCoverageArea, NotificationPreference
from agentcast.services.categories import PROPERTY_TYPES, NotificationCategory, is_subscribed
from agentcast.services.price_range import PriceRangePreference

settings = get_settings()
logger = logging.getLogger("agentcast.preferences")

PRICE_FIELDS = ("min_price", "max_price", "has_no_min", "has_no_max")

# Category -> the column the candidate query filters on
CATEGORY_COLUMNS = {
    NotificationCategory.BUYER_NEED: NotificationPreference.buyer_need,
    NotificationCategory.SALES_INTEL: NotificationPreference.sales_intel,
    NotificationCategory.RENTER_NEED: NotificationPreference.renter_need,
    NotificationCategory.GENERAL_DISCUSSION: NotificationPreference.general_discussion,
}


@dataclass(frozen=True)
class PreferenceRecord:
    """Detached snapshot of a preference row, used by matching."""

    agent_id: uuid.UUID
    buyer_need: bool = False
    sales_intel: bool = False
    renter_need: bool = False
    general_discussion: bool = False
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    has_no_min: bool = False
    has_no_max: bool = False
    property_types: tuple[str, ...] = ()

    @property
    def price_range(self) -> PriceRangePreference:
        return PriceRangePreference(self.min_price, self.max_price, self.has_no_min, self.has_no_max)

    @classmethod
    def from_model(cls, row: NotificationPreference) -> "PreferenceRecord":
        return cls(
            agent_id=row.agent_id,
            buyer_need=bool(row.buyer_need),
            sales_intel=bool(row.sales_intel),
            renter_need=bool(row.renter_need),
            general_discussion=bool(row.general_discussion),
            min_price=row.min_price,
            max_price=row.max_price,
            has_no_min=bool(row.has_no_min),
            has_no_max=bool(row.has_no_max),
            property_types=tuple(row.property_types or ()),
        )


@dataclass(frozen=True)
class CoverageRecord:
    agent_id: uuid.UUID
    state: str
    county: Optional[str] = None
    city: Optional[str] = None
    neighborhood: Optional[str] = None

    @classmethod
    def from_model(cls, row: AgentCoverageArea) -> "CoverageRecord":
        return cls(row.agent_id, row.state, row.county, row.city, row.neighborhood)


def _insert_for(db: AsyncSession):
    """Dialect-specific INSERT supporting ON CONFLICT."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        raise RuntimeError(f"Upsert not supported on dialect {dialect}")
    return insert


def validate_property_types(values: Iterable[str]) -> list[str]:
    """Deduplicate while keeping order; unknown types raise ValueError."""
    cleaned: list[str] = []
    for value in values:
        if value not in PROPERTY_TYPES:
            raise ValueError(f"Unknown property type: {value}")
        if value not in cleaned:
            cleaned.append(value)
    return cleaned


class NotificationPreferenceStore:
    """Reads and writes notification preferences and coverage areas."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, agent_id: uuid.UUID) -> NotificationPreference:
        """Return the agent's preferences, creating the all-false default row."""
        result = await self.db.execute(
            select(NotificationPreference).where(NotificationPreference.agent_id == agent_id)
        )
        preference = result.scalar_one_or_none()
        if preference is not None:
            return preference

        insert = _insert_for(self.db)
        await self.db.execute(
            insert(NotificationPreference)
            .values(agent_id=agent_id)
            .on_conflict_do_nothing(index_elements=["agent_id"])
        )
        await self.db.commit()
        logger.info(f"Created default notification preferences for agent {agent_id}")

        result = await self.db.execute(
            select(NotificationPreference).where(NotificationPreference.agent_id == agent_id)
        )
        return result.scalar_one()

    async def update(self, agent_id: uuid.UUID, changes: Mapping[str, Any]) -> NotificationPreference:
        """Apply a partial update.

        Price fields are validated together before anything is written, so a
        PriceValidationError leaves the stored row untouched.
        """
        current = await self.get(agent_id)
        supplied = frozenset(changes)

        price = current.price_range
        price.max_allowed = settings.MAX_PRICE
        price.update(
            min_price=changes.get("min_price"),
            max_price=changes.get("max_price"),
            has_no_min=changes.get("has_no_min"),
            has_no_max=changes.get("has_no_max"),
            fields=supplied & frozenset(PRICE_FIELDS),
        )

        values: dict[str, Any] = {}
        for category in NotificationCategory:
            supplied_flag = changes.get(category.value)
            values[category.value] = (
                bool(supplied_flag) if supplied_flag is not None else is_subscribed(current, category)
            )
        values.update(
            min_price=price.min_price,
            max_price=price.max_price,
            has_no_min=price.has_no_min,
            has_no_max=price.has_no_max,
        )
        if "property_types" in supplied and changes["property_types"] is not None:
            values["property_types"] = validate_property_types(changes["property_types"])
        else:
            values["property_types"] = list(current.property_types or [])

        await self.upsert(agent_id, values)
        await self.db.refresh(current)
        return current

    async def upsert(self, agent_id: uuid.UUID, values: Mapping[str, Any]) -> None:
        insert = _insert_for(self.db)
        now = datetime.utcnow()
        statement = insert(NotificationPreference).values(agent_id=agent_id, updated_at=now, **values)
        statement = statement.on_conflict_do_update(
            index_elements=["agent_id"],
            set_={**values, "updated_at": now},
        )
        await self.db.execute(statement)
        await self.db.commit()

    async def load_candidates(
        self,
        category: NotificationCategory,
        exclude_agent_id: Optional[uuid.UUID] = None,
    ) -> list[PreferenceRecord]:
        """Preferences of every agent subscribed to the category."""
        query = select(NotificationPreference).where(CATEGORY_COLUMNS[category].is_(True))
        if exclude_agent_id is not None:
            query = query.where(NotificationPreference.agent_id != exclude_agent_id)
        result = await self.db.execute(query)
        return [PreferenceRecord.from_model(row) for row in result.scalars().all()]

    # --- Coverage ---

    async def get_coverage(self, agent_id: uuid.UUID) -> list[AgentCoverageArea]:
        result = await self.db.execute(
            select(AgentCoverageArea)
            .where(AgentCoverageArea.agent_id == agent_id)
            .order_by(
                AgentCoverageArea.state,
                AgentCoverageArea.county,
                AgentCoverageArea.city,
                AgentCoverageArea.neighborhood,
            )
        )
        return list(result.scalars().all())

    async def load_coverage(self, agent_ids: Iterable[uuid.UUID]) -> list[CoverageRecord]:
        ids = list(agent_ids)
        if not ids:
            return []
        result = await self.db.execute(
            select(AgentCoverageArea).where(AgentCoverageArea.agent_id.in_(ids))
        )
        return [CoverageRecord.from_model(row) for row in result.scalars().all()]

    async def replace_coverage(
        self,
        agent_id: uuid.UUID,
        rows: Iterable[Mapping[str, Optional[str]]],
    ) -> list[AgentCoverageArea]:
        """Replace every coverage row of the agent in a single transaction."""
        areas = [
            AgentCoverageArea(
                agent_id=agent_id,
                state=row["state"],
                county=row.get("county"),
                city=row.get("city"),
                neighborhood=row.get("neighborhood"),
            )
            for row in rows
        ]
        try:
            await self.db.execute(
                delete(AgentCoverageArea).where(AgentCoverageArea.agent_id == agent_id)
            )
            self.db.add_all(areas)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception(f"Failed to save coverage areas for agent {agent_id}")
            raise
        logger.info(f"Saved {len(areas)} coverage areas for agent {agent_id}")
        return await self.get_coverage(agent_id)
