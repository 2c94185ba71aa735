"""Broadcast recipient matching.

``match_recipients`` is a pure function over detached preference and coverage
records. Stages run in order (category, geography, price, property types) and
an empty stage short-circuits the rest.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from agentcast.geography import GeographicHierarchy, get_hierarchy
from agentcast.services.categories import PROPERTY_TYPES, NotificationCategory, is_subscribed
from agentcast.services.preferences import (
    CoverageRecord,
    NotificationPreferenceStore,
    PreferenceRecord,
)
from agentcast.services.price_range import PriceRangePreference

logger = logging.getLogger("agentcast.matching")


def _fold(value: str) -> str:
    return value.strip().casefold()


def _fold_county(value: str) -> str:
    folded = _fold(value)
    if folded.endswith(" county"):
        folded = folded[: -len(" county")].strip()
    return folded


@dataclass(frozen=True)
class BroadcastCriteria:
    """Optional filters narrowing a broadcast beyond category subscription."""

    category: NotificationCategory
    state: Optional[str] = None
    counties: tuple[str, ...] = ()
    cities: tuple[str, ...] = ()
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    property_types: tuple[str, ...] = ()

    @property
    def has_geography(self) -> bool:
        return bool(self.state or self.counties or self.cities)

    @property
    def has_price(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    @property
    def has_property_types(self) -> bool:
        return bool(self.property_types)

    def summary_lines(self) -> list[str]:
        """Human readable criteria, prepended to the broadcast body."""
        lines = []
        if self.state:
            lines.append(f"State: {self.state}")
        if self.counties:
            lines.append(f"Counties: {', '.join(self.counties)}")
        if self.cities:
            lines.append(f"Cities: {', '.join(self.cities)}")
        if self.has_price:
            price = PriceRangePreference(self.min_price, self.max_price)
            lines.append(f"Price range: {price.describe()}")
        if self.property_types:
            labels = [PROPERTY_TYPES.get(value, value) for value in self.property_types]
            lines.append(f"Property types: {', '.join(labels)}")
        return lines


class _GeographyFilter:
    """Decides whether a single coverage row satisfies the criteria's geography."""

    def __init__(self, criteria: BroadcastCriteria, hierarchy: GeographicHierarchy):
        self.hierarchy = hierarchy
        self.state = hierarchy.normalize_state_code(criteria.state) if criteria.state else None
        self.counties = {_fold_county(county) for county in criteria.counties}
        self.cities = {_fold(city) for city in criteria.cities}

    def matches(self, row: CoverageRecord) -> bool:
        row_state = self.hierarchy.normalize_state_code(row.state)
        if self.state and row_state != self.state:
            return False
        if self.counties and not self._county_matches(row_state, row):
            return False
        if self.cities and not self._city_matches(row_state, row):
            return False
        return True

    def _county_matches(self, state: str, row: CoverageRecord) -> bool:
        if row.county:
            return _fold_county(row.county) in self.counties
        if row.city:
            return any(
                _fold_county(county) in self.counties
                for county in self.hierarchy.counties_for_town(state, row.city)
            )
        # State-wide coverage
        return True

    def _city_matches(self, state: str, row: CoverageRecord) -> bool:
        if row.city:
            return _fold(row.city) in self.cities
        if row.county:
            return any(
                _fold_county(row.county) == _fold_county(county)
                for city in self.cities
                for county in self.hierarchy.counties_for_town(state, city)
            )
        return True


def match_recipients(
    criteria: BroadcastCriteria,
    preferences: Iterable[PreferenceRecord],
    coverage: Iterable[CoverageRecord] = (),
    sender_id: Optional[uuid.UUID] = None,
    hierarchy: Optional[GeographicHierarchy] = None,
) -> set[uuid.UUID]:
    """Return the ids of agents who should receive a broadcast."""
    hierarchy = hierarchy or get_hierarchy()

    # 1. Category subscription, never the sender
    candidates = {
        record.agent_id: record
        for record in preferences
        if is_subscribed(record, criteria.category) and record.agent_id != sender_id
    }
    if not candidates:
        return set()

    # 2. Geography
    if criteria.has_geography:
        geography = _GeographyFilter(criteria, hierarchy)
        covered = {
            row.agent_id for row in coverage
            if row.agent_id in candidates and geography.matches(row)
        }
        candidates = {agent_id: candidates[agent_id] for agent_id in covered}
        if not candidates:
            return set()

    # 3. Price overlap; agents with no price data are unrestricted
    if criteria.has_price:
        candidates = {
            agent_id: record for agent_id, record in candidates.items()
            if record.price_range.overlaps(criteria.min_price, criteria.max_price)
        }
        if not candidates:
            return set()

    # 4. Property types; an empty preference list accepts any type
    if criteria.has_property_types:
        wanted = set(criteria.property_types)
        candidates = {
            agent_id: record for agent_id, record in candidates.items()
            if not record.property_types or wanted.intersection(record.property_types)
        }

    return set(candidates)


class MatchingService:
    """Loads candidates from the store and runs ``match_recipients``."""

    def __init__(self, db: AsyncSession, hierarchy: Optional[GeographicHierarchy] = None):
        self.store = NotificationPreferenceStore(db)
        self.hierarchy = hierarchy or get_hierarchy()

    async def find_recipients(
        self,
        criteria: BroadcastCriteria,
        sender_id: Optional[uuid.UUID] = None,
    ) -> set[uuid.UUID]:
        candidates: Sequence[PreferenceRecord] = await self.store.load_candidates(
            criteria.category, exclude_agent_id=sender_id
        )
        logger.debug(f"{len(candidates)} agents subscribed to {criteria.category.value}")
        if not candidates:
            return set()

        coverage: list[CoverageRecord] = []
        if criteria.has_geography:
            coverage = await self.store.load_coverage(record.agent_id for record in candidates)

        recipients = match_recipients(criteria, candidates, coverage, sender_id, self.hierarchy)
        logger.info(
            f"Matched {len(recipients)} of {len(candidates)} {criteria.category.value} subscribers"
        )
        return recipients
