"""Geographic hierarchy lookups: state -> county -> town -> neighborhood.

All lookups are permissive. Unknown states, counties or towns resolve to empty
lists instead of raising, so callers can show an empty state instead of failing.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional, Sequence

from agentcast.geography import data

logger = logging.getLogger("agentcast.geography")

ALL_COUNTIES = "all"
_COUNTY_SUFFIX = " county"


class RegionKind(str, enum.Enum):
    STATE = "state"
    COUNTY = "county"
    TOWN = "town"
    NEIGHBORHOOD = "neighborhood"


@dataclass(frozen=True)
class Region:
    """Immutable node of the geographic hierarchy."""

    name: str
    kind: RegionKind
    parent: Optional["Region"] = None

    def path(self) -> list[str]:
        """Names from the state down to this region."""
        names = []
        node: Optional[Region] = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return list(reversed(names))


def _fold(value: str) -> str:
    return value.strip().casefold()


def _strip_county_suffix(county: str) -> str:
    folded = _fold(county)
    if folded.endswith(_COUNTY_SUFFIX):
        folded = folded[: -len(_COUNTY_SUFFIX)].strip()
    return folded


class GeographicHierarchy:
    """Read-only resolver over the static reference tables."""

    def __init__(
        self,
        state_names: Mapping[str, str] = data.STATE_NAMES,
        county_towns: Mapping[str, Mapping[str, Sequence[str]]] = data.COUNTY_TOWNS,
        cities_by_state: Mapping[str, Sequence[str]] = data.CITIES_BY_STATE,
        sub_areas: Mapping[tuple[str, str], Sequence[str]] = data.SUB_AREAS,
    ):
        self._state_names = dict(state_names)
        self._names_to_codes = {_fold(name): code for code, name in self._state_names.items()}
        self._county_towns = county_towns
        self._cities_by_state = cities_by_state
        self._sub_areas = {
            (state, _fold(town)): list(areas) for (state, town), areas in sub_areas.items()
        }

    # --- States ---

    def normalize_state_code(self, value: str) -> str:
        """Return the canonical two-letter code for a code or full state name.

        Unrecognized input is uppercased and passed through unchanged.
        """
        cleaned = (value or "").strip()
        if cleaned.upper() in self._state_names:
            return cleaned.upper()
        code = self._names_to_codes.get(_fold(cleaned))
        if code:
            return code
        return cleaned.upper()

    def state_name(self, state: str) -> Optional[str]:
        return self._state_names.get(self.normalize_state_code(state))

    def list_states(self) -> list[tuple[str, str]]:
        """All (code, name) pairs ordered by code."""
        return sorted(self._state_names.items())

    def has_county_data(self, state: str) -> bool:
        return self.normalize_state_code(state) in self._county_towns

    # --- Counties ---

    def list_counties(self, state: str) -> list[str]:
        table = self._county_towns.get(self.normalize_state_code(state), {})
        return sorted(table)

    def canonical_county(self, state: str, county: str) -> Optional[str]:
        """Match a county name case-insensitively, ignoring a trailing "County"."""
        wanted = _strip_county_suffix(county)
        for name in self._county_towns.get(self.normalize_state_code(state), {}):
            if _strip_county_suffix(name) == wanted:
                return name
        return None

    # --- Towns ---

    def resolve_towns(self, state: str, county: Optional[str] = ALL_COUNTIES) -> list[str]:
        """Towns for a state, optionally limited to one county.

        County-table states return the sorted, de-duplicated union of every
        county for "all", or the listed towns of the matched county. Other
        supported states return their flat city list. Unknown input yields [].
        """
        code = self.normalize_state_code(state)
        table = self._county_towns.get(code)

        if table is None:
            towns: Sequence[str] = self._cities_by_state.get(code, [])
        elif not county or _fold(county) == ALL_COUNTIES:
            towns = sorted({town for county_towns in table.values() for town in county_towns})
        else:
            matched = self.canonical_county(code, county)
            if matched is None:
                logger.debug(f"Unknown county {county!r} for state {code}")
                return []
            towns = table[matched]

        # Composite "Town-SubArea" keys belong to the sub-area lookup only
        return [town for town in towns if not self.is_composite_key(code, town)]

    def is_composite_key(self, state: str, value: str) -> bool:
        """True for a legacy "Town-SubArea" key whose town has sub-areas."""
        town, sep, _ = value.partition("-")
        if not sep:
            return False
        return (self.normalize_state_code(state), _fold(town)) in self._sub_areas

    def find_town(self, state: str, name: str, county: Optional[str] = ALL_COUNTIES) -> Optional[str]:
        """Canonical spelling of a town within the state/county, or None."""
        wanted = _fold(name)
        for town in self.resolve_towns(state, county):
            if _fold(town) == wanted:
                return town
        return None

    def counties_for_town(self, state: str, town: str) -> list[str]:
        """Counties whose town list contains the town (a name can repeat across counties)."""
        wanted = _fold(town)
        table = self._county_towns.get(self.normalize_state_code(state), {})
        return sorted(
            county for county, towns in table.items()
            if any(_fold(candidate) == wanted for candidate in towns)
        )

    def validate_location(
        self,
        state: Optional[str],
        county: Optional[str],
        city: Optional[str],
    ) -> Optional[str]:
        """Return a message when the city does not belong to the county, else None."""
        if not state or not city or not county or _fold(county) == ALL_COUNTIES:
            return None
        if not self.has_county_data(state):
            return None
        if self.find_town(state, city, county) is None:
            code = self.normalize_state_code(state)
            return f"{city} does not belong to {county} County in {code}. Please verify your selection."
        return None

    # --- Sub-areas ---

    def resolve_sub_areas(self, state: str, town: str) -> list[str]:
        code = self.normalize_state_code(state)
        return list(self._sub_areas.get((code, _fold(town)), []))

    def has_sub_areas(self, state: str, town: str) -> bool:
        return bool(self.resolve_sub_areas(state, town))

    # --- Region nodes ---

    def region_path(
        self,
        state: str,
        county: Optional[str] = None,
        town: Optional[str] = None,
        sub_area: Optional[str] = None,
    ) -> Region:
        """Build the Region chain for the most specific level given."""
        node = Region(self.normalize_state_code(state), RegionKind.STATE)
        if county and _fold(county) != ALL_COUNTIES:
            node = Region(self.canonical_county(state, county) or county, RegionKind.COUNTY, node)
        if town:
            node = Region(town, RegionKind.TOWN, node)
            if sub_area:
                node = Region(sub_area, RegionKind.NEIGHBORHOOD, node)
        return node


@lru_cache()
def get_hierarchy() -> GeographicHierarchy:
    """Shared hierarchy over the bundled reference data."""
    return GeographicHierarchy()
