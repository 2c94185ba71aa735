"""Coverage selection: the state/county/towns an agent (or a filter) covers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Container, Iterable, NamedTuple, Optional

from agentcast.geography import ALL_COUNTIES, GeographicHierarchy, get_hierarchy

SUB_AREA_DISPLAY_SEPARATOR = " – "
_LEGACY_SEPARATOR = "-"


class TownKey(NamedTuple):
    """A whole-town selection, or a sub-area of a town when ``sub_area`` is set."""

    town: str
    sub_area: Optional[str] = None

    @property
    def is_sub_area(self) -> bool:
        return self.sub_area is not None

    def display(self) -> str:
        if self.sub_area is None:
            return self.town
        return f"{self.town}{SUB_AREA_DISPLAY_SEPARATOR}{self.sub_area}"

    def to_legacy(self) -> str:
        """Serialize as the older single-string form ("Town-SubArea")."""
        if self.sub_area is None:
            return self.town
        return f"{self.town}{_LEGACY_SEPARATOR}{self.sub_area}"

    @classmethod
    def from_legacy(cls, value: str, known_towns: Container[str] = ()) -> "TownKey":
        """Parse "Town-SubArea"; a value listed in ``known_towns`` stays whole.

        Split on the first hyphen only, since sub-area names may carry one
        ("Haight-Ashbury").
        """
        value = value.strip()
        if value in known_towns:
            return cls(value)
        town, sep, sub_area = value.partition(_LEGACY_SEPARATOR)
        if not sep:
            return cls(town.strip())
        return cls(town.strip(), sub_area.strip() or None)


@dataclass
class CoverageSelection:
    """Mutable selection of towns and sub-areas within one state.

    Never shared across agents: build one per preference edit or broadcast
    filter.
    """

    state: str
    county: str = ALL_COUNTIES
    towns: set[TownKey] = field(default_factory=set)
    include_sub_areas: bool = False
    hierarchy: GeographicHierarchy = field(default_factory=get_hierarchy, repr=False, compare=False)

    def __post_init__(self):
        self.state = self.hierarchy.normalize_state_code(self.state)
        self.county = self.county or ALL_COUNTIES

    # --- Scope ---

    def select_state(self, code: str) -> None:
        self.state = self.hierarchy.normalize_state_code(code)
        self.county = ALL_COUNTIES
        self.towns.clear()

    def select_county(self, county: Optional[str]) -> None:
        if county and county.strip().lower() != ALL_COUNTIES:
            county = self.hierarchy.canonical_county(self.state, county) or county.strip()
        else:
            county = ALL_COUNTIES
        self.county = county
        self.towns.clear()

    def available_towns(self) -> list[str]:
        return self.hierarchy.resolve_towns(self.state, self.county)

    def available_sub_areas(self, town: str) -> list[str]:
        if not self.include_sub_areas:
            return []
        return self.hierarchy.resolve_sub_areas(self.state, town)

    # --- Towns ---

    def toggle_town(self, name: str) -> None:
        key = TownKey(name)
        if key in self.towns:
            self._remove_town(name)
        else:
            # A whole-town selection supersedes its sub-areas
            self._remove_sub_areas(name)
            self.towns.add(key)

    def toggle_sub_area(self, town: str, sub_area: str) -> None:
        key = TownKey(town, sub_area)
        if key in self.towns:
            self.towns.remove(key)
        else:
            self.towns.add(key)

    def select_all(self) -> None:
        for town in self.available_towns():
            self._remove_sub_areas(town)
            self.towns.add(TownKey(town))

    def clear_all(self) -> None:
        for town in self.available_towns():
            self._remove_town(town)

    def add_manual_towns(self, raw: str) -> list[TownKey]:
        """Add comma separated town names typed by the user.

        Names matching a known town are normalized to its spelling; unknown
        names are kept as typed.
        """
        added = []
        for name in (part.strip() for part in raw.split(",")):
            if not name:
                continue
            canonical = self.hierarchy.find_town(self.state, name, self.county) or name
            key = TownKey(canonical)
            if key not in self.towns:
                self._remove_sub_areas(canonical)
                self.towns.add(key)
                added.append(key)
        return added

    def is_selected(self, town: str, sub_area: Optional[str] = None) -> bool:
        return TownKey(town, sub_area) in self.towns

    def _remove_town(self, name: str) -> None:
        self.towns.discard(TownKey(name))
        self._remove_sub_areas(name)

    def _remove_sub_areas(self, name: str) -> None:
        self.towns.difference_update(
            [key for key in self.towns if key.town == name and key.is_sub_area]
        )

    # --- Views ---

    def sorted_towns(self) -> list[TownKey]:
        return sorted(self.towns, key=lambda key: (key.town, key.sub_area or ""))

    def display_labels(self) -> list[str]:
        return [key.display() for key in self.sorted_towns()]

    def to_coverage_rows(self) -> list[dict]:
        """Rows for persisting the selection as coverage areas."""
        county = None if self.county == ALL_COUNTIES else self.county
        return [
            {
                "state": self.state,
                "county": county,
                "city": key.town,
                "neighborhood": key.sub_area,
            }
            for key in self.sorted_towns()
        ]

    @classmethod
    def from_keys(
        cls,
        state: str,
        keys: Iterable[TownKey],
        county: Optional[str] = None,
        include_sub_areas: bool = False,
        hierarchy: Optional[GeographicHierarchy] = None,
    ) -> "CoverageSelection":
        selection = cls(
            state=state,
            include_sub_areas=include_sub_areas,
            hierarchy=hierarchy or get_hierarchy(),
        )
        selection.select_county(county)
        for key in keys:
            if key.is_sub_area:
                if not selection.is_selected(key.town, key.sub_area):
                    selection.toggle_sub_area(key.town, key.sub_area)
            elif not selection.is_selected(key.town):
                selection.toggle_town(key.town)
        return selection
