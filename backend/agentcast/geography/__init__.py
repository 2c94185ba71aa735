"""Geographic reference data and hierarchy lookups."""
from agentcast.geography.hierarchy import (
    ALL_COUNTIES,
    GeographicHierarchy,
    Region,
    RegionKind,
    get_hierarchy,
)

__all__ = [
    "ALL_COUNTIES",
    "GeographicHierarchy",
    "Region",
    "RegionKind",
    "get_hierarchy",
]
