"""Pydantic schemas for notification preferences and coverage."""
from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID
from pydantic import BaseModel, Field, field_validator

from agentcast.geography import get_hierarchy
from agentcast.services.categories import PROPERTY_TYPES

PriceValue = Union[float, str]


def check_property_types(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return values
    unknown = [value for value in values if value not in PROPERTY_TYPES]
    if unknown:
        raise ValueError(f"Unknown property types: {', '.join(unknown)}")
    return values


# --- Notification preferences ---
class NotificationPreferenceResponse(BaseModel):
    """Notification preference response schema."""
    agent_id: UUID
    buyer_need: bool
    sales_intel: bool
    renter_need: bool
    general_discussion: bool
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    has_no_min: bool
    has_no_max: bool
    property_types: List[str] = []
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NotificationPreferenceUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value.

    Prices accept numbers or strings like "450,000". An explicit null clears
    a bound.
    """
    buyer_need: Optional[bool] = None
    sales_intel: Optional[bool] = None
    renter_need: Optional[bool] = None
    general_discussion: Optional[bool] = None
    min_price: Optional[PriceValue] = None
    max_price: Optional[PriceValue] = None
    has_no_min: Optional[bool] = None
    has_no_max: Optional[bool] = None
    property_types: Optional[List[str]] = None

    @field_validator("property_types")
    @classmethod
    def validate_property_types(cls, values):
        return check_property_types(values)


# --- Coverage ---
class SubAreaSelection(BaseModel):
    town: str = Field(min_length=1)
    sub_area: str = Field(min_length=1)


class CoverageUpdate(BaseModel):
    """Replace the agent's coverage with one state's selection.

    ``towns`` also accepts the legacy "Town-SubArea" form. ``state`` must be a
    known state code or name and is stored as its two-letter code.
    """
    state: str = Field(min_length=2)
    county: Optional[str] = None
    towns: List[str] = []
    sub_areas: List[SubAreaSelection] = []
    manual_towns: Optional[str] = None
    whole_state: bool = False

    @field_validator("state")
    @classmethod
    def validate_state(cls, value: str) -> str:
        hierarchy = get_hierarchy()
        if hierarchy.state_name(value) is None:
            raise ValueError(f"Unknown state: {value}")
        return hierarchy.normalize_state_code(value)


class CoverageAreaResponse(BaseModel):
    id: UUID
    state: str
    county: Optional[str] = None
    city: Optional[str] = None
    neighborhood: Optional[str] = None

    class Config:
        from_attributes = True


class CoverageResponse(BaseModel):
    items: List[CoverageAreaResponse]
    labels: List[str] = []
    warnings: List[str] = []
    total: int
