"""Pydantic schemas for broadcast requests.

Field names are exposed in camelCase on the wire (``recipientCount``,
``sendCopyToSelf``) and accepted in either form.
"""
from typing import List, Optional, Union
from uuid import UUID
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from agentcast.schemas.preference import check_property_types
from agentcast.services.categories import NotificationCategory


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class BroadcastCriteriaIn(CamelModel):
    state: Optional[str] = None
    counties: List[str] = []
    cities: List[str] = []
    min_price: Optional[Union[float, str]] = None
    max_price: Optional[Union[float, str]] = None
    property_types: List[str] = []

    @field_validator("property_types")
    @classmethod
    def validate_property_types(cls, values):
        return check_property_types(values)


class BroadcastRequest(CamelModel):
    category: NotificationCategory
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1)
    criteria: Optional[BroadcastCriteriaIn] = None
    send_copy_to_self: bool = False
    preview_only: bool = False
    reply_to: Optional[str] = Field(
        default=None, description="Defaults to the sender's email address"
    )


class BroadcastResponse(CamelModel):
    success: bool
    recipient_count: int
    queued: Optional[int] = None
    message: Optional[str] = None
    omitted: List[UUID] = []
