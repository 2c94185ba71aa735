"""Pydantic schemas for geographic lookups."""
from typing import List, Optional
from pydantic import BaseModel


class StateResponse(BaseModel):
    code: str
    name: str
    has_county_data: bool


class StateListResponse(BaseModel):
    items: List[StateResponse]
    total: int


class CountyListResponse(BaseModel):
    state: str
    items: List[str]
    total: int


class TownListResponse(BaseModel):
    state: str
    county: Optional[str] = None
    items: List[str]
    total: int


class SubAreaListResponse(BaseModel):
    state: str
    town: str
    items: List[str]
    total: int
