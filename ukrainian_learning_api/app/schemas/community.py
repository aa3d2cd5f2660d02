"""
Pydantic models for community resources.

A resource is a cultural centre, a community service or a dated event.
Only events carry an ``event_date``; inactive resources stay in the
store but are hidden from listings.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel


class ResourceType(str, Enum):
    CULTURAL_CENTER = "cultural_center"
    EVENT = "event"
    SERVICE = "service"


class CommunityResourceCreate(CamelModel):
    name: str = Field(..., examples=["Oseredok Ukrainian Cultural Centre"])
    type: ResourceType
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    event_date: Optional[datetime] = None
    is_active: bool = True

    @field_validator("event_date")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # Naive dates are taken as UTC so they compare with the clock.
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class CommunityResource(CommunityResourceCreate):
    id: str
