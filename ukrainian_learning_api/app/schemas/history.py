"""
Pydantic models for historical events.

Events describe the history of Ukrainian settlement in Manitoba.  The
``importance`` score ranges from 1 (minor) to 5 (landmark) and lets
clients highlight key moments on a timeline.
"""

from pydantic import Field

from .base import CamelModel


class HistoricalEventCreate(CamelModel):
    year: int = Field(..., examples=[1891])
    title: str = Field(..., examples=["First Ukrainian Family"])
    description: str
    category: str = Field(..., examples=["Pioneer Settlement"])
    importance: int = Field(1, ge=1, le=5)


class HistoricalEvent(HistoricalEventCreate):
    id: str
