"""
Pydantic models for saved translations and the translate endpoint.

``TranslationCreate``/``Translation`` describe phrase pairs saved by
clients.  ``TranslateRequest``/``TranslateResponse`` are the payloads
of ``POST /api/translate``; the request keeps the short ``from``/``to``
keys the web client sends.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .base import CamelModel


class TranslationCreate(CamelModel):
    """Schema for saving a translation."""

    ukrainian_text: str = Field(..., examples=["Доброго ранку"])
    english_text: str = Field(..., examples=["Good morning"])
    user_id: Optional[str] = None
    is_favorite: Optional[bool] = None


class Translation(CamelModel):
    """Schema for a stored translation."""

    id: str
    ukrainian_text: str
    english_text: str
    user_id: Optional[str] = None
    is_favorite: bool = False
    created_at: datetime


class TranslateRequest(BaseModel):
    text: Optional[str] = Field(None, examples=["hello"])
    source: Optional[str] = Field(None, alias="from", examples=["en"])
    target: Optional[str] = Field(None, alias="to", examples=["uk"])

    model_config = {
        "populate_by_name": True,
    }


class TranslateResponse(CamelModel):
    translated_text: str
    source_language: Optional[str] = None
    target_language: Optional[str] = None
