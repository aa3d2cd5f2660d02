"""
Pydantic models for user data.

``User`` is the stored record and includes the password hash.  The API
only ever returns ``UserRead``, which omits it.  Progress fields are
changed exclusively through ``UserProgressUpdate``.
"""

from datetime import datetime
from typing import List

from pydantic import Field

from .base import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["olena"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserRead(CamelModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
    learning_progress: int = 0
    completed_lessons: List[str] = Field(default_factory=list)
    favorite_translations: List[str] = Field(default_factory=list)
    created_at: datetime


class User(UserRead):
    """Stored user record."""

    password: str


class UserProgressUpdate(CamelModel):
    """Payload for overwriting a user's learning progress."""

    learning_progress: int = Field(..., ge=0, examples=[40])
    completed_lessons: List[str] = Field(default_factory=list)
