"""
Pydantic models for learning modules.

A module groups a handful of lessons under a difficulty tier.  The
``content`` field holds the nested lesson structure as free-form JSON
(typically ``{"lessons": [{"id": 1, "title": ..., "completed": ...}]}``)
because its shape varies between modules.  ``order_index`` controls
display order; lower numbers appear first.
"""

from typing import Any, Dict

from pydantic import Field

from .base import CamelModel


class LearningModuleCreate(CamelModel):
    title: str = Field(..., examples=["Daily Conversations"])
    description: str
    difficulty: str = Field(..., examples=["Beginner"])
    estimated_time: int = Field(..., ge=0, description="Estimated time in minutes")
    has_audio: bool = True
    has_voice_practice: bool = False
    has_certificate: bool = False
    content: Dict[str, Any]
    order_index: int = 0


class LearningModule(LearningModuleCreate):
    id: str
