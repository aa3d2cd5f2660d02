"""Pydantic models for Ukrainian–English dictionary entries."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .base import CamelModel


class DictionaryExample(BaseModel):
    """A usage example with its translation."""

    ukrainian: str
    english: str


class DictionaryEntryCreate(CamelModel):
    ukrainian_word: str = Field(..., examples=["Привіт"])
    english_translation: str = Field(..., examples=["Hello"])
    pronunciation: Optional[str] = Field(None, examples=["pry-VEET"])
    part_of_speech: Optional[str] = Field(None, examples=["interjection"])
    examples: List[DictionaryExample] = Field(default_factory=list)
    category: Optional[str] = Field(None, examples=["greetings"])


class DictionaryEntry(DictionaryEntryCreate):
    id: str
