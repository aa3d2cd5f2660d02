"""
Dictionary endpoints.

Expose the Ukrainian–English dictionary: full listing, lookup by id
and a substring search over both languages.  The search route is
declared before ``/{entry_id}`` so that ``search`` is not captured as
an id.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ukrainian_learning_api.app.core.storage import MemStorage, get_storage
from ukrainian_learning_api.app.schemas.dictionary import DictionaryEntry

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/search", response_model=List[DictionaryEntry])
async def search_dictionary(
    q: Optional[str] = Query(None, description="Text to look for in either language"),
    storage: MemStorage = Depends(get_storage),
) -> List[DictionaryEntry]:
    """Search entries whose Ukrainian word or English translation contains ``q``.

    Matching is case-insensitive and returns at most 50 entries.  A
    missing or empty ``q`` is rejected with HTTP 400.
    """
    if not q:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Query parameter required")
    try:
        return storage.search_dictionary(q)
    except Exception as exc:
        logger.exception("Dictionary search failed for %r", q)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Dictionary search failed") from exc


@router.get("", response_model=List[DictionaryEntry])
async def list_dictionary_entries(storage: MemStorage = Depends(get_storage)) -> List[DictionaryEntry]:
    try:
        return storage.get_all_dictionary_entries()
    except Exception as exc:
        logger.exception("Failed to fetch dictionary entries")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch dictionary entries"
        ) from exc


@router.get("/{entry_id}", response_model=DictionaryEntry)
async def get_dictionary_entry(entry_id: str, storage: MemStorage = Depends(get_storage)) -> DictionaryEntry:
    """Retrieve a single dictionary entry.  Returns HTTP 404 if absent."""
    try:
        entry = storage.get_dictionary_entry(entry_id)
    except Exception as exc:
        logger.exception("Failed to fetch dictionary entry %s", entry_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch dictionary entry"
        ) from exc
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dictionary entry not found")
    return entry
