"""
Saved translation endpoints.

Clients save phrase pairs they looked up, list them (optionally per
user) and mark favourites.  Unknown translation ids are not an error
for the favourite toggle; the call simply has no effect.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ukrainian_learning_api.app.core.storage import MemStorage, get_storage
from ukrainian_learning_api.app.schemas.base import SuccessResponse
from ukrainian_learning_api.app.schemas.translation import Translation, TranslationCreate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=Translation)
async def save_translation(
    translation_in: TranslationCreate,
    storage: MemStorage = Depends(get_storage),
) -> Translation:
    """Save a translation and return the stored record.

    Bodies that fail validation are answered with HTTP 400 by the
    application-wide validation handler.
    """
    try:
        return storage.save_translation(translation_in)
    except Exception as exc:
        logger.exception("Failed to save translation")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid translation data") from exc


@router.get("", response_model=List[Translation])
async def list_translations(
    user_id: Optional[str] = Query(None, alias="userId"),
    storage: MemStorage = Depends(get_storage),
) -> List[Translation]:
    """List translations.

    With ``userId`` all of that user's translations are returned newest
    first.  Without it, the first ten saved translations are returned.
    """
    try:
        return storage.get_user_translations(user_id)
    except Exception as exc:
        logger.exception("Failed to fetch translations")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch translations") from exc


@router.patch("/{translation_id}/favorite", response_model=SuccessResponse)
async def toggle_favorite(translation_id: str, storage: MemStorage = Depends(get_storage)) -> SuccessResponse:
    try:
        storage.toggle_favorite_translation(translation_id)
    except Exception as exc:
        logger.exception("Failed to toggle favorite for translation %s", translation_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to toggle favorite") from exc
    return SuccessResponse()
