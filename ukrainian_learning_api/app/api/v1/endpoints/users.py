"""
User endpoints.

Provide registration, lookup and progress tracking for learners.
There is no login flow; passwords are only stored (hashed) and never
returned.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ukrainian_learning_api.app.core.errors import ConflictError
from ukrainian_learning_api.app.core.storage import MemStorage, get_storage
from ukrainian_learning_api.app.schemas.base import SuccessResponse
from ukrainian_learning_api.app.schemas.user import UserCreate, UserProgressUpdate, UserRead

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user_in: UserCreate, storage: MemStorage = Depends(get_storage)) -> UserRead:
    """Register a new user.  Returns HTTP 409 if the username is taken."""
    try:
        return storage.create_user(user_in)
    except ConflictError as exc:
        logger.info("Registration rejected: %s", exc)
        raise HTTPException(status_code=exc.status_code, detail="Username already exists") from exc
    except Exception as exc:
        logger.exception("Failed to create user")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create user") from exc


@router.get("", response_model=UserRead)
async def find_user(
    username: Optional[str] = Query(None),
    storage: MemStorage = Depends(get_storage),
) -> UserRead:
    """Look a user up by ``username``."""
    if not username:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username parameter required")
    user = storage.get_user_by_username(username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, storage: MemStorage = Depends(get_storage)) -> UserRead:
    user = storage.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.patch("/{user_id}/progress", response_model=SuccessResponse)
async def update_progress(
    user_id: str,
    progress_in: UserProgressUpdate,
    storage: MemStorage = Depends(get_storage),
) -> SuccessResponse:
    """Overwrite a user's progress and completed lessons.

    Unknown user ids are accepted and ignored, matching the store.
    """
    try:
        storage.update_user_progress(user_id, progress_in.learning_progress, progress_in.completed_lessons)
    except Exception as exc:
        logger.exception("Failed to update progress for user %s", user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update progress") from exc
    return SuccessResponse()
