"""
Learning module endpoints.

Modules are listed in their display order (``orderIndex`` ascending).
Each module includes its nested lesson content.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ukrainian_learning_api.app.core.storage import MemStorage, get_storage
from ukrainian_learning_api.app.schemas.learning import LearningModule

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/modules", response_model=List[LearningModule])
async def list_learning_modules(storage: MemStorage = Depends(get_storage)) -> List[LearningModule]:
    try:
        return storage.get_learning_modules()
    except Exception as exc:
        logger.exception("Failed to fetch learning modules")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch learning modules"
        ) from exc


@router.get("/modules/{module_id}", response_model=LearningModule)
async def get_learning_module(module_id: str, storage: MemStorage = Depends(get_storage)) -> LearningModule:
    """Retrieve a single module by id.  Returns HTTP 404 if absent."""
    try:
        module = storage.get_learning_module(module_id)
    except Exception as exc:
        logger.exception("Failed to fetch learning module %s", module_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch learning module"
        ) from exc
    if module is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Learning module not found")
    return module
