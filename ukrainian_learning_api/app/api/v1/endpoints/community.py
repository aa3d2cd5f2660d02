"""
Community resource endpoints.

``/resources`` lists active cultural centres, services and events,
optionally filtered by ``type``.  ``/events`` lists only events that
have not happened yet, soonest first.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ukrainian_learning_api.app.core.storage import MemStorage, get_storage
from ukrainian_learning_api.app.schemas.community import CommunityResource

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/resources", response_model=List[CommunityResource])
async def list_community_resources(
    resource_type: Optional[str] = Query(
        None, alias="type", description="cultural_center, event or service"
    ),
    storage: MemStorage = Depends(get_storage),
) -> List[CommunityResource]:
    try:
        return storage.get_community_resources(resource_type)
    except Exception as exc:
        logger.exception("Failed to fetch community resources")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch community resources"
        ) from exc


@router.get("/events", response_model=List[CommunityResource])
async def list_upcoming_events(storage: MemStorage = Depends(get_storage)) -> List[CommunityResource]:
    try:
        return storage.get_upcoming_events()
    except Exception as exc:
        logger.exception("Failed to fetch upcoming events")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch upcoming events"
        ) from exc
