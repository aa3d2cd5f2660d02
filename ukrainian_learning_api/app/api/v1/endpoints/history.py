"""Historical timeline endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ukrainian_learning_api.app.core.storage import MemStorage, get_storage
from ukrainian_learning_api.app.schemas.history import HistoricalEvent

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[HistoricalEvent])
async def list_historical_events(
    year: Optional[int] = Query(None, description="Only return events of this year"),
    storage: MemStorage = Depends(get_storage),
) -> List[HistoricalEvent]:
    """Return the timeline ordered by year, or the events of one ``year``."""
    try:
        if year is not None:
            return storage.get_historical_events_by_year(year)
        return storage.get_historical_events()
    except Exception as exc:
        logger.exception("Failed to fetch historical events")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch historical events"
        ) from exc
