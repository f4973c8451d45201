from typing import Optional

from fastapi import APIRouter, Query

from mealrotation.events.web_observers import get_events

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


@router.get("")
def list_alerts(since: Optional[int] = Query(default=None, ge=0)):
    """Recent planning events; poll with since=<next_cursor>."""
    return get_events(since)
