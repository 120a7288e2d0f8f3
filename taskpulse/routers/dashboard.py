from typing import List

from fastapi import APIRouter, Depends

from taskpulse.schemas import Analytics, CalendarEvent, UserRecord
from taskpulse.services.dashboard_service import get_analytics, get_calendar_events
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import get_current_user

router = APIRouter()


@router.get("/analytics", response_model=Analytics)
def analytics(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return get_analytics(store)


@router.get("/calendar", response_model=List[CalendarEvent])
def calendar(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    """One event per task with a due date"""
    return get_calendar_events(store)
