from typing import List

from fastapi import APIRouter, Depends

from taskpulse.schemas import NotificationOut, UserRecord
from taskpulse.services.notification_service import NotificationService
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import get_current_user

router = APIRouter()


@router.get("/notifications", response_model=List[NotificationOut])
def get_user_notifications(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    """Get notifications for the current user, oldest first"""
    return NotificationService.list_for_user(store, current_user.id)


@router.post("/notifications/read-all", response_model=List[NotificationOut])
def mark_all_notifications_as_read(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return NotificationService.mark_all_read(store, current_user.id)


@router.post("/notifications/read/{notification_id}", response_model=List[NotificationOut])
def mark_notification_as_read(
    notification_id: str,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    """Mark a notification as read and return the caller's list"""
    return NotificationService.mark_read(store, current_user.id, notification_id)
