"""
Notifications router.

Endpoints:
- GET  /api/notifications/{user_id}    - a user's notifications, newest first
- POST /api/notifications              - send one
- PUT  /api/notifications/{id}/read    - mark as read
"""

from fastapi import APIRouter, Depends

from internhub.repositories.notifications import NotificationRepository
from internhub.schemas import Notification, NotificationCreate
from internhub.store import CollectionStore, get_store

router = APIRouter()


@router.get("/notifications/{user_id}", response_model=list[Notification])
def list_notifications(user_id: str, store: CollectionStore = Depends(get_store)):
    return NotificationRepository(store).for_user(user_id)


@router.post("/notifications", response_model=Notification, status_code=201)
def add_notification(data: NotificationCreate, store: CollectionStore = Depends(get_store)):
    return NotificationRepository(store).add(data.user_id, data.message, data.type)


@router.put("/notifications/{notification_id}/read", response_model=Notification)
def mark_read(notification_id: str, store: CollectionStore = Depends(get_store)):
    return NotificationRepository(store).mark_read(notification_id)
