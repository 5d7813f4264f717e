"""
Announcements router.

Endpoints:
- GET    /api/announcements                 - all, including inactive/expired (admin)
- GET    /api/announcements/active          - what students see (?user_id adds the unread count)
- POST   /api/announcements                 - publish (?created_by)
- PUT    /api/announcements/{id}
- PUT    /api/announcements/{id}/read       - mark read for ?user_id
- DELETE /api/announcements/{id}
"""

from typing import Optional

from fastapi import APIRouter, Depends

from internhub.repositories.announcements import AnnouncementRepository
from internhub.schemas import Announcement, AnnouncementCreate, AnnouncementUpdate
from internhub.store import CollectionStore, get_store

router = APIRouter()


@router.get("/announcements", response_model=list[Announcement])
def list_announcements(store: CollectionStore = Depends(get_store)):
    return AnnouncementRepository(store).list()


@router.get("/announcements/active")
def active_announcements(user_id: Optional[str] = None, store: CollectionStore = Depends(get_store)):
    repo = AnnouncementRepository(store)
    active = repo.active()
    return {
        "announcements": [a.model_dump(mode="json", by_alias=True) for a in active],
        "unread": repo.unread_count(user_id) if user_id else None,
    }


@router.post("/announcements", response_model=Announcement, status_code=201)
def create_announcement(data: AnnouncementCreate, created_by: str = "Admin", store: CollectionStore = Depends(get_store)):
    return AnnouncementRepository(store).create(data, created_by)


@router.put("/announcements/{announcement_id}", response_model=Announcement)
def update_announcement(announcement_id: str, data: AnnouncementUpdate, store: CollectionStore = Depends(get_store)):
    return AnnouncementRepository(store).update(announcement_id, data.model_dump(exclude_unset=True))


@router.put("/announcements/{announcement_id}/read", response_model=Announcement)
def mark_read(announcement_id: str, user_id: str, store: CollectionStore = Depends(get_store)):
    return AnnouncementRepository(store).mark_read(announcement_id, user_id)


@router.delete("/announcements/{announcement_id}", status_code=204)
def delete_announcement(announcement_id: str, store: CollectionStore = Depends(get_store)):
    AnnouncementRepository(store).remove(announcement_id)
