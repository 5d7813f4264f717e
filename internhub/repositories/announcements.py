"""
Admin announcements broadcast to every student, with per-user read tracking.
"""

from datetime import datetime
from typing import Optional

from internhub.repositories.base import CollectionRepository
from internhub.schemas import Announcement, AnnouncementCreate
from internhub.store import ANNOUNCEMENTS


class AnnouncementRepository(CollectionRepository[Announcement]):
    key = ANNOUNCEMENTS
    model = Announcement
    id_prefix = "ann"
    entity_name = "Announcement"
    prepend = True

    def create(self, data: AnnouncementCreate, created_by: str) -> Announcement:
        announcement = Announcement(
            **data.model_dump(),
            id=self._new_id(),
            created_at=datetime.now().isoformat(),
            created_by=created_by,
            read_by=[],
        )
        return self._insert(announcement)

    def active(self, now: Optional[datetime] = None) -> list[Announcement]:
        """Switched on and not past expiresAt."""
        now = now or datetime.now()
        return [a for a in self._load() if a.is_active and not _expired(a, now)]

    def mark_read(self, announcement_id: str, user_id: str) -> Announcement:
        """Add user_id to readBy. Marking twice changes nothing."""
        announcement = self.get(announcement_id)
        if user_id in announcement.read_by:
            return announcement
        return self.update(announcement_id, {"read_by": announcement.read_by + [user_id]})

    def unread_count(self, user_id: str, now: Optional[datetime] = None) -> int:
        return sum(1 for a in self.active(now) if user_id not in a.read_by)


def _expired(announcement: Announcement, now: datetime) -> bool:
    if not announcement.expires_at:
        return False
    try:
        expires = datetime.fromisoformat(announcement.expires_at)
    except ValueError:
        return False
    # Compare naive against naive: drop any offset after converting to local time
    if expires.tzinfo is not None:
        expires = expires.astimezone().replace(tzinfo=None)
    return expires <= now
