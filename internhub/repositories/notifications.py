"""Per-user notifications (new applicant, application status changed, ...)."""

from datetime import datetime

from internhub.repositories.base import CollectionRepository
from internhub.schemas import Notification, NotificationType
from internhub.store import NOTIFICATIONS


class NotificationRepository(CollectionRepository[Notification]):
    key = NOTIFICATIONS
    model = Notification
    id_prefix = "n"
    entity_name = "Notification"

    def add(self, user_id: str, message: str, type: NotificationType = NotificationType.INFO) -> Notification:
        notification = Notification(
            id=self._new_id(),
            user_id=user_id,
            message=message,
            type=type,
            date=datetime.now().isoformat(),
            read=False,
        )
        return self._insert(notification)

    def for_user(self, user_id: str) -> list[Notification]:
        """A user's notifications, newest first."""
        return [n for n in reversed(self._load()) if n.user_id == user_id]

    def mark_read(self, notification_id: str) -> Notification:
        return self.update(notification_id, {"read": True})
