"""
Local user records.

Login, registration with passwords and admin approval normally go through
the remote auth backend (services/gateway.py); this collection keeps the
seeded demo accounts and anything registered while offline.
"""

from typing import Optional

from internhub.exceptions import DuplicateEntityError
from internhub.repositories.base import CollectionRepository
from internhub.schemas import User, UserCreate, UserRole
from internhub.store import USERS


class UserRepository(CollectionRepository[User]):
    key = USERS
    model = User
    id_prefix = "u"
    entity_name = "User"

    def create(self, data: UserCreate) -> User:
        """Register a user. Students are approved straight away, everyone else waits for an admin."""
        if self.find_by_email(data.email) is not None:
            raise DuplicateEntityError(f"User with email {data.email} already exists")
        user = User(
            **data.model_dump(),
            id=self._new_id(),
            approved=data.role == UserRole.STUDENT,
        )
        return self._insert(user)

    def find_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self._load() if u.email.lower() == email), None)

    def students(self) -> list[User]:
        return [u for u in self._load() if u.role == UserRole.STUDENT]

    def approve(self, user_id: str) -> User:
        return self.update(user_id, {"approved": True})
