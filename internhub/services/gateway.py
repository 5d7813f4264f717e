"""
Client for the remote auth backend.

Login, registration, Google sign-in and user administration live on a
separate server. After any successful sign-in the bearer token is kept in
the store's "token" slot and sent on every authenticated call.

Server records carry Mongo's "_id"; they are mapped to "id" before being
turned into User objects.
"""

from typing import Any, Optional

import httpx
import structlog
from fastapi import Depends
from pydantic import ValidationError

from internhub.config import settings
from internhub.exceptions import TransportFailure
from internhub.schemas import RegisterRequest, User
from internhub.services.remote import make_client, send
from internhub.store import TOKEN, CollectionStore, get_store

logger = structlog.get_logger(__name__)

# The only fields PUT /users/profile will accept
PROFILE_FIELDS = (
    "name", "phone", "linkedIn", "rollNumber", "branch", "course", "collegeName",
    "graduationYear", "educationStatus", "cgpa", "skills", "resumeUrl",
)


class RemoteAuthGateway:
    def __init__(self, store: CollectionStore, client: Optional[httpx.Client] = None):
        self.store = store
        self.client = client or make_client(settings.AUTH_API_URL)

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ─── Sign-in ─────────────────────────────────────────────────────

    def login(self, email: str, password: str) -> User:
        data = send(self.client, "POST", "/auth/login", "Login failed",
                    json={"email": email, "password": password})
        return self._signed_in(data, "Login failed")

    def register(self, data: RegisterRequest) -> User:
        payload = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        body = send(self.client, "POST", "/auth/register", "Registration failed", json=payload)
        return self._signed_in(body, "Registration failed")

    def google_login(self, credential: str) -> User:
        data = send(self.client, "POST", "/auth/google", "Google sign-in failed",
                    json={"credential": credential})
        return self._signed_in(data, "Google sign-in failed")

    def logout(self) -> None:
        self.store.delete_value(TOKEN)

    @property
    def token(self) -> Optional[str]:
        return self.store.get_value(TOKEN)

    # ─── Users ───────────────────────────────────────────────────────

    def update_profile(self, fields: dict[str, Any]) -> User:
        """Send only the allow-listed profile fields (camelCase keys)."""
        payload = {k: v for k, v in fields.items() if k in PROFILE_FIELDS}
        dropped = sorted(set(fields) - set(payload))
        if dropped:
            logger.debug("profile_fields_dropped", fields=dropped)
        data = send(self.client, "PUT", "/users/profile", "Failed to update profile",
                    json=payload, headers=self._auth())
        return to_user(data, "Failed to update profile")

    def list_users(self) -> list[User]:
        data = send(self.client, "GET", "/users", "Failed to fetch users", headers=self._auth())
        return to_users(data, "Failed to fetch users")

    def list_students(self) -> list[User]:
        data = send(self.client, "GET", "/users/students", "Failed to fetch students", headers=self._auth())
        return to_users(data, "Failed to fetch students")

    def get_user(self, user_id: str) -> User:
        data = send(self.client, "GET", f"/users/{user_id}", "Failed to fetch user", headers=self._auth())
        return to_user(data, "Failed to fetch user")

    def approve_user(self, user_id: str) -> User:
        data = send(self.client, "PUT", f"/users/{user_id}/approve", "Failed to approve user",
                    headers=self._auth())
        logger.info("user_approved", user_id=user_id)
        return to_user(data, "Failed to approve user")

    def delete_user(self, user_id: str) -> None:
        send(self.client, "DELETE", f"/users/{user_id}", "Failed to delete user", headers=self._auth())
        logger.info("user_deleted", user_id=user_id)

    # ─── Helpers ─────────────────────────────────────────────────────

    def _auth(self) -> dict[str, str]:
        token = self.token
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _signed_in(self, data: Any, fallback: str) -> User:
        # No token is kept unless the record is usable
        user = to_user(data, fallback)
        token = data.get("token")
        if token:
            self.store.set_value(TOKEN, token)
        logger.info("signed_in", user_id=user.id, role=user.role.value)
        return user


def to_user(data: Any, fallback: str = "Unexpected user record") -> User:
    """Build a User from a server record, mapping "_id" to "id".

    An empty body, a non-object or a record missing required fields raises
    TransportFailure carrying the fallback text.
    """
    if not isinstance(data, dict):
        logger.error("remote_bad_record", expected="object", got=type(data).__name__)
        raise TransportFailure(fallback)
    record = dict(data)
    if "_id" in record:
        record["id"] = str(record.pop("_id"))
    elif "id" in record:
        record["id"] = str(record["id"])
    record.pop("password", None)
    record.pop("token", None)
    try:
        return User.model_validate(record)
    except ValidationError as e:
        logger.error("remote_bad_record", errors=e.error_count())
        raise TransportFailure(fallback) from e


def to_users(data: Any, fallback: str) -> list[User]:
    """Map a list of server records; an empty body is an empty list."""
    if data is None:
        return []
    if not isinstance(data, list):
        logger.error("remote_bad_record", expected="array", got=type(data).__name__)
        raise TransportFailure(fallback)
    return [to_user(u, fallback) for u in data]


def get_gateway(store: CollectionStore = Depends(get_store)):
    """
    FastAPI dependency: yields a RemoteAuthGateway sharing the request's store.
    Usage in a route:  def my_route(gateway: RemoteAuthGateway = Depends(get_gateway))
    """
    gateway = RemoteAuthGateway(store)
    try:
        yield gateway
    finally:
        gateway.close()
