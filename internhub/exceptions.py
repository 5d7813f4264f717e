"""
Error taxonomy for the data layer.

Repositories and remote clients raise these; the API maps them to HTTP
status codes in main.py.
"""

from typing import Optional


class InternHubError(Exception):
    """Base exception for all data-layer errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class NotFoundError(InternHubError):
    """An update, status change or message targeted an id that does not exist."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEntityError(InternHubError):
    """Raised when creating something that already exists (e.g. a second application)."""
    pass


class RemoteError(InternHubError):
    """Base for failures reported by (or while reaching) a remote service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationFailure(RemoteError):
    """The server rejected the request and said why (e.g. "User already exists")."""
    pass


class TransportFailure(RemoteError):
    """Network failure, or an error response that carried no message."""
    pass


class InvalidUpdateError(InternHubError):
    """A patch would leave a stored record invalid (e.g. a required field set to null)."""

    def __init__(self, entity: str, entity_id: str, fields: list[str]):
        super().__init__(f"Invalid update for {entity} {entity_id}: {', '.join(fields)}")
        self.entity = entity
        self.entity_id = entity_id
        self.fields = fields
