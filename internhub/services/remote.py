"""
Shared request helper for the remote services (auth backend, extractors).

Every non-2xx response becomes an exception: ValidationFailure when the
server explained itself ({"message": "..."}), TransportFailure with the
caller's fallback text when it didn't or when the server couldn't be
reached at all. A 2xx whose body isn't JSON is a TransportFailure too.
Nothing is retried.
"""

from typing import Any, Optional

import httpx
import structlog

from internhub.config import settings
from internhub.exceptions import TransportFailure, ValidationFailure

logger = structlog.get_logger(__name__)


def make_client(base_url: str) -> httpx.Client:
    """An httpx client with the configured timeout."""
    return httpx.Client(base_url=base_url, timeout=settings.HTTP_TIMEOUT)


def send(client: httpx.Client, method: str, path: str, fallback: str, **kwargs) -> Any:
    """Make the request and return the decoded JSON body (None for an empty body)."""
    try:
        response = client.request(method, path, **kwargs)
    except httpx.RequestError as e:
        logger.error("remote_unreachable", method=method, path=path, error=str(e))
        raise TransportFailure(fallback) from e

    if response.is_success:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("remote_bad_body", method=method, path=path, status=response.status_code)
            raise TransportFailure(fallback, status_code=response.status_code) from e

    message = _server_message(response)
    logger.warning("remote_error", method=method, path=path, status=response.status_code, message=message)
    if message:
        raise ValidationFailure(message, status_code=response.status_code)
    raise TransportFailure(fallback, status_code=response.status_code)


def _server_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
