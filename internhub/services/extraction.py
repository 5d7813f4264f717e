"""
Client for the scraping services that read a hackathon or internship page.

The services answer with whatever they could find, using "Not mentioned" /
"Not Disclosed" for the blanks. Those sentinels become None here, dates are
normalised to YYYY-MM-DD, and values outside our enums are dropped, so the
result is a draft an admin can review before it is posted.
"""

from enum import Enum
from typing import Any, Optional

import httpx
import structlog

from internhub.config import settings
from internhub.exceptions import TransportFailure
from internhub.schemas import Difficulty, HackathonDraft, HackathonMode, InternshipDraft
from internhub.services.dates import is_sentinel, normalize_date
from internhub.services.remote import make_client, send

logger = structlog.get_logger(__name__)


class ExtractionClient:
    def __init__(self, client: Optional[httpx.Client] = None):
        self.client = client or make_client(settings.EXTRACTION_API_URL)

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def extract_hackathon(self, url: str) -> HackathonDraft:
        data = send(self.client, "POST", "/extract-hackathon", "Failed to extract hackathon details",
                    json={"url": url})
        data = _fields(data, "Failed to extract hackathon details")
        draft = HackathonDraft(
            title=_text(data.get("title")),
            organizer=_text(data.get("organizer")),
            description=_text(data.get("description")),
            prize=_text(data.get("prize")),
            mode=_choice(HackathonMode, data.get("mode")),
            difficulty=_choice(Difficulty, data.get("difficulty")),
            tags=_tags(data.get("tags")),
            location=_text(data.get("location")),
            deadline=_date(data.get("deadline")),
            start_date=_date(data.get("startDate")),
            end_date=_date(data.get("endDate")),
            registration_url=url,
        )
        logger.info("hackathon_extracted", url=url, missing=_missing(draft))
        return draft

    def extract_internship(self, url: str) -> InternshipDraft:
        data = send(self.client, "POST", "/extract-internship", "Failed to extract internship details",
                    json={"url": url})
        data = _fields(data, "Failed to extract internship details")
        draft = InternshipDraft(
            title=_text(data.get("title")),
            stipend=_text(data.get("stipend")),
            deadline=_date(data.get("deadline")),
            location=_text(data.get("location")),
            eligibility=_text(data.get("eligibility")),
            registration_url=url,
        )
        logger.info("internship_extracted", url=url, missing=_missing(draft))
        return draft


# ─── Field cleaning ──────────────────────────────────────────────────

def _fields(data: Any, fallback: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.error("extractor_bad_body", got=type(data).__name__)
        raise TransportFailure(fallback)
    return data


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    return None if is_sentinel(value) else value.strip()


def _date(value: Any) -> Optional[str]:
    text = _text(value)
    return normalize_date(text) or None


def _choice(enum: type[Enum], value: Any) -> Optional[Enum]:
    """Match an enum value case-insensitively ("online" -> Online); anything else is None."""
    text = _text(value)
    if text is None:
        return None
    for member in enum:
        if member.value.lower() == text.lower():
            return member
    return None


def _tags(value: Any) -> list[str]:
    # Some pages give "AI, Web3, Open Source" rather than a list
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        return []
    return [t for t in (_text(v) for v in value) if t]


def _missing(draft) -> list[str]:
    return [name for name, v in draft if v is None]


def get_extractor():
    """FastAPI dependency: yields an ExtractionClient, then closes it."""
    extractor = ExtractionClient()
    try:
        yield extractor
    finally:
        extractor.close()
