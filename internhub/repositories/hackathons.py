"""
Hackathon listings posted by admins.

Status (Upcoming/Ongoing/Ended) is worked out from the dates once, when the
hackathon is created. It is not recomputed later; admins change it with an
update.
"""

import random
from datetime import date
from typing import Optional

from internhub.repositories.base import CollectionRepository
from internhub.schemas import Hackathon, HackathonCreate, HackathonStatus
from internhub.store import HACKATHONS

# Range for the placeholder participant count shown on new listings
PARTICIPANTS_RANGE = (100, 5000)


def derive_status(start_date: str, end_date: str, today: Optional[date] = None) -> HackathonStatus:
    """Upcoming before startDate, Ended after endDate, Ongoing in between (or when dates are missing)."""
    today = today or date.today()
    start = _parse(start_date)
    end = _parse(end_date)

    if start is not None and today < start:
        return HackathonStatus.UPCOMING
    if end is not None and today > end:
        return HackathonStatus.ENDED
    if start is None and end is None:
        return HackathonStatus.UPCOMING
    return HackathonStatus.ONGOING


def _parse(value: str) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


class HackathonRepository(CollectionRepository[Hackathon]):
    key = HACKATHONS
    model = Hackathon
    id_prefix = "h"
    entity_name = "Hackathon"
    prepend = True

    def create(self, data: HackathonCreate, today: Optional[date] = None) -> Hackathon:
        today = today or date.today()
        fields = data.model_dump(exclude={"logo", "participants"})
        hackathon = Hackathon(
            **fields,
            id=self._new_id(),
            logo=data.logo or (data.organizer[:1].upper() or "?"),
            participants=data.participants if data.participants is not None else random.randint(*PARTICIPANTS_RANGE),
            posted_date=today.isoformat(),
            status=derive_status(data.start_date, data.end_date, today),
        )
        return self._insert(hackathon)

    def search(self, mode: Optional[str] = None, difficulty: Optional[str] = None,
               status: Optional[str] = None, query: Optional[str] = None) -> list[Hackathon]:
        """Filter like the student listing page: exact mode/difficulty/status, free-text on title/organizer/tags."""
        results = []
        for h in self._load():
            if mode and h.mode.value != mode:
                continue
            if difficulty and h.difficulty.value != difficulty:
                continue
            if status and h.status.value != status:
                continue
            if query:
                q = query.lower()
                haystack = [h.title.lower(), h.organizer.lower()] + [t.lower() for t in h.tags]
                if not any(q in text for text in haystack):
                    continue
            results.append(h)
        return results
