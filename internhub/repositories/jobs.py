"""
Job postings (internships and full-time roles).

New postings go to the front of the collection so the stored order is
most-recent-first.
"""

from datetime import date, timedelta
from typing import Optional

from internhub.repositories.base import CollectionRepository
from internhub.schemas import Job, JobCreate, JobStatus
from internhub.store import JOBS


class JobRepository(CollectionRepository[Job]):
    key = JOBS
    model = Job
    id_prefix = "j"
    entity_name = "Job"
    prepend = True

    def create(self, data: JobCreate) -> Job:
        """
        Post a job for the company in data.company_id / data.company_name.
        postedDate is today's date; status starts Active.
        """
        job = Job(
            **data.model_dump(),
            id=self._new_id(),
            posted_date=date.today().isoformat(),
            status=JobStatus.ACTIVE,
        )
        return self._insert(job)

    def stop_recruiting(self, job_id: str) -> Job:
        return self.update(job_id, {"status": JobStatus.STOPPED})

    def active(self) -> list[Job]:
        return [j for j in self._load() if j.status != JobStatus.STOPPED]

    def for_company(self, company_id: str) -> list[Job]:
        return [j for j in self._load() if j.company_id == company_id]

    def recently_posted(self, days: int = 7, today: Optional[date] = None) -> list[Job]:
        """Jobs posted within the last `days` days, newest first."""
        today = today or date.today()
        cutoff = today - timedelta(days=days)
        recent = [j for j in self._load() if _posted_on(j) >= cutoff]
        recent.sort(key=_posted_on, reverse=True)
        return recent


def _posted_on(job: Job) -> date:
    # postedDate may be a date or a full ISO timestamp (older records)
    try:
        return date.fromisoformat(job.posted_date[:10])
    except ValueError:
        return date.min
