"""
Student applications to jobs.

A student can apply to a given job only once; a second attempt raises
DuplicateEntityError.
"""

from datetime import datetime
from typing import Optional

from internhub.exceptions import DuplicateEntityError
from internhub.repositories.base import CollectionRepository
from internhub.schemas import Application, ApplicationCreate, ApplicationStatus
from internhub.store import APPLICATIONS


class ApplicationRepository(CollectionRepository[Application]):
    key = APPLICATIONS
    model = Application
    id_prefix = "a"
    entity_name = "Application"

    def apply(self, data: ApplicationCreate) -> Application:
        """Record an application. jobTitle/companyName are copied in as they are right now."""
        if self.has_applied(data.student_id, data.job_id):
            raise DuplicateEntityError(
                f"Student {data.student_id} has already applied to job {data.job_id}"
            )
        application = Application(
            **data.model_dump(),
            id=self._new_id(),
            status=ApplicationStatus.APPLIED,
            applied_date=datetime.now().isoformat(),
        )
        return self._insert(application)

    def update_status(self, application_id: str, status: ApplicationStatus,
                      feedback: Optional[str] = None) -> Application:
        patch = {"status": status}
        if feedback is not None:
            patch["feedback"] = feedback
        return self.update(application_id, patch)

    def has_applied(self, student_id: str, job_id: str) -> bool:
        return any(a.student_id == student_id and a.job_id == job_id for a in self._load())

    def for_student(self, student_id: str) -> list[Application]:
        return [a for a in self._load() if a.student_id == student_id]

    def for_job(self, job_id: str) -> list[Application]:
        return [a for a in self._load() if a.job_id == job_id]
