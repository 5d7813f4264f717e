"""
Applications router.

Endpoints:
- GET    /api/applications              - all (?student_id, ?job_id)
- POST   /api/applications              - apply to a job (notifies the company)
- PUT    /api/applications/{id}/status  - shortlist / reject / offer (notifies the student)
- DELETE /api/applications/{id}
"""

from typing import Optional

from fastapi import APIRouter, Depends

from internhub.repositories.applications import ApplicationRepository
from internhub.repositories.jobs import JobRepository
from internhub.repositories.notifications import NotificationRepository
from internhub.schemas import Application, ApplicationCreate, ApplicationStatusUpdate
from internhub.store import CollectionStore, get_store

router = APIRouter()


@router.get("/applications", response_model=list[Application])
def list_applications(
    student_id: Optional[str] = None,
    job_id: Optional[str] = None,
    store: CollectionStore = Depends(get_store),
):
    repo = ApplicationRepository(store)
    if student_id:
        apps = repo.for_student(student_id)
        return [a for a in apps if a.job_id == job_id] if job_id else apps
    return repo.for_job(job_id) if job_id else repo.list()


@router.post("/applications", response_model=Application, status_code=201)
def apply(data: ApplicationCreate, store: CollectionStore = Depends(get_store)):
    """Record the application, then tell the company it has a new applicant."""
    application = ApplicationRepository(store).apply(data)

    job = JobRepository(store).find(data.job_id)
    if job is not None:
        NotificationRepository(store).add(
            job.company_id, f"New applicant {data.student_name} for {data.job_title}"
        )
    return application


@router.put("/applications/{application_id}/status", response_model=Application)
def update_status(application_id: str, data: ApplicationStatusUpdate, store: CollectionStore = Depends(get_store)):
    application = ApplicationRepository(store).update_status(application_id, data.status, data.feedback)
    NotificationRepository(store).add(
        application.student_id,
        f"Your application for {application.job_title} is now {application.status.value}",
    )
    return application


@router.delete("/applications/{application_id}", status_code=204)
def delete_application(application_id: str, store: CollectionStore = Depends(get_store)):
    ApplicationRepository(store).remove(application_id)
