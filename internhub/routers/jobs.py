"""
Jobs router: postings by companies, browsing by students.

Endpoints:
- GET    /api/jobs                              - all jobs (?active_only, ?company_id)
- GET    /api/jobs/recent                       - posted in the last N days
- GET    /api/jobs/eligible/{student_id}        - active jobs the student qualifies for
- GET    /api/jobs/{id}                         - one job
- GET    /api/jobs/{id}/eligibility/{student_id} - can this student apply, and if not why
- POST   /api/jobs                              - post a job
- PUT    /api/jobs/{id}                         - edit a job
- POST   /api/jobs/{id}/stop                    - stop recruiting
- DELETE /api/jobs/{id}                         - delete a job
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from internhub.repositories.jobs import JobRepository
from internhub.repositories.users import UserRepository
from internhub.schemas import Job, JobCreate, JobUpdate
from internhub.services.eligibility import check_eligibility, eligible_jobs
from internhub.store import CollectionStore, get_store

router = APIRouter()


@router.get("/jobs", response_model=list[Job])
def list_jobs(
    active_only: bool = False,
    company_id: Optional[str] = None,
    store: CollectionStore = Depends(get_store),
):
    repo = JobRepository(store)
    jobs = repo.active() if active_only else repo.list()
    if company_id:
        jobs = [j for j in jobs if j.company_id == company_id]
    return jobs


@router.get("/jobs/recent", response_model=list[Job])
def recent_jobs(days: int = Query(7, ge=1), store: CollectionStore = Depends(get_store)):
    return JobRepository(store).recently_posted(days)


@router.get("/jobs/eligible/{student_id}", response_model=list[Job])
def jobs_for_student(student_id: str, store: CollectionStore = Depends(get_store)):
    """Active jobs whose CGPA and branch requirements the student meets."""
    student = UserRepository(store).get(student_id)
    return eligible_jobs(JobRepository(store).active(), student)


@router.get("/jobs/{job_id}", response_model=Job)
def get_job(job_id: str, store: CollectionStore = Depends(get_store)):
    return JobRepository(store).get(job_id)


@router.get("/jobs/{job_id}/eligibility/{student_id}")
def job_eligibility(job_id: str, student_id: str, store: CollectionStore = Depends(get_store)):
    job = JobRepository(store).get(job_id)
    student = UserRepository(store).get(student_id)
    eligible, reason = check_eligibility(job, student)
    return {"eligible": eligible, "reason": reason}


@router.post("/jobs", response_model=Job, status_code=201)
def create_job(data: JobCreate, store: CollectionStore = Depends(get_store)):
    return JobRepository(store).create(data)


@router.put("/jobs/{job_id}", response_model=Job)
def update_job(job_id: str, data: JobUpdate, store: CollectionStore = Depends(get_store)):
    """Only the fields present in the body change."""
    return JobRepository(store).update(job_id, data.model_dump(exclude_unset=True))


@router.post("/jobs/{job_id}/stop", response_model=Job)
def stop_recruiting(job_id: str, store: CollectionStore = Depends(get_store)):
    return JobRepository(store).stop_recruiting(job_id)


@router.delete("/jobs/{job_id}", status_code=204)
def delete_job(job_id: str, store: CollectionStore = Depends(get_store)):
    # Applications pointing at the job are left as they are
    JobRepository(store).remove(job_id)
