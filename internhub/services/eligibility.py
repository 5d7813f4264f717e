"""
Which jobs a student may apply to.

A job is open to a student when
  - the student's CGPA is at least job.eligibility.minCGPA, and
  - the job lists no branches (open to all) or lists the student's branch.

Branch matching is exact string membership. No aliases, no case folding.
"""

from typing import Union

from internhub.schemas import Job, StudentProfile, User

Student = Union[StudentProfile, User]


def check_eligibility(job: Job, student: Student) -> tuple[bool, str]:
    """Return (eligible, reason). reason is "" when eligible."""
    cgpa = student.cgpa or 0.0
    branch = student.branch or ""

    if job.eligibility.min_cgpa > cgpa:
        return False, f"Requires {job.eligibility.min_cgpa}+ CGPA"

    branches = job.eligibility.branches
    if branches and branch not in branches:
        return False, "Branch not eligible"

    return True, ""


def is_eligible(job: Job, student: Student) -> bool:
    return check_eligibility(job, student)[0]


def eligible_jobs(jobs: list[Job], student: Student) -> list[Job]:
    """The jobs the student qualifies for, in their original order."""
    return [job for job in jobs if is_eligible(job, student)]
