"""
Placement statistics for the admin dashboard.

Everything is computed from the three collections passed in; nothing is
cached or stored.
"""

import math
from collections import Counter

from internhub.schemas import (
    Application, ApplicationStatus, CompanyHiring, Job, JobStatus, PlacementStats, User, UserRole,
)

TOP_COMPANIES = 6


def placement_stats(users: list[User], jobs: list[Job], applications: list[Application]) -> PlacementStats:
    students = [u for u in users if u.role == UserRole.STUDENT]
    companies = [u for u in users if u.role == UserRole.COMPANY]

    # A student counts as placed once any of their applications is Offered
    placed = {a.student_id for a in applications if a.status == ApplicationStatus.OFFERED}

    # Jobs posted with package 0 (undisclosed) don't count towards the package figures
    packages = [j.package for j in jobs if j.package > 0]

    return PlacementStats(
        total_students=len(students),
        placed_students=len(placed),
        placement_rate=_round_half_up(len(placed) / len(students) * 100) if students else 0,
        total_companies=len(companies),
        active_companies=sum(1 for c in companies if c.approved),
        total_jobs=len(jobs),
        active_jobs=sum(1 for j in jobs if j.status != JobStatus.STOPPED),
        total_applications=len(applications),
        avg_package=_round_half_up(sum(packages) / len(packages) * 10) / 10 if packages else 0.0,
        highest_package=max(packages, default=0.0),
        lowest_package=min(packages, default=0.0),
        top_companies=top_hiring_companies(applications),
    )


def top_hiring_companies(applications: list[Application], limit: int = TOP_COMPANIES) -> list[CompanyHiring]:
    """Companies by number of offers (ties keep first-seen order), with their application counts."""
    received = Counter(a.company_name for a in applications)
    offers = Counter(a.company_name for a in applications if a.status == ApplicationStatus.OFFERED)

    hiring = [CompanyHiring(name=name, offers=offers[name], applications=count) for name, count in received.items()]
    hiring.sort(key=lambda c: c.offers, reverse=True)
    return hiring[:limit]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
