"""
Tests for the job eligibility filter.
"""

from internhub.schemas import Eligibility, Job, StudentProfile
from internhub.services.eligibility import check_eligibility, eligible_jobs, is_eligible


def job(job_id="j1", min_cgpa=7.0, branches=None) -> Job:
    return Job(
        id=job_id,
        company_id="u2",
        company_name="Tech Corp",
        title="SDE",
        posted_date="2025-01-01",
        eligibility=Eligibility(min_cgpa=min_cgpa, branches=branches if branches is not None else ["CS", "IT"]),
    )


class TestCheckEligibility:
    def test_meets_both_requirements(self):
        assert check_eligibility(job(), StudentProfile(cgpa=8.0, branch="CS")) == (True, "")

    def test_cgpa_too_low(self):
        assert check_eligibility(job(), StudentProfile(cgpa=6.5, branch="CS")) == (False, "Requires 7.0+ CGPA")

    def test_branch_not_listed(self):
        assert check_eligibility(job(), StudentProfile(cgpa=8.0, branch="ECE")) == (False, "Branch not eligible")

    def test_cgpa_exactly_at_cutoff(self):
        assert is_eligible(job(), StudentProfile(cgpa=7.0, branch="IT"))

    def test_empty_branch_list_means_all_branches(self):
        assert is_eligible(job(branches=[]), StudentProfile(cgpa=8.0, branch="Mechanical"))

    def test_missing_profile_fields(self):
        # No CGPA counts as 0, no branch matches nothing
        assert not is_eligible(job(min_cgpa=0.1, branches=[]), StudentProfile())
        assert not is_eligible(job(min_cgpa=0.0), StudentProfile())
        assert is_eligible(job(min_cgpa=0.0, branches=[]), StudentProfile())

    def test_branch_match_is_exact(self):
        assert not is_eligible(job(branches=["Computer Science"]), StudentProfile(cgpa=9.0, branch="computer science"))


class TestEligibleJobs:
    def test_filters_and_keeps_order(self):
        jobs = [
            job("j1", min_cgpa=6.0, branches=[]),
            job("j2", min_cgpa=9.5, branches=[]),
            job("j3", min_cgpa=6.0, branches=["CS"]),
            job("j4", min_cgpa=6.0, branches=["ECE"]),
        ]
        result = eligible_jobs(jobs, StudentProfile(cgpa=8.0, branch="CS"))
        assert [j.id for j in result] == ["j1", "j3"]

    def test_no_jobs(self):
        assert eligible_jobs([], StudentProfile(cgpa=8.0, branch="CS")) == []
