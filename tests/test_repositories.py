"""
Tests for the domain repositories over a seeded store.
"""

from datetime import date, datetime, timedelta

import pytest

from internhub.exceptions import DuplicateEntityError, InvalidUpdateError, NotFoundError
from internhub.repositories.announcements import AnnouncementRepository
from internhub.repositories.applications import ApplicationRepository
from internhub.repositories.courses import CourseRepository, ResourceRepository, youtube_thumbnail
from internhub.repositories.hackathons import PARTICIPANTS_RANGE, HackathonRepository, derive_status
from internhub.repositories.jobs import JobRepository
from internhub.repositories.notifications import NotificationRepository
from internhub.repositories.tickets import SupportTicketRepository
from internhub.repositories.users import UserRepository
from internhub.schemas import (
    AnnouncementCreate, ApplicationCreate, ApplicationStatus, CourseCreate, CourseStatus,
    Eligibility, HackathonCreate, HackathonStatus, JobCreate, JobStatus, MessageCreate,
    NotificationType, ResourceCreate, TicketCreate, TicketStatus, UserCreate, UserRole,
)
from internhub.store import JOBS


def make_job(**overrides) -> JobCreate:
    fields = dict(
        title="Backend Intern",
        company_id="u2",
        company_name="Tech Corp",
        package=6.0,
        eligibility=Eligibility(min_cgpa=6.5, branches=[]),
    )
    fields.update(overrides)
    return JobCreate(**fields)


def make_application(**overrides) -> ApplicationCreate:
    fields = dict(
        job_id="j1",
        student_id="u3",
        student_name="John Doe",
        job_title="Software Engineer I",
        company_name="Tech Corp",
    )
    fields.update(overrides)
    return ApplicationCreate(**fields)


# ─── Generic CRUD (through JobRepository) ────────────────────────────

class TestCrud:
    def test_create_then_list(self, store):
        repo = JobRepository(store)
        job = repo.create(make_job())

        jobs = repo.list()
        assert jobs[0] == job
        assert [j.id for j in jobs] == [job.id, "j1"]

    def test_create_fills_defaults(self, store):
        job = JobRepository(store).create(make_job())
        assert job.id.startswith("j")
        assert job.posted_date == date.today().isoformat()
        assert job.status == JobStatus.ACTIVE

    def test_persisted_in_camel_case(self, store):
        job = JobRepository(store).create(make_job())
        raw = store.get_collection(JOBS)[0]
        assert raw["id"] == job.id
        assert raw["companyId"] == "u2"
        assert raw["eligibility"]["minCGPA"] == 6.5

    def test_update_changes_only_patched_fields(self, store):
        repo = JobRepository(store)
        before = repo.get("j1")

        after = repo.update("j1", {"package": 15.0})

        assert after.package == 15.0
        assert after.model_dump(exclude={"package"}) == before.model_dump(exclude={"package"})
        assert repo.get("j1") == after

    def test_update_accepts_camel_case_keys(self, store):
        job = JobRepository(store).update("j1", {"registrationUrl": "https://apply.example.com"})
        assert job.registration_url == "https://apply.example.com"

    def test_update_cannot_change_id(self, store):
        job = JobRepository(store).update("j1", {"id": "j999", "title": "Renamed"})
        assert job.id == "j1"

    def test_update_nulling_required_field_rejected(self, store):
        repo = JobRepository(store)
        before = repo.get("j1")

        with pytest.raises(InvalidUpdateError) as exc:
            repo.update("j1", {"title": None})

        assert exc.value.fields == ["title"]
        assert repo.get("j1") == before

    def test_update_missing_raises(self, store):
        with pytest.raises(NotFoundError) as exc:
            JobRepository(store).update("nope", {"title": "x"})
        assert exc.value.entity_id == "nope"

    def test_get_missing_raises(self, store):
        with pytest.raises(NotFoundError):
            JobRepository(store).get("nope")

    def test_find_missing_returns_none(self, store):
        assert JobRepository(store).find("nope") is None

    def test_remove_is_idempotent(self, store):
        repo = JobRepository(store)
        repo.remove("j1")
        repo.remove("j1")
        repo.remove("never-existed")
        assert repo.list() == []

    def test_invalid_records_are_skipped(self, store):
        raw = store.get_collection(JOBS)
        store.set_collection(JOBS, raw + [{"id": "broken"}])
        assert [j.id for j in JobRepository(store).list()] == ["j1"]


# ─── Jobs ────────────────────────────────────────────────────────────

class TestJobs:
    def test_stop_recruiting(self, store):
        repo = JobRepository(store)
        repo.stop_recruiting("j1")
        assert repo.get("j1").status == JobStatus.STOPPED
        assert repo.active() == []

    def test_for_company(self, store):
        repo = JobRepository(store)
        repo.create(make_job(company_id="u9", company_name="Other"))
        assert [j.company_id for j in repo.for_company("u9")] == ["u9"]

    def test_recently_posted(self, store):
        repo = JobRepository(store)
        old = (date.today() - timedelta(days=30)).isoformat()
        repo.update("j1", {"posted_date": old})
        new = repo.create(make_job())

        assert [j.id for j in repo.recently_posted(days=7)] == [new.id]
        assert len(repo.recently_posted(days=60)) == 2
        earlier = date.today() - timedelta(days=28)
        assert [j.id for j in repo.recently_posted(days=7, today=earlier)] == [new.id, "j1"]


# ─── Users ───────────────────────────────────────────────────────────

class TestUsers:
    def test_students_are_approved_on_registration(self, store):
        user = UserRepository(store).create(UserCreate(name="Asha", email="asha@uni.edu"))
        assert user.role == UserRole.STUDENT
        assert user.approved is True

    def test_companies_wait_for_approval(self, store):
        repo = UserRepository(store)
        company = repo.create(UserCreate(name="Acme", email="hr@acme.com", role=UserRole.COMPANY))
        assert company.approved is False
        assert repo.approve(company.id).approved is True

    def test_duplicate_email_rejected(self, store):
        with pytest.raises(DuplicateEntityError):
            UserRepository(store).create(UserCreate(name="John", email="JOHN@student.uni.edu"))

    def test_students(self, store):
        assert [u.id for u in UserRepository(store).students()] == ["u3"]


# ─── Applications ────────────────────────────────────────────────────

class TestApplications:
    def test_apply(self, store):
        repo = ApplicationRepository(store)
        app = repo.apply(make_application())
        assert app.status == ApplicationStatus.APPLIED
        assert repo.has_applied("u3", "j1")
        assert repo.for_job("j1") == [app]
        assert repo.for_student("u3") == [app]

    def test_second_application_rejected(self, store):
        repo = ApplicationRepository(store)
        repo.apply(make_application())
        with pytest.raises(DuplicateEntityError):
            repo.apply(make_application())
        assert len(repo.list()) == 1

    def test_same_student_other_job_allowed(self, store):
        repo = ApplicationRepository(store)
        repo.apply(make_application())
        repo.apply(make_application(job_id="j2"))
        assert len(repo.for_student("u3")) == 2

    def test_update_status_with_feedback(self, store):
        repo = ApplicationRepository(store)
        app = repo.apply(make_application())
        updated = repo.update_status(app.id, ApplicationStatus.REJECTED, "CGPA cutoff")
        assert updated.status == ApplicationStatus.REJECTED
        assert updated.feedback == "CGPA cutoff"

    def test_update_status_keeps_feedback_when_none_given(self, store):
        repo = ApplicationRepository(store)
        app = repo.apply(make_application())
        repo.update_status(app.id, ApplicationStatus.SHORTLISTED, "Good profile")
        updated = repo.update_status(app.id, ApplicationStatus.OFFERED)
        assert updated.feedback == "Good profile"

    def test_update_status_missing_raises(self, store):
        with pytest.raises(NotFoundError):
            ApplicationRepository(store).update_status("a0", ApplicationStatus.OFFERED)


# ─── Notifications ───────────────────────────────────────────────────

class TestNotifications:
    def test_for_user_newest_first(self, store):
        repo = NotificationRepository(store)
        first = repo.add("u3", "first")
        second = repo.add("u3", "second", NotificationType.SUCCESS)
        repo.add("u2", "someone else")

        assert [n.id for n in repo.for_user("u3")] == [second.id, first.id]

    def test_mark_read_is_idempotent(self, store):
        repo = NotificationRepository(store)
        n = repo.add("u3", "hello")
        repo.mark_read(n.id)
        assert repo.mark_read(n.id).read is True
        assert len(repo.list()) == 1


# ─── Hackathons ──────────────────────────────────────────────────────

class TestDeriveStatus:
    today = date(2025, 6, 1)

    def test_before_start(self):
        assert derive_status("2025-07-01", "2025-07-03", self.today) == HackathonStatus.UPCOMING

    def test_after_end(self):
        assert derive_status("2025-05-01", "2025-05-03", self.today) == HackathonStatus.ENDED

    def test_in_progress(self):
        assert derive_status("2025-05-30", "2025-06-02", self.today) == HackathonStatus.ONGOING

    def test_no_dates(self):
        assert derive_status("", "", self.today) == HackathonStatus.UPCOMING


class TestHackathons:
    def test_create_derives_fields(self, store):
        data = HackathonCreate(title="Build Week", organizer="acme", start_date="2025-07-01", end_date="2025-07-03")
        h = HackathonRepository(store).create(data, today=date(2025, 6, 1))

        assert h.logo == "A"
        assert PARTICIPANTS_RANGE[0] <= h.participants <= PARTICIPANTS_RANGE[1]
        assert h.posted_date == "2025-06-01"
        assert h.status == HackathonStatus.UPCOMING

    def test_create_keeps_given_logo_and_participants(self, store):
        data = HackathonCreate(title="X", organizer="acme", logo="AC", participants=42)
        h = HackathonRepository(store).create(data)
        assert (h.logo, h.participants) == ("AC", 42)

    def test_search_by_mode_and_difficulty(self, store):
        repo = HackathonRepository(store)
        assert len(repo.search(mode="Online")) == 3
        assert [h.id for h in repo.search(mode="Online", difficulty="Beginner")] == ["h4"]

    def test_search_free_text(self, store):
        assert [h.id for h in HackathonRepository(store).search(query="google")] == ["h1"]

    def test_search_without_filters_returns_all(self, store):
        repo = HackathonRepository(store)
        assert repo.search() == repo.list()
        assert repo.search(mode=None, difficulty=None, status=None, query=None) == repo.list()


# ─── Courses & resources ─────────────────────────────────────────────

class TestYoutubeThumbnail:
    def test_watch_url(self):
        assert youtube_thumbnail("https://www.youtube.com/watch?v=abc123&t=10") == \
            "https://img.youtube.com/vi/abc123/maxresdefault.jpg"

    def test_short_url(self):
        assert youtube_thumbnail("https://youtu.be/xyz789") == "https://img.youtube.com/vi/xyz789/maxresdefault.jpg"

    def test_not_youtube(self):
        assert youtube_thumbnail("https://vimeo.com/123") is None


class TestCourses:
    def test_thumbnail_derived_from_video(self, store):
        course = CourseRepository(store).create(
            CourseCreate(title="Intro", youtube_url="https://youtu.be/xyz789")
        )
        assert course.thumbnail == "https://img.youtube.com/vi/xyz789/maxresdefault.jpg"

    def test_published_hides_drafts(self, store):
        repo = CourseRepository(store)
        draft = repo.create(CourseCreate(title="WIP", status=CourseStatus.DRAFT))
        assert draft.id not in [c.id for c in repo.published()]
        assert draft.id in [c.id for c in repo.list()]

    def test_resource_create(self, store):
        repo = ResourceRepository(store)
        r = repo.create(ResourceCreate(title="Cheatsheet", url="https://example.com/cs.pdf"))
        assert repo.list()[0] == r


# ─── Announcements ───────────────────────────────────────────────────

class TestAnnouncements:
    def test_mark_read_is_idempotent(self, store):
        repo = AnnouncementRepository(store)
        repo.mark_read("ann1", "u3")
        ann = repo.mark_read("ann1", "u3")
        assert ann.read_by == ["u3"]

    def test_mark_read_missing_raises(self, store):
        with pytest.raises(NotFoundError):
            AnnouncementRepository(store).mark_read("nope", "u3")

    def test_active_skips_inactive_and_expired(self, store):
        repo = AnnouncementRepository(store)
        repo.create(AnnouncementCreate(title="Old", message="m", expires_at="2000-01-01T00:00:00"), "Admin")
        repo.create(AnnouncementCreate(title="Off", message="m", is_active=False), "Admin")
        future = (datetime.now() + timedelta(days=1)).isoformat()
        soon = repo.create(AnnouncementCreate(title="Soon", message="m", expires_at=future), "Admin")

        assert [a.id for a in repo.active()] == [soon.id, "ann1"]

    def test_unread_count(self, store):
        repo = AnnouncementRepository(store)
        assert repo.unread_count("u3") == 1
        repo.mark_read("ann1", "u3")
        assert repo.unread_count("u3") == 0


# ─── Support tickets ─────────────────────────────────────────────────

def student_message(text: str) -> MessageCreate:
    return MessageCreate(sender_id="u3", sender_name="John Doe", sender_role=UserRole.STUDENT, message=text)


class TestSupportTickets:
    def test_create_with_opening_message(self, store):
        ticket = SupportTicketRepository(store).create(TicketCreate(
            student_id="u3", student_name="John Doe", student_email="john@student.uni.edu",
            subject="Resume upload fails", messages=[student_message("It shows an error")],
        ))
        assert ticket.status == TicketStatus.OPEN
        assert ticket.messages[0].ticket_id == ticket.id
        assert ticket.messages[0].id.startswith("msg")

    def test_add_message(self, store):
        repo = SupportTicketRepository(store)
        ticket = repo.create(TicketCreate(
            student_id="u3", student_name="John Doe", student_email="john@student.uni.edu", subject="Help",
        ))
        reply = MessageCreate(sender_id="u1", sender_name="Admin User", sender_role=UserRole.ADMIN, message="On it")

        updated = repo.add_message(ticket.id, reply)

        assert [m.message for m in updated.messages] == ["On it"]
        assert updated.updated_at >= ticket.updated_at
        assert repo.for_student("u3") == [updated]

    def test_add_message_to_missing_ticket_raises(self, store):
        with pytest.raises(NotFoundError):
            SupportTicketRepository(store).add_message("t0", student_message("hello?"))

    def test_set_status(self, store):
        repo = SupportTicketRepository(store)
        ticket = repo.create(TicketCreate(
            student_id="u3", student_name="John Doe", student_email="john@student.uni.edu", subject="Help",
        ))
        assert repo.set_status(ticket.id, TicketStatus.IN_PROGRESS).status == TicketStatus.IN_PROGRESS
