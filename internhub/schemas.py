"""
Pydantic schemas for the persisted entities and the API payloads.

Python attributes are snake_case; everything stored in the collection store
(and returned by the API) uses the camelCase names the portal has always
used, e.g. companyId, postedDate, minCGPA.
"""

from enum import Enum
from typing import NewType, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ─── Identifiers ────────────────────────────────────────────────────
# Weak references by id: nothing checks that the target exists.

UserId = NewType("UserId", str)
JobId = NewType("JobId", str)
ApplicationId = NewType("ApplicationId", str)
NotificationId = NewType("NotificationId", str)
HackathonId = NewType("HackathonId", str)
CourseId = NewType("CourseId", str)
ResourceId = NewType("ResourceId", str)
AnnouncementId = NewType("AnnouncementId", str)
TicketId = NewType("TicketId", str)
MessageId = NewType("MessageId", str)


class CamelModel(BaseModel):
    """Base for every schema: camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ─── Enums ───────────────────────────────────────────────────────────

class UserRole(str, Enum):
    STUDENT = "STUDENT"
    COMPANY = "COMPANY"
    ADMIN = "ADMIN"


class EducationStatus(str, Enum):
    PURSUING = "Pursuing"
    GRADUATED = "Graduated"
    UNDERGRADUATE = "Undergraduate"


class JobType(str, Enum):
    FULL_TIME = "Full Time"
    INTERNSHIP = "Internship"


class JobStatus(str, Enum):
    ACTIVE = "Active"
    STOPPED = "Stopped"


class ApplicationStatus(str, Enum):
    APPLIED = "Applied"
    SHORTLISTED = "Shortlisted"
    REJECTED = "Rejected"
    OFFERED = "Offered"
    INTERVIEW_SCHEDULED = "Interview Scheduled"


class NotificationType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class HackathonMode(str, Enum):
    ONLINE = "Online"
    OFFLINE = "Offline"
    HYBRID = "Hybrid"


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class HackathonStatus(str, Enum):
    UPCOMING = "Upcoming"
    ONGOING = "Ongoing"
    ENDED = "Ended"


class CourseStatus(str, Enum):
    ACTIVE = "Active"
    DRAFT = "Draft"
    ARCHIVED = "Archived"


class ResourceType(str, Enum):
    VIDEO = "video"
    PDF = "pdf"
    ARTICLE = "article"
    LINK = "link"


class AnnouncementType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    URGENT = "urgent"


class TicketCategory(str, Enum):
    GENERAL = "general"
    TECHNICAL = "technical"
    INTERNSHIP = "internship"
    ACCOUNT = "account"
    FEEDBACK = "feedback"


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ─── Users ───────────────────────────────────────────────────────────

class StudentProfile(CamelModel):
    """The two fields eligibility is decided on."""
    cgpa: Optional[float] = None
    branch: Optional[str] = None


class UserBase(CamelModel):
    role: UserRole = UserRole.STUDENT
    name: str
    email: str

    # Student specific
    roll_number: Optional[str] = None
    branch: Optional[str] = None
    course: Optional[str] = None
    college_name: Optional[str] = None
    graduation_year: Optional[int] = None
    education_status: Optional[EducationStatus] = None
    cgpa: Optional[float] = None
    skills: list[str] = Field(default_factory=list)
    resume_url: Optional[str] = None
    profile_picture: Optional[str] = None
    phone: Optional[str] = None
    linked_in: Optional[str] = None

    # Company specific
    company_name: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None


class User(UserBase):
    id: UserId
    approved: bool = False


class UserCreate(UserBase):
    """Local registration. Passwords only ever go to the remote auth backend."""
    pass


class UserUpdate(CamelModel):
    name: Optional[str] = None
    roll_number: Optional[str] = None
    branch: Optional[str] = None
    course: Optional[str] = None
    college_name: Optional[str] = None
    graduation_year: Optional[int] = None
    education_status: Optional[EducationStatus] = None
    cgpa: Optional[float] = None
    skills: Optional[list[str]] = None
    resume_url: Optional[str] = None
    profile_picture: Optional[str] = None
    phone: Optional[str] = None
    linked_in: Optional[str] = None
    company_name: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None


# ─── Jobs ────────────────────────────────────────────────────────────

class Eligibility(CamelModel):
    min_cgpa: float = Field(0.0, alias="minCGPA")
    branches: list[str] = Field(default_factory=list)   # empty = every branch


class JobBase(CamelModel):
    title: str
    description: str = ""
    package: float = 0.0                # LPA
    location: str = ""
    type: JobType = JobType.INTERNSHIP
    deadline: str = ""                  # ISO date
    eligibility: Eligibility = Field(default_factory=Eligibility)
    rounds: list[str] = Field(default_factory=list)
    registration_url: Optional[str] = None


class Job(JobBase):
    id: JobId
    company_id: UserId
    company_name: str                   # snapshot taken when the job was posted
    posted_date: str
    status: JobStatus = JobStatus.ACTIVE


class JobCreate(JobBase):
    company_id: UserId
    company_name: str


class JobUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    package: Optional[float] = None
    location: Optional[str] = None
    type: Optional[JobType] = None
    deadline: Optional[str] = None
    eligibility: Optional[Eligibility] = None
    rounds: Optional[list[str]] = None
    registration_url: Optional[str] = None
    status: Optional[JobStatus] = None


# ─── Applications ────────────────────────────────────────────────────

class ApplicationCreate(CamelModel):
    job_id: JobId
    student_id: UserId
    student_name: str
    job_title: str
    company_name: str
    resume_url: Optional[str] = None


class Application(ApplicationCreate):
    id: ApplicationId
    status: ApplicationStatus = ApplicationStatus.APPLIED
    applied_date: str
    feedback: Optional[str] = None


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    feedback: Optional[str] = None


# ─── Notifications ───────────────────────────────────────────────────

class NotificationCreate(CamelModel):
    user_id: UserId
    message: str
    type: NotificationType = NotificationType.INFO


class Notification(NotificationCreate):
    id: NotificationId
    date: str
    read: bool = False


# ─── Hackathons ──────────────────────────────────────────────────────

class HackathonBase(CamelModel):
    title: str
    organizer: str
    deadline: str = ""
    start_date: str = ""
    end_date: str = ""
    prize: str = ""
    mode: HackathonMode = HackathonMode.ONLINE
    location: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    description: str = ""
    registration_url: str = ""


class HackathonCreate(HackathonBase):
    logo: Optional[str] = None          # defaults to the organizer's initial
    participants: Optional[int] = None  # defaults to a random seed value


class Hackathon(HackathonBase):
    id: HackathonId
    logo: str
    participants: int = 0
    posted_date: str = ""
    status: HackathonStatus = HackathonStatus.UPCOMING


class HackathonUpdate(CamelModel):
    title: Optional[str] = None
    organizer: Optional[str] = None
    logo: Optional[str] = None
    deadline: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    prize: Optional[str] = None
    participants: Optional[int] = None
    mode: Optional[HackathonMode] = None
    location: Optional[str] = None
    tags: Optional[list[str]] = None
    difficulty: Optional[Difficulty] = None
    description: Optional[str] = None
    registration_url: Optional[str] = None
    status: Optional[HackathonStatus] = None


# ─── Courses & resources ─────────────────────────────────────────────

class CourseBase(CamelModel):
    title: str
    description: str = ""
    instructor: str = ""
    duration: str = ""
    lessons: int = 0
    level: Difficulty = Difficulty.BEGINNER
    category: str = ""
    youtube_url: str = ""
    youtube_playlist: Optional[str] = None
    rating: float = 0.0
    students: int = 0
    is_free: bool = True
    tags: list[str] = Field(default_factory=list)
    status: CourseStatus = CourseStatus.ACTIVE


class CourseCreate(CourseBase):
    thumbnail: Optional[str] = None     # derived from youtube_url when omitted


class Course(CourseBase):
    id: CourseId
    thumbnail: str = ""


class CourseUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    instructor: Optional[str] = None
    duration: Optional[str] = None
    lessons: Optional[int] = None
    level: Optional[Difficulty] = None
    category: Optional[str] = None
    thumbnail: Optional[str] = None
    youtube_url: Optional[str] = None
    youtube_playlist: Optional[str] = None
    rating: Optional[float] = None
    students: Optional[int] = None
    is_free: Optional[bool] = None
    tags: Optional[list[str]] = None
    status: Optional[CourseStatus] = None


class ResourceCreate(CamelModel):
    title: str
    type: ResourceType = ResourceType.LINK
    category: str = ""
    duration: Optional[str] = None
    size: Optional[str] = None
    url: str
    is_new: bool = False


class Resource(ResourceCreate):
    id: ResourceId


class ResourceUpdate(CamelModel):
    title: Optional[str] = None
    type: Optional[ResourceType] = None
    category: Optional[str] = None
    duration: Optional[str] = None
    size: Optional[str] = None
    url: Optional[str] = None
    is_new: Optional[bool] = None


# ─── Announcements ───────────────────────────────────────────────────

class AnnouncementCreate(CamelModel):
    title: str
    message: str
    type: AnnouncementType = AnnouncementType.INFO
    expires_at: Optional[str] = None
    is_active: bool = True


class Announcement(AnnouncementCreate):
    id: AnnouncementId
    created_at: str
    created_by: str
    read_by: list[UserId] = Field(default_factory=list)   # append-only, no duplicates


class AnnouncementUpdate(CamelModel):
    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[AnnouncementType] = None
    expires_at: Optional[str] = None
    is_active: Optional[bool] = None


# ─── Support tickets ─────────────────────────────────────────────────

class MessageCreate(CamelModel):
    sender_id: UserId
    sender_name: str
    sender_role: UserRole
    message: str
    attachments: list[str] = Field(default_factory=list)


class SupportMessage(MessageCreate):
    id: MessageId
    ticket_id: TicketId
    created_at: str


class TicketCreate(CamelModel):
    student_id: UserId
    student_name: str
    student_email: str
    subject: str
    category: TicketCategory = TicketCategory.GENERAL
    priority: TicketPriority = TicketPriority.MEDIUM
    messages: list[MessageCreate] = Field(default_factory=list)   # usually the opening message


class SupportTicket(CamelModel):
    id: TicketId
    student_id: UserId
    student_name: str
    student_email: str
    subject: str
    category: TicketCategory = TicketCategory.GENERAL
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM
    created_at: str
    updated_at: str
    messages: list[SupportMessage] = Field(default_factory=list)


class TicketStatusUpdate(CamelModel):
    status: TicketStatus


# ─── Remote auth ─────────────────────────────────────────────────────

class LoginRequest(CamelModel):
    email: str
    password: str


class GoogleLoginRequest(CamelModel):
    credential: str


class RegisterRequest(UserBase):
    password: str


# ─── Extraction drafts ───────────────────────────────────────────────
# What the scraping services found, cleaned up for a human to review.
# None means "not found on the page"; the form asks for it manually.

class ExtractRequest(CamelModel):
    url: str


class HackathonDraft(CamelModel):
    title: Optional[str] = None
    organizer: Optional[str] = None
    description: Optional[str] = None
    prize: Optional[str] = None
    mode: Optional[HackathonMode] = None
    difficulty: Optional[Difficulty] = None
    tags: list[str] = Field(default_factory=list)
    location: Optional[str] = None
    deadline: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    registration_url: str


class InternshipDraft(CamelModel):
    title: Optional[str] = None
    stipend: Optional[str] = None
    deadline: Optional[str] = None
    location: Optional[str] = None
    eligibility: Optional[str] = None
    registration_url: str


# ─── Stats ───────────────────────────────────────────────────────────

class CompanyHiring(CamelModel):
    name: str
    offers: int
    applications: int


class PlacementStats(CamelModel):
    total_students: int
    placed_students: int
    placement_rate: int                 # percent
    total_companies: int
    active_companies: int
    total_jobs: int
    active_jobs: int
    total_applications: int
    avg_package: float
    highest_package: float
    lowest_package: float
    top_companies: list[CompanyHiring] = Field(default_factory=list)
