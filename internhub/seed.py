"""
Default datasets written on first start.

ensure_seeded() only fills slots that do not exist yet. A slot that exists,
even as an empty array, is left alone, so calling it again (or on every
startup) never clobbers real data.

The records are stored exactly as the repositories persist them (camelCase).
"""

from datetime import date, datetime, timedelta

import structlog

from internhub.store import (
    ANNOUNCEMENTS, APPLICATIONS, COURSES, HACKATHONS, JOBS, NOTIFICATIONS,
    RESOURCES, SUPPORT_TICKETS, USERS, CollectionStore,
)

logger = structlog.get_logger(__name__)


DEFAULT_USERS = [
    {
        "id": "u1",
        "name": "Admin User",
        "email": "admin@uni.edu",
        "role": "ADMIN",
        "approved": True,
    },
    {
        "id": "u2",
        "name": "Tech Corp",
        "email": "hr@techcorp.com",
        "role": "COMPANY",
        "companyName": "Tech Corp",
        "industry": "Software",
        "website": "https://techcorp.com",
        "approved": True,
    },
    {
        "id": "u3",
        "name": "John Doe",
        "email": "john@student.uni.edu",
        "role": "STUDENT",
        "rollNumber": "CS2024001",
        "branch": "Computer Science",
        "cgpa": 8.5,
        "skills": ["React", "Node.js", "Python"],
        "approved": True,
    },
]


def default_jobs(today: date) -> list[dict]:
    """Sample posting, dated relative to the day the store is seeded."""
    return [
        {
            "id": "j1",
            "companyId": "u2",
            "companyName": "Tech Corp",
            "title": "Software Engineer I",
            "description": "We are looking for a skilled SDE with React knowledge.",
            "package": 12.5,
            "location": "Bangalore",
            "type": "Full Time",
            "postedDate": today.isoformat(),
            "deadline": (today + timedelta(days=10)).isoformat(),
            "eligibility": {
                "minCGPA": 7.0,
                "branches": ["Computer Science", "Information Technology"],
            },
            "rounds": ["Online Test", "Technical Interview", "HR Interview"],
            "status": "Active",
        }
    ]


DEFAULT_HACKATHONS = [
    {
        "id": "h1",
        "title": "Google Summer of Code 2025",
        "organizer": "Google",
        "logo": "G",
        "deadline": "2025-04-02",
        "startDate": "2025-05-27",
        "endDate": "2025-08-25",
        "postedDate": "2025-01-10",
        "prize": "Stipend + Swag",
        "participants": 18000,
        "mode": "Online",
        "tags": ["Open Source", "Coding", "Mentorship"],
        "difficulty": "Intermediate",
        "description": "Contribute to open source projects with guidance from experienced mentors. "
                       "A 12-week program for student developers.",
        "registrationUrl": "https://summerofcode.withgoogle.com/",
        "status": "Upcoming",
    },
    {
        "id": "h2",
        "title": "Smart India Hackathon 2025",
        "organizer": "Government of India",
        "logo": "S",
        "deadline": "2025-02-28",
        "startDate": "2025-03-15",
        "endDate": "2025-03-17",
        "postedDate": "2025-01-10",
        "prize": "₹1,00,000 per problem",
        "participants": 200000,
        "mode": "Hybrid",
        "location": "Multiple Nodal Centers",
        "tags": ["Social Impact", "Innovation", "Government"],
        "difficulty": "Beginner",
        "description": "India's biggest hackathon to solve problems for government ministries "
                       "and departments. 36-hour coding marathon.",
        "registrationUrl": "https://www.sih.gov.in/",
        "status": "Upcoming",
    },
    {
        "id": "h3",
        "title": "HackWithInfy 2025",
        "organizer": "Infosys",
        "logo": "I",
        "deadline": "2025-04-15",
        "startDate": "2025-05-01",
        "endDate": "2025-06-30",
        "postedDate": "2025-01-10",
        "prize": "₹2,00,000 + PPO",
        "participants": 150000,
        "mode": "Online",
        "tags": ["Coding", "DSA", "Problem Solving"],
        "difficulty": "Intermediate",
        "description": "A coding competition for engineering students with a chance to win prizes "
                       "and Pre-Placement Offers at Infosys.",
        "registrationUrl": "https://www.infosys.com/careers/hackwithinfy.html",
        "status": "Upcoming",
    },
    {
        "id": "h4",
        "title": "MLH Global Hack Week",
        "organizer": "Major League Hacking",
        "logo": "H",
        "deadline": "2025-01-20",
        "startDate": "2025-01-22",
        "endDate": "2025-01-28",
        "postedDate": "2025-01-10",
        "prize": "Swag + Certificates",
        "participants": 25000,
        "mode": "Online",
        "tags": ["Learning", "Community", "Beginner Friendly"],
        "difficulty": "Beginner",
        "description": "A week-long celebration of hacking with daily challenges, workshops, "
                       "and mini-hackathons.",
        "registrationUrl": "https://ghw.mlh.io/",
        "status": "Ongoing",
    },
]


DEFAULT_COURSES = [
    {
        "id": "c1",
        "title": "Complete Web Development Bootcamp",
        "description": "HTML, CSS, JavaScript and React from scratch, ending with a deployed project.",
        "instructor": "CodeWithHarry",
        "duration": "40 hours",
        "lessons": 120,
        "level": "Beginner",
        "category": "Web Development",
        "thumbnail": "https://img.youtube.com/vi/tVzUXW6siu0/maxresdefault.jpg",
        "youtubeUrl": "https://www.youtube.com/watch?v=tVzUXW6siu0",
        "rating": 4.8,
        "students": 15000,
        "isFree": True,
        "tags": ["HTML", "CSS", "JavaScript", "React"],
        "status": "Active",
    },
    {
        "id": "c2",
        "title": "Data Structures & Algorithms in Python",
        "description": "Arrays to graphs with interview-style problems after every topic.",
        "instructor": "freeCodeCamp",
        "duration": "12 hours",
        "lessons": 45,
        "level": "Intermediate",
        "category": "Programming",
        "thumbnail": "https://img.youtube.com/vi/pkYVOmU3MgA/maxresdefault.jpg",
        "youtubeUrl": "https://www.youtube.com/watch?v=pkYVOmU3MgA",
        "rating": 4.7,
        "students": 9800,
        "isFree": True,
        "tags": ["DSA", "Python", "Interview"],
        "status": "Active",
    },
    {
        "id": "c3",
        "title": "Machine Learning Foundations",
        "description": "Regression, classification and model evaluation with scikit-learn.",
        "instructor": "Krish Naik",
        "duration": "18 hours",
        "lessons": 60,
        "level": "Intermediate",
        "category": "AI/ML",
        "thumbnail": "https://img.youtube.com/vi/GwIo3gDZCVQ/maxresdefault.jpg",
        "youtubeUrl": "https://www.youtube.com/watch?v=GwIo3gDZCVQ",
        "rating": 4.6,
        "students": 7200,
        "isFree": True,
        "tags": ["Machine Learning", "Python", "scikit-learn"],
        "status": "Active",
    },
]


DEFAULT_RESOURCES = [
    {
        "id": "r1",
        "title": "How to Write a Resume That Gets Shortlisted",
        "type": "article",
        "category": "Career",
        "url": "https://www.indeed.com/career-advice/resumes-cover-letters/how-to-make-a-resume",
        "isNew": False,
    },
    {
        "id": "r2",
        "title": "Top 50 Interview Questions",
        "type": "pdf",
        "category": "Interview",
        "size": "1.2 MB",
        "url": "https://www.geeksforgeeks.org/commonly-asked-interview-questions/",
        "isNew": True,
    },
    {
        "id": "r3",
        "title": "Striver's SDE Sheet",
        "type": "link",
        "category": "DSA",
        "url": "https://takeuforward.org/interviews/strivers-sde-sheet-top-coding-interview-problems/",
        "isNew": False,
    },
    {
        "id": "r4",
        "title": "Git & GitHub Crash Course",
        "type": "video",
        "category": "Tools",
        "duration": "1 hour",
        "url": "https://www.youtube.com/watch?v=RGOj5yH7evk",
        "isNew": False,
    },
]


def default_announcements(now: datetime) -> list[dict]:
    return [
        {
            "id": "ann1",
            "title": "Welcome to InternHub",
            "message": "Complete your profile and upload your resume to start applying.",
            "type": "info",
            "createdAt": now.isoformat(),
            "createdBy": "Admin User",
            "isActive": True,
            "readBy": [],
        }
    ]


def ensure_seeded(store: CollectionStore) -> list[str]:
    """
    Write the default dataset into every slot that does not exist yet.
    Returns the keys that were written (empty on every call after the first).
    """
    today = date.today()
    defaults = {
        USERS: lambda: DEFAULT_USERS,
        JOBS: lambda: default_jobs(today),
        APPLICATIONS: lambda: [],
        NOTIFICATIONS: lambda: [],
        HACKATHONS: lambda: DEFAULT_HACKATHONS,
        COURSES: lambda: DEFAULT_COURSES,
        RESOURCES: lambda: DEFAULT_RESOURCES,
        ANNOUNCEMENTS: lambda: default_announcements(datetime.now()),
        SUPPORT_TICKETS: lambda: [],
    }

    written = []
    for key, build in defaults.items():
        if store.has(key):
            continue
        store.set_collection(key, build())
        written.append(key)

    if written:
        logger.info("store_seeded", keys=written)
    return written
