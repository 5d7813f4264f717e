"""
Learning content: video courses and study resources.
"""

import re
from typing import Optional

from internhub.repositories.base import CollectionRepository
from internhub.schemas import Course, CourseCreate, CourseStatus, Resource, ResourceCreate
from internhub.store import COURSES, RESOURCES

YOUTUBE_ID = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)")


def youtube_thumbnail(url: str) -> Optional[str]:
    """Thumbnail image URL for a YouTube video link, or None if it isn't one."""
    match = YOUTUBE_ID.search(url or "")
    if not match:
        return None
    return f"https://img.youtube.com/vi/{match.group(1)}/maxresdefault.jpg"


class CourseRepository(CollectionRepository[Course]):
    key = COURSES
    model = Course
    id_prefix = "c"
    entity_name = "Course"
    prepend = True

    def create(self, data: CourseCreate) -> Course:
        course = Course(
            **data.model_dump(exclude={"thumbnail"}),
            id=self._new_id(),
            thumbnail=data.thumbnail or youtube_thumbnail(data.youtube_url) or "",
        )
        return self._insert(course)

    def published(self) -> list[Course]:
        """What students get to see: drafts and archived courses are hidden."""
        return [c for c in self._load() if c.status not in (CourseStatus.DRAFT, CourseStatus.ARCHIVED)]


class ResourceRepository(CollectionRepository[Resource]):
    key = RESOURCES
    model = Resource
    id_prefix = "r"
    entity_name = "Resource"
    prepend = True

    def create(self, data: ResourceCreate) -> Resource:
        return self._insert(Resource(**data.model_dump(), id=self._new_id()))
