"""
Learning router: courses and study resources.

Endpoints:
- GET    /api/courses             - list (?published_only hides drafts and archived)
- POST   /api/courses             - add (thumbnail taken from the YouTube link if not given)
- PUT    /api/courses/{id}
- DELETE /api/courses/{id}
- GET    /api/resources
- POST   /api/resources
- PUT    /api/resources/{id}
- DELETE /api/resources/{id}
"""

from fastapi import APIRouter, Depends

from internhub.repositories.courses import CourseRepository, ResourceRepository
from internhub.schemas import Course, CourseCreate, CourseUpdate, Resource, ResourceCreate, ResourceUpdate
from internhub.store import CollectionStore, get_store

router = APIRouter()


# ─── Courses ─────────────────────────────────────────────────────────

@router.get("/courses", response_model=list[Course])
def list_courses(published_only: bool = False, store: CollectionStore = Depends(get_store)):
    repo = CourseRepository(store)
    return repo.published() if published_only else repo.list()


@router.post("/courses", response_model=Course, status_code=201)
def create_course(data: CourseCreate, store: CollectionStore = Depends(get_store)):
    return CourseRepository(store).create(data)


@router.put("/courses/{course_id}", response_model=Course)
def update_course(course_id: str, data: CourseUpdate, store: CollectionStore = Depends(get_store)):
    return CourseRepository(store).update(course_id, data.model_dump(exclude_unset=True))


@router.delete("/courses/{course_id}", status_code=204)
def delete_course(course_id: str, store: CollectionStore = Depends(get_store)):
    CourseRepository(store).remove(course_id)


# ─── Resources ───────────────────────────────────────────────────────

@router.get("/resources", response_model=list[Resource])
def list_resources(store: CollectionStore = Depends(get_store)):
    return ResourceRepository(store).list()


@router.post("/resources", response_model=Resource, status_code=201)
def create_resource(data: ResourceCreate, store: CollectionStore = Depends(get_store)):
    return ResourceRepository(store).create(data)


@router.put("/resources/{resource_id}", response_model=Resource)
def update_resource(resource_id: str, data: ResourceUpdate, store: CollectionStore = Depends(get_store)):
    return ResourceRepository(store).update(resource_id, data.model_dump(exclude_unset=True))


@router.delete("/resources/{resource_id}", status_code=204)
def delete_resource(resource_id: str, store: CollectionStore = Depends(get_store)):
    ResourceRepository(store).remove(resource_id)
