"""
Stats router.

Endpoints:
- GET /api/stats  - placement statistics over the local collections
"""

from fastapi import APIRouter, Depends

from internhub.repositories.applications import ApplicationRepository
from internhub.repositories.jobs import JobRepository
from internhub.repositories.users import UserRepository
from internhub.schemas import PlacementStats
from internhub.services.stats import placement_stats
from internhub.store import CollectionStore, get_store

router = APIRouter()


@router.get("/stats", response_model=PlacementStats)
def get_stats(store: CollectionStore = Depends(get_store)):
    return placement_stats(
        UserRepository(store).list(),
        JobRepository(store).list(),
        ApplicationRepository(store).list(),
    )
