"""
Hackathons router.

Endpoints:
- GET    /api/hackathons        - list (?mode, ?difficulty, ?status, ?q)
- POST   /api/hackathons        - post a hackathon (status derived from its dates)
- PUT    /api/hackathons/{id}   - edit
- DELETE /api/hackathons/{id}
"""

from typing import Optional

from fastapi import APIRouter, Depends

from internhub.repositories.hackathons import HackathonRepository
from internhub.schemas import Difficulty, Hackathon, HackathonCreate, HackathonMode, HackathonStatus, HackathonUpdate
from internhub.store import CollectionStore, get_store

router = APIRouter()


@router.get("/hackathons", response_model=list[Hackathon])
def list_hackathons(
    mode: Optional[HackathonMode] = None,
    difficulty: Optional[Difficulty] = None,
    status: Optional[HackathonStatus] = None,
    q: Optional[str] = None,
    store: CollectionStore = Depends(get_store),
):
    return HackathonRepository(store).search(
        mode=mode.value if mode else None,
        difficulty=difficulty.value if difficulty else None,
        status=status.value if status else None,
        query=q,
    )


@router.post("/hackathons", response_model=Hackathon, status_code=201)
def create_hackathon(data: HackathonCreate, store: CollectionStore = Depends(get_store)):
    return HackathonRepository(store).create(data)


@router.put("/hackathons/{hackathon_id}", response_model=Hackathon)
def update_hackathon(hackathon_id: str, data: HackathonUpdate, store: CollectionStore = Depends(get_store)):
    return HackathonRepository(store).update(hackathon_id, data.model_dump(exclude_unset=True))


@router.delete("/hackathons/{hackathon_id}", status_code=204)
def delete_hackathon(hackathon_id: str, store: CollectionStore = Depends(get_store)):
    HackathonRepository(store).remove(hackathon_id)
