"""
Users router.

Remote (forwarded to the auth backend with the stored bearer token):
- GET    /api/users                - every user (admin)
- GET    /api/users/students       - students only
- GET    /api/users/{id}           - one user
- PUT    /api/users/profile        - update the signed-in user's profile
- PUT    /api/users/{id}/approve   - approve a company account
- DELETE /api/users/{id}           - remove a user

Local (the seeded/offline user collection):
- GET    /api/local-users          - list, optionally students only
- POST   /api/local-users          - register locally
- PUT    /api/local-users/{id}     - update a profile
- PUT    /api/local-users/{id}/approve
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from internhub.repositories.users import UserRepository
from internhub.schemas import User, UserCreate, UserUpdate
from internhub.services.gateway import RemoteAuthGateway, get_gateway
from internhub.store import CollectionStore, get_store

router = APIRouter()


# ─── Remote ──────────────────────────────────────────────────────────

@router.get("/users", response_model=list[User])
def list_users(gateway: RemoteAuthGateway = Depends(get_gateway)):
    return gateway.list_users()


@router.get("/users/students", response_model=list[User])
def list_students(gateway: RemoteAuthGateway = Depends(get_gateway)):
    return gateway.list_students()


@router.put("/users/profile", response_model=User)
def update_profile(fields: dict[str, Any] = Body(...), gateway: RemoteAuthGateway = Depends(get_gateway)):
    """Fields outside the profile allow-list are dropped before the call."""
    return gateway.update_profile(fields)


@router.get("/users/{user_id}", response_model=User)
def get_user(user_id: str, gateway: RemoteAuthGateway = Depends(get_gateway)):
    return gateway.get_user(user_id)


@router.put("/users/{user_id}/approve", response_model=User)
def approve_user(user_id: str, gateway: RemoteAuthGateway = Depends(get_gateway)):
    return gateway.approve_user(user_id)


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, gateway: RemoteAuthGateway = Depends(get_gateway)):
    gateway.delete_user(user_id)


# ─── Local ───────────────────────────────────────────────────────────

@router.get("/local-users", response_model=list[User])
def list_local_users(students_only: bool = False, store: CollectionStore = Depends(get_store)):
    users = UserRepository(store)
    return users.students() if students_only else users.list()


@router.post("/local-users", response_model=User, status_code=201)
def create_local_user(data: UserCreate, store: CollectionStore = Depends(get_store)):
    return UserRepository(store).create(data)


@router.put("/local-users/{user_id}", response_model=User)
def update_local_user(user_id: str, data: UserUpdate, store: CollectionStore = Depends(get_store)):
    return UserRepository(store).update(user_id, data.model_dump(exclude_unset=True))


@router.put("/local-users/{user_id}/approve", response_model=User)
def approve_local_user(user_id: str, store: CollectionStore = Depends(get_store)):
    return UserRepository(store).approve(user_id)
