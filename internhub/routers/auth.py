"""
Auth router: sign-in through the remote auth backend.

Endpoints:
- POST /api/auth/login     - email + password
- POST /api/auth/register  - create an account (server rejects duplicate emails)
- POST /api/auth/google    - Google Identity credential
- POST /api/auth/logout    - forget the stored token
"""

from fastapi import APIRouter, Depends

from internhub.schemas import GoogleLoginRequest, LoginRequest, RegisterRequest, User
from internhub.services.gateway import RemoteAuthGateway, get_gateway

router = APIRouter()


@router.post("/auth/login", response_model=User)
def login(data: LoginRequest, gateway: RemoteAuthGateway = Depends(get_gateway)):
    return gateway.login(data.email, data.password)


@router.post("/auth/register", response_model=User)
def register(data: RegisterRequest, gateway: RemoteAuthGateway = Depends(get_gateway)):
    """Server-side errors such as "User already exists" come back verbatim."""
    return gateway.register(data)


@router.post("/auth/google", response_model=User)
def google_login(data: GoogleLoginRequest, gateway: RemoteAuthGateway = Depends(get_gateway)):
    return gateway.google_login(data.credential)


@router.post("/auth/logout", status_code=204)
def logout(gateway: RemoteAuthGateway = Depends(get_gateway)):
    gateway.logout()
