"""
Authentication API endpoints for registration, login and identity lookup.
"""
from fastapi import APIRouter, Depends, status

from inventory_api.core.security import require_session
from inventory_api.schemas.user import (
    Identity,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)
from inventory_api.services.auth import AuthService, get_auth_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: RegisterRequest,
    auth: AuthService = Depends(get_auth_service)
):
    """
    Register a new user account.

    - **email**: Stored trimmed and lower-cased, must be unique
    - **password**: Minimum 6 characters
    - **role**: Optional, defaults to "staff"
    """
    return await auth.register(user_data)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    auth: AuthService = Depends(get_auth_service)
):
    """
    Authenticate user and return a session token.

    Unknown email and wrong password give the same 401 response.
    """
    token = await auth.login(credentials)
    return LoginResponse(token=token)


@router.get("/me", response_model=Identity)
async def whoami(identity: Identity = Depends(require_session)):
    """Identity decoded from the presented session token."""
    return identity
