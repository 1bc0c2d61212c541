"""
Authentication Handler

Handles user registration and login endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Domain errors raised by the service propagate to the global exception
handlers, which render them in the standard error shape.
"""

from fastapi import APIRouter, Depends, status

from puppymatch.shared.models.user import User
from puppymatch.shared.schemas.user import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from puppymatch.shared.services.auth_service import AuthService
from puppymatch.api.dependencies.services import get_auth_service


router = APIRouter()


def _auth_response(user: User, token: str, expires_in: int) -> AuthResponse:
    return AuthResponse(
        token=token,
        user_id=user.id,
        expires_in=expires_in,
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Creates a new account and returns a session token for it.

    Raises:
        400: Malformed email or password outside the length policy
        409: Email already registered
    """
    user, token, expires_in = await auth_service.register_user(
        email=user_data.email,
        password=user_data.password,
    )
    return _auth_response(user, token, expires_in)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return a session token.

    Raises:
        401: Unknown email or wrong password (indistinguishable)
    """
    user, token, expires_in = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )
    return _auth_response(user, token, expires_in)
