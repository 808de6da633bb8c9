"""Registration, login, token refresh, profile and password change."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from book_inventory.api.deps import (
    get_auth_service,
    get_current_user,
    get_token_manager,
)
from book_inventory.core.errors import TokenError
from book_inventory.core.security import TokenManager
from book_inventory.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
)
from book_inventory.schemas.user import UserResponse
from book_inventory.services.auth import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
    tokens: Annotated[TokenManager, Depends(get_token_manager)],
) -> AuthResponse:
    """Create an account with role 'user' and return it with an access token."""
    user = auth.register(body.username, body.email, body.password)
    token = tokens.issue(user)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
    tokens: Annotated[TokenManager, Depends(get_token_manager)],
) -> AuthResponse:
    """
    Authenticate with username or email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = auth.login(body.username_or_email, body.password)
    return AuthResponse(user=user, token=tokens.issue(user))


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    body: RefreshRequest,
    tokens: Annotated[TokenManager, Depends(get_token_manager)],
) -> TokenResponse:
    """Exchange a still-valid token for one with a later expiry."""
    try:
        new_token = tokens.refresh(body.token)
    except TokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        ) from e
    return TokenResponse(token=new_token)


@router.get("/profile", response_model=UserResponse)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> UserResponse:
    """Return the current user's record from the store (404 if it was deleted)."""
    return UserResponse.model_validate(auth.get_user(current_user.id))


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    auth.change_password(current_user.id, body.current_password, body.new_password)
    return MessageResponse(message="Password changed successfully")
