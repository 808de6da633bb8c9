"""Pydantic request/response schemas."""

from book_inventory.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    SessionClaims,
    TokenResponse,
)
from book_inventory.schemas.book import (
    BookCreate,
    BookPageResponse,
    BookResponse,
    BookSearchResponse,
    QuantityUpdate,
)
from book_inventory.schemas.health import HealthResponse
from book_inventory.schemas.user import RoleUpdateRequest, UserResponse, UsersListResponse

__all__ = [
    "AuthResponse",
    "BookCreate",
    "BookPageResponse",
    "BookResponse",
    "BookSearchResponse",
    "ChangePasswordRequest",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "QuantityUpdate",
    "RefreshRequest",
    "RegisterRequest",
    "RoleUpdateRequest",
    "SessionClaims",
    "TokenResponse",
    "UserResponse",
    "UsersListResponse",
]
