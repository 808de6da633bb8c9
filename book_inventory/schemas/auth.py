"""Request/response schemas for auth endpoints and session claims."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from book_inventory.models.user import Role
from book_inventory.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """New account details."""

    username: str = Field(..., min_length=3, max_length=50, description="Username")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=6, description="Password (6-100 characters)")


class LoginRequest(BaseModel):
    """Credentials for login. The identifier is an email if it contains '@'."""

    username_or_email: str = Field(..., description="Username or email")
    password: str = Field(..., description="Password")


class RefreshRequest(BaseModel):
    token: str = Field(..., min_length=1, description="A still-valid access token")


class TokenResponse(BaseModel):
    """Freshly issued access token."""

    token: str = Field(..., description="JWT access token")


class AuthResponse(BaseModel):
    """Returned by register and login: the sanitized user plus a token."""

    user: UserResponse
    token: str = Field(..., description="JWT access token")


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(..., min_length=6, description="New password (6-100 characters)")


class MessageResponse(BaseModel):
    message: str


class CurrentUser(BaseModel):
    """Authenticated identity taken from a validated token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: Role


class SessionClaims(BaseModel):
    """
    Claims embedded in a signed session token.

    Reflects the user's identity and role at issuance time, not the current
    database state.
    """

    user_id: int
    username: str
    email: str
    role: Role
    issued_at: datetime
    not_before: datetime
    expires_at: datetime
    subject: str
