"""Request/response schemas for user accounts."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from book_inventory.models.user import Role


class UserResponse(BaseModel):
    """User as exposed to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    users: list[UserResponse]


class RoleUpdateRequest(BaseModel):
    role: Role
