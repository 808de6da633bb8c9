"""User management (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from book_inventory.api.deps import get_auth_service, require_admin
from book_inventory.schemas.auth import MessageResponse
from book_inventory.schemas.user import RoleUpdateRequest, UserResponse, UsersListResponse
from book_inventory.services.auth import AuthService

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=UsersListResponse)
def list_users(
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> UsersListResponse:
    """List all active users."""
    return UsersListResponse(
        users=[UserResponse.model_validate(u) for u in auth.list_users()]
    )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> UserResponse:
    return UserResponse.model_validate(auth.get_user(user_id))


@router.patch("/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: int,
    body: RoleUpdateRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> UserResponse:
    """Change a user's role. Existing tokens keep the old role until they expire."""
    return UserResponse.model_validate(auth.update_role(user_id, body.role))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Soft-delete a user. Tokens already issued to them remain valid until expiry."""
    auth.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
