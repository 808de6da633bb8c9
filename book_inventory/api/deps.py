"""Request dependencies: services per request, authentication and admin gates."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from book_inventory.core.config import Settings
from book_inventory.core.database import get_db
from book_inventory.core.errors import TokenError
from book_inventory.core.security import TokenManager
from book_inventory.models.user import Role
from book_inventory.schemas.auth import CurrentUser
from book_inventory.services.auth import AuthService
from book_inventory.services.books import BookService
from book_inventory.stores.books import BookStore
from book_inventory.stores.users import UserStore

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_manager(request: Request) -> TokenManager:
    return request.app.state.token_manager


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    return AuthService(UserStore(db), settings)


def get_book_service(db: Annotated[Session, Depends(get_db)]) -> BookService:
    return BookService(BookStore(db))


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenManager, Depends(get_token_manager)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.

    The failure reason is logged but never returned to the client. The
    identity is also attached to request.state.current_user.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = tokens.validate(credentials.credentials)
    except TokenError as e:
        logger.info("Rejected token on %s %s: %s", request.method, request.url.path, e.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    current_user = CurrentUser(
        id=claims.user_id,
        username=claims.username,
        email=claims.email,
        role=claims.role,
    )
    request.state.current_user = current_user
    return current_user


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    match current_user.role:
        case Role.ADMIN:
            return current_user
        case Role.USER:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin access required",
            )
