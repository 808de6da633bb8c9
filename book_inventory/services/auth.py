"""Auth service: registration, login, password changes and admin user management."""

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from book_inventory.core.errors import (
    ConflictError,
    EmailTakenError,
    EmptyFieldError,
    InvalidCredentialsError,
    NotFoundError,
    UsernameTakenError,
    ValidationError,
)
from book_inventory.core.security import (
    BCRYPT_ROUNDS,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    hash_password,
    validate_password_strength,
    verify_password,
)
from book_inventory.models.user import Role, User
from book_inventory.schemas.user import UserResponse
from book_inventory.stores.users import UserStore

if TYPE_CHECKING:
    from book_inventory.core.config import Settings

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_hash(rounds: int) -> str:
    """Hash compared against when the login identifier matches no user."""
    return hash_password("no-such-user-placeholder", rounds=rounds)


class AuthService:
    """
    Orchestrates the credential store and password hasher.

    Uniqueness checks before insert are two separate store calls, not an
    atomic constraint check. A concurrent duplicate insert is caught by the
    database unique constraint and reported as ConflictError.
    """

    def __init__(self, users: UserStore, settings: "Settings | None" = None) -> None:
        self.users = users
        self.bcrypt_rounds = settings.BCRYPT_ROUNDS if settings else BCRYPT_ROUNDS
        self.require_current_password = (
            settings.REQUIRE_CURRENT_PASSWORD if settings else False
        )

    def register(self, username: str, email: str, password: str) -> User:
        """Create a new account with role 'user'. The returned row still holds the hash."""
        username = username.strip()
        email = email.strip().lower()
        if not username:
            raise EmptyFieldError("username is required")
        if not email:
            raise EmptyFieldError("email is required")
        if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
            raise ValidationError(
                f"username must be {USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} characters long"
            )
        validate_password_strength(password)

        if self.users.exists_by_username(username):
            raise UsernameTakenError()
        if self.users.exists_by_email(email):
            raise EmailTakenError()

        password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        try:
            user = self.users.create(
                username=username,
                email=email,
                password_hash=password_hash,
                role=Role.USER,
            )
        except IntegrityError as e:
            logger.info("Registration lost a uniqueness race: username=%s", username)
            raise ConflictError("username or email already exists") from e
        logger.info("Registered user id=%s username=%s", user.id, user.username)
        return user

    def login(self, username_or_email: str, password: str) -> UserResponse:
        """
        Authenticate by username or email and return the sanitized user.

        Blank fields, unknown identifier and wrong password all raise the same
        InvalidCredentialsError so callers cannot tell them apart. An unknown
        identifier is still checked against a throwaway hash so both failure
        paths pay the bcrypt cost.
        """
        identifier = username_or_email.strip()
        if not identifier or not password.strip():
            raise InvalidCredentialsError()

        if "@" in identifier:
            user = self.users.get_by_email(identifier.lower())
        else:
            user = self.users.get_by_username(identifier)

        stored_hash = user.password_hash if user is not None else _dummy_hash(self.bcrypt_rounds)
        if not verify_password(password, stored_hash) or user is None:
            logger.info("Failed login for identifier=%s", identifier)
            raise InvalidCredentialsError()
        return UserResponse.model_validate(user)

    def change_password(self, user_id: int, current_password: str, new_password: str) -> None:
        """
        Validate and store a new password hash.

        Known gap: current_password is only checked when
        REQUIRE_CURRENT_PASSWORD is enabled. By default any holder of a valid
        token can overwrite the password.
        """
        validate_password_strength(new_password)
        if self.require_current_password:
            user = self.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("user not found")
            if not verify_password(current_password, user.password_hash):
                raise InvalidCredentialsError("current password is incorrect")

        password_hash = hash_password(new_password, rounds=self.bcrypt_rounds)
        if not self.users.update_password(user_id, password_hash):
            raise NotFoundError("user not found")
        logger.info("Password changed for user id=%s", user_id)

    def get_user(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return user

    def list_users(self) -> list[User]:
        return self.users.list_all()

    def update_role(self, user_id: int, role: Role) -> User:
        """Change a user's role. Takes effect on the user's next issued token."""
        user = self.get_user(user_id)
        previous = user.role
        user = self.users.update_role(user, role)
        logger.info(
            "Role changed for user id=%s: %s -> %s",
            user_id,
            Role(previous).value,
            role.value,
        )
        return user

    def delete_user(self, user_id: int) -> None:
        """Soft-delete a user. Tokens already issued stay valid until expiry."""
        user = self.get_user(user_id)
        self.users.soft_delete(user)
        logger.info("Soft-deleted user id=%s", user_id)
