"""Credential store: user lookups, existence checks, create and update."""

from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from book_inventory.models.user import Role, User


class UserStore:
    """
    Repository for User rows. Soft-deleted users are invisible to every query.

    Write methods commit. An IntegrityError from a unique constraint is rolled
    back and re-raised for the service layer to translate.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _active(self):
        return self.session.query(User).filter(User.deleted_at.is_(None))

    def get_by_id(self, user_id: int) -> User | None:
        return self._active().filter(User.id == user_id).first()

    def get_by_username(self, username: str) -> User | None:
        return self._active().filter(User.username == username).first()

    def get_by_email(self, email: str) -> User | None:
        return self._active().filter(User.email == email).first()

    def list_all(self) -> list[User]:
        return self._active().order_by(User.id).all()

    def exists_by_username(self, username: str) -> bool:
        return self._active().filter(User.username == username).count() > 0

    def exists_by_email(self, email: str) -> bool:
        return self._active().filter(User.email == email).count() > 0

    def create(self, username: str, email: str, password_hash: str, role: Role = Role.USER) -> User:
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user

    def update_role(self, user: User, role: Role) -> User:
        user.role = role
        self.session.commit()
        self.session.refresh(user)
        return user

    def update_password(self, user_id: int, password_hash: str) -> bool:
        """Overwrite the stored hash. Returns False when no active user matched."""
        updated = (
            self._active()
            .filter(User.id == user_id)
            .update({User.password_hash: password_hash}, synchronize_session=False)
        )
        self.session.commit()
        return updated > 0

    def soft_delete(self, user: User) -> None:
        user.deleted_at = datetime.now(UTC)
        self.session.commit()
