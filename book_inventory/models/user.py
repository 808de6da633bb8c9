"""ORM model for application users (auth and RBAC)."""

import enum

from sqlalchemy import Column, Enum, Integer, String

from book_inventory.models.base import Base, TimestampMixin


class Role(str, enum.Enum):
    """Closed set of roles a user can hold."""

    USER = "user"
    ADMIN = "admin"


class User(TimestampMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    username and email are unique; email is stored lowercased.
    password_hash is never serialized to clients.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(100), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            length=20,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=Role.USER,
    )
