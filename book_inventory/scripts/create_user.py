"""
Create a user (e.g. the first admin). Run from project root:
  python -m book_inventory.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m book_inventory.scripts.create_user admin admin@books.io your-secure-password admin
"""
import argparse
import logging
import sys

from book_inventory.core.config import get_settings
from book_inventory.core.database import Database
from book_inventory.core.errors import AppError
from book_inventory.models.user import Role
from book_inventory.services.auth import AuthService
from book_inventory.stores.users import UserStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Book Inventory user.")
    parser.add_argument("username", help="Username (3-50 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-100 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.USER.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    database = Database(settings.DATABASE_URL)
    database.connect()
    database.create_all()
    db = database.session()
    try:
        auth = AuthService(UserStore(db), settings)
        user = auth.register(args.username, args.email, args.password)
        role = Role(args.role)
        if role is not Role.USER:
            user = auth.update_role(user.id, role)
        print(f"Created user '{user.username}' with role '{role.value}'.")
        return 0
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
        database.close()


if __name__ == "__main__":
    sys.exit(main())
