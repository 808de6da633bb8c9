"""Tests for the create_user CLI against a temporary SQLite file."""

import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest.mock import patch

from book_inventory.core.config import Settings
from book_inventory.core.database import Database
from book_inventory.models.user import Role
from book_inventory.scripts.create_user import main
from book_inventory.stores.users import UserStore


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        self.url = f"sqlite:///{os.path.join(tmpdir.name, 'books.db')}"
        settings = Settings(DATABASE_URL=self.url, BCRYPT_ROUNDS=4)
        patcher = patch("book_inventory.scripts.create_user.get_settings", return_value=settings)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _role_of(self, username: str) -> Role | None:
        database = Database(self.url)
        database.connect()
        db = database.session()
        try:
            user = UserStore(db).get_by_username(username)
            return user.role if user else None
        finally:
            db.close()
            database.close()

    def test_creates_admin(self) -> None:
        out = StringIO()
        with redirect_stdout(out):
            code = main(["root", "root@x.com", "rootpass", "admin"])
        self.assertEqual(code, 0)
        self.assertIn("role 'admin'", out.getvalue())
        self.assertIs(self._role_of("root"), Role.ADMIN)

    def test_duplicate_user_fails(self) -> None:
        with redirect_stdout(StringIO()):
            main(["root", "root@x.com", "rootpass"])
        err = StringIO()
        with redirect_stderr(err):
            code = main(["root", "other@x.com", "rootpass"])
        self.assertEqual(code, 1)
        self.assertIn("username already exists", err.getvalue())

    def test_weak_password_fails(self) -> None:
        with redirect_stderr(StringIO()):
            self.assertEqual(main(["root", "root@x.com", "123"]), 1)
        self.assertIsNone(self._role_of("root"))


if __name__ == "__main__":
    unittest.main()
