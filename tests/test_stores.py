"""Integration tests for UserStore and BookStore against in-memory SQLite."""

import unittest

from sqlalchemy.exc import IntegrityError

from book_inventory.core.database import Database, check_db_connected
from book_inventory.models.user import Role
from book_inventory.stores.books import BookStore
from book_inventory.stores.users import UserStore


class _StoreTestCase(unittest.TestCase):
    """Fresh in-memory database and session per test."""

    def setUp(self) -> None:
        self.database = Database("sqlite://")
        self.database.connect()
        self.database.create_all()
        self.session = self.database.session()
        self.addCleanup(self.database.close)
        self.addCleanup(self.session.close)


class TestDatabaseLifecycle(unittest.TestCase):
    def test_session_before_connect_fails(self) -> None:
        database = Database("sqlite://")
        with self.assertRaises(RuntimeError):
            database.session()

    def test_connect_and_close(self) -> None:
        database = Database("sqlite://")
        database.connect()
        session = database.session()
        try:
            self.assertTrue(check_db_connected(session))
        finally:
            session.close()
            database.close()
        with self.assertRaises(RuntimeError):
            database.engine


class TestUserStore(_StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.users = UserStore(self.session)

    def test_create_and_lookup(self) -> None:
        created = self.users.create("alice", "alice@x.com", "hash")
        self.assertIsNotNone(created.id)
        self.assertIs(created.role, Role.USER)
        self.assertIsNotNone(created.created_at)
        self.assertEqual(self.users.get_by_id(created.id).username, "alice")
        self.assertEqual(self.users.get_by_username("alice").id, created.id)
        self.assertEqual(self.users.get_by_email("alice@x.com").id, created.id)
        self.assertIsNone(self.users.get_by_username("bob"))

    def test_exists_checks(self) -> None:
        self.users.create("alice", "alice@x.com", "hash")
        self.assertTrue(self.users.exists_by_username("alice"))
        self.assertTrue(self.users.exists_by_email("alice@x.com"))
        self.assertFalse(self.users.exists_by_username("bob"))
        self.assertFalse(self.users.exists_by_email("bob@x.com"))

    def test_unique_constraint_is_the_backstop(self) -> None:
        self.users.create("alice", "alice@x.com", "hash")
        with self.assertRaises(IntegrityError):
            self.users.create("alice", "other@x.com", "hash")
        # Session is usable again after the rollback.
        self.assertTrue(self.users.exists_by_username("alice"))

    def test_update_role(self) -> None:
        user = self.users.create("alice", "alice@x.com", "hash")
        self.users.update_role(user, Role.ADMIN)
        self.assertIs(self.users.get_by_id(user.id).role, Role.ADMIN)

    def test_update_password(self) -> None:
        user = self.users.create("alice", "alice@x.com", "old")
        self.assertTrue(self.users.update_password(user.id, "new"))
        self.session.expire_all()
        self.assertEqual(self.users.get_by_id(user.id).password_hash, "new")
        self.assertFalse(self.users.update_password(999, "new"))

    def test_soft_deleted_user_is_hidden(self) -> None:
        user = self.users.create("alice", "alice@x.com", "hash")
        self.users.soft_delete(user)
        self.assertIsNone(self.users.get_by_id(user.id))
        self.assertFalse(self.users.exists_by_username("alice"))
        self.assertEqual(self.users.list_all(), [])
        self.assertFalse(self.users.update_password(user.id, "new"))


class TestBookStore(_StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.books = BookStore(self.session)
        self.books.create("Dune", "Frank Herbert", 3)
        self.books.create("Neuromancer", "William Gibson", 1)
        self.books.create("The Left Hand of Darkness", "Ursula K. Le Guin", 0)

    def test_list_all_in_id_order(self) -> None:
        titles = [b.title for b in self.books.list_all()]
        self.assertEqual(titles, ["Dune", "Neuromancer", "The Left Hand of Darkness"])

    def test_search_title_and_author_case_insensitive(self) -> None:
        self.assertEqual([b.title for b in self.books.search("dUNE")], ["Dune"])
        self.assertEqual([b.title for b in self.books.search("gibson")], ["Neuromancer"])
        self.assertEqual(len(self.books.search("an")), 3)
        self.assertEqual(self.books.search("tolkien"), [])

    def test_list_page(self) -> None:
        page, total = self.books.list_page(offset=2, limit=2)
        self.assertEqual(total, 3)
        self.assertEqual([b.title for b in page], ["The Left Hand of Darkness"])

    def test_update_and_quantity(self) -> None:
        book = self.books.list_all()[0]
        self.books.update(book, "Dune Messiah", "Frank Herbert", 4)
        self.books.update_quantity(book, 9)
        fetched = self.books.get_by_id(book.id)
        self.assertEqual(fetched.title, "Dune Messiah")
        self.assertEqual(fetched.quantity, 9)

    def test_soft_deleted_book_is_hidden(self) -> None:
        book = self.books.list_all()[0]
        self.books.soft_delete(book)
        self.assertIsNone(self.books.get_by_id(book.id))
        _, total = self.books.list_page(offset=0, limit=10)
        self.assertEqual(total, 2)
        self.assertEqual(self.books.search("dune"), [])


if __name__ == "__main__":
    unittest.main()
