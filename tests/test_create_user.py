"""Tests for the create_user CLI."""

import contextlib
import io
import unittest
from unittest.mock import patch

from app.schemas.user import Role
from app.scripts import create_user
from app.services.user_store import UserStore
from tests.support import fast_bcrypt, make_session_factory


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        patcher = fast_bcrypt()
        patcher.start()
        self.addCleanup(patcher.stop)
        self.factory = make_session_factory()
        db_patcher = patch.object(create_user, "SessionLocal", self.factory)
        db_patcher.start()
        self.addCleanup(db_patcher.stop)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("Ada Admin", "Admin@Example.com", "long-enough", "admin")
        self.assertEqual(code, 0)
        self.assertIn("admin@example.com", out)
        db = self.factory()
        try:
            user = UserStore(db).find_by_email("admin@example.com")
            self.assertEqual(user.role, Role.ADMIN)
            self.assertTrue(user.compare_password("long-enough"))
        finally:
            db.close()

    def test_role_defaults_to_developer(self) -> None:
        self._run("Dev One", "dev@example.com", "long-enough")
        db = self.factory()
        try:
            self.assertEqual(UserStore(db).find_by_email("dev@example.com").role, Role.DEVELOPER)
        finally:
            db.close()

    def test_existing_user_fails(self) -> None:
        self._run("Dev One", "dev@example.com", "long-enough")
        code, _, err = self._run("Dev Two", "DEV@example.com", "long-enough")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

    def test_short_password_fails(self) -> None:
        code, _, err = self._run("Dev One", "dev@example.com", "12345")
        self.assertEqual(code, 1)
        self.assertIn("Password", err)


if __name__ == "__main__":
    unittest.main()
