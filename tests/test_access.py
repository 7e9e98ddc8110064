"""Unit tests for app.services.access: bearer extraction, authenticate, try_authenticate, authorize."""

import unittest

from app.core.errors import Forbidden, Unauthorized
from app.core.security import TokenService
from app.core.session_cache import SessionCache
from app.schemas.user import Role
from app.services.access import authenticate, authorize, extract_bearer_token, try_authenticate
from app.services.auth import AuthService
from app.services.user_store import UserStore
from tests.support import TEST_SECRET, FakeRedis, fast_bcrypt, make_session_factory


class TestExtractBearerToken(unittest.TestCase):
    def test_valid_header(self) -> None:
        self.assertEqual(extract_bearer_token("Bearer abc.def.ghi"), "abc.def.ghi")

    def test_scheme_is_case_insensitive(self) -> None:
        self.assertEqual(extract_bearer_token("bearer abc"), "abc")

    def test_missing_or_malformed(self) -> None:
        for header in (None, "", "Bearer", "Basic abc", "Bearer a b", "abc"):
            with self.subTest(header=header):
                self.assertIsNone(extract_bearer_token(header))


class TestAuthenticate(unittest.TestCase):
    """Any failure is a bare Unauthorized; the session cache is not consulted."""

    def setUp(self) -> None:
        patcher = fast_bcrypt()
        patcher.start()
        self.addCleanup(patcher.stop)
        db = make_session_factory()()
        self.addCleanup(db.close)
        self.users = UserStore(db)
        self.tokens = TokenService(secret=TEST_SECRET, expire_minutes=60)
        self.auth = AuthService(
            users=self.users,
            sessions=SessionCache("redis://localhost:6379/0", client=FakeRedis()),
            tokens=self.tokens,
        )
        self.registered = self.auth.register("Ann", "ann@x.com", "secret1")

    def test_valid_token_loads_user(self) -> None:
        user = authenticate(f"Bearer {self.registered.token}", self.tokens, self.users)
        self.assertEqual(user.id, self.registered.user.id)
        self.assertEqual(user.email, "ann@x.com")

    def test_missing_header(self) -> None:
        with self.assertRaises(Unauthorized):
            authenticate(None, self.tokens, self.users)

    def test_bad_token(self) -> None:
        with self.assertRaises(Unauthorized):
            authenticate("Bearer not-a-token", self.tokens, self.users)

    def test_unknown_user(self) -> None:
        token = self.tokens.sign(999, "ghost@x.com", "developer")
        with self.assertRaises(Unauthorized):
            authenticate(f"Bearer {token}", self.tokens, self.users)

    def test_errors_carry_no_detail(self) -> None:
        messages = set()
        for header in (None, "Bearer junk", f"Bearer {self.tokens.sign(999, 'g@x.com', 'tester')}"):
            with self.assertRaises(Unauthorized) as ctx:
                authenticate(header, self.tokens, self.users)
            messages.add(ctx.exception.message)
        self.assertEqual(len(messages), 1)

    def test_logged_out_token_still_authenticates(self) -> None:
        # Logout only revokes refresh; the token stays usable until it expires.
        self.auth.logout(self.registered.user.id)
        user = authenticate(f"Bearer {self.registered.token}", self.tokens, self.users)
        self.assertEqual(user.id, self.registered.user.id)

    def test_try_authenticate_is_anonymous_on_failure(self) -> None:
        self.assertIsNone(try_authenticate(None, self.tokens, self.users))
        self.assertIsNone(try_authenticate("Bearer junk", self.tokens, self.users))
        user = try_authenticate(f"Bearer {self.registered.token}", self.tokens, self.users)
        self.assertIsNotNone(user)


class TestAuthorize(unittest.TestCase):
    def test_allowed_role(self) -> None:
        authorize(Role.ADMIN, [Role.ADMIN])
        authorize("devops", [Role.ADMIN, Role.DEVOPS])

    def test_disallowed_role(self) -> None:
        with self.assertRaises(Forbidden) as ctx:
            authorize(Role.TESTER, [Role.ADMIN])
        self.assertIn("tester", ctx.exception.message)

    def test_unknown_role_is_forbidden(self) -> None:
        with self.assertRaises(Forbidden):
            authorize("root", [Role.ADMIN])


if __name__ == "__main__":
    unittest.main()
