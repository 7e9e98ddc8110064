"""Unit tests for app.core.security: bcrypt hashing and TokenService sign/verify."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt

from app.core import security
from app.core.errors import InvalidToken
from app.core.security import TokenService, burn_password_check, hash_password, verify_password
from tests.support import TEST_SECRET, fast_bcrypt


class TestPasswordHashing(unittest.TestCase):
    """hash_password never returns the plaintext; verify_password matches only the original."""

    def setUp(self) -> None:
        patcher = fast_bcrypt()
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("secret1")
        self.assertNotEqual(hashed, "secret1")
        self.assertTrue(hashed.startswith("$2"))
        self.assertTrue(verify_password("secret1", hashed))
        self.assertFalse(verify_password("secret2", hashed))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("secret1"), hash_password("secret1"))

    def test_burn_password_check_runs_one_bcrypt_comparison(self) -> None:
        with patch.object(security, "verify_password", wraps=verify_password) as verify:
            self.assertIsNone(burn_password_check("secret1"))
        verify.assert_called_once()
        self.assertTrue(verify.call_args.args[1].startswith("$2"))

    def test_garbage_hash_does_not_raise(self) -> None:
        self.assertFalse(verify_password("secret1", "not-a-bcrypt-hash"))


class TestTokenService(unittest.TestCase):
    """sign carries id/email/role; verify rejects anything malformed, expired or foreign."""

    def setUp(self) -> None:
        self.tokens = TokenService(secret=TEST_SECRET, expire_minutes=60)

    def test_sign_then_verify_returns_claims(self) -> None:
        token = self.tokens.sign(7, "ann@x.com", "developer")
        claims = self.tokens.verify(token)
        self.assertEqual(claims.user_id, 7)
        self.assertEqual(claims.email, "ann@x.com")
        self.assertEqual(claims.role, "developer")
        self.assertGreater(claims.expires_at, datetime.now(UTC))

    def test_tokens_for_same_payload_differ(self) -> None:
        first = self.tokens.sign(7, "ann@x.com", "developer")
        second = self.tokens.sign(7, "ann@x.com", "developer")
        self.assertNotEqual(first, second)

    def test_ttl_seconds_matches_window(self) -> None:
        self.assertEqual(self.tokens.ttl_seconds, 3600)
        self.assertEqual(TokenService(secret=TEST_SECRET).ttl_seconds, 30 * 24 * 60 * 60)

    def test_expired_token_is_invalid(self) -> None:
        past = datetime.now(UTC) - timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "7", "email": "ann@x.com", "role": "developer", "exp": past},
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidToken):
            self.tokens.verify(token)

    def test_wrong_secret_is_invalid(self) -> None:
        other = TokenService(secret="another-secret-key-with-enough-bytes")
        token = other.sign(7, "ann@x.com", "developer")
        with self.assertRaises(InvalidToken):
            self.tokens.verify(token)

    def test_tampered_token_is_invalid(self) -> None:
        token = self.tokens.sign(7, "ann@x.com", "developer")
        head, payload, signature = token.split(".")
        tampered = ".".join([head, payload, signature[::-1]])
        with self.assertRaises(InvalidToken):
            self.tokens.verify(tampered)

    def test_malformed_and_empty_tokens_are_invalid(self) -> None:
        for bad in ("", "not-a-jwt", "a.b.c"):
            with self.subTest(token=bad), self.assertRaises(InvalidToken):
                self.tokens.verify(bad)

    def test_non_numeric_subject_is_invalid(self) -> None:
        token = jwt.encode(
            {"sub": "abc", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            TEST_SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidToken):
            self.tokens.verify(token)

    def test_token_without_expiry_is_invalid(self) -> None:
        token = jwt.encode({"sub": "7"}, TEST_SECRET, algorithm="HS256")
        with self.assertRaises(InvalidToken):
            self.tokens.verify(token)


if __name__ == "__main__":
    unittest.main()
