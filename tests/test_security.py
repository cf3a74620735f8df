import unittest
from datetime import timezone

import jwt

from handout_tracker.core.security import (
    InvalidTokenError,
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)
from tests.support import make_settings


class PasswordHashingTests(unittest.TestCase):
    def test_hash_verifies_matching_password_only(self) -> None:
        hashed = hash_password("s3cret-pass", rounds=4)
        self.assertNotEqual(hashed, "s3cret-pass")
        self.assertTrue(verify_password("s3cret-pass", hashed))
        self.assertFalse(verify_password("wrong-pass", hashed))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("abcdef", rounds=4), hash_password("abcdef", rounds=4))

    def test_garbage_hash_does_not_verify(self) -> None:
        self.assertFalse(verify_password("abcdef", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("abcdef", ""))


class TokenTests(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = make_settings()

    def test_round_trip_carries_identity(self) -> None:
        token, expires_at = issue_token(7, "ops", "manager", self.settings)
        claims = verify_token(token, self.settings)

        self.assertEqual(claims.admin_id, 7)
        self.assertEqual(claims.username, "ops")
        self.assertEqual(claims.role, "manager")
        self.assertEqual(claims.expires_at, expires_at.replace(microsecond=0))
        self.assertEqual((claims.expires_at - claims.issued_at).total_seconds(), 24 * 3600)
        self.assertEqual(claims.expires_at.tzinfo, timezone.utc)

    def test_token_signed_with_other_key_is_rejected(self) -> None:
        token, _ = issue_token(1, "admin", "admin", make_settings(jwt_secret="other-secret"))
        with self.assertRaises(InvalidTokenError):
            verify_token(token, self.settings)

    def test_expired_token_is_rejected(self) -> None:
        token, _ = issue_token(1, "admin", "admin", make_settings(token_ttl_hours=-1))
        with self.assertRaises(InvalidTokenError):
            verify_token(token, self.settings)

    def test_malformed_token_is_rejected(self) -> None:
        for bad in ("", "abc", "a.b.c", "Bearer"):
            with self.assertRaises(InvalidTokenError):
                verify_token(bad, self.settings)

    def test_foreign_issuer_is_rejected(self) -> None:
        token = jwt.encode(
            {"admin_id": 1, "username": "admin", "role": "admin", "iat": 0, "exp": 4102444800, "iss": "someone-else"},
            self.settings.jwt_secret,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            verify_token(token, self.settings)


if __name__ == "__main__":
    unittest.main()
