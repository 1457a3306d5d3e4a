"""Tests for password hashing and session tokens."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from gallery.utils.security import SessionTokens, hash_password, verify_password

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"


class TestPasswords:
    def test_verify_correct_password(self):
        digest = hash_password("s3cret-pass", rounds=4)
        assert verify_password("s3cret-pass", digest)

    def test_verify_wrong_password(self):
        digest = hash_password("s3cret-pass", rounds=4)
        assert not verify_password("wrong-pass", digest)

    def test_hash_is_salted(self):
        assert hash_password("same", rounds=4) != hash_password("same", rounds=4)

    def test_malformed_digest_is_rejected(self):
        assert not verify_password("anything", "not-a-bcrypt-hash")


class TestSessionTokens:
    def test_issued_token_validates(self):
        tokens = SessionTokens(SECRET)
        payload = tokens.validate(tokens.issue(42, "admin"))
        assert payload is not None
        assert payload.user_id == 42
        assert payload.username == "admin"

    def test_seven_day_validity(self):
        tokens = SessionTokens(SECRET)
        payload = tokens.validate(tokens.issue(42, "admin"))
        assert payload.expires_at - payload.issued_at == timedelta(days=7)

    def test_expired_token_is_invalid(self):
        tokens = SessionTokens(SECRET)
        issued = datetime.now(timezone.utc) - timedelta(days=7, minutes=1)
        assert tokens.validate(tokens.issue(42, "admin", now=issued)) is None

    def test_token_close_to_expiry_is_valid(self):
        tokens = SessionTokens(SECRET)
        issued = datetime.now(timezone.utc) - timedelta(days=6, hours=23)
        assert tokens.validate(tokens.issue(42, "admin", now=issued)) is not None

    def test_rotated_secret_invalidates_tokens(self):
        token = SessionTokens(SECRET).issue(42, "admin")
        assert SessionTokens(SECRET + "-rotated").validate(token) is None

    def test_tampered_token_is_invalid(self):
        tokens = SessionTokens(SECRET)
        header, body, signature = tokens.issue(42, "admin").split(".")
        forged_body = jwt.encode({"sub": "1", "username": "root"}, "x" * 32).split(".")[1]
        assert tokens.validate(f"{header}.{forged_body}.{signature}") is None

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_invalid(self, token):
        assert SessionTokens(SECRET).validate(token) is None

    def test_token_missing_claims_is_invalid(self):
        token = jwt.encode({"username": "admin"}, SECRET, algorithm="HS256")
        assert SessionTokens(SECRET).validate(token) is None

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            SessionTokens("")
