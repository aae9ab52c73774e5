"""
Tests for token issuance, verification and the bearer-token dependency.
"""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from auth import ADMIN_ROLE, PasswordHasher, TokenService, get_current_user
from errors import ExpiredToken, InvalidToken
from conftest import TEST_SECRET, bearer, register

DAY = 24 * 60 * 60


class Clock:
    def __init__(self, now=1_700_000_000):
        self.now = now

    def __call__(self):
        return self.now


class TestTokenService:

    def test_issue_then_verify_returns_identity(self):
        tokens = TokenService(TEST_SECRET)
        identity = tokens.verify(tokens.issue("u1", "a@x.com"))
        assert identity.user_id == "u1"
        assert identity.email == "a@x.com"
        assert not identity.is_admin

    def test_role_claim_round_trips(self):
        tokens = TokenService(TEST_SECRET)
        assert tokens.verify(tokens.issue("u1", "a@x.com", ADMIN_ROLE)).is_admin

    def test_expiry_is_24_hours_after_issue(self):
        clock = Clock()
        tokens = TokenService(TEST_SECRET, clock=clock)
        token = tokens.issue("u1", "a@x.com")

        claims = jwt.get_unverified_claims(token)
        assert claims["exp"] - claims["iat"] == DAY

        clock.now += DAY - 1
        assert tokens.verify(token).user_id == "u1"

        clock.now += 1
        with pytest.raises(ExpiredToken):
            tokens.verify(token)

    def test_valid_at_issue_time(self):
        clock = Clock()
        tokens = TokenService(TEST_SECRET, clock=clock)
        assert tokens.verify(tokens.issue("u1", "a@x.com")).user_id == "u1"

    def test_custom_ttl(self):
        clock = Clock()
        tokens = TokenService(TEST_SECRET, ttl=timedelta(hours=1), clock=clock)
        token = tokens.issue("u1", "a@x.com")
        clock.now += 3600
        with pytest.raises(ExpiredToken):
            tokens.verify(token)

    def test_wrong_secret_is_invalid(self):
        token = TokenService("other-secret").issue("u1", "a@x.com")
        with pytest.raises(InvalidToken):
            TokenService(TEST_SECRET).verify(token)

    def test_malformed_token_is_invalid(self):
        with pytest.raises(InvalidToken):
            TokenService(TEST_SECRET).verify("not.a.token")

    def test_token_without_subject_is_invalid(self):
        token = jwt.encode({"email": "a@x.com", "exp": 9_999_999_999}, TEST_SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            TokenService(TEST_SECRET).verify(token)

    def test_tokens_issued_together_differ(self):
        tokens = TokenService(TEST_SECRET, clock=Clock())
        assert tokens.issue("u1", "a@x.com") != tokens.issue("u1", "a@x.com")

    def test_secret_is_required(self):
        with pytest.raises(ValueError):
            TokenService("")


class TestPasswordHasher:

    def test_hash_is_salted_and_verifies(self):
        hasher = PasswordHasher(10)
        first, second = hasher.hash("secret1"), hasher.hash("secret1")
        assert first != second
        assert "secret1" not in first
        assert hasher.verify("secret1", first)
        assert not hasher.verify("wrong", first)

    def test_uses_requested_work_factor(self):
        assert PasswordHasher(10).hash("secret1").startswith("$2b$10$")

    def test_missing_hash_never_verifies(self):
        assert not PasswordHasher(10).verify("secret1", None)


class TestBearerDependency:

    def test_missing_token_is_401(self, client):
        response = client.get("/api/user")
        assert response.status_code == 401
        assert response.json()["code"] == "unauthenticated"

    def test_non_bearer_scheme_is_401(self, client):
        response = client.get("/api/user", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_garbage_token_is_403(self, client):
        response = client.get("/api/user", headers=bearer("garbage"))
        assert response.status_code == 403
        assert response.json()["code"] == "invalid_token"

    def test_expired_token_is_403(self, client):
        body = register(client)
        stale = TokenService(TEST_SECRET, clock=Clock(1_000_000_000)).issue(body["user"]["id"], "a@x.com")
        response = client.get("/api/user", headers=bearer(stale))
        assert response.status_code == 403
        assert response.json()["code"] == "expired_token"

    def test_valid_token_reaches_handler(self, client):
        body = register(client)
        response = client.get("/api/user", headers=bearer(body["token"]))
        assert response.status_code == 200
        assert response.json()["email"] == "a@x.com"

    def test_identity_attached_to_request_state(self, tokens):
        request = SimpleNamespace(state=SimpleNamespace())
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=tokens.issue("u1", "a@x.com"))
        identity = get_current_user(request, credentials, tokens)
        assert request.state.identity is identity
        assert identity.user_id == "u1"
