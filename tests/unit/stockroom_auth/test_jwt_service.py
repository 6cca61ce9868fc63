"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from stockroom_auth.exceptions import ConfigurationError, InvalidTokenError
from stockroom_auth.services import JWTService

SECRET = "unit-test-secret-key-with-enough-length-123"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key=SECRET)
        assert service.access_token_lifetime == timedelta(days=7)

    @pytest.mark.parametrize("secret", ["", None])
    def test_init_without_secret_raises(self, secret):
        with pytest.raises(ConfigurationError, match="JWT_SECRET_KEY"):
            JWTService(secret_key=secret)

    def test_init_with_custom_expiry(self):
        service = JWTService(secret_key=SECRET, access_token_expire_days=1)
        assert service.access_token_lifetime == timedelta(days=1)


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()
        self.email = "test@example.com"

    def test_verify_valid_token(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            role="user",
        )

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == self.email
        assert payload.role == "user"
        assert not payload.is_expired()

    def test_token_expires_after_configured_lifetime(self):
        token = self.service.create_access_token(self.user_id, self.email, "user")

        payload = self.service.verify_token(token)

        lifetime = payload.expires_at - payload.issued_at
        assert lifetime == timedelta(days=7)

    def test_claims_use_sub_for_user_id(self):
        token = self.service.create_access_token(self.user_id, self.email, "admin")

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert claims["sub"] == str(self.user_id)
        assert claims["role"] == "admin"
        assert {"iat", "exp"} <= claims.keys()

    def test_verify_expired_token_raises(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            role="user",
            expires_delta=timedelta(seconds=-1),  # Already expired
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_verify_token_signed_with_other_secret_raises(self):
        other = JWTService(secret_key="another-secret-key-with-enough-length-456")
        token = other.create_access_token(self.user_id, self.email, "user")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_garbage_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.token")

    def test_verify_token_without_sub_raises(self):
        token = jwt.encode(
            {"email": self.email, "iat": 1_700_000_000, "exp": 4_000_000_000},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_token_with_non_uuid_sub_raises(self):
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "email": self.email,
                "iat": 1_700_000_000,
                "exp": 4_000_000_000,
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)
