"""Unit tests for AuthenticationService."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest

from stockroom.application.services import AuthenticationService
from stockroom.domain.shared import ValidationError
from stockroom.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRole,
)
from stockroom_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    WeakPasswordError,
)
from stockroom_auth.repositories.user_credential_repository import (
    UserCredentialData,
)

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "secure_password_123"

REGISTRATION = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": TEST_EMAIL,
    "password": TEST_PASSWORD,
    "phone": "555-0100",
}


def _make_user() -> User:
    return User.create(TEST_EMAIL, "Ada", "Lovelace", "555-0100")


def _make_credential(user: User) -> UserCredentialData:
    return UserCredentialData(
        user_id=str(user.id),
        password_hash="hashed_password",
        last_login_at=None,
    )


class _ServiceTestBase:
    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.credential_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.jwt_service = Mock(spec=JWTService)
        self.jwt_service.create_access_token.return_value = "access_token"

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            credential_repository=self.credential_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )


class TestAuthenticationServiceRegister(_ServiceTestBase):
    """Tests for user registration."""

    @pytest.mark.asyncio
    async def test_register_creates_user_and_returns_token(self):
        # Arrange
        self.user_repo.exists_by_email.return_value = False
        self.password_service.hash.return_value = "hashed_password"

        # Act
        user, token = await self.service.register(**REGISTRATION)

        # Assert
        assert user.email == TEST_EMAIL
        assert user.first_name == "Ada"
        assert user.role == UserRole.USER
        assert token == "access_token"

        self.user_repo.save.assert_called_once_with(user)
        self.credential_repo.save.assert_called_once_with(
            user_id=user.id,
            password_hash="hashed_password",
        )
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        self.jwt_service.create_access_token.assert_called_once_with(
            user_id=user.id,
            email=TEST_EMAIL,
            role="user",
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "missing",
        ["first_name", "last_name", "email", "password", "phone"],
    )
    async def test_register_requires_all_fields(self, missing):
        data = {**REGISTRATION, missing: "   "}

        with pytest.raises(ValidationError, match="All fields are required"):
            await self.service.register(**data)

        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_rejects_none_field(self):
        data = {**REGISTRATION, "phone": None}

        with pytest.raises(ValidationError, match="All fields are required"):
            await self.service.register(**data)

    @pytest.mark.asyncio
    async def test_register_raises_when_email_exists(self):
        # Arrange
        self.user_repo.exists_by_email.return_value = True

        # Act & Assert
        with pytest.raises(EmailAlreadyExistsError, match="Email already in use"):
            await self.service.register(**REGISTRATION)

        self.user_repo.save.assert_not_called()
        self.password_service.hash.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_rejects_invalid_email(self):
        with pytest.raises(InvalidEmailError):
            await self.service.register(**{**REGISTRATION, "email": "nope"})

    @pytest.mark.asyncio
    async def test_register_turns_weak_password_into_validation_error(self):
        # Arrange
        self.user_repo.exists_by_email.return_value = False
        self.password_service.hash.side_effect = WeakPasswordError("Too short")

        # Act & Assert
        with pytest.raises(ValidationError, match="Too short"):
            await self.service.register(**{**REGISTRATION, "password": "short"})

        self.user_repo.save.assert_not_called()


class TestAuthenticationServiceLogin(_ServiceTestBase):
    """Tests for user login."""

    @pytest.mark.asyncio
    async def test_login_returns_user_and_token(self):
        # Arrange
        user = _make_user()
        self.user_repo.find_by_email.return_value = user
        self.credential_repo.find_by_user_id.return_value = _make_credential(user)
        self.password_service.verify.return_value = True

        # Act
        result_user, token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        # Assert
        assert result_user == user
        assert token == "access_token"
        self.credential_repo.update_last_login.assert_called_once_with(user.id)

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_fail_identically(self):
        # Unknown email
        self.user_repo.find_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown:
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        # Wrong password
        user = _make_user()
        self.user_repo.find_by_email.return_value = user
        self.credential_repo.find_by_user_id.return_value = _make_credential(user)
        self.password_service.verify.return_value = False
        with pytest.raises(InvalidCredentialsError) as wrong:
            await self.service.login(TEST_EMAIL, "wrong_password")

        assert unknown.value.message == wrong.value.message == "Invalid credentials"
        self.credential_repo.update_last_login.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_email_is_treated_as_unknown(self):
        self.user_repo.find_by_email.side_effect = InvalidEmailError("bad")

        with pytest.raises(InvalidCredentialsError):
            await self.service.login("not-an-email", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_missing_credential_record_fails(self):
        self.user_repo.find_by_email.return_value = _make_user()
        self.credential_repo.find_by_user_id.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_empty_input_fails_without_lookup(self):
        with pytest.raises(InvalidCredentialsError):
            await self.service.login("", "")

        self.user_repo.find_by_email.assert_not_called()


class TestAuthenticationServiceGetUser(_ServiceTestBase):
    @pytest.mark.asyncio
    async def test_get_user_returns_user(self):
        user = User.reconstitute(
            id=TEST_USER_ID,
            email=TEST_EMAIL,
            first_name="Ada",
            last_name="Lovelace",
            phone="555-0100",
            role="user",
            created_at=datetime.now(tz=timezone.utc),
            updated_at=datetime.now(tz=timezone.utc),
        )
        self.user_repo.find_by_id.return_value = user

        assert await self.service.get_user(TEST_USER_ID) == user

    @pytest.mark.asyncio
    async def test_get_user_raises_when_missing(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError, match="User not found"):
            await self.service.get_user(TEST_USER_ID)
