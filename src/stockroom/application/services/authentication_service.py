"""Authentication service for user registration and login."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from stockroom.domain.shared.exceptions import ValidationError
from stockroom.domain.user import (
    Email,
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
    TokenPayload,
    WeakPasswordError,
)
from stockroom_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from stockroom.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates stockroom_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password
    - Profile lookup by id

    This service is the bridge between the generic auth infrastructure
    and the domain-specific User aggregate.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _create_access_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
        )

    async def register(  # noqa: PLR0913
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        phone: Optional[str],
    ) -> tuple[User, str]:
        fields = (first_name, last_name, email, password, phone)
        if any(value is None or not str(value).strip() for value in fields):
            msg = "All fields are required"
            raise ValidationError(msg)

        normalized = Email(email)  # type: ignore[arg-type]
        if await self._user_repo.exists_by_email(normalized):
            raise EmailAlreadyExistsError(normalized.value)

        try:
            password_hash = await asyncio.to_thread(
                self._password_service.hash,
                password,  # type: ignore[arg-type]
            )
        except WeakPasswordError as e:
            raise ValidationError(e.message, details={"field": "password"}) from e

        user = User.create(
            email=normalized,
            first_name=first_name,  # type: ignore[arg-type]
            last_name=last_name,  # type: ignore[arg-type]
            phone=phone,  # type: ignore[arg-type]
            role=UserRole.USER,
        )
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("User registered: %s", user.email)
        return user, self._create_access_token(user)

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> tuple[User, str]:
        if not email or not password:
            raise InvalidCredentialsError

        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError:
            user = None
        if user is None:
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError

        # bcrypt is CPU-bound; keep it off the event loop
        matches = await asyncio.to_thread(
            self._password_service.verify,
            password,
            credential.password_hash,
        )
        if not matches:
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)

        logger.info("User logged in: %s", user.email)
        return user, self._create_access_token(user)

    async def get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
