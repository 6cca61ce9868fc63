"""Authentication router for user registration, login, and profile."""

import logging

from fastapi import APIRouter, status

from stockroom.presentation.api.dependencies import (
    AuthService,
    CurrentUserContext,
    DBSession,
)
from stockroom.presentation.api.schemas import (
    AuthPayload,
    DataResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Missing fields, invalid email or weak password"},
        409: {"description": "Email already in use"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> DataResponse[AuthPayload]:
    """
    Register a new user account.

    Returns a bearer token together with the new user, so the client is
    signed in immediately.
    """
    try:
        user, token = await auth_service.register(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            phone=request.phone,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return DataResponse(
        data=AuthPayload(token=token, user=UserResponse.from_domain(user)),
    )


@router.post(
    "/login",
    summary="Login with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> DataResponse[AuthPayload]:
    """
    Authenticate with email and password.

    An unknown email and a wrong password produce the same response.
    """
    try:
        user, token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return DataResponse(
        data=AuthPayload(token=token, user=UserResponse.from_domain(user)),
    )


@router.get(
    "/profile",
    summary="Get current user",
    responses={
        200: {"description": "Current user information"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def get_profile(
    user_context: CurrentUserContext,
    auth_service: AuthService,
) -> DataResponse[UserResponse]:
    """Return the authenticated user's profile."""
    user = await auth_service.get_user(user_context.user_id)
    return DataResponse(data=UserResponse.from_domain(user))
