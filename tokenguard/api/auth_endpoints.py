"""
Authentication Endpoints
------------------------
Login, token refresh and "who am I" endpoints.

Failures are raised as domain exceptions and rendered by the exception
handlers; nothing here builds error payloads itself.
"""

from fastapi import APIRouter, Depends
from loguru import logger

from tokenguard.auth.dependencies import (
    get_auth_service,
    get_current_claims,
    get_current_user,
)
from tokenguard.models.auth_models import (
    CurrentUserResponse,
    LoginRequest,
    RefreshRequest,
    TokenClaims,
    TokenPairResponse,
)
from tokenguard.services.auth_service import AuthService
from tokenguard.services.user_store import UserRecord

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=TokenPairResponse,
    summary="Authenticate user and get an access/refresh token pair",
)
async def login(
    request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """
    Authenticate with user id and password.

    Raises:
        UserIdNotFoundError: Unknown user id (errorCode 303)
        PasswordIncorrectError: Wrong password (errorCode 304)
    """
    logger.info(f"Login attempt for user: {request.user_id}")
    return await auth_service.login(request.user_id, request.password)


@router.post(
    "/refresh",
    response_model=TokenPairResponse,
    summary="Exchange a refresh token for a new token pair",
)
async def refresh(
    request: RefreshRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """
    Issue a new access token and a new refresh token.

    Raises:
        RefreshTokenInvalidError: Expired, forged or malformed refresh token (errorCode 301)
        UsernameNotFoundError: Token's user no longer exists (errorCode 302)
    """
    return await auth_service.refresh(request.refresh_token)


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="Describe the caller's access token",
)
async def me(
    claims: TokenClaims = Depends(get_current_claims),
    user: UserRecord = Depends(get_current_user),
):
    """Return the caller's user id and token timestamps."""
    return CurrentUserResponse(
        user_id=user.user_id,
        issued_at=claims.issued_at,
        expires_at=claims.expires_at,
    )
