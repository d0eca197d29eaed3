"""
Authentication Service
----------------------
Login, refresh and user resolution on top of the token codec and validator.

Raises the client-facing exceptions from tokenguard.errors.exceptions; the
exception handlers turn them into ErrorResponse payloads.
"""

from typing import Optional

from loguru import logger

from tokenguard.auth.jwt_utils import TokenCodec
from tokenguard.auth.token_validator import TokenValidator
from tokenguard.errors.exceptions import (
    PasswordIncorrectError,
    RefreshTokenInvalidError,
    UserIdNotFoundError,
    UsernameNotFoundError,
)
from tokenguard.models.auth_models import TokenClaims, TokenPairResponse
from tokenguard.services.user_store import UserCredentialStore, UserRecord
from tokenguard.utils.password_hashing import PasswordHasher


class AuthService:
    """Issues token pairs for verified credentials and refresh tokens."""

    def __init__(
        self,
        codec: TokenCodec,
        validator: TokenValidator,
        user_store: UserCredentialStore,
        password_hasher: Optional[PasswordHasher] = None,
    ):
        self.codec = codec
        self.validator = validator
        self.user_store = user_store
        self.password_hasher = password_hasher or PasswordHasher()

    def issue_token_pair(self, user_id: str) -> TokenPairResponse:
        """Mint a new access token and a new refresh token."""
        return TokenPairResponse(
            access_token=self.codec.generate_access_token(user_id),
            refresh_token=self.codec.generate_refresh_token(user_id),
            token_type="bearer",
            expires_in=int(self.codec.access_token_validity.total_seconds()),
        )

    async def login(self, user_id: str, password: str) -> TokenPairResponse:
        """
        Verify credentials and issue tokens.

        Raises:
            UserIdNotFoundError: If the user id is unknown
            PasswordIncorrectError: If the password does not match
        """
        user = await self.user_store.get_user(user_id)
        if user is None:
            raise UserIdNotFoundError(f"User id '{user_id}' was not found")

        if not self.password_hasher.verify_password(password, user.password_hash):
            raise PasswordIncorrectError("Password does not match")

        logger.info(f"User {user_id} authenticated successfully")
        return self.issue_token_pair(user_id)

    async def refresh(self, refresh_token: str) -> TokenPairResponse:
        """
        Exchange a refresh token for a brand-new token pair.

        Raises:
            RefreshTokenInvalidError: If the refresh token is expired, forged or malformed
            UsernameNotFoundError: If the token's user no longer exists
        """
        verification = self.validator.verify(refresh_token)
        if verification.is_expired:
            raise RefreshTokenInvalidError("Refresh token has expired, log in again")
        if not verification.is_valid:
            raise RefreshTokenInvalidError("Refresh token is invalid")

        user = await self.resolve_user(verification.claims)
        logger.info(f"Token pair refreshed for user {user.user_id}")
        return self.issue_token_pair(user.user_id)

    async def resolve_user(self, claims: TokenClaims) -> UserRecord:
        """
        Load the user a verified token belongs to.

        Raises:
            UsernameNotFoundError: If the identifier no longer resolves
        """
        user = await self.user_store.get_user(claims.identifier)
        if user is None:
            raise UsernameNotFoundError(
                f"User '{claims.identifier}' from token was not found"
            )
        return user
