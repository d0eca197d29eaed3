"""
Token Validator
---------------
Boolean-facing wrapper around TokenCodec.decode_and_verify.

Every decode failure is absorbed here and logged by category; callers only
ever see a TokenVerification, a bool, or a missing claim value, which they
must treat as "this request is unauthenticated".
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, TypeVar

from loguru import logger

from tokenguard.auth.jwt_utils import TokenCodec
from tokenguard.errors.exceptions import (
    TokenExpiredError,
    TokenFailure,
    TokenInvalidError,
)
from tokenguard.models.auth_models import TokenClaims

T = TypeVar("T")

_FAILURE_LOG_MESSAGES = {
    TokenFailure.SIGNATURE: "Invalid JWT signature",
    TokenFailure.MALFORMED: "Invalid JWT token",
    TokenFailure.EXPIRED: "JWT token is expired",
    TokenFailure.UNSUPPORTED: "JWT token is unsupported",
    TokenFailure.EMPTY: "JWT claims string is empty",
}


@dataclass(frozen=True)
class TokenVerification:
    """Outcome of one parse+verify pass over a token."""

    claims: Optional[TokenClaims] = None
    failure: Optional[TokenFailure] = None
    # Claims of an expired but correctly signed token
    expired_claims: Optional[TokenClaims] = None

    @property
    def is_valid(self) -> bool:
        return self.failure is None and self.claims is not None

    @property
    def is_expired(self) -> bool:
        return self.failure is TokenFailure.EXPIRED


class TokenValidator:
    """Verifies tokens and projects claims without ever raising."""

    def __init__(self, codec: TokenCodec):
        self.codec = codec

    def verify(self, token: Optional[str]) -> TokenVerification:
        """
        Parse and verify a token once.

        Returns:
            TokenVerification holding either the claims or the failure category
        """
        try:
            claims = self.codec.decode_and_verify(token)
        except TokenInvalidError as e:
            logger.warning(f"{_FAILURE_LOG_MESSAGES[e.reason]}: {e.detail}")
            expired_claims = e.claims if isinstance(e, TokenExpiredError) else None
            return TokenVerification(failure=e.reason, expired_claims=expired_claims)

        return TokenVerification(claims=claims)

    def is_valid(self, token: Optional[str]) -> bool:
        """True iff the token decodes, verifies and has not expired."""
        return self.verify(token).is_valid

    def extract_claim(
        self, token: Optional[str], projection: Callable[[TokenClaims], T]
    ) -> Optional[T]:
        """
        Verify a token and project one value out of its claims.

        Returns:
            The projected value, or None when the token is not valid
        """
        verification = self.verify(token)
        if not verification.is_valid:
            return None
        return projection(verification.claims)

    def get_user_id_from_token(self, token: Optional[str]) -> Optional[str]:
        return self.extract_claim(token, lambda claims: claims.identifier)

    def get_expiration_from_token(self, token: Optional[str]) -> Optional[datetime]:
        return self.extract_claim(token, lambda claims: claims.expires_at)
