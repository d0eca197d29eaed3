"""
Domain Exceptions
-----------------
Exceptions raised by the token lifecycle and by authentication flows.

Token exceptions (TokenInvalidError, TokenExpiredError) never leave the
TokenValidator. The client-facing exceptions below are converted into
ErrorResponse payloads by the handlers in tokenguard.errors.handlers.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from tokenguard.models.auth_models import TokenClaims


# ============================================================================
# SIGNING KEY / TOKEN EXCEPTIONS
# ============================================================================


class WeakSigningKeyError(ValueError):
    """Raised when the configured secret is too short for HMAC signing."""


class TokenFailure(str, Enum):
    """Why a token failed verification."""

    SIGNATURE = "signature"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    UNSUPPORTED = "unsupported"
    EMPTY = "empty"


class TokenInvalidError(Exception):
    """A token could not be decoded or verified."""

    def __init__(self, reason: TokenFailure, detail: str):
        self.reason = reason
        self.detail = detail
        super().__init__(detail)


class TokenExpiredError(TokenInvalidError):
    """
    Signature and structure are fine but the token is past its expiry.

    Carries the verified claims so refresh flows can tell an expired
    session apart from a forged or broken token.
    """

    def __init__(self, claims: "TokenClaims", detail: str):
        self.claims = claims
        super().__init__(TokenFailure.EXPIRED, detail)


# ============================================================================
# CLIENT-FACING EXCEPTIONS
# ============================================================================


class TokenGuardError(Exception):
    """Base class for failures rendered as ErrorResponse payloads."""

    default_message = "Authentication failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class AuthorizationDeniedError(TokenGuardError):
    """Authenticated caller lacks the rights for the resource."""

    default_message = "Access denied"


class RefreshTokenInvalidError(TokenGuardError):
    """Refresh token is expired, forged or malformed."""

    default_message = "Refresh token is invalid"


class UsernameNotFoundError(TokenGuardError):
    """The identifier carried by an access token no longer resolves to a user."""

    default_message = "User not found for token"


class UserIdNotFoundError(TokenGuardError):
    """Login was attempted for an unknown user id."""

    default_message = "User id not found"


class PasswordIncorrectError(TokenGuardError):
    """Login password did not match."""

    default_message = "Password is incorrect"


class AuthenticationRequiredError(TokenGuardError):
    """No valid authenticated context for a protected resource."""

    default_message = "Full authentication is required to access this resource"
