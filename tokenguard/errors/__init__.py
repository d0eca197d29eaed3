"""
Error Handling Package
----------------------
Domain exceptions, the localized message catalog and the error taxonomy
dispatcher that renders failures as ErrorResponse payloads.
"""

from tokenguard.errors.exceptions import (
    AuthenticationRequiredError,
    AuthorizationDeniedError,
    PasswordIncorrectError,
    RefreshTokenInvalidError,
    TokenExpiredError,
    TokenFailure,
    TokenGuardError,
    TokenInvalidError,
    UserIdNotFoundError,
    UsernameNotFoundError,
    WeakSigningKeyError,
)

__all__ = [
    "AuthenticationRequiredError",
    "AuthorizationDeniedError",
    "PasswordIncorrectError",
    "RefreshTokenInvalidError",
    "TokenExpiredError",
    "TokenFailure",
    "TokenGuardError",
    "TokenInvalidError",
    "UserIdNotFoundError",
    "UsernameNotFoundError",
    "WeakSigningKeyError",
]
