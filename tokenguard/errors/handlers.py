"""
Error Taxonomy Dispatcher
-------------------------
Converts raised failures into ErrorResponse payloads.

The taxonomy is closed: every exception is classified into exactly one
ErrorKind by exact type, and every ErrorKind has one ErrorPolicy
(error code, HTTP status, where the message comes from). Anything that is
not one of the named kinds is UNCLASSIFIED.

| Kind                    | errorCode | HTTP |
|-------------------------|-----------|------|
| UNCLASSIFIED            | 100       | 500  |
| FRAMEWORK               | 100       | exception status |
| VALIDATION              | 200       | 422  |
| AUTHORIZATION_DENIED    | 300       | 401  |
| REFRESH_TOKEN_INVALID   | 301       | 401  |
| USERNAME_NOT_FOUND      | 302       | 401  |
| USER_ID_NOT_FOUND       | 303       | 401  |
| PASSWORD_INCORRECT      | 304       | 401  |
| AUTHENTICATION_REQUIRED | 401       | 401  |
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Type

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from tokenguard.core.config_manager import ApplicationSettings
from tokenguard.errors import messages
from tokenguard.errors.exceptions import (
    AuthenticationRequiredError,
    AuthorizationDeniedError,
    PasswordIncorrectError,
    RefreshTokenInvalidError,
    TokenGuardError,
    UserIdNotFoundError,
    UsernameNotFoundError,
)
from tokenguard.models.error_models import ErrorResponse


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced to clients."""

    UNCLASSIFIED = "unclassified"
    FRAMEWORK = "framework"
    VALIDATION = "validation"
    AUTHORIZATION_DENIED = "authorization_denied"
    REFRESH_TOKEN_INVALID = "refresh_token_invalid"
    USERNAME_NOT_FOUND = "username_not_found"
    USER_ID_NOT_FOUND = "user_id_not_found"
    PASSWORD_INCORRECT = "password_incorrect"
    AUTHENTICATION_REQUIRED = "authentication_required"


class MessagePolicy(str, Enum):
    """Where an error payload's message comes from."""

    EXCEPTION = "exception"
    FIXED = "fixed"
    GENERIC = "generic"


@dataclass(frozen=True)
class ErrorPolicy:
    error_code: int
    http_status: int
    message_policy: MessagePolicy
    log_label: str
    message_key: Optional[str] = None


ERROR_TAXONOMY: Dict[ErrorKind, ErrorPolicy] = {
    ErrorKind.UNCLASSIFIED: ErrorPolicy(
        100,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        MessagePolicy.GENERIC,
        "Internal Server Error occurred",
        messages.INTERNAL_ERROR,
    ),
    ErrorKind.FRAMEWORK: ErrorPolicy(
        100,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        MessagePolicy.EXCEPTION,
        "HTTP Exception occurred",
    ),
    ErrorKind.VALIDATION: ErrorPolicy(
        200,
        422,
        MessagePolicy.FIXED,
        "Request Validation Exception occurred",
        messages.VALIDATION_FAILED,
    ),
    ErrorKind.AUTHORIZATION_DENIED: ErrorPolicy(
        300,
        status.HTTP_401_UNAUTHORIZED,
        MessagePolicy.EXCEPTION,
        "Authorization Denied Exception occurred",
    ),
    ErrorKind.REFRESH_TOKEN_INVALID: ErrorPolicy(
        301,
        status.HTTP_401_UNAUTHORIZED,
        MessagePolicy.EXCEPTION,
        "Refresh Token Invalid Exception occurred",
    ),
    ErrorKind.USERNAME_NOT_FOUND: ErrorPolicy(
        302,
        status.HTTP_401_UNAUTHORIZED,
        MessagePolicy.EXCEPTION,
        "Username Not Found Exception occurred",
    ),
    ErrorKind.USER_ID_NOT_FOUND: ErrorPolicy(
        303,
        status.HTTP_401_UNAUTHORIZED,
        MessagePolicy.EXCEPTION,
        "User Id Not Found Exception occurred",
    ),
    ErrorKind.PASSWORD_INCORRECT: ErrorPolicy(
        304,
        status.HTTP_401_UNAUTHORIZED,
        MessagePolicy.EXCEPTION,
        "Password Incorrect Exception occurred",
    ),
    ErrorKind.AUTHENTICATION_REQUIRED: ErrorPolicy(
        401,
        status.HTTP_401_UNAUTHORIZED,
        MessagePolicy.EXCEPTION,
        "Authentication Required",
        messages.AUTHENTICATION_REQUIRED,
    ),
}

# Exact-type binding; subclasses are not matched
EXCEPTION_KINDS: Dict[Type[BaseException], ErrorKind] = {
    RequestValidationError: ErrorKind.VALIDATION,
    StarletteHTTPException: ErrorKind.FRAMEWORK,
    HTTPException: ErrorKind.FRAMEWORK,
    AuthorizationDeniedError: ErrorKind.AUTHORIZATION_DENIED,
    RefreshTokenInvalidError: ErrorKind.REFRESH_TOKEN_INVALID,
    UsernameNotFoundError: ErrorKind.USERNAME_NOT_FOUND,
    UserIdNotFoundError: ErrorKind.USER_ID_NOT_FOUND,
    PasswordIncorrectError: ErrorKind.PASSWORD_INCORRECT,
    AuthenticationRequiredError: ErrorKind.AUTHENTICATION_REQUIRED,
}

_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def classify(exc: BaseException) -> ErrorKind:
    """Map an exception onto its ErrorKind by exact type."""
    return EXCEPTION_KINDS.get(type(exc), ErrorKind.UNCLASSIFIED)


def _exception_message(exc: BaseException) -> str:
    if isinstance(exc, TokenGuardError):
        return exc.message
    if isinstance(exc, StarletteHTTPException):
        return str(exc.detail)
    return str(exc)


def _field_name(location: Sequence) -> str:
    parts = list(location)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def log_failure(kind: ErrorKind, exc: BaseException) -> None:
    """Record a handled failure: category label plus original message."""
    label = ERROR_TAXONOMY[kind].log_label
    if kind is ErrorKind.UNCLASSIFIED:
        logger.opt(exception=exc).error(f"{label}: {exc}")
    else:
        logger.warning(f"{label}: {_exception_message(exc)}")


def build_error_response(
    exc: BaseException,
    kind: Optional[ErrorKind] = None,
    locale: str = messages.DEFAULT_LOCALE,
    expose_internal_errors: bool = False,
) -> Tuple[int, ErrorResponse]:
    """
    Build the HTTP status and payload for a failure.

    Args:
        exc: The raised exception
        kind: Pre-computed classification (classified here when omitted)
        locale: Catalog locale for fixed messages
        expose_internal_errors: Put raw messages of unclassified failures in the payload

    Returns:
        Tuple of (HTTP status code, ErrorResponse)
    """
    kind = kind or classify(exc)
    policy = ERROR_TAXONOMY[kind]

    http_status = policy.http_status
    if kind is ErrorKind.FRAMEWORK:
        http_status = exc.status_code

    if policy.message_policy is MessagePolicy.FIXED:
        message = messages.get_message(policy.message_key, locale)
    elif policy.message_policy is MessagePolicy.GENERIC and not expose_internal_errors:
        message = messages.get_message(policy.message_key, locale)
    else:
        message = _exception_message(exc)

    response = ErrorResponse(error_code=policy.error_code, message=message)

    if kind is ErrorKind.VALIDATION:
        for error in exc.errors():
            response.add_validation_error(_field_name(error["loc"]), error["msg"])

    return http_status, response


def register_exception_handlers(app: FastAPI, settings: ApplicationSettings) -> None:
    """
    Bind the dispatcher to every named exception type plus the catch-all.

    Args:
        app: FastAPI application
        settings: Supplies the default locale and the internal-error exposure flag
    """

    async def dispatch_exception(request: Request, exc: Exception) -> JSONResponse:
        kind = classify(exc)
        log_failure(kind, exc)

        locale = messages.resolve_locale(
            request.headers.get("accept-language"), settings.error_message_locale
        )
        http_status, body = build_error_response(
            exc, kind, locale, settings.expose_internal_errors
        )

        headers = getattr(exc, "headers", None) if kind is ErrorKind.FRAMEWORK else None
        if http_status == status.HTTP_401_UNAUTHORIZED and not headers:
            headers = {"WWW-Authenticate": "Bearer"}

        return JSONResponse(
            status_code=http_status, content=body.to_payload(), headers=headers
        )

    for exc_class in EXCEPTION_KINDS:
        app.add_exception_handler(exc_class, dispatch_exception)
    app.add_exception_handler(Exception, dispatch_exception)

    logger.debug(f"Registered {len(EXCEPTION_KINDS) + 1} exception handlers")
