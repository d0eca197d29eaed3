"""
Authentication Entry Point
--------------------------
Answers requests that reach a protected resource without a valid
authenticated context.

Runs from the authentication middleware, outside route handling, so it
writes the ErrorResponse itself instead of going through the exception
handlers.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

from tokenguard.errors import messages
from tokenguard.errors.exceptions import AuthenticationRequiredError
from tokenguard.errors.handlers import ERROR_TAXONOMY, ErrorKind
from tokenguard.models.error_models import ErrorResponse

_LOG_PREFIX = "[AuthenticationEntryPoint]"


def authentication_entry_point(
    request: Request,
    exc: AuthenticationRequiredError,
    locale: str = messages.DEFAULT_LOCALE,
) -> JSONResponse:
    """
    Build the 401 response for an unauthenticated request.

    Args:
        request: The rejected request
        exc: Why no authenticated context could be established
        locale: Catalog locale used when the exception carries no message

    Returns:
        JSONResponse: 401 with errorCode 401 and the exception's message
    """
    logger.info(f"{_LOG_PREFIX} :: {exc.message}")
    logger.info(f"{_LOG_PREFIX} :: {request.url}")
    logger.info(f"{_LOG_PREFIX} :: token is expired or missing")

    policy = ERROR_TAXONOMY[ErrorKind.AUTHENTICATION_REQUIRED]
    body = ErrorResponse(
        error_code=policy.error_code,
        message=exc.message or messages.get_message(policy.message_key, locale),
    )

    return JSONResponse(
        status_code=policy.http_status,
        content=body.to_payload(),
        headers={"WWW-Authenticate": "Bearer"},
        media_type="application/json; charset=utf-8",
    )
