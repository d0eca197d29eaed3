"""
JWT Authentication Middleware
-----------------------------
Request filter that establishes the authenticated context.

For every request the bearer token (if any) is verified once and the
TokenVerification is cached on request.state, so route dependencies never
re-verify the signature. Requests to non-public paths without a valid
token are answered by the authentication entry point.
"""

from typing import List, Optional

from fastapi import Request, Response
from fastapi.security.utils import get_authorization_scheme_param
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from tokenguard.auth.entry_point import authentication_entry_point
from tokenguard.auth.token_validator import TokenValidator, TokenVerification
from tokenguard.errors import messages
from tokenguard.errors.exceptions import AuthenticationRequiredError, TokenFailure


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the credentials of a 'Bearer <token>' header, else None."""
    scheme, credentials = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "bearer" or not credentials:
        return None
    return credentials


class JwtAuthenticationMiddleware(BaseHTTPMiddleware):
    """Verifies bearer tokens and guards every non-public path."""

    def __init__(
        self,
        app: ASGIApp,
        token_validator: TokenValidator,
        public_paths: List[str],
        default_locale: str = messages.DEFAULT_LOCALE,
    ):
        super().__init__(app)
        self.token_validator = token_validator
        self.public_paths = public_paths
        self.default_locale = default_locale

    def is_public(self, path: str) -> bool:
        for public_path in self.public_paths:
            if path == public_path:
                return True
            if public_path != "/" and path.startswith(public_path.rstrip("/") + "/"):
                return True
        return False

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token = extract_bearer_token(request.headers.get("authorization"))

        if token is None:
            verification = TokenVerification(failure=TokenFailure.EMPTY)
        else:
            verification = self.token_validator.verify(token)

        request.state.token_verification = verification
        request.state.user_id = (
            verification.claims.identifier if verification.is_valid else None
        )

        if self.is_public(request.url.path):
            return await call_next(request)

        if not verification.is_valid:
            logger.debug(f"Unauthenticated request to {request.url.path}")
            locale = messages.resolve_locale(
                request.headers.get("accept-language"), self.default_locale
            )
            return authentication_entry_point(
                request, self._authentication_error(verification), locale
            )

        return await call_next(request)

    @staticmethod
    def _authentication_error(
        verification: TokenVerification,
    ) -> AuthenticationRequiredError:
        if verification.failure is TokenFailure.EMPTY:
            return AuthenticationRequiredError()
        if verification.is_expired:
            return AuthenticationRequiredError("Access token has expired")
        return AuthenticationRequiredError("Access token is invalid")
