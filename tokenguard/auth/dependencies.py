"""
FastAPI Authentication Dependencies
-----------------------------------
Dependencies that hand route handlers the verified claims and the user
behind them.

The authentication middleware verifies the bearer token once per request and
caches the TokenVerification on request.state; these dependencies read that
cache and only verify on their own when it is missing.
"""

from fastapi import Depends, Request

from tokenguard.auth.middleware import extract_bearer_token
from tokenguard.auth.token_validator import TokenValidator, TokenVerification
from tokenguard.errors.exceptions import AuthenticationRequiredError
from tokenguard.models.auth_models import TokenClaims
from tokenguard.services.auth_service import AuthService
from tokenguard.services.user_store import UserRecord


def get_token_validator(request: Request) -> TokenValidator:
    """TokenValidator built at application start."""
    return request.app.state.token_validator


def get_auth_service(request: Request) -> AuthService:
    """AuthService built at application start."""
    return request.app.state.auth_service


def get_token_verification(
    request: Request, validator: TokenValidator = Depends(get_token_validator)
) -> TokenVerification:
    """
    Verification result for this request's bearer token.

    Computed at most once per request and cached on request.state.
    """
    verification = getattr(request.state, "token_verification", None)
    if verification is None:
        token = extract_bearer_token(request.headers.get("authorization"))
        verification = validator.verify(token)
        request.state.token_verification = verification
    return verification


async def get_current_claims(
    verification: TokenVerification = Depends(get_token_verification),
) -> TokenClaims:
    """
    Verified claims of the presented access token.

    Raises:
        AuthenticationRequiredError: If the request carries no valid token
    """
    if not verification.is_valid:
        raise AuthenticationRequiredError()
    return verification.claims


async def get_current_user(
    claims: TokenClaims = Depends(get_current_claims),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserRecord:
    """
    User the access token belongs to.

    Raises:
        UsernameNotFoundError: If the token's identifier no longer resolves
    """
    return await auth_service.resolve_user(claims)
