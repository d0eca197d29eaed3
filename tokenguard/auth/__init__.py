"""
JWT Authentication Module
-------------------------
Token lifecycle and request authentication.

This module provides:
- SigningKey: immutable HMAC key derived from the configured secret
- TokenCodec: token generation, decoding and verification
- TokenValidator: non-raising verification with per-category diagnostics
- JwtAuthenticationMiddleware: request filter populating the authenticated context
- authentication_entry_point: 401 payload for unauthenticated requests

Route dependencies live in tokenguard.auth.dependencies, which also needs the
service layer and is therefore not imported here.

Usage:
    from tokenguard.auth.dependencies import get_current_claims

    @router.get("/protected")
    async def protected_endpoint(claims: TokenClaims = Depends(get_current_claims)):
        return {"user_id": claims.identifier}
"""

from tokenguard.auth.signing_key import SigningKey
from tokenguard.auth.jwt_utils import TokenCodec, utc_now
from tokenguard.auth.token_validator import TokenValidator, TokenVerification
from tokenguard.auth.entry_point import authentication_entry_point
from tokenguard.auth.middleware import JwtAuthenticationMiddleware, extract_bearer_token

__all__ = [
    "SigningKey",
    "TokenCodec",
    "utc_now",
    "TokenValidator",
    "TokenVerification",
    "authentication_entry_point",
    "JwtAuthenticationMiddleware",
    "extract_bearer_token",
]
