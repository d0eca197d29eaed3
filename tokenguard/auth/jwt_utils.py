"""
JWT Utilities
-------------
Core JWT operations for token generation, decoding and verification.

Tokens are compact HMAC-signed JWS strings carrying three claims:
- jti: the user identifier
- iat: issued-at (NumericDate)
- exp: expiry (NumericDate)

A token is valid only while its signature verifies against the current
SigningKey and the current time is strictly before exp. Decoding and the
expiry decision happen in one pass; failures are raised as TokenInvalidError
(or its TokenExpiredError subclass) with the failure category attached.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError
from loguru import logger

from tokenguard.auth.signing_key import SigningKey
from tokenguard.core.config_manager import ApplicationSettings
from tokenguard.errors.exceptions import (
    TokenExpiredError,
    TokenFailure,
    TokenInvalidError,
)
from tokenguard.models.auth_models import TokenClaims

Clock = Callable[[], datetime]

ACCESS_TOKEN_VALIDITY = timedelta(hours=1)
REFRESH_TOKEN_VALIDITY = timedelta(hours=24)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class TokenCodec:
    """
    Encodes and decodes signed tokens with a single SigningKey.

    The clock is injectable so expiry can be tested with a fast-forwarded time.
    """

    def __init__(
        self,
        signing_key: SigningKey,
        access_token_validity: timedelta = ACCESS_TOKEN_VALIDITY,
        refresh_token_validity: timedelta = REFRESH_TOKEN_VALIDITY,
        clock: Optional[Clock] = None,
    ):
        self._signing_key = signing_key
        self.access_token_validity = access_token_validity
        self.refresh_token_validity = refresh_token_validity
        self._clock: Clock = clock or utc_now

    @classmethod
    def from_settings(
        cls, settings: ApplicationSettings, clock: Optional[Clock] = None
    ) -> "TokenCodec":
        """Build a codec from application settings."""
        signing_key = SigningKey.from_secret(settings.jwt_secret_key.get_secret_value())
        logger.info(f"Token codec initialized with {signing_key}")
        return cls(
            signing_key,
            access_token_validity=timedelta(seconds=settings.access_token_expire_seconds),
            refresh_token_validity=timedelta(
                seconds=settings.refresh_token_expire_seconds
            ),
            clock=clock,
        )

    @property
    def algorithm(self) -> str:
        return self._signing_key.algorithm

    def now(self) -> datetime:
        return self._clock()

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def generate(self, user_id: str, validity: timedelta) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: User identifier, stored in the jti claim
            validity: How long the token stays valid after issue

        Returns:
            Compact JWS token string
        """
        issued_at = int(self._clock().timestamp())
        payload: Dict[str, Any] = {
            "jti": user_id,
            "iat": issued_at,
            "exp": issued_at + int(validity.total_seconds()),
        }

        token: str = jwt.encode(
            payload, self._signing_key.material, algorithm=self._signing_key.algorithm
        )
        logger.debug(f"Token created for user {user_id}, valid for {validity}")
        return token

    def generate_access_token(self, user_id: str) -> str:
        """Create a short-lived access token."""
        return self.generate(user_id, self.access_token_validity)

    def generate_refresh_token(self, user_id: str) -> str:
        """Create a long-lived refresh token."""
        return self.generate(user_id, self.refresh_token_validity)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode_and_verify(self, token: Optional[str]) -> TokenClaims:
        """
        Decode a token, verify its signature and check it has not expired.

        Args:
            token: Compact JWS token string

        Returns:
            TokenClaims: Verified claims

        Raises:
            TokenExpiredError: If the token is well formed and signed but expired
            TokenInvalidError: For empty, malformed, unsupported or forged tokens
        """
        if token is None or not token.strip():
            raise TokenInvalidError(TokenFailure.EMPTY, "JWT string is empty")

        if token.count(".") != 2:
            raise TokenInvalidError(
                TokenFailure.MALFORMED, "JWT must consist of exactly three segments"
            )

        try:
            header = jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise TokenInvalidError(TokenFailure.MALFORMED, str(e))

        algorithm = header.get("alg")
        if algorithm != self._signing_key.algorithm:
            raise TokenInvalidError(
                TokenFailure.UNSUPPORTED, f"Unsupported signing algorithm: {algorithm}"
            )

        try:
            payload = jwt.decode(
                token,
                self._signing_key.material,
                algorithms=[self._signing_key.algorithm],
                options={"verify_exp": False},
            )
        except JWTClaimsError as e:
            raise TokenInvalidError(TokenFailure.MALFORMED, str(e))
        except JWTError as e:
            # Structure was checked above, so what remains is the signature
            raise TokenInvalidError(TokenFailure.SIGNATURE, str(e))

        claims = self._to_claims(payload)

        if self._clock() >= claims.expires_at:
            raise TokenExpiredError(
                claims, f"JWT expired at {claims.expires_at.isoformat()}"
            )

        return claims

    @staticmethod
    def _to_claims(payload: Dict[str, Any]) -> TokenClaims:
        identifier = payload.get("jti")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")

        if not isinstance(identifier, str) or not identifier:
            raise TokenInvalidError(TokenFailure.MALFORMED, "Token missing identifier")
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise TokenInvalidError(
                TokenFailure.MALFORMED, "Token timestamps must be integer NumericDates"
            )

        return TokenClaims(
            identifier=identifier,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )
