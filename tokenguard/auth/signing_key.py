"""
Signing Key
-----------
Immutable holder for the symmetric key used to sign and verify tokens.

Built once when the application starts and passed into the TokenCodec.
The key material is never part of repr() output.
"""

from dataclasses import dataclass, field

from jose.constants import ALGORITHMS

from tokenguard.core.config_manager import MIN_SECRET_KEY_BYTES
from tokenguard.errors.exceptions import WeakSigningKeyError


@dataclass(frozen=True)
class SigningKey:
    """HMAC key plus the algorithm that matches its strength."""

    material: bytes = field(repr=False)
    algorithm: str = ALGORITHMS.HS256

    @classmethod
    def from_secret(cls, secret: str) -> "SigningKey":
        """
        Derive a signing key from a configured secret.

        The strongest HMAC variant the key length supports is selected:
        64+ bytes -> HS512, 48+ bytes -> HS384, otherwise HS256.

        Raises:
            WeakSigningKeyError: If the secret is shorter than 256 bits
        """
        material = secret.encode("utf-8")
        if len(material) < MIN_SECRET_KEY_BYTES:
            raise WeakSigningKeyError(
                f"Signing key is {len(material) * 8} bits; "
                f"at least {MIN_SECRET_KEY_BYTES * 8} bits are required"
            )

        if len(material) >= 64:
            algorithm = ALGORITHMS.HS512
        elif len(material) >= 48:
            algorithm = ALGORITHMS.HS384
        else:
            algorithm = ALGORITHMS.HS256

        return cls(material=material, algorithm=algorithm)

    def __str__(self) -> str:
        return f"SigningKey(algorithm={self.algorithm})"
