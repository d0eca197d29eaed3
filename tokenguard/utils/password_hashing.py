"""
Password Hashing
----------------
bcrypt hashing for stored user credentials.

bcrypt only reads the first 72 bytes of its input. Longer passwords are
rejected when hashing and never match when verifying, so two passwords that
share a 72-byte prefix cannot collide.
"""

import bcrypt

BCRYPT_MAX_PASSWORD_BYTES = 72
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31
DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHasher:
    """bcrypt hasher with a fixed work factor."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
            raise ValueError(
                f"bcrypt rounds must be between {MIN_BCRYPT_ROUNDS} "
                f"and {MAX_BCRYPT_ROUNDS}, got {rounds}"
            )
        self.rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password is {len(encoded)} bytes; bcrypt accepts at most "
                f"{BCRYPT_MAX_PASSWORD_BYTES}"
            )
        return encoded

    def hash_password(self, password: str) -> str:
        """
        Hash a password with a fresh salt.

        Raises:
            ValueError: If the password is longer than 72 bytes
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("ascii")

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Check a password against a stored hash.

        Over-long passwords and malformed hashes never match.
        """
        try:
            return bcrypt.checkpw(
                self._encode(password), hashed_password.encode("utf-8")
            )
        except ValueError:
            return False
