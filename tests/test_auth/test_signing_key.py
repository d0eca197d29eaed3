"""
Signing Key Tests
-----------------
Test key derivation, algorithm selection and key material hiding.
"""

import dataclasses

import pytest

from tokenguard.auth.signing_key import SigningKey
from tokenguard.errors.exceptions import WeakSigningKeyError


class TestSigningKey:
    """Test SigningKey construction."""

    def test_from_secret_hs256(self):
        key = SigningKey.from_secret("k" * 32)

        assert key.algorithm == "HS256"
        assert key.material == b"k" * 32

    def test_from_secret_hs384(self):
        assert SigningKey.from_secret("k" * 48).algorithm == "HS384"

    def test_from_secret_hs512(self):
        assert SigningKey.from_secret("k" * 64).algorithm == "HS512"
        assert SigningKey.from_secret("k" * 100).algorithm == "HS512"

    def test_short_secret_rejected(self):
        """Secrets under 256 bits are refused."""
        with pytest.raises(WeakSigningKeyError, match="at least 256 bits"):
            SigningKey.from_secret("k" * 31)

    def test_empty_secret_rejected(self):
        with pytest.raises(WeakSigningKeyError):
            SigningKey.from_secret("")

    def test_multibyte_secret_measured_in_bytes(self):
        """Length is checked on the UTF-8 encoding, not on characters."""
        # 11 characters, 33 bytes
        key = SigningKey.from_secret("비밀키비밀키비밀키비밀")
        assert len(key.material) == 33

    def test_key_material_not_in_repr(self):
        key = SigningKey.from_secret("super-secret-value-that-is-long-enough")

        assert "super-secret" not in repr(key)
        assert "super-secret" not in str(key)
        assert "HS256" in str(key)

    def test_key_is_immutable(self):
        key = SigningKey.from_secret("k" * 32)

        with pytest.raises(dataclasses.FrozenInstanceError):
            key.algorithm = "HS512"
