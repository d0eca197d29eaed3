"""
Services Package
----------------
Authentication flows (login, refresh, user resolution) and the credential
store protocol they depend on.
"""

from tokenguard.services.user_store import (
    InMemoryUserStore,
    UserCredentialStore,
    UserRecord,
)
from tokenguard.services.auth_service import AuthService

__all__ = [
    "AuthService",
    "InMemoryUserStore",
    "UserCredentialStore",
    "UserRecord",
]
