"""
User Credential Store
---------------------
Lookup of user credentials by user id.

Persistence is owned by the hosting platform; the service only depends on the
UserCredentialStore protocol. InMemoryUserStore backs local runs and tests.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from loguru import logger

from tokenguard.utils.password_hashing import PasswordHasher


@dataclass(frozen=True)
class UserRecord:
    """Stored credentials for one user."""

    user_id: str
    password_hash: str = field(repr=False)


class UserCredentialStore(Protocol):
    """Anything that can resolve a user id to stored credentials."""

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        ...


class InMemoryUserStore:
    """Dict-backed credential store."""

    def __init__(self, password_hasher: Optional[PasswordHasher] = None) -> None:
        self._users: Dict[str, UserRecord] = {}
        self._password_hasher = password_hasher or PasswordHasher()

    def add_user(self, user_id: str, password: str) -> UserRecord:
        """
        Register a user, hashing the password with bcrypt.

        Raises:
            ValueError: If the user id is already registered or the password
                is longer than bcrypt accepts
        """
        if user_id in self._users:
            raise ValueError(f"User '{user_id}' already exists")

        record = UserRecord(
            user_id=user_id, password_hash=self._password_hasher.hash_password(password)
        )
        self._users[user_id] = record
        logger.debug(f"User {user_id} added to in-memory store")
        return record

    def remove_user(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self._users.get(user_id)
