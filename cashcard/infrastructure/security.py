"""HTTP Basic Authentication — resolves the caller identity threaded into card operations.

Invariants:
    - Unauthenticated requests never reach a route body (401 + WWW-Authenticate: Basic)
    - Role check runs before any ownership check: NON-OWNER callers get 403
    - Passwords held only as argon2 hashes after the directory is built
    - Unknown usernames still pay for one hash verification, so response time
      does not reveal which usernames exist
    - The caller identity comes from credentials, never from a request payload

Design Decisions:
    - argon2-cffi PasswordHasher for verification
    - Directory built once per process from settings.users (lru_cache)
"""

import logging
import secrets
from dataclasses import dataclass
from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHashError
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from cashcard.config import UserAccount, get_settings
from cashcard.core.domain_types import Owner, UserRole
from cashcard.core.errors import AccessDeniedError

logger = logging.getLogger(__name__)

http_basic = HTTPBasic(realm="cashcards")


@dataclass(frozen=True)
class CallerIdentity:
    username: str
    roles: frozenset[UserRole]

    def has_role(self, role: UserRole) -> bool:
        return role in self.roles


class UserDirectory:
    """In-process credential store keyed by username."""

    def __init__(self, accounts: list[UserAccount], hasher: PasswordHasher | None = None):
        self._hasher = hasher or PasswordHasher()
        self._users: dict[str, tuple[str, frozenset[UserRole]]] = {
            a.username: (self._hasher.hash(a.password), frozenset(a.roles))
            for a in accounts
        }
        # verified against when the username is unknown
        self._dummy_hash = self._hasher.hash(secrets.token_urlsafe(16))

    def authenticate(self, username: str, password: str) -> CallerIdentity | None:
        """Return the identity for valid credentials, None otherwise."""
        entry = self._users.get(username)
        password_hash, roles = entry if entry else (self._dummy_hash, frozenset())
        try:
            self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return None
        if entry is None:
            return None
        return CallerIdentity(username=username, roles=roles)


@lru_cache
def get_user_directory() -> UserDirectory:
    return UserDirectory(get_settings().users)


def authenticate(
    credentials: HTTPBasicCredentials = Depends(http_basic),
    directory: UserDirectory = Depends(get_user_directory),
) -> CallerIdentity:
    """FastAPI dependency: 401 unless the Basic credentials check out."""
    identity = directory.authenticate(credentials.username, credentials.password)
    if identity is None:
        logger.warning(
            "Rejected credentials", extra={"owner": credentials.username},
        )
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": 'Basic realm="cashcards"'},
        )
    return identity


def require_card_owner(
    identity: CallerIdentity = Depends(authenticate),
) -> Owner:
    """FastAPI dependency: the caller's owner name, or 403 without CARD-OWNER."""
    if not identity.has_role(UserRole.CARD_OWNER):
        raise AccessDeniedError(identity.username)
    return Owner(identity.username)
