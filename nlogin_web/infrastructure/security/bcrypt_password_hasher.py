"""Bcrypt password hasher implementation using pwdlib.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher interface)
defines WHAT we need (hash and verify operations), while this implementation
defines HOW we do it (bcrypt via pwdlib).

Dependency flow:
    AccountService (application) → AlgorithmRegistry → IPasswordHasher (domain) ← BcryptPasswordHasher (infrastructure)

pwdlib is only imported here (external library isolated to infrastructure).
"""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.bcrypt import BcryptHasher

from nlogin_web.domain.services.password_hasher import IPasswordHasher

# bcrypt ignores everything past this many bytes
MAX_PASSWORD_BYTES = 72

# Prefix tokens that pwdlib does not accept but that hash like "2a"
LEGACY_PREFIXES = frozenset({"2", "2A"})


class BcryptPasswordHasher(IPasswordHasher):
    """
    Password hasher for the bcrypt family ($2$ / $2a$ hashes).

    New hashes are written with the "$2a$" prefix, which is the prefix the
    nLogin plugin itself produces and the one format detection routes back
    to this hasher.

    Usage:
        hasher = BcryptPasswordHasher()

        hashed = hasher.hash("user_password_123")
        # Returns: "$2a$12$<22 char salt><31 char digest>"

        hasher.verify("user_password_123", hashed)  # True
        hasher.verify("wrong_password", hashed)  # False
    """

    def __init__(self, rounds: int = 12):
        """
        Initialize bcrypt hasher.

        Args:
            rounds: Log2 cost factor (4-31)
        """
        self._password_hash = PasswordHash((BcryptHasher(rounds=rounds, prefix="2a"),))

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password with a fresh random salt.

        Note:
            Only the first 72 UTF-8 bytes of the password are hashed, the
            same cut-off the plugin's bcrypt applies.
        """
        return self._password_hash.hash(_truncate(plain_password))

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a bcrypt hash.

        "$2$" and "$2A$" hashes are checked as "$2a$". The comparison is done
        by the bcrypt library in constant time.

        Returns:
            True if the password matches, False otherwise (including malformed hashes)
        """
        try:
            return self._password_hash.verify(
                _truncate(plain_password), _normalize_prefix(hashed_password)
            )
        except (UnknownHashError, ValueError):
            # Malformed hash
            return False


def _truncate(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def _normalize_prefix(hashed_password: str) -> str:
    parts = hashed_password.split("$", 2)
    if len(parts) == 3 and parts[0] == "" and parts[1].upper() in LEGACY_PREFIXES:
        return "$2a$" + parts[2]
    return hashed_password
