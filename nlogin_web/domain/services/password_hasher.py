"""Password hashing interface - domain service abstraction.

This interface defines the capability every hashing strategy offers.
It belongs in the domain layer because verifying a stored credential of
any supported format is a BUSINESS REQUIREMENT, not an infrastructure detail.

The domain cares that:
1. Stored hashes are self-describing (they name their algorithm)
2. Each supported algorithm can hash and verify
3. Unknown formats are a checked outcome, never a silent login failure

The domain does NOT care:
- Which library implements each algorithm (pwdlib, hashlib)
- Implementation details (salt generation, digest rounds)
"""

from abc import ABC, abstractmethod
from enum import Enum


class HashAlgorithm(str, Enum):
    """
    Closed set of hashing strategies an nLogin table may contain.

    UNKNOWN is a regular member so that format detection always yields a
    value the caller has to branch on.
    """

    BCRYPT = "bcrypt"
    SHA256 = "sha256"
    SHA512 = "sha512"
    AUTHME = "authme"
    UNKNOWN = "unknown"


class IPasswordHasher(ABC):
    """
    Interface for one password hashing strategy.

    Implementations must generate their own salt and return a string that
    encodes the algorithm identifier together with the salt and digest.
    """

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Self-describing hash string, e.g. "$SHA256$<salt>$<digest>"
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a hashed password.

        Implementations must compare in constant time and return False
        (not raise) for malformed hash material.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The previously hashed password to check against

        Returns:
            True if password matches, False otherwise
        """
        pass
