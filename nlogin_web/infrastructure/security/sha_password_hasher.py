"""Salted SHA password hashers (nLogin SHA-256/SHA-512, AuthMe legacy SHA).

All three share one layout:

    $<TOKEN>$<salt>$<digest>
    digest = H(H(password).hexdigest() + salt).hexdigest()

where H is SHA-256 for "$SHA256$" and "$SHA$" (AuthMe) hashes and SHA-512
for "$SHA512$" hashes. Salts are 16 random hex characters.
"""

import hashlib
import hmac
import secrets

from nlogin_web.domain.services.password_hasher import IPasswordHasher

SALT_LENGTH = 16


class SaltedShaPasswordHasher(IPasswordHasher):
    """
    Double-SHA hasher parameterised by prefix token and digest algorithm.

    Usage:
        hasher = Sha256PasswordHasher()
        hashed = hasher.hash("secret")
        # Returns: "$SHA256$<16 hex salt>$<64 hex digest>"
    """

    def __init__(self, token: str, digest_name: str):
        """
        Args:
            token: Upper-case prefix token written between the first two "$"
            digest_name: hashlib algorithm name, e.g. "sha256"

        Raises:
            ValueError: If the token is empty or the digest is not available
        """
        if not token or "$" in token:
            raise ValueError(f"Invalid hash token: {token!r}")
        hashlib.new(digest_name)
        self.token = token.upper()
        self.digest_name = digest_name

    def hash(self, plain_password: str) -> str:
        """Hash a password with a fresh random salt."""
        salt = secrets.token_hex(SALT_LENGTH // 2)
        return f"${self.token}${salt}${self._digest(plain_password, salt)}"

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a stored "$TOKEN$salt$digest" hash.

        Returns:
            True if the password matches; False on mismatch or malformed input
        """
        parts = hashed_password.split("$")
        if len(parts) != 4 or parts[1].upper() != self.token:
            return False

        _, _, salt, expected = parts
        actual = self._digest(plain_password, salt)
        return hmac.compare_digest(actual.encode("utf-8"), expected.encode("utf-8"))

    def _digest(self, plain_password: str, salt: str) -> str:
        inner = hashlib.new(self.digest_name, plain_password.encode("utf-8")).hexdigest()
        return hashlib.new(self.digest_name, (inner + salt).encode("utf-8")).hexdigest()


class Sha256PasswordHasher(SaltedShaPasswordHasher):
    """nLogin "$SHA256$" hashes."""

    def __init__(self):
        super().__init__("SHA256", "sha256")


class Sha512PasswordHasher(SaltedShaPasswordHasher):
    """nLogin "$SHA512$" hashes."""

    def __init__(self):
        super().__init__("SHA512", "sha512")


class AuthMePasswordHasher(SaltedShaPasswordHasher):
    """Legacy AuthMe "$SHA$" hashes, kept readable for imported accounts."""

    def __init__(self):
        super().__init__("SHA", "sha256")
