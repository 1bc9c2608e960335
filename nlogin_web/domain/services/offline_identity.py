"""Offline unique id derivation for accounts without a platform identity."""

import hashlib
import uuid

OFFLINE_NAME_PREFIX = "OfflinePlayer:"


class OfflineIdentityGenerator:
    """
    Derives the unique id the game server assigns to offline-mode players.

    The id is a name-based (version 3) UUID: the MD5 digest of
    "OfflinePlayer:<name>" with the version nibble set to 3 and the RFC 4122
    variant bits set to 10. The same name always yields the same id, so an
    unclaimed account re-registered by name resolves to the same identity.
    """

    @staticmethod
    def derive(display_name: str) -> str:
        """
        Derive the offline unique id for a display name.

        Args:
            display_name: The player name

        Returns:
            32 lowercase hex characters, no dashes

        Example:
            >>> OfflineIdentityGenerator.derive("Notch")[12]
            '3'
        """
        digest = hashlib.md5(
            (OFFLINE_NAME_PREFIX + display_name).encode("utf-8"),
            usedforsecurity=False,
        ).digest()
        # version=3 overwrites byte 6's high nibble and byte 8's top two bits
        return uuid.UUID(bytes=digest, version=3).hex
