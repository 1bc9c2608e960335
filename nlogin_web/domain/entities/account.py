"""Account domain entity - pure business logic, no infrastructure."""

import re
from dataclasses import dataclass, field
from typing import Optional

from nlogin_web.domain.entities.platform_identity import PlatformIdentity
from nlogin_web.domain.exceptions import (
    InvalidEntityStateException,
    InvalidIdentifierException,
)

_UNIQUE_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


def validate_unique_id(unique_id: Optional[str]) -> str:
    """
    Check that a unique id is a dash-less UUID in lowercase hex.

    Args:
        unique_id: Candidate unique id

    Returns:
        The unique id unchanged

    Raises:
        InvalidIdentifierException: If it is missing or not 32 lowercase hex characters
    """
    if unique_id is None or not _UNIQUE_ID_PATTERN.fullmatch(unique_id):
        raise InvalidIdentifierException(
            f"Invalid unique id: {unique_id!r}. "
            "Expected 32 lowercase hexadecimal characters."
        )
    return unique_id


@dataclass
class Account:
    """
    Account domain entity representing one registered player.

    This is a pure Python class with NO dependencies on SQLAlchemy or any
    framework. account_id is assigned by the store and never changes.
    """

    display_name: str
    password_hash: str
    unique_id: str
    platform_identity: PlatformIdentity = field(default_factory=PlatformIdentity.none)
    last_ip: Optional[str] = None
    email: str = ""
    account_id: Optional[int] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        Raises:
            InvalidEntityStateException: If display name or password hash is empty
            InvalidIdentifierException: If unique_id is malformed
        """
        if not self.display_name or len(self.display_name.strip()) == 0:
            raise InvalidEntityStateException(
                "Display name cannot be empty. Account must have a player name."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. Account cannot exist without credentials."
            )

        validate_unique_id(self.unique_id)

    @property
    def primary_platform_id(self) -> Optional[str]:
        return self.platform_identity.primary_id

    @property
    def alternate_platform_id(self) -> Optional[str]:
        return self.platform_identity.alternate_id
