"""Platform identity value object - the account's external identity binding."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from nlogin_web.domain.exceptions import (
    IdentityConflictException,
    InvalidEntityStateException,
)


class PlatformKind(str, Enum):
    """Which identity namespace an account is bound to."""

    NONE = "none"
    PRIMARY = "primary"
    ALTERNATE = "alternate"


@dataclass(frozen=True)
class PlatformIdentity:
    """
    External identity of an account.

    An account is bound to at most one platform namespace: the primary
    platform (Mojang/Java edition UUID), the alternate platform
    (Bedrock/Geyser id), or neither (offline account). Holding a single
    tagged value instead of two nullable ids means "both set" cannot be
    represented; the two nullable columns only exist at the storage boundary.
    """

    kind: PlatformKind = PlatformKind.NONE
    value: Optional[str] = None

    def __post_init__(self):
        if self.kind is PlatformKind.NONE:
            if self.value is not None:
                raise InvalidEntityStateException(
                    "An unbound platform identity cannot carry an id."
                )
        elif not self.value:
            raise InvalidEntityStateException(
                f"A {self.kind.value} platform identity requires a non-empty id."
            )

    @classmethod
    def none(cls) -> "PlatformIdentity":
        return cls()

    @classmethod
    def primary(cls, platform_id: str) -> "PlatformIdentity":
        return cls(PlatformKind.PRIMARY, platform_id)

    @classmethod
    def alternate(cls, platform_id: str) -> "PlatformIdentity":
        return cls(PlatformKind.ALTERNATE, platform_id)

    @classmethod
    def from_ids(
        cls, primary_id: Optional[str], alternate_id: Optional[str]
    ) -> "PlatformIdentity":
        """
        Build an identity from the two nullable ids used by callers and storage.

        Args:
            primary_id: Primary platform id, or None
            alternate_id: Alternate platform id, or None

        Returns:
            The matching PlatformIdentity variant

        Raises:
            IdentityConflictException: If both ids are set
        """
        if primary_id is not None and alternate_id is not None:
            raise IdentityConflictException(
                f"Primary platform id '{primary_id}' and alternate platform id "
                f"'{alternate_id}' cannot both be set on one account."
            )
        if primary_id is not None:
            return cls.primary(primary_id)
        if alternate_id is not None:
            return cls.alternate(alternate_id)
        return cls.none()

    @property
    def primary_id(self) -> Optional[str]:
        """Value for the primary platform column."""
        return self.value if self.kind is PlatformKind.PRIMARY else None

    @property
    def alternate_id(self) -> Optional[str]:
        """Value for the alternate platform column."""
        return self.value if self.kind is PlatformKind.ALTERNATE else None

    @property
    def is_bound(self) -> bool:
        return self.kind is not PlatformKind.NONE
