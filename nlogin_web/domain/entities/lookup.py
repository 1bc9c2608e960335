"""Identity lookup values: search modes and the tri-state lookup result."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class SearchMode(IntEnum):
    """
    Identifier namespace used to search for an account.

    The integer values match the fetch constants of the nLogin website
    integration so callers porting existing code keep their numbers.
    """

    BY_PRIMARY_ID = 1
    BY_ALTERNATE_ID = 2
    BY_DISPLAY_NAME = 3


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of an identity search.

    NOT_FOUND means "safe to register"; STORE_UNAVAILABLE means "must not
    register". Callers must never treat the two alike.
    """

    status: LookupStatus
    account_id: Optional[int] = None

    @classmethod
    def found(cls, account_id: int) -> "LookupResult":
        return cls(LookupStatus.FOUND, account_id)

    @classmethod
    def not_found(cls) -> "LookupResult":
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def store_unavailable(cls) -> "LookupResult":
        return cls(LookupStatus.STORE_UNAVAILABLE)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_not_found(self) -> bool:
        return self.status is LookupStatus.NOT_FOUND

    @property
    def is_store_unavailable(self) -> bool:
        return self.status is LookupStatus.STORE_UNAVAILABLE
