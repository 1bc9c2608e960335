"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from nlogin_web.domain.entities.account import Account
from nlogin_web.domain.entities.platform_identity import PlatformIdentity

# Account attributes that may be probed with exists_by()
SEARCHABLE_FIELDS = frozenset(
    {
        "account_id",
        "display_name",
        "last_ip",
        "unique_id",
        "primary_platform_id",
        "alternate_platform_id",
        "email",
    }
)


class IAccountRepository(ABC):
    """
    Account repository interface.

    This interface belongs to the DOMAIN layer and defines the queries the
    identity resolver and credential store need, without any SQL.

    Every method raises StoreUnavailableError when the store cannot be
    reached, so "no rows" and "no connection" are never confused.
    """

    @abstractmethod
    def get_by_id(self, account_id: int) -> Optional[Account]:
        """
        Retrieve an account by its id.

        Args:
            account_id: The surrogate key

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    def find_id_by_primary_id(self, primary_id: str) -> Optional[int]:
        """Return the id of the first account bound to this primary platform id."""
        pass

    @abstractmethod
    def find_id_by_alternate_id(self, alternate_id: str) -> Optional[int]:
        """Return the id of the first account bound to this alternate platform id."""
        pass

    @abstractmethod
    def find_id_by_display_name(
        self, display_name: str, unclaimed_only: bool
    ) -> Optional[int]:
        """
        Find an account id by display name.

        Args:
            display_name: Exact player name
            unclaimed_only: Only match accounts with no platform identity

        Returns:
            When unclaimed_only is False, accounts holding a primary platform
            id win over those without one (then highest primary id first).
            None if nothing matches.
        """
        pass

    @abstractmethod
    def get_password_hash(self, account_id: int) -> Optional[str]:
        """Return the stored hash, or None if the account does not exist."""
        pass

    @abstractmethod
    def set_password_hash(self, account_id: int, password_hash: str) -> bool:
        """
        Replace the stored hash.

        Returns:
            True if a row was updated, False if no account has this id
        """
        pass

    @abstractmethod
    def exists_by(self, field: str, value: object) -> bool:
        """
        Check whether any account has the given value in the given field.

        Args:
            field: One of SEARCHABLE_FIELDS
            value: Value to match exactly

        Raises:
            ValueError: If field is not searchable
        """
        pass

    @abstractmethod
    def add(self, account: Account) -> Account:
        """
        Insert a new account.

        Returns:
            The stored account with its generated account_id
        """
        pass

    @abstractmethod
    def update_registration(
        self,
        account_id: int,
        *,
        password_hash: str,
        last_ip: Optional[str],
        email: str,
        platform_identity: PlatformIdentity,
    ) -> bool:
        """
        Overwrite the registration columns of an existing account.

        Password hash, last IP and email are always written. If the
        identity is bound, only the column of its own namespace is written;
        an unbound identity leaves both platform columns untouched.

        Returns:
            True if a row was updated
        """
        pass
