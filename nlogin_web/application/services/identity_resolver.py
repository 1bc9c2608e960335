"""Identity resolver - maps a search value to a canonical account id."""

import logging
from collections.abc import Callable

from nlogin_web.application.exceptions import (
    InvalidSearchModeError,
    StoreUnavailableError,
)
from nlogin_web.domain.entities.lookup import LookupResult, SearchMode
from nlogin_web.domain.repositories.account_repository import IAccountRepository
from nlogin_web.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


def coerce_search_mode(mode: SearchMode | int) -> SearchMode:
    """
    Convert a caller-supplied mode to SearchMode.

    Raises:
        InvalidSearchModeError: If the value is not a known mode
    """
    if isinstance(mode, bool):
        raise InvalidSearchModeError(mode)
    try:
        return SearchMode(mode)
    except ValueError:
        raise InvalidSearchModeError(mode) from None


class IdentityResolver:
    """
    Resolves a player identifier under the configured name ambiguity policy.

    Display-name lookups depend on strict_name_uniqueness (nLogin's
    "username-appender" option):
    - True: only accounts without any platform identity match by name, so
      a verified platform account never collides with an offline one.
    - False: any account with the name matches; accounts holding a primary
      platform id win over unclaimed ones.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        strict_name_uniqueness: bool = False,
    ):
        """
        Initialize resolver.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            strict_name_uniqueness: Name ambiguity policy (see class docstring)
        """
        self._uow_factory = uow_factory
        self._strict_name_uniqueness = strict_name_uniqueness

    def resolve(self, search_value: str, mode: SearchMode | int) -> LookupResult:
        """
        Resolve a search value to an account.

        Args:
            search_value: Platform id or display name; surrounding whitespace is ignored
            mode: Namespace the value belongs to

        Returns:
            LookupResult.found(id), not_found() or store_unavailable()

        Raises:
            InvalidSearchModeError: If mode is not a SearchMode value
        """
        mode = coerce_search_mode(mode)
        search_value = search_value.strip()

        try:
            with self._uow_factory() as uow:
                account_id = self._find(uow.accounts, search_value, mode)
        except StoreUnavailableError as exc:
            logger.warning(f"Lookup by {mode.name} failed, store unavailable: {exc}")
            return LookupResult.store_unavailable()

        if account_id is None:
            logger.debug(f"No account for {mode.name} '{search_value}'")
            return LookupResult.not_found()

        return LookupResult.found(account_id)

    def _find(
        self, accounts: IAccountRepository, search_value: str, mode: SearchMode
    ) -> int | None:
        if mode is SearchMode.BY_PRIMARY_ID:
            return accounts.find_id_by_primary_id(search_value)
        if mode is SearchMode.BY_ALTERNATE_ID:
            return accounts.find_id_by_alternate_id(search_value)
        return accounts.find_id_by_display_name(
            search_value, unclaimed_only=self._strict_name_uniqueness
        )
