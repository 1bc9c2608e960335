"""Credential store - hash and existence access to the account table."""

import logging
from collections.abc import Callable

from nlogin_web.application.exceptions import StoreUnavailableError
from nlogin_web.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Reads and replaces stored hashes and probes for existing values.

    Each call opens and closes its own unit of work.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]):
        self._uow_factory = uow_factory

    def get_hash(self, account_id: int) -> str | None:
        """
        Get the stored hash of an account.

        Returns:
            The hash, or None if no such account exists

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        with self._uow_factory() as uow:
            return uow.accounts.get_password_hash(account_id)

    def set_hash(self, account_id: int, new_hash: str) -> bool:
        """
        Replace the stored hash of an account.

        Returns:
            True on success; False if the store is unavailable or no
            account has this id
        """
        try:
            with self._uow_factory() as uow:
                updated = uow.accounts.set_password_hash(account_id, new_hash)
                uow.commit()
        except StoreUnavailableError as exc:
            logger.warning(f"Could not store hash for account {account_id}: {exc}")
            return False

        if not updated:
            logger.warning(f"Hash not stored, account {account_id} does not exist")
        return updated

    def exists(self, column_name: str, value: object) -> bool:
        """
        Check whether any account has value in column_name.

        When the store cannot be reached this answers True: a caller using
        it to refuse duplicates then refuses instead of admitting one.

        Raises:
            ValueError: If column_name is not a searchable account field
        """
        try:
            with self._uow_factory() as uow:
                return uow.accounts.exists_by(column_name, value)
        except StoreUnavailableError as exc:
            logger.warning(
                f"Existence check on {column_name} failed, assuming it exists: {exc}"
            )
            return True
