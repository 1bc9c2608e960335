"""Fake Unit of Work for testing without a database.

This fake UoW provides the same interface as the real one but uses
a fake repository that stores data in memory.
"""

from typing import List, Optional

from nlogin_web.domain.entities.account import Account
from nlogin_web.domain.repositories.unit_of_work import IUnitOfWork
from tests.fakes.account_repository_fake import FakeAccountRepository


class FakeUnitOfWork(IUnitOfWork):
    """
    In-memory fake implementation of IUnitOfWork.

    Services call the factory once per operation; tests hand them the same
    instance every time so state survives between calls.

    Usage:
        with FakeUnitOfWork() as uow:
            uow.accounts.add(account)
            uow.commit()
    """

    def __init__(self, initial_accounts: Optional[List[Account]] = None):
        """
        Initialize with fake repositories.

        Args:
            initial_accounts: Optional list of accounts to pre-populate the repository
        """
        self.accounts = FakeAccountRepository(initial_data=initial_accounts)

        self.committed = False
        self.rolled_back = False
        self.enter_count = 0
        self._is_active = False

    @property
    def unavailable(self) -> bool:
        return self.accounts.unavailable

    @unavailable.setter
    def unavailable(self, value: bool) -> None:
        self.accounts.unavailable = value

    def __enter__(self) -> "FakeUnitOfWork":
        """Enter context."""
        self.enter_count += 1
        self._is_active = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context, rolling back on error."""
        if exc_type is not None:
            self.rollback()

        self._is_active = False

    def commit(self) -> None:
        """
        Mark as committed.

        Data is already in memory, so we just track that commit was called.
        """
        if not self._is_active:
            raise RuntimeError("Cannot commit: UoW is not active")

        self.committed = True
        self.rolled_back = False

    def rollback(self) -> None:
        """
        Mark as rolled back.

        Note: The fake repository doesn't undo changes since it writes
        immediately.
        """
        if not self._is_active:
            raise RuntimeError("Cannot rollback: UoW is not active")

        self.rolled_back = True
        self.committed = False

    # Helper methods for testing

    def was_committed(self) -> bool:
        """Check if commit was called (useful for assertions)."""
        return self.committed

    def was_rolled_back(self) -> bool:
        """Check if rollback was called (useful for assertions)."""
        return self.rolled_back
