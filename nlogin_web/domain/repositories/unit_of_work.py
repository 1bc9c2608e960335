"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nlogin_web.domain.repositories.account_repository import IAccountRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing one store session.

    Every public operation opens its own unit of work and the session is
    released on every exit path, so no connection is shared between calls.
    """

    accounts: "IAccountRepository"

    @abstractmethod
    def __enter__(self) -> "IUnitOfWork":
        """Start a session and bind the repositories to it."""
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit the context manager.

        If exc_type is not None, rollback. The session is always closed.
        """
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
