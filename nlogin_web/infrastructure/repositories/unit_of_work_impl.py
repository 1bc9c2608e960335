"""Unit of Work implementation using SQLAlchemy."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from nlogin_web.domain.repositories.unit_of_work import IUnitOfWork
from nlogin_web.infrastructure.repositories.account_repository_impl import (
    AccountRepository,
    translate_store_errors,
)

logger = logging.getLogger(__name__)


class UnitOfWork(IUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work.

    This class:
    1. Manages the SQLAlchemy session lifecycle
    2. Provides access to the account repository within a transaction
    3. Commits or rolls back based on operation success
    4. Closes the session on every exit path
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: SQLAlchemy session factory
        """
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        """
        Start a new database session and initialize repositories.

        The session connects lazily, so connection failures surface from
        the first query as StoreUnavailableError.

        Returns:
            Self for context manager usage
        """
        self._session = self._session_factory()
        self.accounts = AccountRepository(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """
        Exit context manager, rolling back on error and closing the session.

        Uncommitted work is discarded when the session closes.
        """
        if self._session is None:
            return

        try:
            if exc_type is not None:
                try:
                    self._session.rollback()
                except SQLAlchemyError as rollback_exc:
                    # keep the original exception; the connection is already gone
                    logger.warning(f"Rollback failed after error: {rollback_exc}")
        finally:
            self._session.close()
            self._session = None

    def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        with translate_store_errors():
            self._session.commit()

    def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        self._session.rollback()
