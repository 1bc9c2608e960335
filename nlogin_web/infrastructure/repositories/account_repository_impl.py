"""Account repository implementation using SQLAlchemy."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.orm import Session

from nlogin_web.application.exceptions import StoreUnavailableError
from nlogin_web.domain.entities.account import Account
from nlogin_web.domain.entities.platform_identity import PlatformIdentity, PlatformKind
from nlogin_web.domain.repositories.account_repository import (
    SEARCHABLE_FIELDS,
    IAccountRepository,
)
from nlogin_web.infrastructure.persistence.models.account_model import AccountModel

# Driver and pool errors that mean "cannot reach the store", as opposed to
# bad SQL or constraint violations, which keep propagating unchanged.
CONNECTIVITY_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
)


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise connectivity failures as StoreUnavailableError."""
    try:
        yield
    except CONNECTIVITY_ERRORS as exc:
        raise StoreUnavailableError(f"Account store is unavailable: {exc}") from exc


class AccountRepository(IAccountRepository):
    """
    SQLAlchemy implementation of IAccountRepository.

    This class contains all database-specific code and depends on:
    - SQLAlchemy (infrastructure)
    - AccountModel (infrastructure ORM mapping)

    It returns domain entities or plain ids, never ORM models.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy session (managed by UoW)
        """
        self._session = session

    def get_by_id(self, account_id: int) -> Optional[Account]:
        """Get account by id."""
        with translate_store_errors():
            result = self._session.execute(
                select(AccountModel).where(AccountModel.account_id == account_id)
            )
            account_model = result.scalar_one_or_none()

        if account_model is None:
            return None

        return account_model.to_entity()

    def find_id_by_primary_id(self, primary_id: str) -> Optional[int]:
        """Get the first account id bound to a primary platform id."""
        return self._first_id(
            select(AccountModel.account_id)
            .where(AccountModel.primary_platform_id == primary_id)
            .limit(1)
        )

    def find_id_by_alternate_id(self, alternate_id: str) -> Optional[int]:
        """Get the first account id bound to an alternate platform id."""
        return self._first_id(
            select(AccountModel.account_id)
            .where(AccountModel.alternate_platform_id == alternate_id)
            .limit(1)
        )

    def find_id_by_display_name(
        self, display_name: str, unclaimed_only: bool
    ) -> Optional[int]:
        """Get an account id by display name under the given claim policy."""
        stmt = select(AccountModel.account_id).where(
            AccountModel.display_name == display_name
        )

        if unclaimed_only:
            stmt = stmt.where(
                AccountModel.primary_platform_id.is_(None),
                AccountModel.alternate_platform_id.is_(None),
            )
        else:
            # Claimed rows first; "IS NULL" ordering is portable, NULLS LAST is not
            stmt = stmt.order_by(
                AccountModel.primary_platform_id.is_(None),
                AccountModel.primary_platform_id.desc(),
            )

        return self._first_id(stmt.limit(1))

    def get_password_hash(self, account_id: int) -> Optional[str]:
        """Get the stored hash of an account."""
        with translate_store_errors():
            result = self._session.execute(
                select(AccountModel.password_hash).where(
                    AccountModel.account_id == account_id
                )
            )
            return result.scalar_one_or_none()

    def set_password_hash(self, account_id: int, password_hash: str) -> bool:
        """Replace the stored hash of an account."""
        return self._update(account_id, {AccountModel.password_hash: password_hash})

    def exists_by(self, field: str, value: object) -> bool:
        """Check if any account has value in field."""
        if field not in SEARCHABLE_FIELDS:
            raise ValueError(f"Unknown account field: {field!r}")

        column = getattr(AccountModel, field)
        with translate_store_errors():
            result = self._session.execute(
                select(AccountModel.account_id).where(column == value).limit(1)
            )
            return result.scalar_one_or_none() is not None

    def add(self, account: Account) -> Account:
        """
        Add a new account.

        Note: We convert domain entity -> ORM model, persist it,
        then convert back to domain entity.
        """
        account_model = AccountModel.from_entity(account)

        with translate_store_errors():
            self._session.add(account_model)
            self._session.flush()  # Get generated id without committing

        return account_model.to_entity()

    def update_registration(
        self,
        account_id: int,
        *,
        password_hash: str,
        last_ip: Optional[str],
        email: str,
        platform_identity: PlatformIdentity,
    ) -> bool:
        """Overwrite hash, last IP, email and the matched platform column."""
        values = {
            AccountModel.password_hash: password_hash,
            AccountModel.last_ip: last_ip,
            AccountModel.email: email,
        }
        if platform_identity.kind is PlatformKind.PRIMARY:
            values[AccountModel.primary_platform_id] = platform_identity.value
        elif platform_identity.kind is PlatformKind.ALTERNATE:
            values[AccountModel.alternate_platform_id] = platform_identity.value

        return self._update(account_id, values)

    def _first_id(self, stmt) -> Optional[int]:
        with translate_store_errors():
            return self._session.execute(stmt).scalar_one_or_none()

    def _update(self, account_id: int, values: dict) -> bool:
        with translate_store_errors():
            result = self._session.execute(
                update(AccountModel)
                .where(AccountModel.account_id == account_id)
                .values(values)
            )
        return result.rowcount > 0
