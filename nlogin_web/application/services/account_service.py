"""Account service - registration, verification and password changes.

This service is the caller-facing surface used by a website sitting in
front of the nLogin account table. It orchestrates:
1. IdentityResolver (which account does this identifier mean?)
2. AlgorithmRegistry (which strategy verifies this stored hash?)
3. CredentialStore (read/replace hashes, existence probes)

Registration resolves the identity first and then inserts or updates in a
separate unit of work. The two steps are not atomic: two concurrent
registrations for the same identity can both see "not found" and insert
twice. Callers that need stronger guarantees must serialise registrations
for the same identity themselves.
"""

import logging
from collections.abc import Callable

from nlogin_web.application.dtos.account_dto import RegisterAccountDTO
from nlogin_web.application.exceptions import (
    StoreUnavailableError,
    UnverifiableAccountError,
)
from nlogin_web.application.services.algorithm_registry import AlgorithmRegistry
from nlogin_web.application.services.credential_store import CredentialStore
from nlogin_web.application.services.identity_resolver import IdentityResolver
from nlogin_web.domain.entities.account import Account, validate_unique_id
from nlogin_web.domain.entities.lookup import LookupResult, SearchMode
from nlogin_web.domain.entities.platform_identity import PlatformIdentity, PlatformKind
from nlogin_web.domain.repositories.unit_of_work import IUnitOfWork
from nlogin_web.domain.services.offline_identity import OfflineIdentityGenerator
from nlogin_web.domain.services.password_hasher import HashAlgorithm

logger = logging.getLogger(__name__)


class AccountService:
    """
    Account service encapsulating the website-facing use cases.

    This service:
    1. Depends on the IUnitOfWork abstraction (not SQLAlchemy)
    2. Depends on AlgorithmRegistry for every hash it reads or writes
    3. Validates identity invariants before touching the store
    4. Never reports an infrastructure fault as a wrong password

    Testing:
    - Unit tests use FakeUnitOfWork and a registry of FakePasswordHasher
    - No database or real crypto required
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        algorithm_registry: AlgorithmRegistry,
        strict_name_uniqueness: bool = False,
    ):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            algorithm_registry: Strategies plus the current write algorithm
            strict_name_uniqueness: Display-name ambiguity policy, see IdentityResolver
        """
        self._uow_factory = uow_factory
        self._registry = algorithm_registry
        self._resolver = IdentityResolver(uow_factory, strict_name_uniqueness)
        self._credentials = CredentialStore(uow_factory)

    def fetch_account_id(self, search: str, mode: SearchMode | int) -> LookupResult:
        """
        Look up the account id for a platform id or display name.

        Raises:
            InvalidSearchModeError: If mode is not a SearchMode value
        """
        return self._resolver.resolve(search, mode)

    def is_account_registered(self, account_id: int) -> bool:
        """True if the account exists, or if the store cannot tell."""
        return self._credentials.exists("account_id", account_id)

    def is_ip_registered(self, ip: str) -> bool:
        """True if some account last logged in from ip, or if the store cannot tell."""
        return self._credentials.exists("last_ip", ip)

    def get_hashed_password(self, account_id: int) -> str | None:
        """
        Get the raw stored hash of an account.

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        return self._credentials.get_hash(account_id)

    def verify_password(self, account_id: int, password: str) -> bool:
        """
        Check a submitted password against the stored credential.

        Args:
            account_id: Account to check
            password: Plain password as typed by the player

        Returns:
            True if the password matches, False if it does not or the
            account has no stored hash

        Raises:
            UnverifiableAccountError: If the stored hash has an unknown format
            StoreUnavailableError: If the store cannot be reached
        """
        hashed_password = self._credentials.get_hash(account_id)
        if not hashed_password:
            return False

        algorithm = self._registry.detect(hashed_password)
        if algorithm is HashAlgorithm.UNKNOWN:
            logger.error(
                f"Stored hash of account {account_id} matches no known algorithm"
            )
            raise UnverifiableAccountError(account_id)

        return self._registry.hasher(algorithm).verify(password, hashed_password)

    def change_password(self, account_id: int, password: str) -> bool:
        """
        Replace the password, hashing with the current write algorithm.

        Returns:
            True if the new hash was stored
        """
        new_hash = self._registry.hash(password)
        return self._credentials.set_hash(account_id, new_hash)

    def register(self, dto: RegisterAccountDTO, client_ip: str | None = None) -> bool:
        """
        Register a player, or refresh the registration of a known one.

        Identity priority (first match wins):
        1. primary_platform_id: search by it; unique_id defaults to it
        2. alternate_platform_id: search by it; unique_id defaults to it
        3. display_name: search by name; unique_id defaults to the offline id

        A new account is inserted when nothing matches. A matching account
        gets its hash, last IP and email overwritten, plus the platform id
        of the path that matched (this is how an offline record is claimed).
        Matching by display name never touches the platform ids.

        Args:
            dto: Registration data
            client_ip: Address of the current web request, used when dto.ip is absent

        Returns:
            True if the insert/update was written, False if the store was unavailable

        Raises:
            IdentityConflictException: If both platform ids are supplied
            InvalidIdentifierException: If the unique id is not 32 lowercase hex characters
        """
        identity = PlatformIdentity.from_ids(
            dto.primary_platform_id, dto.alternate_platform_id
        )

        if identity.kind is PlatformKind.PRIMARY:
            mode, search = SearchMode.BY_PRIMARY_ID, identity.value
            default_unique_id = identity.value
        elif identity.kind is PlatformKind.ALTERNATE:
            mode, search = SearchMode.BY_ALTERNATE_ID, identity.value
            default_unique_id = identity.value
        else:
            mode, search = SearchMode.BY_DISPLAY_NAME, dto.display_name
            default_unique_id = OfflineIdentityGenerator.derive(dto.display_name)

        unique_id = validate_unique_id(dto.unique_id or default_unique_id)

        account = Account(
            display_name=dto.display_name,
            password_hash=self._registry.hash(dto.password),
            unique_id=unique_id,
            platform_identity=identity,
            last_ip=dto.ip or client_ip,
            email=dto.email,
        )

        lookup = self._resolver.resolve(search, mode)
        if lookup.is_store_unavailable:
            logger.warning(f"Registration of '{dto.display_name}' aborted, store unavailable")
            return False

        try:
            with self._uow_factory() as uow:
                if lookup.is_not_found:
                    created = uow.accounts.add(account)
                    uow.commit()
                    logger.info(
                        f"Registered account {created.account_id} for '{created.display_name}' "
                        f"({identity.kind.value} identity)"
                    )
                    return True

                updated = uow.accounts.update_registration(
                    lookup.account_id,
                    password_hash=account.password_hash,
                    last_ip=account.last_ip,
                    email=account.email,
                    platform_identity=identity,
                )
                uow.commit()
        except StoreUnavailableError as exc:
            logger.warning(f"Registration of '{dto.display_name}' failed: {exc}")
            return False

        if updated:
            logger.info(
                f"Updated registration of account {lookup.account_id} via {mode.name}"
            )
        else:
            logger.warning(
                f"Registration of '{dto.display_name}' not stored: "
                f"account {lookup.account_id} no longer exists"
            )
        return updated
