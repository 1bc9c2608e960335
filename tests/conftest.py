"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakePasswordHasher, FakeUnitOfWork)
- Tests run fast (no real crypto, no database)
- Tests are isolated (each test gets fresh fakes)
"""

import pytest

from nlogin_web.application.services.account_service import AccountService
from nlogin_web.application.services.algorithm_registry import AlgorithmRegistry
from nlogin_web.domain.entities.account import Account
from nlogin_web.domain.entities.platform_identity import PlatformIdentity
from nlogin_web.domain.services.password_hasher import HashAlgorithm
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

PRIMARY_ID = "069a79f444e94726a5befca90e38aaf5"
ALTERNATE_ID = "00000000000000000009012345678901"


@pytest.fixture
def fake_hashers() -> dict[HashAlgorithm, FakePasswordHasher]:
    """
    One FakePasswordHasher per algorithm, each writing its real token.

    Hashes look like "$2A$HASHED$password123", so format detection routes
    them exactly like real hashes.
    """
    return {
        HashAlgorithm.BCRYPT: FakePasswordHasher("2A"),
        HashAlgorithm.SHA256: FakePasswordHasher("SHA256"),
        HashAlgorithm.SHA512: FakePasswordHasher("SHA512"),
        HashAlgorithm.AUTHME: FakePasswordHasher("SHA"),
    }


@pytest.fixture
def fake_registry(fake_hashers) -> AlgorithmRegistry:
    """Registry of fakes writing bcrypt-tokened hashes."""
    return AlgorithmRegistry(fake_hashers, current=HashAlgorithm.BCRYPT)


@pytest.fixture
def offline_account() -> Account:
    """An unclaimed account, registered by name only."""
    return Account(
        account_id=1,
        display_name="Steve",
        password_hash="$2A$HASHED$password123",  # FakePasswordHasher format
        unique_id="5627dd98e6be3c21b8a8e92344183641",
        last_ip="10.0.0.1",
        email="steve@example.com",
    )


@pytest.fixture
def claimed_account() -> Account:
    """An account bound to a primary platform id."""
    return Account(
        account_id=2,
        display_name="Alex",
        password_hash="$SHA256$HASHED$password456",
        unique_id=PRIMARY_ID,
        platform_identity=PlatformIdentity.primary(PRIMARY_ID),
        last_ip="10.0.0.2",
    )


@pytest.fixture
def fake_uow():
    """
    Provide a fresh FakeUnitOfWork for each test.

    This ensures tests are isolated and don't affect each other.
    """
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_accounts(offline_account, claimed_account):
    """
    Provide a FakeUnitOfWork pre-populated with accounts.

    Useful for testing operations on existing data.
    """
    return FakeUnitOfWork(initial_accounts=[offline_account, claimed_account])


@pytest.fixture
def account_service(fake_uow, fake_registry):
    """
    Provide an AccountService instance with fake dependencies.

    This allows testing the service layer in isolation:
    - No database (FakeUnitOfWork)
    - No real crypto (FakePasswordHasher)
    """

    def uow_factory():
        return fake_uow

    return AccountService(uow_factory=uow_factory, algorithm_registry=fake_registry)


@pytest.fixture
def account_service_with_data(fake_uow_with_accounts, fake_registry):
    """
    Provide an AccountService with pre-populated data.

    Useful for testing operations on existing accounts.
    """

    def uow_factory():
        return fake_uow_with_accounts

    return AccountService(
        uow_factory=uow_factory, algorithm_registry=fake_registry
    )
