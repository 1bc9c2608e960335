"""Fake implementations for testing."""

from tests.fakes.account_repository_fake import FakeAccountRepository
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

__all__ = ["FakeAccountRepository", "FakePasswordHasher", "FakeUnitOfWork"]
