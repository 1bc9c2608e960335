"""Integration test fixtures.

Provides fixtures for integration testing with a real database and the real
hashers. Uses a SQLite in-memory database for fast, isolated tests; the
production target is MySQL, but the account table only uses portable SQL.
"""

from collections.abc import Generator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from nlogin_web.application.services.account_service import AccountService
from nlogin_web.application.services.algorithm_registry import AlgorithmRegistry
from nlogin_web.infrastructure.config.settings import Settings
from nlogin_web.infrastructure.persistence.database import (
    Base,
    create_session_factory,
)
from nlogin_web.infrastructure.persistence.models.account_model import AccountModel  # noqa: F401
from nlogin_web.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from nlogin_web.infrastructure.security.algorithms import create_algorithm_registry
from nlogin_web.presentation.dependencies import build_account_service

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: in-memory database, cheapest bcrypt cost."""
    return Settings(
        _env_file=None,
        db_url=TEST_DATABASE_URL,
        bcrypt_rounds=4,
    )


@pytest.fixture
def test_engine() -> Generator[Engine]:
    """Create a test database engine using SQLite in-memory."""
    # One shared connection, otherwise every session sees an empty database
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine: Engine) -> sessionmaker[Session]:
    """Create a test session factory."""
    return create_session_factory(test_engine)


@pytest.fixture
def uow_factory(test_session_factory):
    """Factory returning a fresh UnitOfWork per call, like production."""

    def factory() -> UnitOfWork:
        return UnitOfWork(test_session_factory)

    return factory


@pytest.fixture
def algorithm_registry(test_settings) -> AlgorithmRegistry:
    """Registry of the real bcrypt and SHA hashers."""
    return create_algorithm_registry(test_settings)


@pytest.fixture
def service(test_settings, test_session_factory, algorithm_registry) -> AccountService:
    """AccountService wired exactly as the composition root does it."""
    return build_account_service(test_settings, test_session_factory, algorithm_registry)


@pytest.fixture
def unavailable_session_factory(tmp_path) -> Generator[sessionmaker[Session]]:
    """
    Session factory whose database cannot be opened.

    The SQLite file lives in a directory that does not exist, so every
    connection attempt fails with an OperationalError.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'nlogin.db'}")

    yield create_session_factory(engine)

    engine.dispose()
