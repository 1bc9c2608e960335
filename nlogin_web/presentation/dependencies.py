"""FastAPI dependency injection setup for websites hosting this library.

This module is the COMPOSITION ROOT - where we wire up dependencies.

This is where we decide:
- Use the full algorithm registry (bcrypt, SHA-256, SHA-512, AuthMe)
- Use UnitOfWork with SQLAlchemy against the nLogin MySQL table
- Use Settings from environment (not hardcoded config)

The application layer doesn't know or care about these choices - it only
knows about interfaces. Websites that are not built on FastAPI can call
build_account_service() directly.
"""

from fastapi import Depends, Request
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from nlogin_web.application.services.account_service import AccountService
from nlogin_web.application.services.algorithm_registry import AlgorithmRegistry
from nlogin_web.domain.repositories.unit_of_work import IUnitOfWork
from nlogin_web.infrastructure.config.settings import Settings, get_settings
from nlogin_web.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from nlogin_web.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from nlogin_web.infrastructure.security.algorithms import create_algorithm_registry


# Module-level singletons (created once, reused throughout app lifecycle)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None
_algorithm_registry: AlgorithmRegistry | None = None


def build_account_service(
    settings: Settings,
    session_factory: sessionmaker[Session],
    algorithm_registry: AlgorithmRegistry | None = None,
) -> AccountService:
    """
    Create an AccountService without FastAPI.

    Args:
        settings: Application settings
        session_factory: SQLAlchemy session factory for the nLogin database
        algorithm_registry: Registry to use; built from settings when omitted

    Returns:
        AccountService whose operations each open their own UnitOfWork
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return AccountService(
        uow_factory=uow_factory,
        algorithm_registry=algorithm_registry or create_algorithm_registry(settings),
        strict_name_uniqueness=settings.strict_name_uniqueness,
    )


def get_database_engine(settings: Settings = Depends(get_settings)) -> Engine:
    """Get or create database engine singleton.

    Args:
        settings: Application settings (injected)

    Returns:
        Engine instance
    """
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: Engine = Depends(get_database_engine),
) -> sessionmaker[Session]:
    """Get or create session factory singleton.

    Args:
        engine: Database engine (injected)

    Returns:
        Session factory
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


def get_algorithm_registry(
    settings: Settings = Depends(get_settings),
) -> AlgorithmRegistry:
    """
    Dependency that provides the algorithm registry.

    This is a SINGLETON - hashers are stateless and thread-safe.

    Note:
        In tests, this dependency can be overridden with a registry of fakes:

        app.dependency_overrides[get_algorithm_registry] = lambda: fake_registry
    """
    global _algorithm_registry
    if _algorithm_registry is None:
        _algorithm_registry = create_algorithm_registry(settings)
    return _algorithm_registry


def get_account_service(
    settings: Settings = Depends(get_settings),
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    algorithm_registry: AlgorithmRegistry = Depends(get_algorithm_registry),
) -> AccountService:
    """
    Dependency that provides AccountService.

    Usage:
        @app.post("/register")
        def register(
            dto: RegisterAccountDTO,
            service: AccountService = Depends(get_account_service),
            client_ip: str | None = Depends(get_client_ip),
        ):
            return {"registered": service.register(dto, client_ip=client_ip)}

    Dependency Graph:
        route
            → get_account_service()
                → get_algorithm_registry() → Settings
                → get_session_factory() → get_database_engine() → Settings
    """
    return build_account_service(settings, session_factory, algorithm_registry)


def get_client_ip(request: Request) -> str | None:
    """
    Address of the peer that sent the current request.

    This is the default last_ip for registrations that do not carry one.
    It is the immediate peer; hosts behind a reverse proxy should configure
    their ASGI server's forwarded-header handling.
    """
    if request.client is None:
        return None
    return request.client.host
