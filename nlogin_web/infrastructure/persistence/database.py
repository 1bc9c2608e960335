"""Database configuration and session management."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from nlogin_web.infrastructure.config.settings import Settings


# Base class for all ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def create_database_engine(settings: Settings) -> Engine:
    """Create SQLAlchemy engine from settings.

    pool_pre_ping detects connections the server dropped, so an idle
    website does not report a stale connection as an outage.

    Args:
        settings: Application settings containing database configuration

    Returns:
        Configured Engine instance
    """
    url = settings.database_url
    if url.startswith("sqlite"):
        return create_engine(url, echo=settings.db_echo)

    return create_engine(
        url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create session factory from engine.

    Args:
        engine: SQLAlchemy engine

    Returns:
        Session factory that creates Session instances
    """
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )
