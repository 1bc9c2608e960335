"""Repository implementations using SQLAlchemy."""

from nlogin_web.infrastructure.repositories.account_repository_impl import AccountRepository
from nlogin_web.infrastructure.repositories.unit_of_work_impl import UnitOfWork

__all__ = ["AccountRepository", "UnitOfWork"]
