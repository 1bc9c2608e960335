"""Repository interfaces - define contracts for data access."""

from nlogin_web.domain.repositories.account_repository import (
    SEARCHABLE_FIELDS,
    IAccountRepository,
)
from nlogin_web.domain.repositories.unit_of_work import IUnitOfWork

__all__ = ["IAccountRepository", "IUnitOfWork", "SEARCHABLE_FIELDS"]
