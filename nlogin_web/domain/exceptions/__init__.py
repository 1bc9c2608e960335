"""Domain exceptions - account invariant violations."""

from nlogin_web.domain.exceptions.domain_exceptions import (
    DomainException,
    IdentityConflictException,
    InvalidEntityStateException,
    InvalidIdentifierException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "IdentityConflictException",
    "InvalidIdentifierException",
]
