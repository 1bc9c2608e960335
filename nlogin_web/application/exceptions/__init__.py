"""Application layer exceptions."""

from nlogin_web.application.exceptions.exceptions import (
    ApplicationError,
    InvalidSearchModeError,
    StoreUnavailableError,
    UnverifiableAccountError,
)

__all__ = [
    "ApplicationError",
    "StoreUnavailableError",
    "UnverifiableAccountError",
    "InvalidSearchModeError",
]
