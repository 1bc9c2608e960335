"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class StoreUnavailableError(ApplicationError):
    """Raised when the account store cannot be reached. Retry later."""

    def __init__(self, message: str = "Account store is unavailable"):
        super().__init__(message, error_code="STORE_UNAVAILABLE")


class UnverifiableAccountError(ApplicationError):
    """
    Raised when a stored hash matches no known algorithm format.

    This means corrupted data or an unsupported legacy format. It must never
    be reported to the player as a wrong password.
    """

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(
            f"Hashing algorithm cannot be determined for account {account_id}",
            error_code="UNVERIFIABLE_ACCOUNT",
        )


class InvalidSearchModeError(ApplicationError):
    """Raised when a lookup is requested with an unknown search mode."""

    def __init__(self, mode: object):
        self.mode = mode
        super().__init__(
            f"Invalid search mode ({mode!r}), valid values: "
            "BY_PRIMARY_ID (1), BY_ALTERNATE_ID (2), BY_DISPLAY_NAME (3)",
            error_code="INVALID_SEARCH_MODE",
        )
