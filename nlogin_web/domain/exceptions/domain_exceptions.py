"""Domain layer exceptions for account invariant violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent broken account invariants and are raised
    before any store access takes place.

    Examples:
        - Both platform identities supplied for one account
        - Malformed unique id
        - Empty display name or password hash
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class IdentityConflictException(DomainException):
    """Raised when a primary and an alternate platform id are supplied together."""

    def __init__(
        self,
        message: str = "Primary and alternate platform ids cannot both be set",
    ):
        super().__init__(message, error_code="IDENTITY_CONFLICT")


class InvalidIdentifierException(DomainException):
    """Raised when a unique id is not 32 lowercase hexadecimal characters."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_IDENTIFIER")
