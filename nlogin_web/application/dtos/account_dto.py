"""Account DTOs for application layer using Pydantic."""

from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def strip_whitespace(v: str | None) -> str | None:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


def blank_to_none(v: str | None) -> str | None:
    """Strip whitespace and treat an empty string as not supplied."""
    v = strip_whitespace(v)
    return v or None


def text_or_empty(v: str | None) -> str:
    """Strip whitespace and store a missing value as an empty string."""
    return strip_whitespace(v) or ""


OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]


class RegisterAccountDTO(BaseModel):
    """
    DTO for registering (or re-registering) a player account.

    Validation:
    - display_name: whitespace trimmed, cannot be empty
    - password: cannot be empty
    - email: may be empty, stored as "" when absent
    - ip, unique_id, primary_platform_id, alternate_platform_id: trimmed,
      blank values count as not supplied

    Identity rules (both platform ids set, malformed unique id) are domain
    invariants checked by the service, not here.
    """

    display_name: Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1)]
    password: Annotated[str, Field(min_length=1)]
    email: Annotated[str, BeforeValidator(text_or_empty)] = ""
    ip: OptionalText = None
    unique_id: OptionalText = None
    primary_platform_id: OptionalText = None
    alternate_platform_id: OptionalText = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "display_name": "Steve",
                "password": "securepassword123",
                "email": "steve@example.com",
                "primary_platform_id": "069a79f444e94726a5befca90e38aaf5",
            }
        }
    )
