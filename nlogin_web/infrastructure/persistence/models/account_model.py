"""Account ORM model - infrastructure layer SQLAlchemy mapping."""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from nlogin_web.domain.entities.account import Account
from nlogin_web.domain.entities.platform_identity import PlatformIdentity
from nlogin_web.infrastructure.persistence.database import Base


class AccountModel(Base):
    """
    SQLAlchemy ORM model for the nLogin account table.

    Attribute names follow the domain; the physical column names are the
    ones the nLogin plugin creates, so the library can share its table.
    The domain layer never imports this class.
    """

    __tablename__ = "nlogin"

    # Primary key
    account_id: Mapped[int] = mapped_column(
        "ai", primary_key=True, autoincrement=True
    )

    # Player information
    display_name: Mapped[str] = mapped_column(
        "last_name", String(255), index=True, nullable=False
    )
    last_ip: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # Authentication
    password_hash: Mapped[str] = mapped_column("password", String(255), nullable=False)

    # Identity
    unique_id: Mapped[str] = mapped_column(String(32), nullable=False)
    primary_platform_id: Mapped[Optional[str]] = mapped_column(
        "mojang_id", String(255), index=True
    )
    alternate_platform_id: Mapped[Optional[str]] = mapped_column(
        "bedrock_id", String(255), index=True
    )

    def __repr__(self) -> str:
        """String representation of AccountModel."""
        return (
            f"AccountModel(account_id={self.account_id!r}, "
            f"display_name={self.display_name!r}, unique_id={self.unique_id!r})"
        )

    def to_entity(self) -> Account:
        """
        Convert ORM model to domain entity.

        Raises:
            IdentityConflictException: If the row has both platform ids set
        """
        return Account(
            account_id=self.account_id,
            display_name=self.display_name,
            password_hash=self.password_hash,
            unique_id=self.unique_id,
            platform_identity=PlatformIdentity.from_ids(
                self.primary_platform_id, self.alternate_platform_id
            ),
            last_ip=self.last_ip,
            email=self.email or "",
        )

    @staticmethod
    def from_entity(account: Account) -> "AccountModel":
        """
        Create ORM model from domain entity.

        Args:
            account: Domain entity

        Returns:
            ORM model ready for persistence
        """
        model = AccountModel(
            display_name=account.display_name,
            password_hash=account.password_hash,
            unique_id=account.unique_id,
            primary_platform_id=account.primary_platform_id,
            alternate_platform_id=account.alternate_platform_id,
            last_ip=account.last_ip,
            email=account.email,
        )

        if account.account_id is not None:
            model.account_id = account.account_id

        return model
