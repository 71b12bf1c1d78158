"""
Operation model.

One deposit or withdrawal recorded against an account. Operations
are append-only: once recorded they are never modified or deleted,
and each belongs to exactly one account.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from beer_bank.models.base import Base
from beer_bank.models.enums import OperationType
from beer_bank.models.types import Money, UTCDateTime


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Operation(Base):
    """
    An immutable deposit or withdrawal.

    The amount is always stored positive; the direction comes
    from operation_type. Amount validation happens on the
    Account before an Operation is ever created.
    """

    __tablename__ = "operations"

    id: Mapped[int] = mapped_column(primary_key=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    operation_type: Mapped[OperationType] = mapped_column(
        SAEnum(
            OperationType,
            name="operation_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Money(), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow
    )

    account: Mapped["Account"] = relationship(back_populates="operations")

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it affects the balance: negative for withdrawals."""
        if self.operation_type == OperationType.WITHDRAWAL:
            return -self.amount
        return self.amount

    def __repr__(self) -> str:
        return f"<Operation {self.operation_type.value} {self.amount}>"
