"""
Account model.

An account is identified by an opaque key (usually a hash handed
out to the customer) and keeps a running balance together with
the ordered history of operations that produced it.

The balance only ever changes through apply_deposit and
apply_withdrawal, which validate the amount before recording
anything. A rejected operation leaves the account untouched.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from beer_bank.exceptions import (
    InvalidKeyError,
    InvalidAmountError,
    InvalidOperationTypeError,
    InsufficientFundsError,
)
from beer_bank.models.base import Base
from beer_bank.models.enums import OperationType
from beer_bank.models.operation import Operation, utcnow
from beer_bank.models.types import Money, UTCDateTime, MAX_MONEY, MONEY_QUANTUM, MONEY_SCALE


ZERO = Decimal("0")


def to_amount(value) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal.

    Floats go through str() so 50.40 becomes Decimal("50.4")
    rather than its binary approximation.
    """
    if isinstance(value, Decimal):
        amount = value
    elif value is None or isinstance(value, bool):
        raise InvalidAmountError(value)
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise InvalidAmountError(value) from None
    if not amount.is_finite():
        raise InvalidAmountError(value)
    return amount


def validate_amount(amount: Decimal) -> None:
    """
    Reject amounts an account cannot record exactly.

    An amount must be positive, fit in the money column and
    carry no more than four significant decimal places.
    """
    if amount <= ZERO:
        raise InvalidAmountError(amount)
    if amount > MAX_MONEY:
        raise InvalidAmountError(amount, f"must not exceed {MAX_MONEY}")
    if amount != amount.quantize(MONEY_QUANTUM):
        raise InvalidAmountError(
            amount, f"must have at most {MONEY_SCALE} decimal places"
        )


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    key: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    balance: Mapped[Decimal] = mapped_column(
        Money(), nullable=False, default=ZERO
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow
    )

    # Ordered by id so reloaded history matches insertion order
    operations: Mapped[list["Operation"]] = relationship(
        back_populates="account",
        order_by="Operation.id",
        cascade="all, delete-orphan",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("balance", ZERO)
        super().__init__(**kwargs)

    @classmethod
    def create(cls, key: str) -> "Account":
        """Build a new, empty account. Raises InvalidKeyError on a blank key."""
        if key is None or not str(key).strip():
            raise InvalidKeyError("Account key must not be empty")
        return cls(key=key, balance=ZERO)

    def apply_deposit(self, amount) -> Operation:
        amount = to_amount(amount)
        validate_amount(amount)
        if not self.can_accept(amount):
            raise InvalidAmountError(
                amount, f"would take the balance past {MAX_MONEY}"
            )
        return self._record(OperationType.DEPOSIT, amount)

    def apply_withdrawal(self, amount) -> Operation:
        """
        Withdraw from the account.

        The amount must be positive and no larger than the
        current balance; the balance never goes negative.
        """
        amount = to_amount(amount)
        validate_amount(amount)
        if not self.has_funds(amount):
            raise InsufficientFundsError(self.key, self.balance, amount)
        return self._record(OperationType.WITHDRAWAL, amount)

    def apply(self, operation_type, amount) -> Operation:
        """Dispatch to apply_deposit or apply_withdrawal."""
        try:
            operation_type = OperationType(operation_type)
        except ValueError:
            raise InvalidOperationTypeError(operation_type) from None
        if operation_type == OperationType.DEPOSIT:
            return self.apply_deposit(amount)
        return self.apply_withdrawal(amount)

    def has_funds(self, amount: Decimal) -> bool:
        return amount <= self.balance

    def can_accept(self, amount: Decimal) -> bool:
        return self.balance + amount <= MAX_MONEY

    def _record(self, operation_type: OperationType, amount: Decimal) -> Operation:
        operation = Operation(
            operation_type=operation_type,
            amount=amount,
            created_at=utcnow(),
        )
        self.operations.append(operation)
        self.balance = self.balance + operation.signed_amount
        return operation

    def __repr__(self) -> str:
        return f"<Account {self.key} balance={self.balance}>"
