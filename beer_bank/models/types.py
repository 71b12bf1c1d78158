"""
Column types shared by the models.

Money columns are NUMERIC(19, 4) on databases with a native
decimal type. SQLite has none, and SQLAlchemy would round-trip
its values through float, so there the amount is stored as its
decimal string instead.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.types import TypeDecorator


MONEY_PRECISION = 19
MONEY_SCALE = 4

# Smallest step a stored amount can take
MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_SCALE)

# Largest value NUMERIC(19, 4) holds: 15 integer digits, 4 decimals
MAX_MONEY = Decimal(10) ** (MONEY_PRECISION - MONEY_SCALE) - MONEY_QUANTUM


class Money(TypeDecorator):
    """Exact decimal amount, stored with four decimal places."""

    impl = Numeric
    cache_ok = True

    def __init__(self):
        super().__init__(precision=MONEY_PRECISION, scale=MONEY_SCALE)

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(MONEY_PRECISION + 2))
        return super().load_dialect_impl(dialect)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = Decimal(value).quantize(MONEY_QUANTUM)
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC timestamp.

    SQLite drops tzinfo on the way in; values read back are
    marked as UTC again.
    """

    impl = DateTime
    cache_ok = True

    def __init__(self):
        super().__init__(timezone=True)

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: datetime | None, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
