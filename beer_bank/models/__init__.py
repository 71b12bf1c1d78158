"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from beer_bank.models.base import Base
from beer_bank.models.enums import OperationType
from beer_bank.models.operation import Operation
from beer_bank.models.account import Account

__all__ = [
    "Base",
    "OperationType",
    "Operation",
    "Account",
]
