"""
Shared enumerations for database models.

Stored as database enums so an unknown operation type is
rejected by the database as well as by Python.
"""

import enum


class OperationType(str, enum.Enum):
    """Direction of a balance-affecting operation."""
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
