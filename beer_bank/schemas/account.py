"""
Pydantic schemas for account operations.

Amounts are not range-checked here. Zero, negative and
overdrawing amounts are rejected by the Account itself so that
API clients and direct callers see the same errors.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from beer_bank.models.enums import OperationType


# --- Request Schemas ---

class AccountCreate(BaseModel):
    """Request to create an account under a client-chosen key."""
    key: str = Field(min_length=1, max_length=255)


class OperationRequest(BaseModel):
    """A deposit or withdrawal to apply to one account."""
    amount: Decimal
    operation_type: OperationType


class TransferRequest(BaseModel):
    source_key: str = Field(min_length=1, max_length=255)
    destination_key: str = Field(min_length=1, max_length=255)
    amount: Decimal


# --- Response Schemas ---

class OperationResponse(BaseModel):
    operation_type: OperationType
    amount: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}


class AccountResponse(BaseModel):
    """Account with its full operation history, oldest first."""
    key: str
    balance: Decimal
    operations: list[OperationResponse]

    model_config = {"from_attributes": True}


class BalanceResponse(BaseModel):
    key: str
    balance: Decimal

    model_config = {"from_attributes": True}


class TransferResponse(BaseModel):
    """Balances of both accounts after a transfer."""
    source: BalanceResponse
    destination: BalanceResponse
