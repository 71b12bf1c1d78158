"""
Account API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting, commit/rollback) and delegates all
business rules to the LedgerService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from beer_bank.exceptions import AccountNotFoundError
from beer_bank.models.base import get_db
from beer_bank.repositories.account_repository import SqlAlchemyAccountRepository
from beer_bank.services.ledger_service import LedgerService
from beer_bank.schemas.account import (
    AccountCreate,
    AccountResponse,
    BalanceResponse,
    OperationRequest,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


def ledger_service(db: Session) -> LedgerService:
    return LedgerService(SqlAlchemyAccountRepository(db))


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """Create an empty account under the given key."""
    service = ledger_service(db)
    try:
        account = service.create_account(request.key)
        db.commit()
        return account
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{key}", response_model=AccountResponse)
def get_account(
    key: str,
    db: Session = Depends(get_db),
):
    """Get an account and its operation history."""
    service = ledger_service(db)
    try:
        return service.get_account(key)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{key}/balance", response_model=BalanceResponse)
def get_balance(
    key: str,
    db: Session = Depends(get_db),
):
    """Get the current balance of an account."""
    service = ledger_service(db)
    try:
        balance = service.balance_of(key)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return BalanceResponse(key=key, balance=balance)


@router.post(
    "/{key}/operations",
    response_model=AccountResponse,
    status_code=201,
)
def perform_operation(
    key: str,
    request: OperationRequest,
    db: Session = Depends(get_db),
):
    """
    Deposit into or withdraw from an account.

    Zero or negative amounts and overdrafts are rejected
    with 400 and leave the account unchanged.
    """
    service = ledger_service(db)
    try:
        account = service.perform_operation(key, request)
        db.commit()
        return account
    except AccountNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
