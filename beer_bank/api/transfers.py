"""
Transfer API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from beer_bank.api.accounts import ledger_service
from beer_bank.exceptions import AccountNotFoundError
from beer_bank.models.base import get_db
from beer_bank.schemas.account import (
    BalanceResponse,
    TransferRequest,
    TransferResponse,
)

router = APIRouter(prefix="/transfers", tags=["Transfers"])


@router.post("", response_model=TransferResponse, status_code=201)
def transfer(
    request: TransferRequest,
    db: Session = Depends(get_db),
):
    """
    Transfer money between two accounts.

    A missing account gives 404; an invalid amount or
    insufficient funds gives 400. Either way neither
    account is changed.
    """
    service = ledger_service(db)
    try:
        source, destination = service.transfer(
            request.source_key, request.destination_key, request.amount
        )
        db.commit()
    except AccountNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    return TransferResponse(
        source=BalanceResponse.model_validate(source),
        destination=BalanceResponse.model_validate(destination),
    )
