"""Business logic services."""

from beer_bank.services.ledger_service import LedgerService

__all__ = ["LedgerService"]
