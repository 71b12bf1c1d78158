"""
Ledger service: the core of the bank.

This service enforces the account rules:
1. Account keys are unique
2. Amounts must be positive
3. Accounts can never be overdrawn
4. A transfer either moves the full amount or nothing

No other code mutates accounts directly. All balance
changes go through this service.
"""

import logging
from decimal import Decimal
from typing import Protocol

from beer_bank.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidAmountError,
    InsufficientFundsError,
    LedgerError,
)
from beer_bank.models.account import Account, to_amount, validate_amount
from beer_bank.models.enums import OperationType
from beer_bank.repositories.account_repository import AccountRepository


logger = logging.getLogger(__name__)


class OperationInput(Protocol):
    """What perform_operation needs to know about a requested operation."""

    operation_type: OperationType
    amount: Decimal


class LedgerService:
    """
    All account operations pass through this service.

    The service takes its repository as a constructor argument.
    Whoever builds the repository controls persistence: with
    the SQLAlchemy repository the caller still decides when to
    commit or roll back.
    """

    def __init__(self, repository: AccountRepository):
        self.repository = repository

    def _get_account(self, key: str) -> Account:
        account = self.repository.find_by_key(key)
        if account is None:
            logger.warning("Account %s not found", key)
            raise AccountNotFoundError(key)
        return account

    def create_account(self, key: str) -> Account:
        """
        Create and save a new empty account.

        Raises DuplicateAccountError if the key is already in use.
        The existing account is left untouched.
        """
        if self.repository.find_by_key(key) is not None:
            logger.warning("Rejected duplicate account key %s", key)
            raise DuplicateAccountError(key)

        account = self.repository.save(Account.create(key))
        logger.info("Created account %s", key)
        return account

    def get_account(self, key: str) -> Account:
        """Get an account by key."""
        return self._get_account(key)

    def balance_of(self, key: str) -> Decimal:
        """Current balance of the account stored under key."""
        return self._get_account(key).balance

    def perform_operation(self, key: str, operation: OperationInput) -> Account:
        """
        Apply a deposit or withdrawal to one account and save it.

        InvalidAmountError and InsufficientFundsError from the
        account propagate unchanged; nothing is saved in that case.
        """
        account = self._get_account(key)
        try:
            recorded = account.apply(operation.operation_type, operation.amount)
        except LedgerError as e:
            logger.warning("Rejected %s on %s: %s",
                           operation.operation_type, key, e)
            raise

        account = self.repository.save(account)
        logger.info("Applied %s of %s to %s",
                    recorded.operation_type.value, recorded.amount, key)
        return account

    def transfer(
        self, source_key: str, destination_key: str, amount
    ) -> tuple[Account, Account]:
        """
        Move amount from the source account to the destination.

        Checks run in a fixed order: source exists, destination
        exists, amount is valid, source has enough funds,
        destination can hold the amount. All checks happen before
        either account is touched, so a rejected transfer changes
        neither balance.

        Returns (source, destination) as saved.
        """
        source = self._get_account(source_key)
        destination = self._get_account(destination_key)

        try:
            amount = to_amount(amount)
            validate_amount(amount)
        except InvalidAmountError:
            logger.warning("Rejected transfer %s -> %s: amount %s",
                           source_key, destination_key, amount)
            raise

        if not source.has_funds(amount):
            logger.warning("Rejected transfer %s -> %s: insufficient funds",
                           source_key, destination_key)
            raise InsufficientFundsError(source_key, source.balance, amount)

        if source is not destination and not destination.can_accept(amount):
            logger.warning("Rejected transfer %s -> %s: destination full",
                           source_key, destination_key)
            raise InvalidAmountError(
                amount, f"would take the balance of '{destination_key}' too high"
            )

        source.apply_withdrawal(amount)
        destination.apply_deposit(amount)

        source = self.repository.save(source)
        destination = self.repository.save(destination)
        logger.info("Transferred %s from %s to %s",
                    amount, source_key, destination_key)
        return source, destination
