"""
Account repositories.

The ledger service only needs two capabilities from storage:
look an account up by key, and save it. AccountRepository
names that contract; the implementations below back it with a
dict or with a SQLAlchemy session.
"""

from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.orm import Session

from beer_bank.models.account import Account


class AccountRepository(ABC):
    """Storage contract consumed by LedgerService."""

    @abstractmethod
    def find_by_key(self, key: str) -> Account | None:
        """Return the account stored under key, or None."""

    @abstractmethod
    def save(self, account: Account) -> Account:
        """
        Persist the account's current state.

        Returns the canonical stored record, which callers
        should use from then on.
        """


class InMemoryAccountRepository(AccountRepository):
    """Keeps accounts in a dict. Nothing survives the process."""

    def __init__(self):
        self._accounts: dict[str, Account] = {}

    def find_by_key(self, key: str) -> Account | None:
        return self._accounts.get(key)

    def save(self, account: Account) -> Account:
        self._accounts[account.key] = account
        return account

    def __len__(self) -> int:
        return len(self._accounts)


class SqlAlchemyAccountRepository(AccountRepository):
    """
    Accounts stored through a SQLAlchemy session.

    save() only flushes. The caller owns the session and
    decides when to commit or roll back.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_key(self, key: str) -> Account | None:
        return self.db.execute(
            select(Account).where(Account.key == key)
        ).scalar_one_or_none()

    def save(self, account: Account) -> Account:
        self.db.add(account)
        self.db.flush()
        return account
