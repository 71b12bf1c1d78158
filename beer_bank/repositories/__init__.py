"""Storage backends for accounts."""

from beer_bank.repositories.account_repository import (
    AccountRepository,
    InMemoryAccountRepository,
    SqlAlchemyAccountRepository,
)

__all__ = [
    "AccountRepository",
    "InMemoryAccountRepository",
    "SqlAlchemyAccountRepository",
]
