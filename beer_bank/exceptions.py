"""
Domain errors raised by accounts and the ledger service.

Every error derives from ValueError, so callers that only
care about "the request was invalid" can catch that.
"""


class LedgerError(ValueError):
    """Base class for all ledger rule violations."""


class InvalidKeyError(LedgerError):
    """Raised when an account key is missing or blank."""


class DuplicateAccountError(LedgerError):
    """Raised when an account key is already taken."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Account with key '{key}' already exists")


class AccountNotFoundError(LedgerError):
    """Raised when no account is stored under a key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Account '{key}' not found")


class InvalidAmountError(LedgerError):
    """Raised when an amount is not positive or cannot be stored exactly."""

    def __init__(self, amount, reason: str = "must be positive"):
        self.amount = amount
        super().__init__(f"Amount {reason}, got {amount}")


class InvalidOperationTypeError(LedgerError):
    """Raised when an operation is neither a deposit nor a withdrawal."""

    def __init__(self, operation_type):
        self.operation_type = operation_type
        super().__init__(f"Unknown operation type: {operation_type!r}")


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal or transfer would overdraw an account."""

    def __init__(self, key: str, available, requested):
        self.key = key
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient balance on account '{key}': "
            f"available={available}, requested={requested}"
        )
