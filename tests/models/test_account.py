"""
Tests for the Account entity on its own, without storage.
"""

from decimal import Decimal

import pytest

from beer_bank.exceptions import (
    InvalidKeyError,
    InvalidAmountError,
    InvalidOperationTypeError,
    LedgerError,
    InsufficientFundsError,
)
from beer_bank.models.account import Account, to_amount
from beer_bank.models.enums import OperationType
from beer_bank.models.types import MAX_MONEY


def signed_total(account):
    return sum((op.signed_amount for op in account.operations), Decimal("0"))


class TestCreate:

    def test_new_account_is_empty(self):
        account = Account.create("hash")

        assert account.key == "hash"
        assert account.balance == Decimal("0")
        assert account.operations == []

    @pytest.mark.parametrize("key", [None, "", "   "])
    def test_blank_key_rejected(self, key):
        with pytest.raises(InvalidKeyError):
            Account.create(key)

    def test_constructor_defaults_balance_to_zero(self):
        assert Account(key="hash").balance == Decimal("0")


class TestDeposit:

    def test_deposit_increases_balance(self):
        account = Account.create("hash")
        operation = account.apply_deposit(Decimal("1050.90"))

        assert account.balance == Decimal("1050.90")
        assert len(account.operations) == 1
        assert operation.operation_type == OperationType.DEPOSIT
        assert operation.amount == Decimal("1050.90")

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-10.00")])
    def test_non_positive_deposit_rejected(self, amount):
        account = Account.create("hash")

        with pytest.raises(InvalidAmountError):
            account.apply_deposit(amount)

        assert account.balance == Decimal("0")
        assert account.operations == []


class TestWithdrawal:

    def test_withdrawal_decreases_balance(self):
        account = Account.create("hash")
        account.apply_deposit(Decimal("1050.90"))
        operation = account.apply_withdrawal(Decimal("50.40"))

        assert account.balance == Decimal("1000.50")
        assert len(account.operations) == 2
        assert operation.operation_type == OperationType.WITHDRAWAL
        assert operation.signed_amount == Decimal("-50.40")

    def test_withdraw_entire_balance(self):
        account = Account.create("hash")
        account.apply_deposit(Decimal("25.00"))
        account.apply_withdrawal(Decimal("25.00"))

        assert account.balance == Decimal("0")

    def test_overdraft_rejected_without_mutation(self):
        account = Account.create("hash")
        account.apply_deposit(Decimal("10.00"))

        with pytest.raises(InsufficientFundsError) as exc_info:
            account.apply_withdrawal(Decimal("10.01"))

        assert exc_info.value.available == Decimal("10.00")
        assert exc_info.value.requested == Decimal("10.01")
        assert account.balance == Decimal("10.00")
        assert len(account.operations) == 1

    def test_non_positive_withdrawal_rejected(self):
        account = Account.create("hash")
        account.apply_deposit(Decimal("10.00"))

        with pytest.raises(InvalidAmountError):
            account.apply_withdrawal(Decimal("0"))

        assert account.balance == Decimal("10.00")
        assert len(account.operations) == 1

    def test_zero_amount_checked_before_funds(self):
        """An empty account still reports the amount as the problem."""
        account = Account.create("hash")

        with pytest.raises(InvalidAmountError):
            account.apply_withdrawal(Decimal("-5"))


class TestApply:

    def test_dispatches_on_operation_type(self):
        account = Account.create("hash")
        account.apply(OperationType.DEPOSIT, Decimal("100"))
        account.apply(OperationType.WITHDRAWAL, Decimal("10"))

        assert account.balance == Decimal("90")
        assert [op.operation_type for op in account.operations] == [
            OperationType.DEPOSIT,
            OperationType.WITHDRAWAL,
        ]


class TestBalanceInvariant:

    def test_balance_matches_history_after_many_operations(self):
        account = Account.create("hash")
        for _ in range(100):
            account.apply_deposit(Decimal("0.10"))
        for _ in range(30):
            account.apply_withdrawal(Decimal("0.20"))

        # 10.00 - 6.00, exactly
        assert account.balance == Decimal("4.00")
        assert account.balance == signed_total(account)

    def test_history_keeps_insertion_order(self):
        account = Account.create("hash")
        amounts = [Decimal("5"), Decimal("3"), Decimal("7")]
        for amount in amounts:
            account.apply_deposit(amount)

        assert [op.amount for op in account.operations] == amounts


class TestToAmount:

    def test_float_uses_its_decimal_literal(self):
        assert to_amount(50.40) == Decimal("50.4")

    def test_string_and_int_accepted(self):
        assert to_amount("40.40") == Decimal("40.40")
        assert to_amount(100) == Decimal("100")

    @pytest.mark.parametrize("value", [None, True, "abc", "NaN", "Infinity"])
    def test_garbage_rejected(self, value):
        with pytest.raises(InvalidAmountError):
            to_amount(value)


class TestAmountLimits:

    def test_sub_cent_fraction_rejected(self):
        """0.00001 would be stored as zero, so it is never recorded."""
        account = Account.create("hash")

        with pytest.raises(InvalidAmountError, match="decimal places"):
            account.apply_deposit(Decimal("0.00001"))

        assert account.balance == Decimal("0")
        assert account.operations == []

    def test_four_decimal_places_accepted(self):
        account = Account.create("hash")
        account.apply_deposit(Decimal("0.0001"))
        assert account.balance == Decimal("0.0001")

    def test_trailing_zeros_beyond_scale_accepted(self):
        account = Account.create("hash")
        account.apply_deposit(Decimal("1.500000"))
        assert account.balance == Decimal("1.5")

    def test_withdrawal_with_too_many_places_rejected(self):
        account = Account.create("hash")
        account.apply_deposit(Decimal("10"))

        with pytest.raises(InvalidAmountError):
            account.apply_withdrawal(Decimal("1.00005"))

        assert account.balance == Decimal("10")
        assert len(account.operations) == 1

    def test_largest_amount_accepted(self):
        account = Account.create("hash")
        account.apply_deposit(MAX_MONEY)
        assert account.balance == Decimal("999999999999999.9999")

    def test_amount_over_column_range_rejected(self):
        account = Account.create("hash")

        with pytest.raises(InvalidAmountError, match="must not exceed"):
            account.apply_deposit(Decimal("1000000000000000"))

        assert account.operations == []

    def test_deposit_that_overflows_balance_rejected(self):
        account = Account.create("hash")
        account.apply_deposit(MAX_MONEY)

        with pytest.raises(InvalidAmountError):
            account.apply_deposit(Decimal("0.0001"))

        assert account.balance == MAX_MONEY
        assert len(account.operations) == 1


class TestUnknownOperationType:

    def test_unknown_type_is_a_ledger_error(self):
        account = Account.create("hash")

        with pytest.raises(InvalidOperationTypeError) as exc_info:
            account.apply("INTEREST", Decimal("10"))

        assert isinstance(exc_info.value, LedgerError)
        assert account.operations == []

    def test_plain_string_type_accepted(self):
        account = Account.create("hash")
        operation = account.apply("DEPOSIT", Decimal("10"))
        assert operation.operation_type is OperationType.DEPOSIT
