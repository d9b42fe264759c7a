from decimal import Decimal

import pytest

from ..core.errors import (
    InsufficientFundsError,
    InsufficientFundsOrInvalidAmountError,
    InvalidAmountError,
    InvalidWithdrawalAmountError,
)
from ..services import Account, to_amount


@pytest.fixture
def account() -> Account:
    return Account.create("ACC1001", "Alice", Decimal("100.00"))


@pytest.mark.parametrize("opening", [Decimal("0"), Decimal("0.01"), Decimal("100.00"), 250])
def test_create_keeps_opening_balance(opening) -> None:
    account = Account.create("ACC1", "Alice", opening)
    assert account.balance == Decimal(opening)
    assert account.id == "ACC1"
    assert account.holder_name == "Alice"


def test_create_rejects_negative_opening_balance() -> None:
    with pytest.raises(InvalidAmountError, match="Initial balance cannot be negative"):
        Account.create("ACC1", "Alice", Decimal("-0.01"))


def test_identity_is_read_only(account: Account) -> None:
    with pytest.raises(AttributeError):
        account.id = "ACC2"
    with pytest.raises(AttributeError):
        account.holder_name = "Mallory"


def test_deposit_increases_balance_by_amount(account: Account) -> None:
    assert account.deposit(Decimal("50.00")) == Decimal("150.00")
    assert account.balance == Decimal("150.00")


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5"), "nan", "abc"])
def test_deposit_rejects_non_positive_or_unreadable_amount(account: Account, amount) -> None:
    with pytest.raises(InvalidAmountError):
        account.deposit(amount)
    assert account.balance == Decimal("100.00")


def test_withdraw_decreases_balance_by_amount(account: Account) -> None:
    account.withdraw(Decimal("40.25"))
    assert account.balance == Decimal("59.75")


def test_withdraw_whole_balance_leaves_zero(account: Account) -> None:
    account.withdraw(Decimal("100.00"))
    assert account.balance == Decimal("0")


def test_withdraw_more_than_balance_is_rejected(account: Account) -> None:
    with pytest.raises(InsufficientFundsError) as excinfo:
        account.withdraw(Decimal("100.01"))
    assert str(excinfo.value) == "Insufficient funds or invalid amount"
    assert account.balance == Decimal("100.00")


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1")])
def test_withdraw_non_positive_is_rejected_with_combined_error(account: Account, amount) -> None:
    with pytest.raises(InsufficientFundsOrInvalidAmountError) as excinfo:
        account.withdraw(amount)
    assert isinstance(excinfo.value, InvalidWithdrawalAmountError)
    assert isinstance(excinfo.value, InvalidAmountError)
    assert str(excinfo.value) == "Insufficient funds or invalid amount"
    assert account.balance == Decimal("100.00")


def test_to_amount_reads_floats_through_str() -> None:
    assert to_amount(0.1) == Decimal("0.1")
    assert to_amount(" 12.50 ") == Decimal("12.50")


@pytest.mark.parametrize("value", [True, "Infinity", "", "1,000"])
def test_to_amount_rejects_non_amounts(value) -> None:
    with pytest.raises(InvalidAmountError):
        to_amount(value)


def test_deposit_that_would_round_is_rejected() -> None:
    balance = Decimal("1" + "0" * 27)
    account = Account.create("ACC1", "Alice", balance)
    with pytest.raises(InvalidAmountError, match="Invalid deposit amount"):
        account.deposit(Decimal("0.01"))
    assert account.balance == balance


def test_withdraw_that_would_round_is_rejected() -> None:
    balance = Decimal("1" + "0" * 27)
    account = Account.create("ACC1", "Alice", balance)
    with pytest.raises(InvalidWithdrawalAmountError):
        account.withdraw(Decimal("0.01"))
    assert account.balance == balance


def test_large_balances_stay_exact_within_precision() -> None:
    account = Account.create("ACC1", "Alice", Decimal("1" + "0" * 24))
    account.deposit(Decimal("0.01"))
    assert account.balance == Decimal("1" + "0" * 24 + ".01")
