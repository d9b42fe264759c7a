from __future__ import annotations

import operator
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Callable, Union

from ..core.errors import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidWithdrawalAmountError,
)

Amount = Union[Decimal, int, str, float]


def to_amount(value: Amount) -> Decimal:
    """Read ``value`` as a finite ``Decimal``.

    Floats go through ``str`` so that ``0.1`` stays ``Decimal("0.1")``.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    return amount


def _exact(
    operation: Callable[[Decimal, Decimal], Decimal], left: Decimal, right: Decimal
) -> Decimal:
    """Apply ``operation`` without rounding; raises ``decimal.Inexact`` otherwise."""
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        return operation(left, right)


class Account:
    """A named holder of a non-negative balance.

    Only ``deposit`` and ``withdraw`` change the balance, and both leave it
    untouched when they reject an amount.
    """

    __slots__ = ("_id", "_holder_name", "_balance")

    def __init__(self, account_id: str, holder_name: str, balance: Decimal) -> None:
        self._id = account_id
        self._holder_name = holder_name
        self._balance = balance

    @classmethod
    def create(
        cls, account_id: str, holder_name: str, opening_balance: Amount
    ) -> Account:
        amount = to_amount(opening_balance)
        if amount < 0:
            raise InvalidAmountError("Initial balance cannot be negative")
        return cls(account_id, holder_name, amount)

    @property
    def id(self) -> str:
        return self._id

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Amount) -> Decimal:
        value = to_amount(amount)
        if value <= 0:
            raise InvalidAmountError("Invalid deposit amount")
        try:
            self._balance = _exact(operator.add, self._balance, value)
        except Inexact as exc:
            raise InvalidAmountError("Invalid deposit amount") from exc
        return self._balance

    def withdraw(self, amount: Amount) -> Decimal:
        try:
            value = to_amount(amount)
        except InvalidAmountError as exc:
            raise InvalidWithdrawalAmountError() from exc
        if value <= 0:
            raise InvalidWithdrawalAmountError()
        if value > self._balance:
            raise InsufficientFundsError()
        try:
            self._balance = _exact(operator.sub, self._balance, value)
        except Inexact as exc:
            raise InvalidWithdrawalAmountError() from exc
        return self._balance

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id!r}, holder_name={self._holder_name!r}, "
            f"balance={self._balance!r})"
        )
