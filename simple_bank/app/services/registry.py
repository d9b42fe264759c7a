from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Optional

from ..core.errors import (
    AccountNotFoundError,
    BankError,
    DuplicateIdError,
    InvalidAmountError,
)
from .account import Account, Amount, to_amount


logger = logging.getLogger(__name__)


class Registry:
    """In-memory store of accounts keyed by id, and the source of new ids."""

    def __init__(self, id_prefix: str = "ACC", start: int = 1000) -> None:
        self.id_prefix = id_prefix
        self._accounts: Dict[str, Account] = {}
        self._next_sequence = start

    @property
    def next_sequence(self) -> int:
        return self._next_sequence

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    # ------------------------------------------------------------------
    # Identity and lookup
    # ------------------------------------------------------------------
    def generate_id(self) -> str:
        self._next_sequence += 1
        return f"{self.id_prefix}{self._next_sequence}"

    def register(self, account: Account) -> Account:
        if account.id in self._accounts:
            raise DuplicateIdError(f"Account {account.id} already exists")
        self._accounts[account.id] = account
        return account

    def find(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    def get(self, account_id: str) -> Account:
        account = self.find(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    def get_balance(self, account_id: str) -> Decimal:
        return self.get(account_id).balance

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def open_account(self, holder_name: str, opening_balance: Amount) -> Account:
        # Reject before generate_id so a bad opening balance burns no id.
        if to_amount(opening_balance) < 0:
            logger.info(
                "account.create.rejected",
                extra={"holder_name": holder_name, "opening_balance": str(opening_balance)},
            )
            raise InvalidAmountError("Initial balance cannot be negative")

        account = self.register(
            Account.create(self.generate_id(), holder_name, opening_balance)
        )
        logger.info(
            "account.created",
            extra={
                "account_id": account.id,
                "holder_name": account.holder_name,
                "balance": str(account.balance),
            },
        )
        return account

    def deposit(self, account_id: str, amount: Amount) -> Account:
        account = self.get(account_id)
        try:
            account.deposit(amount)
        except BankError:
            logger.info(
                "account.deposit.rejected",
                extra={"account_id": account_id, "amount": str(amount)},
            )
            raise
        logger.info(
            "account.deposit",
            extra={
                "account_id": account_id,
                "amount": str(amount),
                "balance": str(account.balance),
            },
        )
        return account

    def withdraw(self, account_id: str, amount: Amount) -> Account:
        account = self.get(account_id)
        try:
            account.withdraw(amount)
        except BankError:
            logger.info(
                "account.withdraw.rejected",
                extra={
                    "account_id": account_id,
                    "amount": str(amount),
                    "balance": str(account.balance),
                },
            )
            raise
        logger.info(
            "account.withdraw",
            extra={
                "account_id": account_id,
                "amount": str(amount),
                "balance": str(account.balance),
            },
        )
        return account
