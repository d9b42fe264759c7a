from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Dict, Optional

from pydantic import ValidationError

from ..core.config import Settings, get_settings
from ..core.errors import (
    BankError,
    InsufficientFundsOrInvalidAmountError,
    InvalidAmountError,
)
from ..models import AccountCreate, AccountResponse, MoneyMovementRequest
from ..services import Registry
from .exceptions import describe_error


logger = logging.getLogger(__name__)

MENU = {
    "1": "Create Account",
    "2": "Deposit Money",
    "3": "Withdraw Money",
    "4": "View Account Balance",
    "5": "Exit",
}


class BankMenu:
    """Interactive loop mapping numbered choices onto registry calls."""

    def __init__(
        self,
        registry: Registry,
        settings: Optional[Settings] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.registry = registry
        self.settings = settings or get_settings()
        self.read = read
        self.write = write
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.create_account,
            "2": self.deposit_money,
            "3": self.withdraw_money,
            "4": self.view_balance,
        }

    def format_money(self, amount: Decimal) -> str:
        return f"{self.settings.currency_symbol}{amount:.2f}"

    def show_menu(self) -> None:
        self.write(f"=== {self.settings.app_name} ===")
        for key, label in MENU.items():
            self.write(f"{key}. {label}")

    def run(self) -> None:
        while True:
            self.show_menu()
            try:
                choice = self.read("Enter your choice: ").strip()
            except EOFError:
                logger.debug("menu.eof")
                return
            if not self.dispatch(choice):
                return

    def dispatch(self, choice: str) -> bool:
        """Run one menu choice. Returns ``False`` once the operator exits."""
        if choice == "5":
            self.write(f"Thank you for using {self.settings.app_name}!")
            return False

        action = self._actions.get(choice)
        if action is None:
            self.write("Invalid choice. Please try again.")
            return True

        try:
            action()
        except (BankError, ValidationError) as exc:
            self.write(describe_error(exc))
        except EOFError:
            return False
        return True

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------
    def create_account(self) -> None:
        payload = AccountCreate(
            holder_name=self.read("Enter account holder name: "),
            opening_balance=self.read("Enter initial balance: "),
        )
        account = self.registry.open_account(
            payload.holder_name, payload.opening_balance
        )
        self.write("Account created successfully!")
        self.write(f"Account Number: {account.id}")

    def deposit_money(self) -> None:
        account = self.registry.get(self.read("Enter account number: ").strip())
        payload = MoneyMovementRequest(amount=self.read("Enter deposit amount: "))
        try:
            self.registry.deposit(account.id, payload.amount)
        except InvalidAmountError:
            self.write("Invalid deposit amount")
            return
        self.write("Deposit successful!")
        self.write(f"New balance: {self.format_money(account.balance)}")

    def withdraw_money(self) -> None:
        account = self.registry.get(self.read("Enter account number: ").strip())
        payload = MoneyMovementRequest(amount=self.read("Enter withdrawal amount: "))
        try:
            self.registry.withdraw(account.id, payload.amount)
        except InsufficientFundsOrInvalidAmountError as exc:
            self.write(str(exc))
            return
        self.write("Withdrawal successful!")
        self.write(f"New balance: {self.format_money(account.balance)}")

    def view_balance(self) -> None:
        snapshot = AccountResponse.from_account(
            self.registry.get(self.read("Enter account number: ").strip())
        )
        self.write(f"Account Number: {snapshot.id}")
        self.write(f"Account Holder: {snapshot.holder_name}")
        self.write(f"Current Balance: {self.format_money(snapshot.balance)}")
