class BankError(Exception):
    """Base class for every bookkeeping failure reported to callers."""


class InvalidAmountError(BankError):
    """Raised when an amount is non-positive, negative or unreadable."""


class InsufficientFundsOrInvalidAmountError(BankError):
    """Raised when a withdrawal is rejected for any reason."""

    message = "Insufficient funds or invalid amount"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InsufficientFundsError(InsufficientFundsOrInvalidAmountError):
    """Raised when a withdrawal would drop balance below zero."""


class InvalidWithdrawalAmountError(
    InsufficientFundsOrInvalidAmountError, InvalidAmountError
):
    """Raised when a withdrawal amount is not positive."""


class AccountNotFoundError(BankError):
    """Raised when an account id is missing from the registry."""


class DuplicateIdError(BankError):
    """Raised when an account id is already registered."""
