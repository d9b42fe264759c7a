from .schemas import AccountCreate, AccountResponse, MoneyMovementRequest

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "MoneyMovementRequest",
]
