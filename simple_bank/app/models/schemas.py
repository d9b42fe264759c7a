from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ..services import Account


class AccountCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    holder_name: str = Field(..., min_length=1, description="Name of the account holder")
    opening_balance: Decimal = Field(
        ...,
        allow_inf_nan=False,
        decimal_places=2,
        description="Initial balance; sign is checked by the ledger",
    )

class MoneyMovementRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Decimal = Field(
        ...,
        allow_inf_nan=False,
        decimal_places=2,
        description="Amount in major units with at most two decimal places",
    )

class AccountResponse(BaseModel):
    id: str
    holder_name: str
    balance: Decimal = Field(..., ge=0)

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            holder_name=account.holder_name,
            balance=account.balance,
        )
