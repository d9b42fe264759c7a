from __future__ import annotations

from typing import Union

from pydantic import ValidationError

from ..core.errors import BankError


def describe_error(error: Union[BankError, ValidationError]) -> str:
    """Turn a ledger or input failure into the line shown to the operator."""
    if isinstance(error, ValidationError):
        fields = ", ".join(
            str(err["loc"][-1]) for err in error.errors() if err.get("loc")
        )
        return f"Error: invalid value for {fields or 'input'}"
    return f"Error: {error}"
