from .account import Account, to_amount
from .registry import Registry

__all__ = ["Account", "Registry", "to_amount"]
