from .menu import BankMenu

__all__ = ["BankMenu"]
