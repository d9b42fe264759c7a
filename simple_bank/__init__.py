"""In-memory account ledger with a text menu."""

__version__ = "0.1.0"
