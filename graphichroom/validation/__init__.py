"""Transaction entry validation package."""

from graphichroom.validation.validator import (
    UNCATEGORIZED,
    InvalidEntryError,
    TransactionEntryValidator,
)

__all__ = ["UNCATEGORIZED", "InvalidEntryError", "TransactionEntryValidator"]
