"""
Store Package

Abstract interfaces and the in-memory implementations that hold the
session's transactions and categories.
"""

from graphichroom.stores.interface import (
    CategoryStoreInterface,
    NotFoundError,
    StoreError,
    TransactionStoreInterface,
)
from graphichroom.stores.memory import (
    InMemoryCategoryStore,
    InMemoryTransactionStore,
    generate_id,
)

__all__ = [
    # Interfaces
    "CategoryStoreInterface",
    "TransactionStoreInterface",
    # Exceptions
    "NotFoundError",
    "StoreError",
    # In-memory implementation
    "InMemoryCategoryStore",
    "InMemoryTransactionStore",
    "generate_id",
]
