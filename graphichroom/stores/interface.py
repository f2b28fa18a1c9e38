"""
Abstract Store Interfaces

The session keeps transactions and categories behind these interfaces
so the aggregation engine only ever sees snapshots, never live state.
An in-memory implementation backs the dashboard; a durable backend can
be swapped in without touching the engine or the UI.

The interfaces are intentionally small - just the operations the
dashboard performs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from graphichroom.models.ledger import (
    Category,
    NewTransaction,
    Transaction,
    TransactionType,
)


class TransactionStoreInterface(ABC):
    """
    Append-only transaction log.

    There is no update or delete: a recorded transaction is final.
    """

    @abstractmethod
    def list(self) -> list[Transaction]:
        """
        Snapshot of all transactions, newest first.

        Returns:
            A new list each call; mutating it does not affect the store
        """
        pass

    @abstractmethod
    def add(self, data: NewTransaction) -> Transaction:
        """
        Record a transaction.

        Args:
            data: Transaction fields without an id

        Returns:
            The stored transaction with its freshly assigned id
        """
        pass

    def __len__(self) -> int:
        return len(self.list())


class CategoryStoreInterface(ABC):
    """Mutable collection of categories."""

    @abstractmethod
    def list(self) -> list[Category]:
        """Snapshot of all categories in insertion order."""
        pass

    @abstractmethod
    def add(self, name: str, type: TransactionType) -> Category:
        """
        Create a category.

        Names are not required to be unique.
        """
        pass

    @abstractmethod
    def remove(self, category_id: str) -> None:
        """
        Delete a category by id.

        Transactions referencing the category's name are left untouched.

        Raises:
            NotFoundError: If no category has this id
        """
        pass

    def get(self, category_id: str) -> Optional[Category]:
        for category in self.list():
            if category.id == category_id:
                return category
        return None

    def list_by_type(self, type: TransactionType) -> list[Category]:
        """Categories offered when entering a transaction of this type."""
        return [c for c in self.list() if c.type is type]

    def find_by_name(self, name: str) -> list[Category]:
        """All categories with exactly this name."""
        return [c for c in self.list() if c.name == name]


class StoreError(Exception):
    """Base exception for store operations."""
    pass


class NotFoundError(StoreError):
    """Entity not found in the store."""
    pass
