"""
In-Memory Stores

Session-lifetime storage for transactions and categories. Reads return
copies, so callers can never mutate the store through a snapshot.

Ids are uuid4 hex strings; only uniqueness within the session matters.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional
from uuid import uuid4

import structlog

from graphichroom.models.ledger import (
    Category,
    NewTransaction,
    Transaction,
    TransactionType,
)
from graphichroom.stores.interface import (
    CategoryStoreInterface,
    NotFoundError,
    TransactionStoreInterface,
)


logger = structlog.get_logger(__name__)


def generate_id() -> str:
    """Fresh opaque identifier for a new record."""
    return uuid4().hex


class InMemoryTransactionStore(TransactionStoreInterface):
    """
    Transaction log held in process memory.

    New transactions go to the front, matching the dashboard's
    newest-first listing.
    """

    def __init__(
        self,
        initial: Optional[Iterable[Transaction]] = None,
        id_factory: Callable[[], str] = generate_id,
    ):
        self._transactions: list[Transaction] = list(initial or [])
        self._id_factory = id_factory

    def list(self) -> list[Transaction]:
        return list(self._transactions)

    def add(self, data: NewTransaction) -> Transaction:
        transaction = Transaction(id=self._id_factory(), **data.model_dump())
        self._transactions.insert(0, transaction)
        logger.debug(
            "transaction_stored",
            transaction_id=transaction.id,
            total=len(self._transactions),
        )
        return transaction


class InMemoryCategoryStore(CategoryStoreInterface):
    """Category collection held in process memory."""

    def __init__(
        self,
        initial: Optional[Iterable[Category]] = None,
        id_factory: Callable[[], str] = generate_id,
    ):
        self._categories: list[Category] = list(initial or [])
        self._id_factory = id_factory

    def list(self) -> list[Category]:
        return list(self._categories)

    def add(self, name: str, type: TransactionType) -> Category:
        category = Category(id=self._id_factory(), name=name, type=type)
        self._categories.append(category)
        logger.debug("category_stored", category_id=category.id, name=category.name)
        return category

    def remove(self, category_id: str) -> None:
        remaining = [c for c in self._categories if c.id != category_id]
        if len(remaining) == len(self._categories):
            raise NotFoundError(f"Category not found: {category_id}")
        self._categories = remaining
