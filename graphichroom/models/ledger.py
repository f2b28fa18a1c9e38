"""
Core Data Models for Graphichroom Ledger

These models define the schemas for the bookkeeping data:
transactions and categories held by the stores, plus the derived
statistics the aggregation engine emits.

Transactions are frozen once created. Derived models (stats, buckets)
are recomputed from the transaction log and never stored.
"""

import datetime
from enum import Enum

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


CATEGORY_NAME_MAX_LENGTH = 100


# =============================================================================
# ENUMS
# =============================================================================

class TransactionType(str, Enum):
    """
    Direction of a money movement.

    The sign of a transaction's effect on balance comes from its type,
    never from its amount.
    """
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @property
    def label(self) -> str:
        """Display label used by the entry form and category lists."""
        return "Pemasukan" if self is TransactionType.INCOME else "Pengeluaran"


# =============================================================================
# STORED RECORDS
# =============================================================================

class NewTransaction(BaseModel):
    """
    Transaction data as produced by the entry form, before an id is assigned.

    The Transaction Store turns this into a Transaction.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    date: datetime.date = Field(
        ...,
        description="Calendar date of the money movement"
    )
    amount: int = Field(
        ...,
        ge=0,
        description="Whole Rupiah, sign carried by type"
    )
    category: str = Field(
        ...,
        description="Category name (not referentially enforced)"
    )
    description: str = Field(
        default="",
        description="Free-text label"
    )
    type: TransactionType


class Transaction(NewTransaction):
    """
    A recorded transaction.

    Immutable once created. The id is opaque and unique within the session.
    """

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque unique identifier assigned at creation"
    )

    @property
    def signed_amount(self) -> int:
        """Contribution to balance: +amount for income, -amount for expense."""
        return self.amount if self.type is TransactionType.INCOME else -self.amount


class Category(BaseModel):
    """
    A named label offered for one transaction type.

    Names are not unique. Removing a category never touches transactions
    that reference its name.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH)
    type: TransactionType


# =============================================================================
# DERIVED STATISTICS
# =============================================================================

class DashboardStats(BaseModel):
    """Lifetime totals over the full transaction set."""
    model_config = ConfigDict(frozen=True)

    total_balance: int = 0
    total_income: int = 0
    total_expense: int = 0


class ReportStats(BaseModel):
    """Totals scoped to a single calendar month."""
    model_config = ConfigDict(frozen=True)

    income: int = 0
    expense: int = 0
    net: int = 0
    count: int = Field(default=0, ge=0)


class MonthBucket(BaseModel):
    """One bar-chart group: income and expense under a month label."""

    label: str
    income: int = 0
    expense: int = 0


class CategoryBucket(BaseModel):
    """One slice of the expense-by-category chart."""

    label: str
    value: int = 0


# =============================================================================
# ENTRY VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in a transaction entry form."""

    field: str = Field(
        ...,
        description="Form field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'type_mismatch')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


class EntryValidationResult(BaseModel):
    """
    Outcome of validating a transaction entry.

    When there are no error-level issues, `transaction` holds the
    coerced data ready for the Transaction Store.
    """

    issues: list[ValidationIssue] = Field(default_factory=list)
    transaction: Optional[NewTransaction] = None

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors and self.transaction is not None

    @property
    def warnings(self) -> list[str]:
        return [i.message for i in self.issues if i.severity == "warning"]
