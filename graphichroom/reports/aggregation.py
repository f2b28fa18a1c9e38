"""
Aggregation Engine

Turns a flat transaction log into the numbers the dashboard shows:
lifetime totals, a single-month report, the month and category chart
series, and the searchable transaction list.

Every function here is pure: it reads the snapshot it is handed,
never mutates it, and returns fresh models. Inputs are assumed to
already satisfy the Transaction invariants (amount >= 0), so nothing
is validated here.
"""

import datetime
from collections.abc import Iterable, Sequence

from graphichroom.models.ledger import (
    CategoryBucket,
    DashboardStats,
    MonthBucket,
    ReportStats,
    Transaction,
    TransactionType,
)


# id-ID month names, indexed by zero-based month
SHORT_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
)
LONG_MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)


def month_label(value: datetime.date) -> str:
    """Short month label used as the bar-chart key (e.g. 'Mei')."""
    return SHORT_MONTH_NAMES[value.month - 1]


def month_name(month: int) -> str:
    """Long month name for a zero-based month (0 -> 'Januari')."""
    return LONG_MONTH_NAMES[month]


def compute_dashboard_stats(transactions: Iterable[Transaction]) -> DashboardStats:
    """
    Fold the whole log into lifetime totals.

    Each transaction is visited once. The balance is the running signed
    sum, so total_balance == total_income - total_expense always holds.
    """
    total_income = 0
    total_expense = 0
    total_balance = 0

    for tx in transactions:
        if tx.type is TransactionType.INCOME:
            total_income += tx.amount
            total_balance += tx.amount
        else:
            total_expense += tx.amount
            total_balance -= tx.amount

    return DashboardStats(
        total_balance=total_balance,
        total_income=total_income,
        total_expense=total_expense,
    )


def compute_report_stats(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
) -> ReportStats:
    """
    Totals for one calendar month.

    Args:
        transactions: The transaction log
        month: Zero-based month (0 = January, 11 = December)
        year: Four-digit year

    The match uses the date's own month and year, not a rolling window.
    """
    income = 0
    expense = 0
    count = 0

    for tx in transactions:
        if tx.date.month - 1 != month or tx.date.year != year:
            continue
        count += 1
        if tx.type is TransactionType.INCOME:
            income += tx.amount
        else:
            expense += tx.amount

    return ReportStats(
        income=income,
        expense=expense,
        net=income - expense,
        count=count,
    )


def bucket_by_month(transactions: Iterable[Transaction]) -> list[MonthBucket]:
    """
    Income/expense series for the cash-flow bar chart.

    Buckets are keyed by the short month label alone, so May 2023 and
    May 2024 land in the same 'Mei' bucket. Labels keep first-seen order.
    """
    buckets: dict[str, MonthBucket] = {}

    for tx in transactions:
        key = month_label(tx.date)
        if key not in buckets:
            buckets[key] = MonthBucket(label=key)
        bucket = buckets[key]
        if tx.type is TransactionType.INCOME:
            bucket.income += tx.amount
        else:
            bucket.expense += tx.amount

    return list(buckets.values())


def bucket_by_category(transactions: Iterable[Transaction]) -> list[CategoryBucket]:
    """
    Expense totals per category for the donut chart.

    Only EXPENSE transactions count. Category names match exactly
    (case-sensitive) and keep first-seen order. An empty list means
    there is nothing to chart.
    """
    buckets: dict[str, CategoryBucket] = {}

    for tx in transactions:
        if tx.type is not TransactionType.EXPENSE:
            continue
        if tx.category not in buckets:
            buckets[tx.category] = CategoryBucket(label=tx.category)
        buckets[tx.category].value += tx.amount

    return list(buckets.values())


def filter_by_substring(
    transactions: Sequence[Transaction],
    term: str,
) -> list[Transaction]:
    """
    Case-insensitive search over description and category.

    An empty term keeps everything. Relative order is preserved.
    """
    needle = term.lower()
    return [
        tx for tx in transactions
        if needle in tx.description.lower() or needle in tx.category.lower()
    ]
