"""
Data Models Package

All data flowing between the stores, the aggregation engine and the
presentation layer conforms to these Pydantic schemas.
"""

from graphichroom.models.ledger import (
    Category,
    CategoryBucket,
    DashboardStats,
    EntryValidationResult,
    MonthBucket,
    NewTransaction,
    ReportStats,
    Transaction,
    TransactionType,
    ValidationIssue,
)
from graphichroom.models.invoice import (
    DEFAULT_CLIENT_NAME,
    Invoice,
    InvoiceItem,
)
from graphichroom.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "Category",
    "CategoryBucket",
    "DashboardStats",
    "EntryValidationResult",
    "MonthBucket",
    "NewTransaction",
    "ReportStats",
    "Transaction",
    "TransactionType",
    "ValidationIssue",
    # Invoice models
    "DEFAULT_CLIENT_NAME",
    "Invoice",
    "InvoiceItem",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
