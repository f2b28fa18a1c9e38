"""
Audit Models for Graphichroom Ledger

Every user action that changes session state, and every call to the
AI text service, produces an audit event. Events are only ever appended.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Ledger changes
    TRANSACTION_ADDED = "transaction_added"
    ENTRY_VALIDATION_FAILED = "entry_validation_failed"

    # Category management
    CATEGORY_ADDED = "category_added"
    CATEGORY_REMOVED = "category_removed"

    # Reporting
    REPORT_VIEWED = "report_viewed"

    # Invoices
    INVOICE_ITEM_ADDED = "invoice_item_added"

    # AI text service
    AI_REQUEST_COMPLETED = "ai_request_completed"
    AI_REQUEST_FAILED = "ai_request_failed"
    AI_CREDENTIALS_MISSING = "ai_credentials_missing"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # What entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'category', 'ai')"
    )
    entity_id: Optional[str] = None

    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate events raised by one user action"
    )

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)

    error_message: Optional[str] = None

    is_user_action: bool = False

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added(tx, correlation_id)
        event = AuditEventBuilder.category_removed(category_id, correlation_id)
    """

    @staticmethod
    def transaction_added(
        transaction_id: str,
        transaction_type: str,
        amount: int,
        category: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description=f"Transaction added: {transaction_type} {amount} ({category})",
            details={
                "type": transaction_type,
                "amount": amount,
                "category": category,
            },
            is_user_action=True,
        )

    @staticmethod
    def entry_validation_failed(
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENTRY_VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            correlation_id=correlation_id,
            description=f"Transaction entry rejected with {len(issues)} issues",
            details={"issues": issues},
            is_user_action=True,
        )

    @staticmethod
    def category_added(
        category_id: str,
        name: str,
        category_type: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORY_ADDED,
            entity_type="category",
            entity_id=category_id,
            correlation_id=correlation_id,
            description=f"Category added: {name}",
            details={"name": name, "type": category_type},
            is_user_action=True,
        )

    @staticmethod
    def category_removed(
        category_id: str,
        name: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORY_REMOVED,
            entity_type="category",
            entity_id=category_id,
            correlation_id=correlation_id,
            description=f"Category removed: {name}",
            details={"name": name},
            is_user_action=True,
        )

    @staticmethod
    def report_viewed(
        month: int,
        year: int,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_VIEWED,
            severity=AuditSeverity.DEBUG,
            entity_type="report",
            correlation_id=correlation_id,
            description=f"Report for {month + 1:02d}/{year} covers {count} transactions",
            details={"month": month, "year": year, "count": count},
        )

    @staticmethod
    def invoice_item_added(
        invoice_number: str,
        item_id: str,
        line_total: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVOICE_ITEM_ADDED,
            entity_type="invoice",
            entity_id=invoice_number,
            correlation_id=correlation_id,
            description=f"Item added to {invoice_number}",
            details={"item_id": item_id, "line_total": line_total},
            is_user_action=True,
        )

    @staticmethod
    def ai_request_completed(
        purpose: str,
        prompt_chars: int,
        response_chars: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.AI_REQUEST_COMPLETED,
            entity_type="ai",
            entity_id=purpose,
            correlation_id=correlation_id,
            description=f"AI {purpose} request completed",
            details={
                "prompt_chars": prompt_chars,
                "response_chars": response_chars,
            },
        )

    @staticmethod
    def ai_request_failed(
        purpose: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.AI_REQUEST_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="ai",
            entity_id=purpose,
            correlation_id=correlation_id,
            description=f"AI {purpose} request failed",
            error_message=error_message,
        )

    @staticmethod
    def ai_credentials_missing(
        purpose: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.AI_CREDENTIALS_MISSING,
            severity=AuditSeverity.WARNING,
            entity_type="ai",
            entity_id=purpose,
            correlation_id=correlation_id,
            description=f"AI {purpose} skipped: no API key configured",
        )
