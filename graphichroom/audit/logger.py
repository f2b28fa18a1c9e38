"""
Audit Logger

Every user action that changes session state, and every AI request,
is logged as a structured event. The logger:
- Writes JSON lines through structlog
- Keeps a bounded in-memory history the dashboard can display
- Supports correlation IDs to trace related events
"""

import logging
from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from graphichroom.models.audit import AuditEvent, AuditEventBuilder


def configure_logging(level: str = "INFO") -> None:
    """Route structlog through stdlib logging with a JSON renderer."""
    logging.basicConfig(format="%(message)s", level=level.upper())
    logging.getLogger().setLevel(level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. A bounded in-memory history (for the session's activity panel)
    """

    def __init__(self, history_size: int = 200):
        self._history: deque[AuditEvent] = deque(maxlen=history_size)
        self._logger = structlog.get_logger("graphichroom.audit")

    @property
    def history(self) -> list[AuditEvent]:
        """Logged events, newest first."""
        return list(reversed(self._history))

    def log(self, event: AuditEvent) -> None:
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._history.append(event)

    def log_transaction_added(
        self,
        transaction_id: str,
        transaction_type: str,
        amount: int,
        category: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.transaction_added(
            transaction_id=transaction_id,
            transaction_type=transaction_type,
            amount=amount,
            category=category,
            correlation_id=correlation_id,
        ))

    def log_entry_rejected(
        self,
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.entry_validation_failed(
            issues=issues,
            correlation_id=correlation_id,
        ))

    def log_category_added(
        self,
        category_id: str,
        name: str,
        category_type: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.category_added(
            category_id=category_id,
            name=name,
            category_type=category_type,
            correlation_id=correlation_id,
        ))

    def log_category_removed(
        self,
        category_id: str,
        name: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.category_removed(
            category_id=category_id,
            name=name,
            correlation_id=correlation_id,
        ))

    def log_report_viewed(
        self,
        month: int,
        year: int,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.report_viewed(
            month=month,
            year=year,
            count=count,
            correlation_id=correlation_id,
        ))

    def log_invoice_item_added(
        self,
        invoice_number: str,
        item_id: str,
        line_total: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.invoice_item_added(
            invoice_number=invoice_number,
            item_id=item_id,
            line_total=line_total,
            correlation_id=correlation_id,
        ))

    def log_ai_completed(
        self,
        purpose: str,
        prompt_chars: int,
        response_chars: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.ai_request_completed(
            purpose=purpose,
            prompt_chars=prompt_chars,
            response_chars=response_chars,
            correlation_id=correlation_id,
        ))

    def log_ai_failed(
        self,
        purpose: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.ai_request_failed(
            purpose=purpose,
            error_message=error_message,
            correlation_id=correlation_id,
        ))

    def log_ai_credentials_missing(
        self,
        purpose: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.ai_credentials_missing(
            purpose=purpose,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a user action (e.g., saving a transaction)
    and pass it through all subsequent operations.
    """
    return uuid4()
