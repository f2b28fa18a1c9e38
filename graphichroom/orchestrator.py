"""
Session Orchestrator for Graphichroom Ledger

Ties the stores, the entry validator, the aggregation engine, the
invoice builder and the AI agents together behind one object that the
six dashboard panes talk to:

1. Dashboard   - lifetime stats, cash-flow and expense chart series, AI advice
2. Transaksi   - searchable list, new-transaction entry
3. Laporan     - single-month report
4. Kategori    - add / remove categories
5. Invoice     - invoice drafts
6. Brief       - AI design-brief drafts

Derived numbers are always recomputed from a fresh store snapshot;
nothing is cached here.
"""

import datetime
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

import structlog

from graphichroom.agents import (
    BriefWriterAgent,
    FinancialAdvisorAgent,
    GeminiTextGenerator,
    TextGenerator,
)
from graphichroom.audit import AuditLogger, configure_logging, create_correlation_id
from graphichroom.config import get_settings
from graphichroom.invoices import InvoiceDraft
from graphichroom.models.invoice import InvoiceItem
from graphichroom.models.ledger import (
    CATEGORY_NAME_MAX_LENGTH,
    Category,
    CategoryBucket,
    DashboardStats,
    EntryValidationResult,
    MonthBucket,
    ReportStats,
    Transaction,
    TransactionType,
)
from graphichroom.reports import (
    bucket_by_category,
    bucket_by_month,
    compute_dashboard_stats,
    compute_report_stats,
    filter_by_substring,
)
from graphichroom.seed import DESIGN_CATEGORIES, SAMPLE_TRANSACTIONS
from graphichroom.stores import (
    CategoryStoreInterface,
    InMemoryCategoryStore,
    InMemoryTransactionStore,
    TransactionStoreInterface,
)
from graphichroom.validation import TransactionEntryValidator


logger = structlog.get_logger(__name__)


class BookkeepingSession:
    """
    Everything one dashboard session needs.

    Collaborators are injected; anything left out gets an in-memory or
    settings-driven default.
    """

    def __init__(
        self,
        transaction_store: Optional[TransactionStoreInterface] = None,
        category_store: Optional[CategoryStoreInterface] = None,
        advisor: Optional[FinancialAdvisorAgent] = None,
        brief_writer: Optional[BriefWriterAgent] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._audit_logger = audit_logger or AuditLogger()
        self._transactions = transaction_store or InMemoryTransactionStore()
        self._categories = category_store or InMemoryCategoryStore()
        self._validator = TransactionEntryValidator(self._categories)
        self._advisor = advisor or FinancialAdvisorAgent(audit_logger=self._audit_logger)
        self._brief_writer = brief_writer or BriefWriterAgent(audit_logger=self._audit_logger)

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    @property
    def transactions(self) -> list[Transaction]:
        """Snapshot, newest first."""
        return self._transactions.list()

    def add_transaction(
        self,
        amount: Union[str, int, float, Decimal, None],
        type: Union[TransactionType, str, None],
        category: Optional[str] = None,
        description: Optional[str] = None,
        date: Union[datetime.date, str, None] = None,
        correlation_id: Optional[UUID] = None,
    ) -> tuple[Optional[Transaction], EntryValidationResult]:
        """
        Validate form input and record the transaction.

        Returns:
            (transaction, validation_result); transaction is None when
            the entry was rejected.
        """
        correlation_id = correlation_id or create_correlation_id()

        result = self._validator.validate(
            amount=amount,
            type=type,
            category=category,
            description=description,
            date=date,
        )
        if not result.is_valid:
            self._audit_logger.log_entry_rejected(
                issues=[i.model_dump() for i in result.issues],
                correlation_id=correlation_id,
            )
            return None, result

        transaction = self._transactions.add(result.transaction)
        self._audit_logger.log_transaction_added(
            transaction_id=transaction.id,
            transaction_type=transaction.type.value,
            amount=transaction.amount,
            category=transaction.category,
            correlation_id=correlation_id,
        )
        return transaction, result

    def search(self, term: str) -> list[Transaction]:
        return filter_by_substring(self.transactions, term)

    # -------------------------------------------------------------------------
    # Derived statistics
    # -------------------------------------------------------------------------

    def dashboard_stats(self) -> DashboardStats:
        return compute_dashboard_stats(self.transactions)

    def report_stats(self, month: int, year: int) -> ReportStats:
        """Report for a zero-based month and four-digit year."""
        stats = compute_report_stats(self.transactions, month, year)
        self._audit_logger.log_report_viewed(month=month, year=year, count=stats.count)
        return stats

    def cash_flow_series(self) -> list[MonthBucket]:
        return bucket_by_month(self.transactions)

    def expense_series(self) -> list[CategoryBucket]:
        return bucket_by_category(self.transactions)

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    @property
    def categories(self) -> list[Category]:
        return self._categories.list()

    def categories_for(self, type: TransactionType) -> list[Category]:
        return self._categories.list_by_type(type)

    def add_category(
        self,
        name: str,
        type: TransactionType,
        correlation_id: Optional[UUID] = None,
    ) -> Optional[Category]:
        """
        Create a category.

        A blank name, or one longer than CATEGORY_NAME_MAX_LENGTH, is
        ignored and returns None.
        """
        name = (name or "").strip()
        if not name or len(name) > CATEGORY_NAME_MAX_LENGTH:
            return None

        category = self._categories.add(name, type)
        self._audit_logger.log_category_added(
            category_id=category.id,
            name=category.name,
            category_type=category.type.value,
            correlation_id=correlation_id,
        )
        return category

    def remove_category(
        self,
        category_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """
        Delete a category. Transactions keep the old name.

        Raises:
            NotFoundError: If no category has this id
        """
        category = self._categories.get(category_id)
        self._categories.remove(category_id)
        self._audit_logger.log_category_removed(
            category_id=category_id,
            name=category.name if category else "",
            correlation_id=correlation_id,
        )

    # -------------------------------------------------------------------------
    # Invoices
    # -------------------------------------------------------------------------

    def new_invoice(self, client_name: str = "") -> InvoiceDraft:
        return InvoiceDraft(client_name=client_name)

    def add_invoice_item(
        self,
        draft: InvoiceDraft,
        description: Optional[str],
        price: Union[str, int, float, Decimal, None],
        quantity: Union[str, int, float, Decimal, None] = None,
    ) -> Optional[InvoiceItem]:
        item = draft.add_item(description, price, quantity)
        if item is not None:
            self._audit_logger.log_invoice_item_added(
                invoice_number=draft.number,
                item_id=item.id,
                line_total=str(item.line_total),
            )
        return item

    # -------------------------------------------------------------------------
    # AI text
    # -------------------------------------------------------------------------

    async def request_financial_advice(
        self,
        correlation_id: Optional[UUID] = None,
    ) -> str:
        return await self._advisor.get_financial_advice(
            self.transactions,
            correlation_id=correlation_id or create_correlation_id(),
        )

    async def request_brief(
        self,
        topic: str,
        correlation_id: Optional[UUID] = None,
    ) -> str:
        """Draft a brief. An empty topic sends nothing and returns ""."""
        if not (topic or "").strip():
            return ""
        return await self._brief_writer.generate_brief_draft(
            topic,
            correlation_id=correlation_id or create_correlation_id(),
        )


def create_app_components(
    seed_sample_data: Optional[bool] = None,
    generator: Optional[TextGenerator] = None,
) -> BookkeepingSession:
    """
    Factory function to create a ready-to-use session.

    Args:
        seed_sample_data: Start with the sample agency data. Defaults to
                          the SEED_SAMPLE_DATA setting.
        generator: Text generator for both AI agents. Defaults to Gemini.

    Returns:
        A BookkeepingSession with in-memory stores
    """
    settings = get_settings()
    configure_logging(settings.app.log_level)

    if seed_sample_data is None:
        seed_sample_data = settings.app.seed_sample_data

    audit_logger = AuditLogger()
    generator = generator or GeminiTextGenerator(settings.gemini)

    session = BookkeepingSession(
        transaction_store=InMemoryTransactionStore(
            SAMPLE_TRANSACTIONS if seed_sample_data else None
        ),
        category_store=InMemoryCategoryStore(DESIGN_CATEGORIES),
        advisor=FinancialAdvisorAgent(
            generator=generator,
            audit_logger=audit_logger,
            limit=settings.app.advice_transaction_limit,
        ),
        brief_writer=BriefWriterAgent(generator=generator, audit_logger=audit_logger),
        audit_logger=audit_logger,
    )

    logger.info(
        "session_created",
        transactions=len(session.transactions),
        categories=len(session.categories),
        ai_configured=generator.is_configured,
    )
    return session
