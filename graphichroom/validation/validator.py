"""
Transaction Entry Validation

Raw form input is checked and coerced here before it reaches the
Transaction Store. Downstream code (the stores and the aggregation
engine) assumes every transaction already has a non-negative whole
Rupiah amount, a real date and a known type.

Validation reports issues instead of guessing:
- error:   the entry cannot be saved
- warning: saved, but the user should look again
- info:    a default was applied
"""

import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from graphichroom.models.ledger import (
    EntryValidationResult,
    NewTransaction,
    TransactionType,
    ValidationIssue,
)
from graphichroom.stores.interface import CategoryStoreInterface


UNCATEGORIZED = "Uncategorized"


class InvalidEntryError(ValueError):
    """Raised when a transaction entry has error-level issues."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        messages = "; ".join(i.message for i in issues if i.severity == "error")
        super().__init__(f"Invalid transaction entry: {messages}")


class TransactionEntryValidator:
    """
    Validates the transaction entry form.

    The category store is optional; without it the category/type
    cross-check is skipped.
    """

    def __init__(
        self,
        category_store: Optional[CategoryStoreInterface] = None,
    ):
        self._categories = category_store

    def validate(
        self,
        amount: Union[str, int, float, Decimal, None],
        type: Union[TransactionType, str, None],
        category: Optional[str] = None,
        description: Optional[str] = None,
        date: Union[datetime.date, str, None] = None,
    ) -> EntryValidationResult:
        """
        Validate and coerce one entry.

        Returns an EntryValidationResult; its `transaction` is set only
        when no error-level issue was found.
        """
        issues: list[ValidationIssue] = []

        parsed_amount = self._parse_amount(amount, issues)
        parsed_type = self._parse_type(type, issues)
        parsed_date = self._parse_date(date, issues)
        parsed_category = self._parse_category(category, parsed_type, issues)

        description = (description or "").strip()
        if not description:
            issues.append(ValidationIssue(
                field="description",
                issue_type="missing",
                message="Keterangan kosong",
                severity="warning",
            ))

        if any(i.severity == "error" for i in issues):
            return EntryValidationResult(issues=issues)

        return EntryValidationResult(
            issues=issues,
            transaction=NewTransaction(
                date=parsed_date,
                amount=parsed_amount,
                category=parsed_category,
                description=description,
                type=parsed_type,
            ),
        )

    def require_valid(self, **fields) -> NewTransaction:
        """
        Validate and return the coerced entry.

        Raises:
            InvalidEntryError: If any error-level issue was found
        """
        result = self.validate(**fields)
        if not result.is_valid:
            raise InvalidEntryError(result.issues)
        return result.transaction

    def _parse_amount(
        self,
        raw: Union[str, int, float, Decimal, None],
        issues: list[ValidationIssue],
    ) -> Optional[int]:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            issues.append(ValidationIssue(
                field="amount",
                issue_type="missing",
                message="Jumlah wajib diisi",
                severity="error",
            ))
            return None

        try:
            value = Decimal(str(raw).strip())
        except InvalidOperation:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message=f"Jumlah bukan angka: {raw!r}",
                severity="error",
            ))
            return None

        if not value.is_finite():
            issues.append(ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message=f"Jumlah bukan angka: {raw!r}",
                severity="error",
            ))
            return None

        if value < 0:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Jumlah tidak boleh negatif",
                severity="error",
            ))
            return None

        try:
            whole = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            # More digits than the decimal context can hold
            issues.append(ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Jumlah terlalu besar",
                severity="error",
            ))
            return None

        if whole != value:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="rounded",
                message=f"Jumlah dibulatkan ke Rp {int(whole)}",
                severity="info",
            ))
        return int(whole)

    def _parse_type(
        self,
        raw: Union[TransactionType, str, None],
        issues: list[ValidationIssue],
    ) -> Optional[TransactionType]:
        if isinstance(raw, TransactionType):
            return raw
        try:
            return TransactionType((raw or "").strip().upper())
        except ValueError:
            issues.append(ValidationIssue(
                field="type",
                issue_type="invalid_value",
                message=f"Jenis transaksi tidak dikenal: {raw!r}",
                severity="error",
            ))
            return None

    def _parse_date(
        self,
        raw: Union[datetime.date, str, None],
        issues: list[ValidationIssue],
    ) -> Optional[datetime.date]:
        if isinstance(raw, datetime.datetime):
            return raw.date()
        if isinstance(raw, datetime.date):
            return raw
        if raw is None or not raw.strip():
            issues.append(ValidationIssue(
                field="date",
                issue_type="defaulted",
                message="Tanggal kosong, memakai tanggal hari ini",
                severity="info",
            ))
            return datetime.date.today()
        try:
            return datetime.date.fromisoformat(raw.strip())
        except ValueError:
            issues.append(ValidationIssue(
                field="date",
                issue_type="invalid_format",
                message=f"Format tanggal harus YYYY-MM-DD: {raw!r}",
                severity="error",
            ))
            return None

    def _parse_category(
        self,
        raw: Optional[str],
        tx_type: Optional[TransactionType],
        issues: list[ValidationIssue],
    ) -> str:
        name = (raw or "").strip()
        if not name:
            issues.append(ValidationIssue(
                field="category",
                issue_type="defaulted",
                message=f"Kategori kosong, memakai '{UNCATEGORIZED}'",
                severity="info",
            ))
            return UNCATEGORIZED

        if self._categories is None or tx_type is None:
            return name

        matches = self._categories.find_by_name(name)
        if not matches:
            issues.append(ValidationIssue(
                field="category",
                issue_type="unknown_category",
                message=f"Kategori '{name}' belum terdaftar",
                severity="info",
            ))
        elif all(c.type is not tx_type for c in matches):
            issues.append(ValidationIssue(
                field="category",
                issue_type="type_mismatch",
                message=f"Kategori '{name}' terdaftar untuk {matches[0].type.label}",
                severity="warning",
            ))
        return name
