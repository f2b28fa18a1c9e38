"""
Invoice Models

Line items and the invoice document produced by the invoice generator pane.
Invoices live only in the session; nothing here touches the ledger.
"""

import datetime
from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_CLIENT_NAME = "Nama Client"
ITEM_DESCRIPTION_MAX_LENGTH = 200
CLIENT_NAME_MAX_LENGTH = 200

# Issuer block printed on every invoice
STUDIO_NAME = "Graphichroom Studio"
STUDIO_CITY = "Jakarta, Indonesia"
STUDIO_EMAIL = "support@graphichroom.id"
THANK_YOU_NOTE = "Terima kasih atas kepercayaan Anda bekerja sama dengan kami."


class InvoiceItem(BaseModel):
    """A single billable line on an invoice."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    description: str = Field(
        ...,
        min_length=1,
        max_length=ITEM_DESCRIPTION_MAX_LENGTH,
        description="What is being billed"
    )
    quantity: Decimal = Field(
        default=Decimal("1"),
        gt=0,
        description="Number of units"
    )
    price: Decimal = Field(
        ...,
        ge=0,
        description="Unit price in Rupiah"
    )

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class Invoice(BaseModel):
    """
    An invoice document.

    The number is drawn once when the invoice is created and stays fixed
    while items are added.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    number: str = Field(
        ...,
        pattern=r"^INV-\d{1,4}$",
        description="Display number, e.g. INV-4821"
    )
    client_name: str = Field(default="", max_length=CLIENT_NAME_MAX_LENGTH)
    date: datetime.date = Field(default_factory=datetime.date.today)
    items: list[InvoiceItem] = Field(default_factory=list)

    @property
    def display_client_name(self) -> str:
        return self.client_name or DEFAULT_CLIENT_NAME

    @property
    def total(self) -> Decimal:
        """Sum of all line totals."""
        return sum((item.line_total for item in self.items), Decimal("0"))
