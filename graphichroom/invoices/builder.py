"""
Invoice Builder

Backs the invoice generator pane: the user types a client name and
adds line items one by one, then prints. Item fields arrive as raw
form strings, so parsing lives here rather than in the model.
"""

import random
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from graphichroom.models.invoice import (
    CLIENT_NAME_MAX_LENGTH,
    ITEM_DESCRIPTION_MAX_LENGTH,
    Invoice,
    InvoiceItem,
)


FormNumber = Union[str, int, float, Decimal, None]


def generate_invoice_number(rng: Optional[random.Random] = None) -> str:
    """Display number such as INV-4821; not guaranteed unique."""
    rng = rng or random.Random()
    return f"INV-{rng.randrange(10000)}"


def _parse_number(raw: FormNumber) -> Optional[Decimal]:
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


class InvoiceDraft:
    """
    Mutable wrapper around an Invoice being composed.

    Usage:
        draft = InvoiceDraft(client_name="PT Kreatif Maju Jaya")
        draft.add_item("Desain Logo", price="1500000", quantity="2")
        draft.total  # Decimal('3000000')
    """

    def __init__(
        self,
        client_name: str = "",
        number: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        self._invoice = Invoice(
            number=number or generate_invoice_number(rng),
            client_name=client_name.strip()[:CLIENT_NAME_MAX_LENGTH],
        )

    @property
    def invoice(self) -> Invoice:
        """Snapshot of the invoice as it stands."""
        return self._invoice.model_copy(deep=True)

    @property
    def number(self) -> str:
        return self._invoice.number

    @property
    def items(self) -> list[InvoiceItem]:
        return list(self._invoice.items)

    @property
    def total(self) -> Decimal:
        return self._invoice.total

    def set_client(self, name: str) -> None:
        """Set the billed client. Overlong names are cut to fit."""
        self._invoice.client_name = (name or "").strip()[:CLIENT_NAME_MAX_LENGTH]

    def add_item(
        self,
        description: Optional[str],
        price: FormNumber,
        quantity: FormNumber = None,
    ) -> Optional[InvoiceItem]:
        """
        Append a line item.

        Returns None (and adds nothing) when the description is missing or
        too long, or the price is missing or not a non-negative number.
        A missing, unparseable or zero quantity counts as 1.
        """
        description = (description or "").strip()
        parsed_price = _parse_number(price)
        if not description or len(description) > ITEM_DESCRIPTION_MAX_LENGTH:
            return None
        if parsed_price is None or parsed_price < 0:
            return None

        parsed_qty = _parse_number(quantity)
        if not parsed_qty or parsed_qty < 0:
            parsed_qty = Decimal("1")

        item = InvoiceItem(
            description=description,
            price=parsed_price,
            quantity=parsed_qty,
        )
        self._invoice.items.append(item)
        return item

    def remove_item(self, item_id: str) -> bool:
        """Remove a line item. Returns False when no item has this id."""
        before = len(self._invoice.items)
        self._invoice.items = [i for i in self._invoice.items if i.id != item_id]
        return len(self._invoice.items) < before

    def clear(self) -> None:
        self._invoice.items = []
