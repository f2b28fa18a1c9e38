"""Display helpers for the id-ID locale."""

import datetime
from decimal import Decimal
from html import escape
from typing import Union

from graphichroom.models.ledger import Transaction, TransactionType


Number = Union[int, float, Decimal]


def format_number(value: Number) -> str:
    """
    Group thousands with '.' and use ',' for decimals.

    Whole values print without decimals: 2500000 -> '2.500.000',
    1250.5 -> '1.250,50'.
    """
    value = Decimal(str(value))
    sign = "-" if value < 0 else ""
    value = abs(value)

    if value == value.to_integral_value():
        return f"{sign}{int(value):,}".replace(",", ".")

    whole, _, frac = f"{value:,.2f}".partition(".")
    return f"{sign}{whole.replace(',', '.')},{frac}"


def format_rupiah(value: Number) -> str:
    return f"Rp {format_number(value)}"


def format_signed_amount(tx: Transaction) -> str:
    """'+ Rp 2.500.000' for income, '- Rp 500.000' for expense."""
    sign = "+" if tx.type is TransactionType.INCOME else "-"
    return f"{sign} {format_rupiah(tx.amount)}"


def format_date_id(value: datetime.date) -> str:
    """Short id-ID date, e.g. 1/5/2024."""
    return f"{value.day}/{value.month}/{value.year}"


def ai_box_html(text: str, title: str = "✨ Analisis AI") -> str:
    """Styled AI answer box; model output is escaped, never rendered as markup."""
    return f'<div class="ai-box"><h4>{escape(title)}</h4>{escape(text)}</div>'
