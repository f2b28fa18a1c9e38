"""Invoice generator package."""

from graphichroom.invoices.builder import InvoiceDraft, generate_invoice_number
from graphichroom.invoices.printable import PRINT_BUTTON_LABEL, render_invoice_html

__all__ = [
    "InvoiceDraft",
    "PRINT_BUTTON_LABEL",
    "generate_invoice_number",
    "render_invoice_html",
]
