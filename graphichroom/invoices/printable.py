"""
Printable Invoice

Renders an Invoice as a self-contained HTML page with its own print
button. The page is shown in an iframe, so window.print() prints the
invoice alone and none of the dashboard around it.

All user-entered text is HTML-escaped.
"""

from html import escape

from graphichroom.formatting import format_date_id, format_number, format_rupiah
from graphichroom.models.invoice import (
    STUDIO_CITY,
    STUDIO_EMAIL,
    STUDIO_NAME,
    THANK_YOU_NOTE,
    Invoice,
)


PRINT_BUTTON_LABEL = "Print Invoice"

_STYLE = """
<style>
    body { font-family: sans-serif; color: #18181b; background: #fff; margin: 0; padding: 24px; }
    .header { display: flex; justify-content: space-between; border-bottom: 2px solid #f4f4f5; padding-bottom: 16px; }
    .title { color: #ea580c; font-size: 28px; font-weight: bold; margin: 0; }
    .muted { color: #71717a; font-size: 13px; margin: 2px 0; }
    .studio { text-align: right; }
    table { width: 100%; border-collapse: collapse; margin-top: 24px; }
    th { text-align: left; border-bottom: 1px solid #e4e4e7; padding: 8px 0; font-size: 13px; color: #71717a; }
    td { padding: 8px 0; border-bottom: 1px solid #f4f4f5; }
    .num { text-align: right; }
    .total { text-align: right; margin-top: 16px; font-size: 22px; font-weight: bold; color: #ea580c; }
    .footer { margin-top: 40px; text-align: center; color: #71717a; font-size: 13px; }
    .print-btn { background: #27272a; color: #fff; border: none; border-radius: 8px; padding: 8px 16px; cursor: pointer; margin-bottom: 16px; }
    @media print { .print-btn { display: none; } body { padding: 0; } }
</style>
"""


def _item_rows(invoice: Invoice) -> str:
    return "".join(
        "<tr>"
        f"<td>{escape(item.description)}</td>"
        f"<td class=\"num\">{format_number(item.quantity)}</td>"
        f"<td class=\"num\">{format_rupiah(item.price)}</td>"
        f"<td class=\"num\">{format_rupiah(item.line_total)}</td>"
        "</tr>"
        for item in invoice.items
    )


def render_invoice_html(invoice: Invoice) -> str:
    """Full invoice page: studio header, client, items, total and closing note."""
    return f"""
{_STYLE}
<button class="print-btn" onclick="window.print()">{PRINT_BUTTON_LABEL}</button>
<div class="header">
    <div>
        <p class="title">INVOICE</p>
        <p class="muted">#{escape(invoice.number)}</p>
        <p class="muted">Tanggal: {format_date_id(invoice.date)}</p>
    </div>
    <div class="studio">
        <strong>{escape(STUDIO_NAME)}</strong>
        <p class="muted">{escape(STUDIO_CITY)}</p>
        <p class="muted">{escape(STUDIO_EMAIL)}</p>
    </div>
</div>
<p class="muted" style="margin-top: 24px;">Ditagihkan kepada:</p>
<h3 style="margin: 4px 0;">{escape(invoice.display_client_name)}</h3>
<table>
    <thead>
        <tr><th>Deskripsi</th><th class="num">Qty</th><th class="num">Harga</th><th class="num">Total</th></tr>
    </thead>
    <tbody>{_item_rows(invoice)}</tbody>
</table>
<p class="total">Total Tagihan: {format_rupiah(invoice.total)}</p>
<div class="footer">
    <p>{escape(THANK_YOU_NOTE)}</p>
</div>
"""
