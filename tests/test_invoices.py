"""Tests for the invoice builder."""

import random
from decimal import Decimal

import pytest

from graphichroom.invoices import (
    PRINT_BUTTON_LABEL,
    InvoiceDraft,
    generate_invoice_number,
    render_invoice_html,
)
from graphichroom.models.invoice import (
    CLIENT_NAME_MAX_LENGTH,
    ITEM_DESCRIPTION_MAX_LENGTH,
    STUDIO_EMAIL,
    STUDIO_NAME,
    THANK_YOU_NOTE,
)


class TestInvoiceNumber:
    """Tests for generate_invoice_number."""

    def test_format(self):
        number = generate_invoice_number(random.Random(7))
        prefix, _, digits = number.partition("-")
        assert prefix == "INV"
        assert digits.isdigit()
        assert 0 <= int(digits) < 10000

    def test_seeded_rng_is_repeatable(self):
        assert generate_invoice_number(random.Random(1)) == generate_invoice_number(random.Random(1))


class TestInvoiceDraft:
    """Tests for InvoiceDraft."""

    @pytest.fixture
    def draft(self) -> InvoiceDraft:
        return InvoiceDraft(client_name="PT Kreatif Maju Jaya", number="INV-1001")

    def test_add_item_parses_form_strings(self, draft):
        item = draft.add_item("Desain Logo", price="1500000", quantity="2")
        assert item is not None
        assert item.quantity == Decimal("2")
        assert draft.total == Decimal("3000000")

    def test_quantity_defaults_to_one(self, draft):
        item = draft.add_item("Banner", price="250000")
        assert item.quantity == Decimal("1")

    @pytest.mark.parametrize("quantity", ["", "abc", "0"])
    def test_bad_quantity_counts_as_one(self, draft, quantity):
        item = draft.add_item("Banner", price="250000", quantity=quantity)
        assert item.quantity == Decimal("1")

    @pytest.mark.parametrize("description,price", [
        ("", "100"),
        ("   ", "100"),
        (None, "100"),
        ("Banner", ""),
        ("Banner", None),
        ("Banner", "seratus"),
        ("Banner", "-5"),
    ])
    def test_incomplete_item_is_ignored(self, draft, description, price):
        assert draft.add_item(description, price=price) is None
        assert draft.items == []

    def test_overlong_description_is_ignored(self, draft):
        assert draft.add_item("x" * (ITEM_DESCRIPTION_MAX_LENGTH + 1), price="1000") is None
        assert draft.items == []

    def test_description_at_limit_is_accepted(self, draft):
        item = draft.add_item("x" * ITEM_DESCRIPTION_MAX_LENGTH, price="1000")
        assert item is not None

    def test_total_sums_line_totals(self, draft):
        draft.add_item("Logo", price="1000000", quantity="1")
        draft.add_item("Kartu Nama", price="150000", quantity="3")
        assert draft.total == Decimal("1450000")

    def test_empty_draft_total_is_zero(self, draft):
        assert draft.total == Decimal("0")

    def test_remove_item(self, draft):
        keep = draft.add_item("Logo", price="100")
        drop = draft.add_item("Poster", price="200")
        assert draft.remove_item(drop.id) is True
        assert draft.items == [keep]
        assert draft.remove_item(drop.id) is False

    def test_clear(self, draft):
        draft.add_item("Logo", price="100")
        draft.clear()
        assert draft.items == []
        assert draft.total == Decimal("0")

    def test_invoice_is_a_snapshot(self, draft):
        draft.add_item("Logo", price="100")
        snapshot = draft.invoice
        draft.add_item("Poster", price="200")
        assert len(snapshot.items) == 1
        assert len(draft.items) == 2

    def test_client_name_placeholder(self):
        draft = InvoiceDraft(number="INV-5")
        assert draft.invoice.display_client_name == "Nama Client"
        draft.set_client("  Toko Roti Sejahtera ")
        assert draft.invoice.display_client_name == "Toko Roti Sejahtera"

    def test_long_client_name_is_cut(self):
        draft = InvoiceDraft(number="INV-5")
        draft.set_client("k" * 500)
        assert len(draft.invoice.client_name) == CLIENT_NAME_MAX_LENGTH

    def test_generated_number(self):
        draft = InvoiceDraft(rng=random.Random(3))
        assert draft.number.startswith("INV-")


class TestPrintableInvoice:
    """Tests for render_invoice_html."""

    @pytest.fixture
    def page(self) -> str:
        draft = InvoiceDraft(client_name="PT Kreatif Maju Jaya", number="INV-1001")
        draft.add_item("Desain Logo", price="1500000", quantity="2")
        return render_invoice_html(draft.invoice)

    def test_studio_header_and_closing_note(self, page):
        assert STUDIO_NAME in page
        assert "Jakarta, Indonesia" in page
        assert STUDIO_EMAIL in page
        assert THANK_YOU_NOTE in page

    def test_print_button(self, page):
        assert PRINT_BUTTON_LABEL in page
        assert "window.print()" in page

    def test_invoice_content(self, page):
        assert "#INV-1001" in page
        assert "PT Kreatif Maju Jaya" in page
        assert "Desain Logo" in page
        assert "Rp 3.000.000" in page

    def test_placeholder_client(self):
        page = render_invoice_html(InvoiceDraft(number="INV-7").invoice)
        assert "Nama Client" in page

    def test_user_text_is_escaped(self):
        draft = InvoiceDraft(client_name="<script>alert(1)</script>", number="INV-8")
        draft.add_item("<b>Banner</b>", price="100")
        page = render_invoice_html(draft.invoice)
        assert "<script>alert(1)</script>" not in page
        assert "&lt;script&gt;" in page
        assert "&lt;b&gt;Banner&lt;/b&gt;" in page
