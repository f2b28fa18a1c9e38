"""Tests for id-ID display formatting."""

from datetime import date
from decimal import Decimal

import pytest

from conftest import make_tx
from graphichroom.formatting import (
    ai_box_html,
    format_date_id,
    format_number,
    format_rupiah,
    format_signed_amount,
)
from graphichroom.models.ledger import TransactionType


@pytest.mark.parametrize("value,expected", [
    (0, "0"),
    (500, "500"),
    (2_500_000, "2.500.000"),
    (-60, "-60"),
    (-1_150_000, "-1.150.000"),
    (Decimal("1250.5"), "1.250,50"),
    (3000000.0, "3.000.000"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_rupiah():
    assert format_rupiah(2_500_000) == "Rp 2.500.000"
    assert format_rupiah(-500_000) == "Rp -500.000"


def test_signed_amount():
    income = make_tx("a", date(2024, 5, 1), 2_500_000, "Pesanan Logo", TransactionType.INCOME)
    expense = make_tx("b", date(2024, 5, 2), 500_000, "Biaya Iklan", TransactionType.EXPENSE)
    assert format_signed_amount(income) == "+ Rp 2.500.000"
    assert format_signed_amount(expense) == "- Rp 500.000"


def test_format_date_id():
    assert format_date_id(date(2024, 5, 1)) == "1/5/2024"
    assert format_date_id(date(2024, 12, 31)) == "31/12/2024"


def test_ai_box_escapes_model_output():
    box = ai_box_html('<img src=x onerror="alert(1)">\nSaran 1')
    assert "<img" not in box
    assert "&lt;img src=x" in box
    assert "Saran 1" in box
    assert box.startswith('<div class="ai-box"><h4>✨ Analisis AI</h4>')
