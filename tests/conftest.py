"""Pytest configuration and fixtures."""

from datetime import date
from typing import Optional

import pytest

from graphichroom.agents import TextGenerator
from graphichroom.audit import AuditLogger
from graphichroom.config import get_settings
from graphichroom.models.ledger import Transaction, TransactionType
from graphichroom.seed import SAMPLE_TRANSACTIONS


def make_tx(
    tx_id: str,
    day: date,
    amount: int,
    category: str,
    tx_type: TransactionType,
    description: str = "",
) -> Transaction:
    """Build a Transaction with positional shorthand."""
    return Transaction(
        id=tx_id,
        date=day,
        amount=amount,
        category=category,
        description=description,
        type=tx_type,
    )


class StubGenerator(TextGenerator):
    """Canned-text generator that records every prompt it receives."""

    def __init__(
        self,
        reply: str = "Saran: kurangi biaya iklan.",
        error: Optional[Exception] = None,
        configured: bool = True,
    ):
        self.reply = reply
        self.error = error
        self.configured = configured
        self.prompts: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep real credentials and cached settings out of every test."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def two_may_transactions() -> list[Transaction]:
    """One income and one expense in May 2024."""
    return [
        make_tx("a", date(2024, 5, 1), 2_500_000, "Pesanan Logo", TransactionType.INCOME,
                "Logo Project - Coffee Shop"),
        make_tx("b", date(2024, 5, 2), 500_000, "Biaya Iklan", TransactionType.EXPENSE,
                "Instagram Ads Promo Lebaran"),
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    return list(SAMPLE_TRANSACTIONS)


@pytest.fixture
def mixed_years() -> list[Transaction]:
    """Transactions spread over months and two years."""
    return [
        make_tx("m1", date(2024, 5, 3), 1_000_000, "Percetakan", TransactionType.INCOME, "Brosur"),
        make_tx("m2", date(2023, 5, 9), 200_000, "Internet", TransactionType.EXPENSE, "WiFi"),
        make_tx("m3", date(2024, 1, 15), 750_000, "Pesanan Logo", TransactionType.INCOME, "Logo"),
        make_tx("m4", date(2024, 1, 20), 300_000, "Konsumsi", TransactionType.EXPENSE, "Kopi"),
        make_tx("m5", date(2024, 12, 31), 100_000, "internet", TransactionType.EXPENSE, "Kuota"),
        make_tx("m6", date(2025, 1, 1), 0, "Internet", TransactionType.EXPENSE, "Gratis"),
    ]


@pytest.fixture
def stub_generator() -> StubGenerator:
    return StubGenerator()


@pytest.fixture
def audit_logger() -> AuditLogger:
    return AuditLogger()
