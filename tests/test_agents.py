"""
Tests for the AI drafting agents.

No real API calls: every agent gets a StubGenerator.
"""

import asyncio
from datetime import date, timedelta
from uuid import uuid4

from conftest import StubGenerator, make_tx
from graphichroom.agents import (
    ADVICE_EMPTY,
    ADVICE_FAILED,
    ADVICE_MISSING_KEY,
    BRIEF_EMPTY,
    BRIEF_FAILED,
    BRIEF_MISSING_KEY,
    BriefWriterAgent,
    FinancialAdvisorAgent,
    GeminiTextGenerator,
    build_design_brief_prompt,
    build_financial_advice_prompt,
    summarize_transaction,
)
from graphichroom.config.settings import GeminiSettings
from graphichroom.models.audit import AuditEventType
from graphichroom.models.ledger import TransactionType


class TestPromptBuilders:
    """Tests for the pure prompt builders."""

    def test_transaction_summary_line(self, two_may_transactions):
        line = summarize_transaction(two_may_transactions[0])
        assert line == "- 2024-05-01: Logo Project - Coffee Shop (Pesanan Logo) | Rp 2.500.000 | INCOME"

    def test_advice_prompt_lists_transactions(self, two_may_transactions):
        prompt = build_financial_advice_prompt(two_may_transactions)
        assert "Instagram Ads Promo Lebaran" in prompt
        assert "| EXPENSE" in prompt
        assert "3 saran strategis" in prompt

    def test_brief_prompt_contains_topic(self):
        prompt = build_design_brief_prompt("  Rebranding Kopi Kenangan Senja ")
        assert '"Rebranding Kopi Kenangan Senja"' in prompt
        assert "Target Audience" in prompt


class TestFinancialAdvisorAgent:
    """Tests for FinancialAdvisorAgent."""

    def test_returns_generated_text(self, two_may_transactions, audit_logger):
        stub = StubGenerator(reply="1. Hemat langganan software.")
        agent = FinancialAdvisorAgent(stub, audit_logger, limit=20)
        advice = asyncio.run(agent.get_financial_advice(two_may_transactions))
        assert advice == "1. Hemat langganan software."
        assert len(stub.prompts) == 1
        assert audit_logger.history[0].event_type == AuditEventType.AI_REQUEST_COMPLETED

    def test_only_most_recent_transactions_are_sent(self, audit_logger):
        """With 25 transactions (newest first), only the first 20 reach the prompt."""
        start = date(2024, 1, 1)
        transactions = [
            make_tx(f"t{i}", start + timedelta(days=i), 1000 + i, "Internet",
                    TransactionType.EXPENSE, f"Tagihan nomor {i:02d}")
            for i in range(25)
        ]
        stub = StubGenerator()
        agent = FinancialAdvisorAgent(stub, audit_logger, limit=20)
        asyncio.run(agent.get_financial_advice(transactions))

        prompt = stub.prompts[0]
        assert "Tagihan nomor 19" in prompt
        assert "Tagihan nomor 20" not in prompt
        assert prompt.count("| EXPENSE") == 20

    def test_zero_limit_sends_no_transactions(self, two_may_transactions, audit_logger):
        """limit=0 is honoured rather than replaced by the configured default."""
        stub = StubGenerator()
        agent = FinancialAdvisorAgent(stub, audit_logger, limit=0)
        asyncio.run(agent.get_financial_advice(two_may_transactions))
        assert "| INCOME" not in stub.prompts[0]
        assert "| EXPENSE" not in stub.prompts[0]

    def test_default_limit_comes_from_settings(self, monkeypatch, audit_logger):
        monkeypatch.setenv("ADVICE_TRANSACTION_LIMIT", "3")
        transactions = [
            make_tx(f"s{i}", date(2024, 2, 1), 10, "Internet", TransactionType.EXPENSE, f"Kuota {i}")
            for i in range(5)
        ]
        stub = StubGenerator()
        agent = FinancialAdvisorAgent(stub, audit_logger)
        asyncio.run(agent.get_financial_advice(transactions))
        assert stub.prompts[0].count("| EXPENSE") == 3

    def test_missing_key_skips_request(self, two_may_transactions, audit_logger):
        stub = StubGenerator(configured=False)
        agent = FinancialAdvisorAgent(stub, audit_logger, limit=20)
        advice = asyncio.run(agent.get_financial_advice(two_may_transactions))
        assert advice == ADVICE_MISSING_KEY
        assert stub.prompts == []
        assert audit_logger.history[0].event_type == AuditEventType.AI_CREDENTIALS_MISSING

    def test_request_failure_returns_apology(self, two_may_transactions, audit_logger):
        stub = StubGenerator(error=RuntimeError("quota exceeded"))
        agent = FinancialAdvisorAgent(stub, audit_logger, limit=20)
        advice = asyncio.run(agent.get_financial_advice(two_may_transactions))
        assert advice == ADVICE_FAILED
        event = audit_logger.history[0]
        assert event.event_type == AuditEventType.AI_REQUEST_FAILED
        assert event.error_message == "quota exceeded"

    def test_empty_reply(self, two_may_transactions, audit_logger):
        agent = FinancialAdvisorAgent(StubGenerator(reply=""), audit_logger, limit=20)
        advice = asyncio.run(agent.get_financial_advice(two_may_transactions))
        assert advice == ADVICE_EMPTY

    def test_works_without_audit_logger(self, two_may_transactions):
        agent = FinancialAdvisorAgent(StubGenerator(reply="ok"), limit=5)
        assert asyncio.run(agent.get_financial_advice(two_may_transactions)) == "ok"

    def test_correlation_id_is_recorded(self, two_may_transactions, audit_logger):
        correlation_id = uuid4()
        agent = FinancialAdvisorAgent(StubGenerator(), audit_logger, limit=20)
        asyncio.run(agent.get_financial_advice(two_may_transactions, correlation_id))
        assert audit_logger.history[0].correlation_id == correlation_id


class TestBriefWriterAgent:
    """Tests for BriefWriterAgent."""

    def test_returns_draft(self, audit_logger):
        stub = StubGenerator(reply="1. Tujuan Proyek\n...")
        agent = BriefWriterAgent(stub, audit_logger)
        draft = asyncio.run(agent.generate_brief_draft("Logo UMKM Batik"))
        assert draft.startswith("1. Tujuan Proyek")
        assert "Logo UMKM Batik" in stub.prompts[0]

    def test_fallback_messages(self, audit_logger):
        missing = BriefWriterAgent(StubGenerator(configured=False), audit_logger)
        failing = BriefWriterAgent(StubGenerator(error=TimeoutError("timeout")), audit_logger)
        empty = BriefWriterAgent(StubGenerator(reply=""), audit_logger)

        assert asyncio.run(missing.generate_brief_draft("x")) == BRIEF_MISSING_KEY
        assert asyncio.run(failing.generate_brief_draft("x")) == BRIEF_FAILED
        assert asyncio.run(empty.generate_brief_draft("x")) == BRIEF_EMPTY


class TestGeminiTextGenerator:
    """Configuration checks that need no network."""

    def test_not_configured_without_key(self):
        generator = GeminiTextGenerator(GeminiSettings(api_key=""))
        assert generator.is_configured is False

    def test_configured_with_key(self):
        generator = GeminiTextGenerator(GeminiSettings(api_key="test-key"))
        assert generator.is_configured is True

    def test_unconfigured_generator_never_calls_api(self, two_may_transactions, audit_logger):
        agent = FinancialAdvisorAgent(
            GeminiTextGenerator(GeminiSettings(api_key="")),
            audit_logger,
            limit=20,
        )
        assert asyncio.run(agent.get_financial_advice(two_may_transactions)) == ADVICE_MISSING_KEY
