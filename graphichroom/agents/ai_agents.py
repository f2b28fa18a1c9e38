"""
AI Agents for Graphichroom Ledger

Two text-drafting features sit on top of a hosted language model:

1. FINANCIAL ADVISOR:
   - Reads up to the N most recent transactions
   - Returns three short strategic suggestions, in Indonesian

2. BRIEF WRITER:
   - Takes a free-text project topic
   - Returns a design-brief skeleton, in Indonesian

The model is an opaque text service. Prompts are built by pure
functions; the actual call goes through a TextGenerator so tests can
inject a stub. Failures never propagate to the UI: a missing API key
or a failed request turns into a fixed message.
"""

import textwrap
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional
from uuid import UUID

import google.generativeai as genai
import structlog
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential

from graphichroom.audit import AuditLogger
from graphichroom.config import GeminiSettings, get_settings
from graphichroom.formatting import format_number
from graphichroom.models.ledger import Transaction


logger = structlog.get_logger(__name__)


# User-facing messages (id-ID)
ADVICE_MISSING_KEY = "API Key tidak ditemukan. Silakan konfigurasi environment variable."
ADVICE_EMPTY = "Tidak dapat menghasilkan analisis saat ini."
ADVICE_FAILED = "Maaf, terjadi kesalahan saat menghubungi asisten AI."

BRIEF_MISSING_KEY = "API Key missing."
BRIEF_EMPTY = "Gagal membuat brief."
BRIEF_FAILED = "Terjadi kesalahan saat membuat brief."


# =============================================================================
# PROMPT BUILDERS
# =============================================================================

def summarize_transaction(tx: Transaction) -> str:
    return (
        f"- {tx.date.isoformat()}: {tx.description} ({tx.category}) "
        f"| Rp {format_number(tx.amount)} | {tx.type.value}"
    )


def build_financial_advice_prompt(transactions: Sequence[Transaction]) -> str:
    """Instruction asking for three cash-flow suggestions over the given transactions."""
    summary = "\n".join(summarize_transaction(tx) for tx in transactions)

    return textwrap.dedent("""\
        Anda adalah konsultan keuangan profesional khusus untuk agensi desain dan freelancer kreatif.
        Analisis data transaksi berikut dan berikan 3 saran strategis singkat (dalam format bullet point) untuk meningkatkan profitabilitas dan efisiensi arus kas.
        Gunakan Bahasa Indonesia yang profesional namun mudah dimengerti.

        Data Transaksi:
        {summary}

        Berikan saran fokus pada:
        1. Pola pengeluaran yang bisa dihemat (misal software subscription).
        2. Peluang cashflow (misal termin pembayaran).
        3. Kesehatan keuangan secara umum.
        """).format(summary=summary)


def build_design_brief_prompt(topic: str) -> str:
    """Instruction asking for a four-part design brief on the topic."""
    return textwrap.dedent("""\
        Buatkan kerangka Brief Desain profesional untuk proyek dengan topik: "{topic}".

        Berikan output dalam format teks biasa (plain text) dengan struktur:
        1. Tujuan Proyek
        2. Target Audience
        3. Tone & Style Visual
        4. Key Deliverables (misal: Logo, Banner, IG Post)

        Gunakan bahasa Indonesia yang profesional ala agency kreatif.
        """).format(topic=topic.strip())


# =============================================================================
# TEXT GENERATORS
# =============================================================================

class TextGenerator(ABC):
    """Opaque prompt-in, text-out service."""

    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Returns an empty string when the model produced no text.
        Raises on transport or API errors.
        """
        pass


class GeminiTextGenerator(TextGenerator):
    """Google Gemini via the google-generativeai SDK."""

    def __init__(self, settings: Optional[GeminiSettings] = None):
        self._settings = settings or get_settings().gemini
        self._model = None

    @property
    def is_configured(self) -> bool:
        return self._settings.is_configured

    def _configure_genai(self):
        """Configure Google Generative AI on first use."""
        genai.configure(api_key=self._settings.api_key)
        self._model = genai.GenerativeModel(
            model_name=self._settings.model_name,
            generation_config={
                "temperature": self._settings.temperature,
                "max_output_tokens": self._settings.max_tokens,
            }
        )

    async def generate(self, prompt: str) -> str:
        if self._model is None:
            self._configure_genai()

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._settings.max_retries),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            reraise=True,
        ):
            with attempt:
                response = await self._model.generate_content_async(prompt)

        try:
            return (response.text or "").strip()
        except ValueError:
            # Blocked or empty candidates: the SDK raises instead of returning ""
            logger.warning("gemini_response_without_text", model=self._settings.model_name)
            return ""


# =============================================================================
# AGENTS
# =============================================================================

class _TextAgent:
    """Shared request/fallback handling for the two drafting agents."""

    purpose = "text"
    missing_key_message = ""
    empty_message = ""
    failed_message = ""

    def __init__(
        self,
        generator: Optional[TextGenerator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._generator = generator or GeminiTextGenerator()
        self._audit_logger = audit_logger

    async def _run(self, prompt: str, correlation_id: Optional[UUID]) -> str:
        if not self._generator.is_configured:
            if self._audit_logger:
                self._audit_logger.log_ai_credentials_missing(
                    purpose=self.purpose,
                    correlation_id=correlation_id,
                )
            return self.missing_key_message

        try:
            text = await self._generator.generate(prompt)
        except Exception as e:
            logger.error("ai_request_failed", purpose=self.purpose, error=str(e))
            if self._audit_logger:
                self._audit_logger.log_ai_failed(
                    purpose=self.purpose,
                    error_message=str(e),
                    correlation_id=correlation_id,
                )
            return self.failed_message

        if self._audit_logger:
            self._audit_logger.log_ai_completed(
                purpose=self.purpose,
                prompt_chars=len(prompt),
                response_chars=len(text),
                correlation_id=correlation_id,
            )
        return text or self.empty_message


class FinancialAdvisorAgent(_TextAgent):
    """
    Drafts financial advice from the recent transaction history.

    BOUNDARIES:
    - Sees only the transactions it is handed, capped at `limit`
    - Never changes any data
    """

    purpose = "financial_advice"
    missing_key_message = ADVICE_MISSING_KEY
    empty_message = ADVICE_EMPTY
    failed_message = ADVICE_FAILED

    def __init__(
        self,
        generator: Optional[TextGenerator] = None,
        audit_logger: Optional[AuditLogger] = None,
        limit: Optional[int] = None,
    ):
        super().__init__(generator, audit_logger)
        self._limit = (
            limit if limit is not None
            else get_settings().app.advice_transaction_limit
        )

    async def get_financial_advice(
        self,
        transactions: Sequence[Transaction],
        correlation_id: Optional[UUID] = None,
    ) -> str:
        """
        Ask for three strategic suggestions.

        `transactions` is expected newest first; only the first `limit`
        entries are sent.
        """
        prompt = build_financial_advice_prompt(list(transactions)[:self._limit])
        return await self._run(prompt, correlation_id)


class BriefWriterAgent(_TextAgent):
    """Drafts a design-brief skeleton for a project topic."""

    purpose = "design_brief"
    missing_key_message = BRIEF_MISSING_KEY
    empty_message = BRIEF_EMPTY
    failed_message = BRIEF_FAILED

    async def generate_brief_draft(
        self,
        topic: str,
        correlation_id: Optional[UUID] = None,
    ) -> str:
        return await self._run(build_design_brief_prompt(topic), correlation_id)
