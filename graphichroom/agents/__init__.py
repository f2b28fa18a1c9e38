"""AI Agents package."""

from graphichroom.agents.ai_agents import (
    ADVICE_EMPTY,
    ADVICE_FAILED,
    ADVICE_MISSING_KEY,
    BRIEF_EMPTY,
    BRIEF_FAILED,
    BRIEF_MISSING_KEY,
    BriefWriterAgent,
    FinancialAdvisorAgent,
    GeminiTextGenerator,
    TextGenerator,
    build_design_brief_prompt,
    build_financial_advice_prompt,
    summarize_transaction,
)

__all__ = [
    "ADVICE_EMPTY",
    "ADVICE_FAILED",
    "ADVICE_MISSING_KEY",
    "BRIEF_EMPTY",
    "BRIEF_FAILED",
    "BRIEF_MISSING_KEY",
    "BriefWriterAgent",
    "FinancialAdvisorAgent",
    "GeminiTextGenerator",
    "TextGenerator",
    "build_design_brief_prompt",
    "build_financial_advice_prompt",
    "summarize_transaction",
]
