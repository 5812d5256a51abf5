"""
Completion service package for the relay endpoints.

This package provides the prompt templates and the single-call
completion helpers, split into:
- statements: Balance and transaction extraction from statement text
- brokerage: Simulated brokerage portfolio
- advice: Narrative financial advice
- completion: The outbound chat-completion call
- formatting: Truncation and number rendering for prompts

The AIService class bundles the shared client handle with these
operations.
"""

import logging
from typing import Any

from ...models import AnalyzeRequest
from .advice import build_advice_prompt, generate_advice as _generate_advice
from .brokerage import simulate_brokerage_portfolio as _simulate_brokerage_portfolio
from .exceptions import AIServiceError
from .formatting import DEFAULT_MAX_PROMPT_CHARS, format_number, parse_currency, truncate_text
from .statements import (
    TransactionSource,
    parse_bank_summary as _parse_bank_summary,
    parse_transactions as _parse_transactions,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AIService",
    "AIServiceError",
    "TransactionSource",
    "build_advice_prompt",
    "format_number",
    "parse_currency",
    "truncate_text",
]


class AIService:
    """
    Service wrapping the OpenAI chat-completion client.

    One instance is built at startup and shared by every request. It holds
    no per-request state; the client handle is never replaced.
    """

    def __init__(
        self,
        client: Any | None,
        model: str = "gpt-4o",
        max_prompt_chars: int = DEFAULT_MAX_PROMPT_CHARS,
    ):
        """
        Initialize the AI service.

        Args:
            client: OpenAI client instance, or None when no credentials are
                configured. Every call then fails with AIServiceError.
            model: Chat model used for every request.
            max_prompt_chars: Maximum statement/transaction text embedded in a prompt.
        """
        self._client = client
        self.model = model
        self.max_prompt_chars = max_prompt_chars

    @classmethod
    def from_settings(cls, settings: Any) -> "AIService":
        """Build the service and its OpenAI client from application settings."""
        client = None
        if settings.openai_api_key:
            from openai import OpenAI

            client = OpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                max_retries=0,
            )
        else:
            logger.warning(
                "No OpenAI API key configured. Set AI_INTEGRATIONS_OPENAI_API_KEY; "
                "all AI endpoints will fail until then."
            )
        return cls(
            client,
            model=settings.openai_model,
            max_prompt_chars=settings.max_prompt_chars,
        )

    @property
    def client(self) -> Any:
        """The shared OpenAI client."""
        if self._client is None:
            raise AIServiceError(
                "OpenAI API key not provided. Set AI_INTEGRATIONS_OPENAI_API_KEY."
            )
        return self._client

    async def parse_bank_summary(self, text: str) -> dict[str, Any]:
        """Extract balances and transactions from bank statement text."""
        return await _parse_bank_summary(
            text, client=self.client, model=self.model, max_chars=self.max_prompt_chars
        )

    async def parse_transactions(
        self, text: str, source: TransactionSource
    ) -> dict[str, Any]:
        """Extract categorized transactions and a summary."""
        return await _parse_transactions(
            text,
            source,
            client=self.client,
            model=self.model,
            max_chars=self.max_prompt_chars,
        )

    async def simulate_brokerage_portfolio(self, key_suffix: str) -> dict[str, Any]:
        """Generate a fabricated portfolio for the given key suffix."""
        return await _simulate_brokerage_portfolio(
            key_suffix, client=self.client, model=self.model
        )

    async def generate_advice(self, request: AnalyzeRequest) -> str:
        """Produce markdown advice for the analysis request."""
        return await _generate_advice(request, client=self.client, model=self.model)
