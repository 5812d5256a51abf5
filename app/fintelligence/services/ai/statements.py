"""
Statement parsing: balances and categorized transactions.

The text of a bank or credit card statement (or transactions pasted by
the user) is handed to the model together with a system prompt that fixes
the JSON shape of the answer.
"""

import enum
import logging
from typing import Any

from .completion import Message, request_json_completion, system_message, user_message
from .formatting import DEFAULT_MAX_PROMPT_CHARS, truncate_text

logger = logging.getLogger(__name__)


# =============================================================================
# System Prompts
# =============================================================================

BANK_SUMMARY_SYSTEM_PROMPT = """You are a financial document parser. Extract banking information from the provided text. Return ONLY valid JSON with this exact structure:
{
  "checking": <number or null>,
  "savings": <number or null>,
  "transactions": [
    { "date": "<date string>", "description": "<description>", "amount": <number>, "type": "<debit|credit>" }
  ]
}
If you cannot find a value, use null. For transactions, extract as many as you can find. Amounts should be positive numbers. Use "debit" for money going out and "credit" for money coming in."""

_TRANSACTIONS_SHAPE = """{
  "transactions": [
    { "date": "<date string>", "description": "<description>", "amount": <positive number>, "type": "<debit|credit>", "category": "<category like Food, Transport, Entertainment, Bills, Shopping, Income, etc.>" }
  ],
  "summary": {
    "totalSpent": <number>,
    "totalIncome": <number>,
    "topCategories": [{ "category": "<name>", "amount": <number> }]
  }
}"""

DOCUMENT_TRANSACTIONS_SYSTEM_PROMPT = f"""You are a financial transaction parser. Extract transactions from the provided bank/credit card statement text. Return ONLY valid JSON:
{_TRANSACTIONS_SHAPE}
Extract as many transactions as you can. Always categorize each one."""

TEXT_TRANSACTIONS_SYSTEM_PROMPT = f"""You are a financial transaction parser. Parse the provided text into structured transaction data. Return ONLY valid JSON:
{_TRANSACTIONS_SHAPE}
Parse whatever format the user provides. If dates aren't clear, make reasonable guesses. Always categorize transactions."""


class TransactionSource(str, enum.Enum):
    """Where the transaction text came from."""

    DOCUMENT = "document"
    TEXT = "text"


# =============================================================================
# Prompt Builders
# =============================================================================


def build_bank_summary_messages(
    text: str, max_chars: int = DEFAULT_MAX_PROMPT_CHARS
) -> list[Message]:
    """Build the messages asking for balances and raw transactions."""
    return [
        system_message(BANK_SUMMARY_SYSTEM_PROMPT),
        user_message(
            "Parse the following bank statement text and extract the data:\n\n"
            + truncate_text(text, max_chars)
        ),
    ]


def build_transaction_messages(
    text: str,
    source: TransactionSource,
    max_chars: int = DEFAULT_MAX_PROMPT_CHARS,
) -> list[Message]:
    """Build the messages asking for categorized transactions and a summary."""
    if source == TransactionSource.DOCUMENT:
        system_prompt = DOCUMENT_TRANSACTIONS_SYSTEM_PROMPT
        lead = "Parse the transactions from this statement:\n\n"
    else:
        system_prompt = TEXT_TRANSACTIONS_SYSTEM_PROMPT
        lead = "Parse these transactions:\n\n"

    return [
        system_message(system_prompt),
        user_message(lead + truncate_text(text, max_chars)),
    ]


# =============================================================================
# Operations
# =============================================================================


async def parse_bank_summary(
    text: str,
    client: Any,
    model: str,
    max_chars: int = DEFAULT_MAX_PROMPT_CHARS,
) -> dict[str, Any]:
    """
    Extract checking/savings balances and transactions from statement text.

    Returns:
        The model's JSON object, typically
        ``{"checking": ..., "savings": ..., "transactions": [...]}``.

    Raises:
        AIServiceError: If the call fails or the answer is not JSON.
    """
    logger.info("Parsing bank statement (%d characters)", len(text))
    return await request_json_completion(
        client, model, build_bank_summary_messages(text, max_chars)
    )


async def parse_transactions(
    text: str,
    source: TransactionSource,
    client: Any,
    model: str,
    max_chars: int = DEFAULT_MAX_PROMPT_CHARS,
) -> dict[str, Any]:
    """
    Extract categorized transactions with a spend/income summary.

    Returns:
        The model's JSON object, typically
        ``{"transactions": [...], "summary": {...}}``.

    Raises:
        AIServiceError: If the call fails or the answer is not JSON.
    """
    logger.info(
        "Parsing transactions from %s (%d characters)", source.value, len(text)
    )
    return await request_json_completion(
        client, model, build_transaction_messages(text, source, max_chars)
    )
