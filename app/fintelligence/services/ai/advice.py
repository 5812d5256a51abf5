"""
Financial advice generation.

Finances, portfolio, recent transactions and news headlines are rendered
into one narrative prompt. Holdings and transactions appear as bullet
lines rather than JSON so the model reads them as a human would.
"""

import json
import logging
from typing import Any

from ...models import AnalyzeRequest, Portfolio, TransactionRecord
from .completion import Message, request_text_completion, user_message
from .formatting import format_number

logger = logging.getLogger(__name__)

DEFAULT_RISK = "moderate"
MISSING = "N/A"

ADVICE_INTRO = (
    "As a financial advisor, analyze the following comprehensive data and "
    "suggest the best path forward:\n\n"
)

ADVICE_INSTRUCTIONS = (
    "Provide a concise, professional recommendation in markdown format. Include:\n"
    "1. Portfolio assessment\n"
    "2. Spending insights (if transaction data available)\n"
    "3. Market outlook based on news\n"
    "4. Specific actionable recommendations\n"
    "5. Risk considerations"
)


def _render_portfolio(portfolio: Portfolio) -> str:
    risk = portfolio.risk or DEFAULT_RISK

    if not portfolio.has_holdings:
        return (
            f"Portfolio Value: ${format_number(portfolio.value)}\n"
            f"Risk Tolerance: {risk}\n\n"
        )

    lines = ["Portfolio Holdings:"]
    for h in portfolio.holdings:
        lines.append(
            f"- {h.symbol or MISSING} ({h.name or MISSING}): "
            f"{format_number(h.shares)} shares "
            f"@ ${format_number(h.current_price)}, "
            f"Value: ${format_number(h.market_value)}, "
            f"Gain/Loss: {format_number(h.gain_loss_percent)}%"
        )
    lines.append(f"Total Portfolio Value: ${format_number(portfolio.account_value)}")
    lines.append(f"Cash Balance: ${format_number(portfolio.cash_balance)}")
    lines.append(f"Risk Tolerance: {risk}")
    return "\n".join(lines) + "\n\n"


def _render_transactions(transactions: list[TransactionRecord]) -> str:
    lines = ["Recent Transactions:"]
    for t in transactions:
        lines.append(
            f"- {t.date or MISSING}: {t.description or MISSING} - "
            f"${format_number(t.amount)} "
            f"({t.type or MISSING}) [{t.category or 'Uncategorized'}]"
        )
    return "\n".join(lines) + "\n\n"


def build_advice_prompt(request: AnalyzeRequest) -> str:
    """
    Render the analysis request into the advisor prompt.

    Sections, in order: finances (JSON), portfolio, recent transactions
    (only when present), news headlines joined by ", ", and the markdown
    outline the answer should follow.
    """
    prompt = ADVICE_INTRO
    prompt += (
        "Finances (Checking/Savings): "
        f"{json.dumps(request.finances, separators=(',', ':'), default=str)}\n\n"
    )
    prompt += _render_portfolio(request.portfolio)

    if request.transactions:
        prompt += _render_transactions(request.transactions)

    prompt += f"Latest News Headlines: {', '.join(request.news)}\n\n"
    prompt += ADVICE_INSTRUCTIONS
    return prompt


def build_advice_messages(request: AnalyzeRequest) -> list[Message]:
    return [user_message(build_advice_prompt(request))]


async def generate_advice(
    request: AnalyzeRequest,
    client: Any,
    model: str,
) -> str:
    """
    Ask the model for markdown advice on the supplied finances.

    Raises:
        AIServiceError: If the call fails or returns no text.
    """
    logger.info(
        "Generating advice (%d holding(s), %d transaction(s), %d headline(s))",
        len(request.portfolio.holdings),
        len(request.transactions or []),
        len(request.news),
    )
    return await request_text_completion(
        client, model, build_advice_messages(request)
    )
