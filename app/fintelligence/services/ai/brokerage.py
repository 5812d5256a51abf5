"""
Simulated brokerage connection.

There is no brokerage integration here. The model is asked to invent a
realistic-looking portfolio; the result is demo data and must never be
presented as the user's real holdings. Only the last four characters of
the supplied key are sent to the model.
"""

import logging
from typing import Any

from .completion import Message, request_json_completion, system_message, user_message

logger = logging.getLogger(__name__)

KEY_SUFFIX_LENGTH = 4

BROKERAGE_SYSTEM_PROMPT = """You are simulating a brokerage API response. Generate a realistic-looking portfolio with 5-8 stock holdings. Return ONLY valid JSON with this structure:
{
  "accountName": "<brokerage account name>",
  "accountValue": <total portfolio value number>,
  "cashBalance": <available cash number>,
  "holdings": [
    { "symbol": "<ticker>", "name": "<company name>", "shares": <number>, "avgCost": <number>, "currentPrice": <number>, "marketValue": <number>, "gainLoss": <number>, "gainLossPercent": <number> }
  ]
}
Make it realistic with well-known stocks. Include a mix of tech, healthcare, finance, etc."""


def build_brokerage_messages(key_suffix: str) -> list[Message]:
    """Build the simulation prompt from the last characters of the key."""
    key_suffix = key_suffix[-KEY_SUFFIX_LENGTH:]
    return [
        system_message(BROKERAGE_SYSTEM_PROMPT),
        user_message(
            "Generate a simulated brokerage portfolio response for API key "
            f"ending in: ...{key_suffix}"
        ),
    ]


async def simulate_brokerage_portfolio(
    key_suffix: str,
    client: Any,
    model: str,
) -> dict[str, Any]:
    """
    Ask the model for a fabricated portfolio.

    Args:
        key_suffix: Last characters of the user's key. Anything longer than
            four characters is cut down before it reaches the prompt.
        client: OpenAI client instance.
        model: Model name to use.

    Returns:
        The simulated portfolio JSON object.

    Raises:
        AIServiceError: If the call fails or the answer is not JSON.
    """
    logger.info("Generating simulated brokerage portfolio")
    return await request_json_completion(
        client, model, build_brokerage_messages(key_suffix)
    )
