"""
Single-shot chat completion calls.

Each relay operation makes exactly one call through one of these helpers.
The OpenAI client is synchronous, so the call runs in the worker thread
pool to keep the event loop free for concurrent requests. Nothing is
retried.
"""

import json
import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from .exceptions import AIServiceError

logger = logging.getLogger(__name__)

Message = dict[str, str]


def system_message(content: str) -> Message:
    return {"role": "system", "content": content}


def user_message(content: str) -> Message:
    return {"role": "user", "content": content}


async def _create_completion(
    client: Any,
    model: str,
    messages: list[Message],
    json_mode: bool,
) -> str:
    """Issue the completion call and return the text of the first choice."""
    kwargs: dict[str, Any] = {"model": model, "messages": messages}
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    logger.info(
        "Calling %s: %d message(s), %d prompt characters, json_mode=%s",
        model,
        len(messages),
        sum(len(m["content"]) for m in messages),
        json_mode,
    )

    try:
        response = await run_in_threadpool(client.chat.completions.create, **kwargs)
    except Exception as e:
        logger.exception("Completion request to %s failed", model)
        raise AIServiceError(f"Completion request failed: {e}") from e

    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError) as e:
        raise AIServiceError("Malformed completion response") from e

    if not content:
        raise AIServiceError("Empty response from completion API")
    return content


async def request_json_completion(
    client: Any,
    model: str,
    messages: list[Message],
) -> dict[str, Any]:
    """
    Request a JSON object completion and parse it.

    Args:
        client: OpenAI client instance.
        model: Model name to use.
        messages: Ordered role/content messages.

    Returns:
        The parsed JSON object, unmodified.

    Raises:
        AIServiceError: If the call fails or the answer is not a JSON object.
    """
    content = await _create_completion(client, model, messages, json_mode=True)

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse completion response: %s", content[:500])
        raise AIServiceError(f"Invalid JSON in completion response: {e}") from e

    if not isinstance(parsed, dict):
        logger.error("Completion response is not a JSON object: %s", content[:500])
        raise AIServiceError("Completion response is not a JSON object")

    return parsed


async def request_text_completion(
    client: Any,
    model: str,
    messages: list[Message],
) -> str:
    """Request a free-form completion and return its text."""
    return await _create_completion(client, model, messages, json_mode=False)
