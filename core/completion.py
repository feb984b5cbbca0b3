"""
Completion Service Client.

Thin wrapper around the OpenAI chat completions API used by the gluten
analyzer.

Features:
- One client per process, built from config (timeout bounded, SDK retries off)
- Uses temperature=0 for reproducible verdicts
- Optional JSON-schema response format
"""

import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI

import config

logger = logging.getLogger(__name__)


def build_client(
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> OpenAI:
    """
    Create the OpenAI client.

    Args:
        api_key: OpenAI API key (uses config / env var if not provided)
        timeout: Request timeout in seconds (uses config if not provided)

    Returns:
        Configured OpenAI client
    """
    return OpenAI(
        api_key=api_key or config.OPENAI_API_KEY,
        timeout=timeout if timeout is not None else config.OPENAI_TIMEOUT,
        max_retries=0,
    )


def complete(
    client: Any,
    messages: List[Dict[str, str]],
    model: str,
    response_format: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Run one chat completion and return the text of the first choice.

    Args:
        client: OpenAI client (or anything exposing chat.completions.create)
        messages: Role-tagged messages
        model: Model name
        response_format: Optional structured output constraint

    Returns:
        The completion text, "" when the model returned no content
    """
    kwargs: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "temperature": 0,
    }
    if response_format is not None:
        kwargs["response_format"] = response_format

    response = client.chat.completions.create(**kwargs)

    content = response.choices[0].message.content
    logger.debug(f"Completion from {model}: {len(content or '')} chars")
    return content or ""
