"""
LLM Helper Module

Provides call_llm_text, which sends an instructions string and a task string to
the OpenAI chat completion API and returns the assistant's free-text reply.

The OpenAI library is imported inside the function to avoid a hard dependency at import time,
allowing tests to monkeypatch this function without requiring the openai package.
"""

import logging
import time
from dataclasses import dataclass

from .config import get_openai_api_key, OPENAI_MODEL

logger = logging.getLogger(__name__)


@dataclass
class LLMResult:
    """Result of an LLM call with metadata for observability."""
    text: str
    latency_ms: int
    input_tokens: int | None
    output_tokens: int | None


def call_llm_text_with_metadata(instructions: str, prompt: str) -> LLMResult:
    """
    Call the OpenAI chat completion API and return result with metadata.

    Returns LLMResult with the reply text plus timing and token info.
    """
    try:
        from openai import OpenAI
    except ImportError as exc:
        raise RuntimeError(
            "openai package is not installed. Install it to run plant agents."
        ) from exc

    api_key = get_openai_api_key()
    client = OpenAI(api_key=api_key)

    start_time = time.time()
    try:
        response = client.chat.completions.create(
            model=OPENAI_MODEL,
            messages=[
                {"role": "system", "content": instructions},
                {"role": "user", "content": prompt},
            ],
        )
        latency_ms = int((time.time() - start_time) * 1000)

        content = response.choices[0].message.content
        if content is None:
            raise RuntimeError("LLM response was empty")

        input_tokens = None
        output_tokens = None
        if response.usage:
            input_tokens = response.usage.prompt_tokens
            output_tokens = response.usage.completion_tokens

        logger.info(
            "LLM call finished in %dms (input_tokens=%s output_tokens=%s)",
            latency_ms,
            input_tokens,
            output_tokens,
        )

        return LLMResult(
            text=content,
            latency_ms=latency_ms,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
    except Exception:
        logger.exception("LLM call failed")
        raise


def call_llm_text(instructions: str, prompt: str) -> str:
    """
    Call the OpenAI chat completion API with a system instructions string and a
    user prompt, returning the assistant's reply.

    Args:
        instructions: System message describing the agent's role.
        prompt: The task text to send as the user message.

    Returns:
        The reply text.

    Raises:
        RuntimeError: If the openai package is not installed, the API key is missing,
            or the response is empty.

    NOTE:
    - Tests monkeypatch this function to avoid real network calls.
    """
    result = call_llm_text_with_metadata(instructions, prompt)
    return result.text
