"""Ollama-compatible chat API wrapper with a fixed retry loop."""

import asyncio
import logging

import ollama

from config import settings
from services.exceptions import LLMServiceError

logger = logging.getLogger(__name__)

_client: ollama.AsyncClient | None = None


def get_client() -> ollama.AsyncClient | None:
    global _client
    if not settings.ollama_api_key:
        logger.warning("No OLLAMA_API_KEY set - LLM features disabled")
        return None
    if _client is None:
        _client = ollama.AsyncClient(
            host=settings.ollama_base_url,
            headers={"Authorization": f"Bearer {settings.ollama_api_key}"},
        )
    return _client


async def _chat_once(client: ollama.AsyncClient, messages: list[dict]) -> str:
    response = await client.chat(model=settings.ollama_model, messages=messages, stream=False)
    content = (response.message.content or "").strip()
    if not content:
        raise LLMServiceError("Empty response from LLM")
    return content


async def chat(prompt: str, system_prompt: str) -> str:
    """Send one chat request, retrying with linear backoff.

    Makes up to settings.llm_max_attempts attempts, sleeping
    llm_retry_delay_ms * attempt between them, and raises LLMServiceError
    once they are exhausted.
    """
    client = get_client()
    if client is None:
        raise LLMServiceError("LLM service not configured")

    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": prompt},
    ]
    attempts = max(1, settings.llm_max_attempts)
    for attempt in range(1, attempts + 1):
        try:
            return await _chat_once(client, messages)
        except Exception as e:
            logger.warning("LLM attempt %d/%d failed: %s", attempt, attempts, e)
            if attempt == attempts:
                raise LLMServiceError(f"LLM request failed after {attempts} attempts") from e
            await asyncio.sleep(settings.llm_retry_delay_ms * attempt / 1000)
