"""
Manual Kit LLM Client — provider-agnostic chat completion.

Wraps LiteLLM so the assistant can run against Gemini (the default),
OpenAI, Anthropic, Ollama or any other LiteLLM-supported provider.
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Optional

import litellm

from .exceptions import LLMMaxRetriesError
from .schemas import LLMResponse

logger = logging.getLogger(__name__)

# Suppress litellm's verbose logging by default
litellm.suppress_debug_info = True

DEFAULT_MODEL = "gemini/gemini-2.5-flash"


@dataclass
class LLMClient:
    """Thin async LiteLLM wrapper with retry.

    Usage:
        client = LLMClient(default_model="gemini/gemini-2.5-flash")
        response = await client.acomplete(
            "Onde fica a política de descarte?",
            system_prompt="Answer from the manual only.",
            chat_history=[{"role": "user", "content": "Oi"},
                          {"role": "assistant", "content": "Olá!"}],
        )
        print(response.content)
    """

    default_model: str = DEFAULT_MODEL
    temperature: float = 0.2
    max_retries: int = 3
    retry_delay: float = 1.0
    api_key: Optional[str] = None
    api_base: Optional[str] = None

    def build_messages(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        chat_history: Optional[list] = None,
    ) -> list[dict]:
        messages: list[dict] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        if chat_history:
            messages.extend(chat_history)
        messages.append({"role": "user", "content": prompt})
        return messages

    def _get_completion_kwargs(
        self,
        prompt: str,
        model: Optional[str] = None,
        system_prompt: Optional[str] = None,
        chat_history: Optional[list] = None,
        **kwargs,
    ) -> dict:
        """Build kwargs dict for litellm.acompletion."""
        completion_kwargs = {
            "model": model or self.default_model,
            "messages": self.build_messages(prompt, system_prompt, chat_history),
            "temperature": kwargs.get("temperature", self.temperature),
        }

        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        if self.api_base:
            completion_kwargs["api_base"] = self.api_base

        for key in ("max_tokens", "top_p", "stop"):
            if key in kwargs:
                completion_kwargs[key] = kwargs[key]

        return completion_kwargs

    def _parse_response(self, response, model: str) -> LLMResponse:
        """Parse a LiteLLM response into our LLMResponse model."""
        choice = response.choices[0]
        content = choice.message.content or ""
        finish_reason = choice.finish_reason or "stop"

        usage = {}
        if hasattr(response, "usage") and response.usage:
            usage = {
                "prompt_tokens": getattr(response.usage, "prompt_tokens", 0),
                "completion_tokens": getattr(response.usage, "completion_tokens", 0),
                "total_tokens": getattr(response.usage, "total_tokens", 0),
            }

        return LLMResponse(
            content=content,
            finish_reason=finish_reason,
            model=model,
            usage=usage,
        )

    async def acomplete(
        self,
        prompt: str,
        model: Optional[str] = None,
        system_prompt: Optional[str] = None,
        chat_history: Optional[list] = None,
        **kwargs,
    ) -> LLMResponse:
        """Async chat completion with retry logic.

        Args:
            prompt: The user message to send.
            model: Override the default model.
            system_prompt: Optional system instruction placed first.
            chat_history: Previous conversation turns (role/content dicts).
            **kwargs: Extra params (temperature, max_tokens, top_p, stop).

        Raises:
            LLMMaxRetriesError: If all retries are exhausted.
        """
        completion_kwargs = self._get_completion_kwargs(
            prompt, model, system_prompt, chat_history, **kwargs
        )
        used_model = completion_kwargs["model"]

        for attempt in range(self.max_retries):
            try:
                response = await litellm.acompletion(**completion_kwargs)
                return self._parse_response(response, used_model)
            except Exception as e:
                logger.warning("LLM API error (attempt %d/%d): %s", attempt + 1, self.max_retries, e)
                if attempt < self.max_retries - 1:
                    await asyncio.sleep(self.retry_delay)
                else:
                    logger.error("Max retries reached for model %s", used_model)
                    raise LLMMaxRetriesError(
                        f"Max retries ({self.max_retries}) reached: {e}"
                    ) from e

        raise LLMMaxRetriesError("Max retries reached")


# Global default client instance
_default_client: Optional[LLMClient] = None


def get_default_client() -> LLMClient:
    """Get or create the default LLMClient instance.

    Uses environment variables for configuration:
    - MANUAL_DEFAULT_MODEL: LiteLLM model name (default Gemini 2.5 Flash)
    - MANUAL_LLM_API_KEY: explicit API key; otherwise LiteLLM reads the
      provider variable (GEMINI_API_KEY, OPENAI_API_KEY, ...)
    - MANUAL_LLM_API_BASE: custom endpoint, e.g. a local Ollama server
    """
    global _default_client

    if _default_client is None:
        _default_client = LLMClient(
            default_model=os.getenv("MANUAL_DEFAULT_MODEL", DEFAULT_MODEL),
            api_key=os.getenv("MANUAL_LLM_API_KEY"),
            api_base=os.getenv("MANUAL_LLM_API_BASE"),
        )

    return _default_client


def reset_default_client() -> None:
    """Reset the default client (useful for testing)."""
    global _default_client
    _default_client = None
