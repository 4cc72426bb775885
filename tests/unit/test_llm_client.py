"""Unit tests for manualkit.core.llm.LLMClient with LiteLLM patched out."""

import asyncio
from types import SimpleNamespace

import pytest

from manualkit.core import llm as llm_module
from manualkit.core.exceptions import LLMMaxRetriesError
from manualkit.core.llm import DEFAULT_MODEL, LLMClient, get_default_client, reset_default_client


def fake_completion(text):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=text), finish_reason="stop")],
        usage=SimpleNamespace(prompt_tokens=3, completion_tokens=2, total_tokens=5),
    )


class TestLLMClient:

    def test_build_messages_order(self):
        messages = LLMClient().build_messages(
            "pergunta", system_prompt="sistema", chat_history=[{"role": "assistant", "content": "oi"}],
        )

        assert [m["role"] for m in messages] == ["system", "assistant", "user"]
        assert messages[-1]["content"] == "pergunta"

    def test_acomplete_parses_response(self, monkeypatch):
        captured = {}

        async def acompletion(**kwargs):
            captured.update(kwargs)
            return fake_completion("resposta")

        monkeypatch.setattr(llm_module.litellm, "acompletion", acompletion)

        result = asyncio.run(LLMClient(api_key="k").acomplete("oi", system_prompt="s"))

        assert result.content == "resposta"
        assert result.model == DEFAULT_MODEL
        assert result.usage["total_tokens"] == 5
        assert captured["api_key"] == "k"
        assert captured["messages"][0] == {"role": "system", "content": "s"}

    def test_retries_then_fails(self, monkeypatch):
        calls = []

        async def acompletion(**kwargs):
            calls.append(kwargs)
            raise RuntimeError("indisponível")

        monkeypatch.setattr(llm_module.litellm, "acompletion", acompletion)

        with pytest.raises(LLMMaxRetriesError):
            asyncio.run(LLMClient(max_retries=2, retry_delay=0).acomplete("oi"))
        assert len(calls) == 2

    def test_default_client_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MANUAL_DEFAULT_MODEL", "openai/gpt-4o-mini")
        reset_default_client()
        try:
            assert get_default_client().default_model == "openai/gpt-4o-mini"
        finally:
            reset_default_client()
