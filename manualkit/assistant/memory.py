"""Manual Kit assistant conversation memory."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

CHAT_ROLES = ("user", "assistant")


class ConversationMemory:
    """In-memory chat history for one assistant session.

    Messages are LiteLLM/OpenAI style dicts with ``role`` and ``content``.
    The HTTP API is stateless, so each request rebuilds the memory from the
    history the client sends back.
    """

    def __init__(self, max_messages: Optional[int] = 40) -> None:
        self._messages: list[dict] = []
        self.max_messages = max_messages

    @classmethod
    def from_history(cls, history: Iterable[dict], max_messages: Optional[int] = 40) -> "ConversationMemory":
        """Build a memory from client-supplied turns, dropping unknown roles."""
        memory = cls(max_messages=max_messages)
        for item in history:
            role = item.get("role")
            if role == "model":
                role = "assistant"
            if role not in CHAT_ROLES:
                logger.debug("Ignoring history entry with role %r", role)
                continue
            memory.add_message(role, str(item.get("content", "")))
        return memory

    def add_message(self, role: str, content: str) -> None:
        if role not in CHAT_ROLES:
            raise ValueError(f"Unsupported chat role: {role!r}")
        self._messages.append({"role": role, "content": content})
        if self.max_messages and len(self._messages) > self.max_messages:
            del self._messages[: len(self._messages) - self.max_messages]

    def get_messages(self, limit: int = 20) -> list[dict]:
        """Return the most recent *limit* messages (all of them if *limit* is 0)."""
        recent = self._messages[-limit:] if limit else self._messages
        return [dict(m) for m in recent]

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"ConversationMemory(messages={len(self._messages)})"
