"""Manual Kit assistant — page-scoped question answering over the manual.

The assistant answers from the page the user is reading. The system prompt
carries that page's text plus a sitemap of the whole manual so the model can
redirect the user to another section, or to the FAQ and Contact pages.
"""

from __future__ import annotations

import logging
from typing import Optional

from manualkit.assistant.context import build_sitemap, page_context
from manualkit.assistant.memory import ConversationMemory
from manualkit.assistant.prompts import build_system_prompt
from manualkit.core.llm import LLMClient
from manualkit.core.schemas import Page

logger = logging.getLogger(__name__)

# Prior turns sent to the model with each message.
HISTORY_LIMIT = 20


class ManualAssistant:
    """Answers questions about one manual page.

    Usage::

        assistant = ManualAssistant()
        result = await assistant.chat(
            message="Qual é o horário de atendimento?",
            page=page,
            forest=forest,
            llm=llm_client,
        )
        print(result["response"])
    """

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        self.history_limit = history_limit

    def system_prompt(self, page: Page, forest: list[Page]) -> str:
        return build_system_prompt(page_context(page), build_sitemap(forest))

    async def chat(
        self,
        message: str,
        page: Page,
        forest: list[Page],
        llm: LLMClient,
        conversation: Optional[ConversationMemory] = None,
    ) -> dict:
        """Send *message* to the model with the page context and prior turns.

        Returns a dict with ``response`` (the model's answer) and ``model``.
        Both turns are appended to *conversation* once the model answers.

        Raises:
            LLMError: If the model call fails after retries.
        """
        if conversation is None:
            conversation = ConversationMemory()

        history = conversation.get_messages(limit=self.history_limit)
        result = await llm.acomplete(
            message,
            system_prompt=self.system_prompt(page, forest),
            chat_history=history,
        )

        conversation.add_message("user", message)
        conversation.add_message("assistant", result.content)

        logger.info(
            "Assistant answered on page %s (model=%s, history=%d)",
            page.id, result.model, len(history),
        )
        return {"response": result.content, "model": result.model}
