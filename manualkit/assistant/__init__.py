from manualkit.assistant.assistant import ManualAssistant
from manualkit.assistant.context import build_sitemap, page_context, page_url
from manualkit.assistant.memory import ConversationMemory
from manualkit.assistant.prompts import build_system_prompt

__all__ = [
    "ManualAssistant",
    "ConversationMemory",
    "build_sitemap",
    "page_context",
    "page_url",
    "build_system_prompt",
]
