"""Manual Kit assistant chat route."""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from manualkit import tree
from manualkit.api.deps import get_current_user, get_llm, get_store, http_error
from manualkit.assistant import ConversationMemory, ManualAssistant
from manualkit.content.store import ContentStore
from manualkit.core.exceptions import ManualKitError
from manualkit.core.llm import LLMClient
from manualkit.db.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assistant", tags=["assistant"])


class ChatTurn(BaseModel):
    role: Literal["user", "assistant", "model"]
    content: str


class ChatRequest(BaseModel):
    path: list[str] = Field(..., min_length=1, description="Path of the page being read")
    message: str = Field(..., min_length=1, max_length=4000)
    history: list[ChatTurn] = Field(default_factory=list)


class ChatResponse(BaseModel):
    response: str
    model: str = ""


@router.post("/chat", response_model=ChatResponse, summary="Ask the assistant about a page")
async def chat(
    body: ChatRequest,
    user: User = Depends(get_current_user),
    store: ContentStore = Depends(get_store),
    llm: LLMClient = Depends(get_llm),
):
    try:
        forest, _version = await store.load_pages()
    except ManualKitError as exc:
        raise http_error(exc) from exc

    page = tree.locate(forest, body.path)
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")

    conversation = ConversationMemory.from_history(turn.model_dump() for turn in body.history)
    try:
        result = await ManualAssistant().chat(body.message, page, forest, llm, conversation)
    except ManualKitError as exc:
        logger.error("Assistant failed for %s on page %s: %s", user.username, page.id, exc)
        raise http_error(exc) from exc

    return ChatResponse(**result)
