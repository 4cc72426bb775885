"""Manual Kit Core — Abstractions for LLM, storage, schemas, and errors."""

from .llm import LLMClient, get_default_client
from .schemas import ContentBlock, ContentType, FaqItem, LLMResponse, Page, SearchResult
from .exceptions import (
    ManualKitError,
    NotFoundError,
    PageNotFoundError,
    BlockNotFoundError,
    FaqNotFoundError,
    ValidationError,
    DuplicatePageError,
    CategoryPageError,
    StorageError,
    VersionConflictError,
    LLMError,
)

__all__ = [
    "LLMClient",
    "LLMResponse",
    "get_default_client",
    "ContentBlock",
    "ContentType",
    "FaqItem",
    "Page",
    "SearchResult",
    "ManualKitError",
    "NotFoundError",
    "PageNotFoundError",
    "BlockNotFoundError",
    "FaqNotFoundError",
    "ValidationError",
    "DuplicatePageError",
    "CategoryPageError",
    "StorageError",
    "VersionConflictError",
    "LLMError",
]
