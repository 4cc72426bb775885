"""Manual Kit shared Pydantic models and data schemas."""

from __future__ import annotations

import enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from .exceptions import DuplicatePageError


class ContentType(str, enum.Enum):
    H1 = "h1"
    H2 = "h2"
    P = "p"
    UL = "ul"
    OL = "ol"
    IMAGE = "image"
    ALERT_INFO = "alert_info"
    ALERT_WARNING = "alert_warning"


LIST_CONTENT_TYPES = frozenset({ContentType.UL, ContentType.OL})


class ContentBlock(BaseModel):
    """One typed unit of page content.

    List blocks (``ul``/``ol``) carry a list of strings; every other type
    carries a single string (an ``image`` block holds a data-URI or media URL).
    """

    id: str
    type: ContentType
    content: Union[str, list[str]] = ""

    model_config = {"use_enum_values": True}

    @model_validator(mode="after")
    def _check_payload_shape(self) -> "ContentBlock":
        is_list = isinstance(self.content, list)
        if self.type in LIST_CONTENT_TYPES and not is_list:
            raise ValueError(f"'{self.type}' blocks require a list of strings")
        if self.type not in LIST_CONTENT_TYPES and is_list:
            raise ValueError(f"'{self.type}' blocks require a single string")
        return self

    def text(self) -> str:
        """Flatten the payload into one searchable string."""
        if isinstance(self.content, list):
            return " ".join(self.content)
        return self.content


class Page(BaseModel):
    """A node in the manual's page forest.

    ``content`` is ``None`` for pure category pages; ``children`` is ``None``
    for leaves. Ids are only unique within one sibling list.
    """

    id: str
    title: str
    icon: str = "DocumentTextIcon"
    content: Optional[list[ContentBlock]] = None
    children: Optional[list[Page]] = None

    @model_validator(mode="after")
    def _check_child_ids(self) -> "Page":
        if self.children:
            check_sibling_ids(self.children)
        return self

    @property
    def is_category(self) -> bool:
        return self.content is None


class FaqItem(BaseModel):
    id: str
    question: str
    answer: str


class SearchResult(BaseModel):
    """A single search hit; ``title`` and ``snippet`` are HTML fragments."""

    type: Literal["Page", "FAQ"]
    id: str
    title: str
    path: list[str] = Field(default_factory=list)
    path_titles: list[str] = Field(default_factory=list)
    snippet: str = ""


class LLMResponse(BaseModel):
    """Response from an LLM API call."""

    content: str
    finish_reason: str = "stop"  # "stop", "length", etc.
    model: str = ""
    usage: dict = Field(default_factory=dict)


def dump_pages(pages: list[Page]) -> list[dict]:
    """Serialize a forest to JSON-compatible dicts, omitting absent lists."""
    return [p.model_dump(mode="json", exclude_none=True) for p in pages]


def check_sibling_ids(pages: list[Page]) -> None:
    """Raise ``DuplicatePageError`` if two siblings share an id."""
    seen: set[str] = set()
    for page in pages:
        if page.id in seen:
            raise DuplicatePageError(page.id)
        seen.add(page.id)


def load_pages(data: list[dict]) -> list[Page]:
    """Parse a stored or imported forest; sibling ids must be unique at every level."""
    pages = [Page.model_validate(p) for p in data or []]
    check_sibling_ids(pages)
    return pages
