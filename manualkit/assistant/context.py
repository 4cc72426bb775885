"""Render manual pages into plain-text context for the assistant.

``page_context`` turns one page's blocks into readable text; ``build_sitemap``
renders the whole forest as an indented outline with links, so the model can
point users to other sections.
"""

import logging
from typing import Optional

from manualkit.core.schemas import ContentType, Page
from manualkit.tree.pages import walk

logger = logging.getLogger(__name__)

PAGE_URL_PREFIX = "/page/"

# Rough characters-per-token estimate.
_CHARS_PER_TOKEN = 4


def _estimate_tokens(text: str) -> int:
    return len(text) // _CHARS_PER_TOKEN


def page_url(path: list[str]) -> str:
    return PAGE_URL_PREFIX + "/".join(path)


def _format_block(block) -> Optional[str]:
    kind = block.type
    if kind == ContentType.IMAGE.value:
        return None
    if kind == ContentType.UL.value:
        return "\n".join(f"- {item}" for item in block.content)
    if kind == ContentType.OL.value:
        return "\n".join(f"{n}. {item}" for n, item in enumerate(block.content, start=1))
    if kind == ContentType.H1.value:
        return f"# {block.content}"
    if kind == ContentType.H2.value:
        return f"## {block.content}"
    if kind == ContentType.ALERT_INFO.value:
        return f"[Informação] {block.content}"
    if kind == ContentType.ALERT_WARNING.value:
        return f"[Atenção] {block.content}"
    return block.text()


def page_context(page: Page, max_tokens: Optional[int] = 8000) -> str:
    """Plain-text rendering of *page*: its title, then each non-image block.

    Category pages (no content) render as their title plus the titles of
    their children. Output is truncated at a rough *max_tokens* budget.
    """
    parts = [f"Página: {page.title}"]

    if page.content is None:
        children = page.children or []
        if children:
            parts.append("Seções: " + ", ".join(child.title for child in children))
    else:
        for block in page.content:
            rendered = _format_block(block)
            if rendered:
                parts.append(rendered)

    text = "\n\n".join(parts)
    if max_tokens and _estimate_tokens(text) > max_tokens:
        logger.debug("Truncating context for page %s to ~%d tokens", page.id, max_tokens)
        text = text[: max_tokens * _CHARS_PER_TOKEN]
    return text


def build_sitemap(forest: list[Page]) -> str:
    """Indented outline of every page title with its ``/page/<path>`` link."""
    lines = []
    for path, _titles, page in walk(forest):
        indent = "  " * (len(path) - 1)
        lines.append(f"{indent}- {page.title} ({page_url(path)})")
    return "\n".join(lines)
