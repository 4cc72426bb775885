"""Naive full-text search over the page forest and the FAQ list.

A single linear scan with case-insensitive substring matching. Results are
ordered pages first (depth-first, parents before children) then FAQs in
list order; there is no relevance ranking.

Titles and snippets are returned as HTML fragments: the matched text is
wrapped in ``<mark>`` and everything else is escaped.
"""

import html
import logging
import re

from manualkit.core.schemas import ContentType, FaqItem, Page, SearchResult

from .pages import walk

logger = logging.getLogger(__name__)

TITLE_MATCH_SNIPPET = "Correspondência encontrada no título da página."
QUESTION_MATCH_SNIPPET = "Correspondência encontrada na pergunta."

FAQ_PAGE_ID = "faq"
FAQ_PAGE_TITLE = "FAQ"

# Characters of context kept on each side of the first match.
SNIPPET_RADIUS = 50


def highlight(text: str, pattern: re.Pattern) -> str:
    """Escape *text* and wrap every match of *pattern* in ``<mark>``."""
    parts: list[str] = []
    last = 0
    for match in pattern.finditer(text):
        parts.append(html.escape(text[last:match.start()]))
        parts.append(f"<mark>{html.escape(match.group(0))}</mark>")
        last = match.end()
    parts.append(html.escape(text[last:]))
    return "".join(parts)


def make_snippet(text: str, pattern: re.Pattern, radius: int = SNIPPET_RADIUS) -> str:
    """Window around the first match, with '...' on each clipped side."""
    match = pattern.search(text)
    if match is None:
        return ""

    start = max(0, match.start() - radius)
    end = min(len(text), match.end() + radius)
    snippet = highlight(text[start:end], pattern)
    if start > 0:
        snippet = "..." + snippet
    if end < len(text):
        snippet = snippet + "..."
    return snippet


def _search_pages(forest: list[Page], pattern: re.Pattern) -> list[SearchResult]:
    results: list[SearchResult] = []
    for path, titles, page in walk(forest):
        if pattern.search(page.title):
            results.append(SearchResult(
                type="Page",
                id=page.id,
                title=highlight(page.title, pattern),
                path=path,
                path_titles=titles,
                snippet=TITLE_MATCH_SNIPPET,
            ))
            continue

        # At most one hit per page: the first matching block wins.
        for block in page.content or []:
            if block.type == ContentType.IMAGE:
                continue
            text = block.text()
            if pattern.search(text):
                results.append(SearchResult(
                    type="Page",
                    id=page.id,
                    title=html.escape(page.title),
                    path=path,
                    path_titles=titles,
                    snippet=make_snippet(text, pattern),
                ))
                break
    return results


def _search_faqs(faqs: list[FaqItem], pattern: re.Pattern) -> list[SearchResult]:
    results: list[SearchResult] = []
    for faq in faqs:
        question_hit = pattern.search(faq.question) is not None
        answer_hit = pattern.search(faq.answer) is not None
        if not (question_hit or answer_hit):
            continue
        results.append(SearchResult(
            type="FAQ",
            id=faq.id,
            title=highlight(faq.question, pattern),
            path=[FAQ_PAGE_ID],
            path_titles=[FAQ_PAGE_TITLE],
            snippet=make_snippet(faq.answer, pattern) if answer_hit else QUESTION_MATCH_SNIPPET,
        ))
    return results


def search(forest: list[Page], faqs: list[FaqItem], query: str) -> list[SearchResult]:
    """Search page titles, page content and FAQs for *query*.

    Args:
        forest: The page forest to scan.
        faqs: The FAQ list to scan after the pages.
        query: Literal text; matched case-insensitively.

    Returns:
        Page results in traversal order followed by FAQ results. An empty
        query returns an empty list without scanning.
    """
    if not query:
        return []

    pattern = re.compile(re.escape(query), re.IGNORECASE)
    results = _search_pages(forest, pattern) + _search_faqs(faqs, pattern)
    logger.debug("search %r matched %d item(s)", query[:80], len(results))
    return results
