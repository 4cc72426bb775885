"""Manual Kit search route."""

import logging

from fastapi import APIRouter, Depends, Query

from manualkit import tree
from manualkit.api.deps import get_current_user, get_store, http_error
from manualkit.content.store import ContentStore
from manualkit.core.exceptions import ManualKitError
from manualkit.core.schemas import SearchResult
from manualkit.db.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=list[SearchResult], summary="Search pages and FAQs")
async def search_content(
    q: str = Query(default="", max_length=200, description="Text to look for"),
    _user: User = Depends(get_current_user),
    store: ContentStore = Depends(get_store),
):
    """Case-insensitive substring search over page titles, page content and FAQs.

    Leading and trailing whitespace in ``q`` is dropped before matching, so a
    blank query returns no results and a padded one matches like the bare text.
    """
    query = q.strip()
    if not query:
        return []

    try:
        pages, _ = await store.load_pages()
        faqs, _ = await store.load_faqs()
    except ManualKitError as exc:
        raise http_error(exc) from exc

    results = tree.search(pages, faqs, query)
    logger.info("Search for %r returned %d result(s)", query[:80], len(results))
    return results
