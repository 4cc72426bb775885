"""Manual Kit Pages API routes — content snapshot and page-tree mutations.

Every mutation loads the whole forest, applies one tree operation and
writes the forest back against the version it read, returning the updated
forest. A body may carry the ``expected_version`` the client last saw in
``GET /api/content``; a stale one is rejected with 409.
"""

import logging
from typing import Callable, Literal, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from manualkit import tree
from manualkit.api.deps import get_current_user, get_store, http_error, require_admin
from manualkit.content.store import ContentStore
from manualkit.core.exceptions import ManualKitError
from manualkit.core.schemas import ContentBlock, ContentType, Page, dump_pages
from manualkit.db.models import User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

LOGO_SETTING = "logo"

PagePath = list[str]


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class VersionedRequest(BaseModel):
    expected_version: Optional[int] = Field(
        default=None, ge=0, description="Forest version the edit was based on; omit to skip the check",
    )


class PagePathRequest(VersionedRequest):
    path: PagePath = Field(..., min_length=1, description="Page ids from the root down to the target")


class PageCreate(VersionedRequest):
    parent_path: Optional[PagePath] = Field(
        default=None, description="Parent page path; omit to add a top-level page",
    )
    title: str = Field(..., min_length=1, max_length=200)
    icon: Optional[str] = Field(default=None, max_length=100)

    model_config = {"str_strip_whitespace": True}


class PageDetailsUpdate(PagePathRequest):
    title: str = Field(..., min_length=1, max_length=200)
    icon: Optional[str] = Field(default=None, max_length=100)

    model_config = {"str_strip_whitespace": True}


class PageContentUpdate(PagePathRequest):
    content: list[ContentBlock]


class BlockCreate(PagePathRequest):
    block_type: ContentType


class BlockMove(PagePathRequest):
    block_id: str
    direction: Literal["up", "down"]


class BlockUpdate(PagePathRequest):
    block_id: str
    content: Union[str, list[str]]


class BlockDelete(PagePathRequest):
    block_id: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _apply(
    store: ContentStore,
    operation: Callable[[list[Page]], list[Page]],
    expected_version: Optional[int] = None,
) -> list[dict]:
    """Load the forest, apply *operation*, save with a version check.

    The check uses *expected_version* when the client sent one, otherwise
    the version just read.
    """
    try:
        forest, version = await store.load_pages()
        if expected_version is None:
            expected_version = version
        updated = operation(forest)
        saved = await store.save_pages(updated, expected_version=expected_version)
    except ManualKitError as exc:
        raise http_error(exc) from exc
    return dump_pages(saved)


# ---------------------------------------------------------------------------
# Read routes
# ---------------------------------------------------------------------------

@router.get("/api/content", summary="Get the whole manual")
async def get_content(
    _user: User = Depends(get_current_user),
    store: ContentStore = Depends(get_store),
):
    """Return the page forest, the FAQ list, the logo URL and both versions."""
    try:
        pages, pages_version = await store.load_pages()
        faqs, faqs_version = await store.load_faqs()
        logo_url = await store.get_setting(LOGO_SETTING)
    except ManualKitError as exc:
        raise http_error(exc) from exc

    return {
        "pages": dump_pages(pages),
        "faqs": [f.model_dump() for f in faqs],
        "logo_url": logo_url,
        "pages_version": pages_version,
        "faqs_version": faqs_version,
    }


@router.get("/api/pages/{page_path:path}", summary="Get one page by path")
async def get_page(
    page_path: str,
    _user: User = Depends(get_current_user),
    store: ContentStore = Depends(get_store),
):
    """Resolve a slash-joined path such as ``diretrizes/sustentabilidade``."""
    path = [segment for segment in page_path.split("/") if segment]
    try:
        forest, _version = await store.load_pages()
    except ManualKitError as exc:
        raise http_error(exc) from exc

    page = tree.locate(forest, path)
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return page.model_dump(mode="json", exclude_none=True)


# ---------------------------------------------------------------------------
# Page mutations (admin only)
# ---------------------------------------------------------------------------

@router.post("/api/pages", status_code=status.HTTP_201_CREATED, summary="Add a page")
async def add_page(
    body: PageCreate,
    admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    """Add a page under ``parent_path`` or at the top level.

    Top-level pages are inserted before the pinned FAQ and Contact pages.
    """
    page = tree.new_page(body.title, body.icon)
    pages = await _apply(
        store,
        lambda forest: tree.insert_child(forest, body.parent_path, page),
        body.expected_version,
    )
    logger.info("Page %s added under %s by %s", page.id, body.parent_path or "(root)", admin.username)
    return pages


@router.patch("/api/pages/details", summary="Edit a page's title and icon")
async def update_page_details(
    body: PageDetailsUpdate,
    _admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    return await _apply(
        store,
        lambda forest: tree.mutate_at(
            forest, body.path, lambda page: tree.update_details(page, body.title, body.icon),
        ),
        body.expected_version,
    )


@router.delete("/api/pages", summary="Delete a page and its sub-pages")
async def delete_page(
    body: PagePathRequest,
    admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    pages = await _apply(store, lambda forest: tree.delete_at(forest, body.path), body.expected_version)
    logger.info("Page %s deleted by %s", "/".join(body.path), admin.username)
    return pages


@router.patch("/api/pages/content", summary="Replace a page's content blocks")
async def replace_page_content(
    body: PageContentUpdate,
    _admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    return await _apply(
        store,
        lambda forest: tree.mutate_at(
            forest, body.path, lambda page: tree.replace_content(page, body.content),
        ),
        body.expected_version,
    )


# ---------------------------------------------------------------------------
# Block mutations (admin only)
# ---------------------------------------------------------------------------

@router.post("/api/pages/blocks", summary="Append a content block")
async def add_block(
    body: BlockCreate,
    _admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    return await _apply(
        store,
        lambda forest: tree.mutate_at(
            forest, body.path, lambda page: tree.add_block(page, body.block_type),
        ),
        body.expected_version,
    )


@router.patch("/api/pages/blocks/move", summary="Move a content block up or down")
async def move_block(
    body: BlockMove,
    _admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    return await _apply(
        store,
        lambda forest: tree.mutate_at(
            forest, body.path, lambda page: tree.move_block(page, body.block_id, body.direction),
        ),
        body.expected_version,
    )


@router.patch("/api/pages/blocks", summary="Edit one content block")
async def update_block(
    body: BlockUpdate,
    _admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    return await _apply(
        store,
        lambda forest: tree.mutate_at(
            forest, body.path, lambda page: tree.update_block(page, body.block_id, body.content),
        ),
        body.expected_version,
    )


@router.delete("/api/pages/blocks", summary="Delete one content block")
async def delete_block(
    body: BlockDelete,
    _admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    return await _apply(
        store,
        lambda forest: tree.mutate_at(
            forest, body.path, lambda page: tree.delete_block(page, body.block_id),
        ),
        body.expected_version,
    )
