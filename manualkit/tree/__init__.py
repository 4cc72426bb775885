"""Manual Kit PageTree engine — pure forest operations and search."""

from .pages import (
    PINNED_PAGE_IDS,
    delete_at,
    insert_child,
    locate,
    mutate_at,
    new_page,
    require_page,
    slugify,
    update_details,
    walk,
)
from .blocks import add_block, delete_block, move_block, replace_content, update_block
from .search import search

__all__ = [
    "PINNED_PAGE_IDS",
    "locate",
    "require_page",
    "mutate_at",
    "delete_at",
    "insert_child",
    "new_page",
    "slugify",
    "update_details",
    "walk",
    "add_block",
    "move_block",
    "update_block",
    "delete_block",
    "replace_content",
    "search",
]
