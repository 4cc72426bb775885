"""Path-addressed operations over the manual's page forest.

A forest is an ordered ``list[Page]``; each page may carry ``children``.
Pages are addressed only by their path (the list of ids from a root page
down to the target) because ids are unique among siblings, not globally.

Every operation returns a new forest. Only the pages along the addressed
path are rebuilt (via ``model_copy``); every other subtree is shared with
the input by identity. A path that does not resolve raises
``PageNotFoundError``.
"""

import re
import time
import unicodedata
from typing import Callable, Iterator, Optional

from manualkit.core.exceptions import DuplicatePageError, PageNotFoundError
from manualkit.core.schemas import ContentBlock, ContentType, Page

# Top-level pages that always stay at the end of the forest, in this order
# of appearance.
PINNED_PAGE_IDS = frozenset({"faq", "contato"})

DEFAULT_PAGE_ICON = "DocumentTextIcon"

Transform = Callable[[Page], Page]


def timestamp_ms() -> int:
    return int(time.time() * 1000)


def slugify(text: str) -> str:
    """Lowercase ASCII slug with runs of other characters collapsed to '-'."""
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", ascii_text.lower()).strip("-") or "page"


def new_page(title: str, icon: Optional[str] = None, now_ms: Optional[int] = None) -> Page:
    """Build a fresh content page whose first block is an H1 of its title."""
    stamp = now_ms if now_ms is not None else timestamp_ms()
    return Page(
        id=f"{slugify(title)}_{stamp}",
        title=title,
        icon=icon or DEFAULT_PAGE_ICON,
        content=[ContentBlock(id=f"c_{stamp}", type=ContentType.H1, content=title)],
    )


def _index_of(pages: list[Page], page_id: str) -> int:
    for i, page in enumerate(pages):
        if page.id == page_id:
            return i
    return -1


def _ensure_unique(siblings: list[Page], page_id: str) -> None:
    if _index_of(siblings, page_id) != -1:
        raise DuplicatePageError(page_id)


def locate(forest: list[Page], path: list[str]) -> Optional[Page]:
    """Return the page at *path*, or ``None`` as soon as a segment misses."""
    if not path:
        return None

    level: Optional[list[Page]] = forest
    found: Optional[Page] = None
    for segment in path:
        idx = _index_of(level or [], segment)
        if idx == -1:
            return None
        found = level[idx]
        level = found.children
    return found


def require_page(forest: list[Page], path: list[str]) -> Page:
    page = locate(forest, path)
    if page is None:
        raise PageNotFoundError(path)
    return page


def _rebuild(
    level: list[Page],
    path: list[str],
    full_path: list[str],
    replace: Callable[[list[Page], int], list[Page]],
) -> list[Page]:
    """Walk *path* and let *replace* produce the new sibling list at its end."""
    idx = _index_of(level, path[0])
    if idx == -1:
        raise PageNotFoundError(full_path)
    if len(path) == 1:
        return replace(level, idx)

    node = level[idx]
    if not node.children:
        raise PageNotFoundError(full_path)
    children = _rebuild(node.children, path[1:], full_path, replace)
    return [*level[:idx], node.model_copy(update={"children": children}), *level[idx + 1:]]


def mutate_at(forest: list[Page], path: list[str], transform: Transform) -> list[Page]:
    """Replace the page at *path* with ``transform(page)``."""
    if not path:
        raise PageNotFoundError(path)
    return _rebuild(
        forest,
        list(path),
        list(path),
        lambda level, i: [*level[:i], transform(level[i]), *level[i + 1:]],
    )


def delete_at(forest: list[Page], path: list[str]) -> list[Page]:
    """Remove the page at *path* together with its subtree."""
    if not path:
        raise PageNotFoundError(path)
    return _rebuild(
        forest,
        list(path),
        list(path),
        lambda level, i: [*level[:i], *level[i + 1:]],
    )


def insert_child(forest: list[Page], parent_path: Optional[list[str]], node: Page) -> list[Page]:
    """Append *node* under *parent_path*, or at the top level when it is empty.

    Top-level inserts keep the pinned pages (FAQ, Contact) as the trailing
    entries: the new page is placed after every regular page and before the
    pinned ones, which keep their relative order.
    """
    if not parent_path:
        _ensure_unique(forest, node.id)
        regular = [p for p in forest if p.id not in PINNED_PAGE_IDS]
        pinned = [p for p in forest if p.id in PINNED_PAGE_IDS]
        return [*regular, node, *pinned]

    def _append(parent: Page) -> Page:
        children = parent.children or []
        _ensure_unique(children, node.id)
        return parent.model_copy(update={"children": [*children, node]})

    return mutate_at(forest, parent_path, _append)


def update_details(page: Page, title: str, icon: Optional[str] = None) -> Page:
    update = {"title": title}
    if icon:
        update["icon"] = icon
    return page.model_copy(update=update)


def walk(
    forest: list[Page],
    path: tuple[str, ...] = (),
    titles: tuple[str, ...] = (),
) -> Iterator[tuple[list[str], list[str], Page]]:
    """Yield ``(path, path_titles, page)`` depth-first, parents first."""
    for page in forest:
        page_path = (*path, page.id)
        page_titles = (*titles, page.title)
        yield list(page_path), list(page_titles), page
        if page.children:
            yield from walk(page.children, page_path, page_titles)
