"""Content block operations on a single page.

These take a page and return a new page; combine them with
``mutate_at`` to apply them inside a forest.
"""

from typing import Literal, Union

from pydantic import ValidationError as PydanticValidationError

from manualkit.core.exceptions import BlockNotFoundError, CategoryPageError, ValidationError
from manualkit.core.schemas import ContentBlock, ContentType, Page

from .pages import timestamp_ms

Direction = Literal["up", "down"]

DEFAULT_BLOCK_CONTENT: dict[ContentType, Union[str, list[str]]] = {
    ContentType.H1: "Novo Título 1",
    ContentType.H2: "Novo Título 2",
    ContentType.P: "Novo parágrafo.",
    ContentType.UL: ["Novo item"],
    ContentType.OL: ["Novo item"],
    ContentType.IMAGE: "",
    ContentType.ALERT_INFO: "Nova informação.",
    ContentType.ALERT_WARNING: "Novo aviso.",
}


def _blocks_of(page: Page) -> list[ContentBlock]:
    if page.content is None:
        raise CategoryPageError(page.id)
    return page.content


def _block_index(blocks: list[ContentBlock], block_id: str) -> int:
    for i, block in enumerate(blocks):
        if block.id == block_id:
            return i
    raise BlockNotFoundError(block_id)


def new_block_id(blocks: list[ContentBlock]) -> str:
    """``block_<ms>``, bumped until it is unique on the page."""
    taken = {b.id for b in blocks}
    stamp = timestamp_ms()
    while f"block_{stamp}" in taken:
        stamp += 1
    return f"block_{stamp}"


def add_block(page: Page, block_type: ContentType) -> Page:
    """Append a block of *block_type* holding its placeholder payload."""
    blocks = _blocks_of(page)
    block_type = ContentType(block_type)
    default = DEFAULT_BLOCK_CONTENT[block_type]
    block = ContentBlock(
        id=new_block_id(blocks),
        type=block_type,
        content=list(default) if isinstance(default, list) else default,
    )
    return page.model_copy(update={"content": [*blocks, block]})


def move_block(page: Page, block_id: str, direction: Direction) -> Page:
    """Swap a block with its neighbour; a move past either end is a no-op."""
    if direction not in ("up", "down"):
        raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")

    blocks = page.content or []
    index = _block_index(blocks, block_id)
    new_index = index - 1 if direction == "up" else index + 1
    if new_index < 0 or new_index >= len(blocks):
        return page

    reordered = list(blocks)
    moved = reordered.pop(index)
    reordered.insert(new_index, moved)
    return page.model_copy(update={"content": reordered})


def update_block(page: Page, block_id: str, content: Union[str, list[str]]) -> Page:
    blocks = _blocks_of(page)
    index = _block_index(blocks, block_id)
    current = blocks[index]
    try:
        updated = ContentBlock(id=current.id, type=current.type, content=content)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid content for block {block_id}: {exc.errors()[0]['msg']}") from exc
    return page.model_copy(update={"content": [*blocks[:index], updated, *blocks[index + 1:]]})


def delete_block(page: Page, block_id: str) -> Page:
    blocks = _blocks_of(page)
    index = _block_index(blocks, block_id)
    return page.model_copy(update={"content": [*blocks[:index], *blocks[index + 1:]]})


def replace_content(page: Page, blocks: list[ContentBlock]) -> Page:
    """Swap the whole block list, as the page editor saves it."""
    _blocks_of(page)
    ids = [b.id for b in blocks]
    if len(ids) != len(set(ids)):
        raise ValidationError(f"Duplicate block ids on page '{page.id}'")
    return page.model_copy(update={"content": list(blocks)})
