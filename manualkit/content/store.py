"""Whole-document persistence for the page forest and the FAQ list.

Each collection is stored as a single JSON document in ``content_documents``
and is always written back in full. Every write is a compare-and-set on the
document's version column: a writer that passes a version other than the
stored one gets a ``VersionConflictError`` instead of replacing the document.
The API routes pass the version the client sent when it sent one, otherwise
the version read at the start of the request.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from manualkit.core.exceptions import StorageError, VersionConflictError
from manualkit.core.schemas import FaqItem, Page, dump_pages, load_pages
from manualkit.db.models import ContentDocument, SiteSetting, utcnow

logger = logging.getLogger(__name__)

PAGES_DOCUMENT = "pages"
FAQS_DOCUMENT = "faqs"


class ContentStore:
    """Load and save the manual's content collections on one DB session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def load_pages(self) -> tuple[list[Page], int]:
        """Return the page forest and its version (0 if never written)."""
        data, version = await self._load(PAGES_DOCUMENT)
        return load_pages(data), version

    async def load_faqs(self) -> tuple[list[FaqItem], int]:
        data, version = await self._load(FAQS_DOCUMENT)
        return [FaqItem.model_validate(f) for f in data], version

    async def save_pages(self, pages: list[Page], expected_version: Optional[int] = None) -> list[Page]:
        """Replace the whole forest and return it as stored."""
        data = dump_pages(pages)
        await self._save(PAGES_DOCUMENT, data, expected_version)
        return load_pages(data)

    async def save_faqs(self, faqs: list[FaqItem], expected_version: Optional[int] = None) -> list[FaqItem]:
        data = [f.model_dump(mode="json") for f in faqs]
        await self._save(FAQS_DOCUMENT, data, expected_version)
        return [FaqItem.model_validate(f) for f in data]

    async def has_document(self, name: str) -> bool:
        return await self._current_version(name) > 0

    async def get_setting(self, key: str) -> Optional[str]:
        try:
            setting = await self.db.get(SiteSetting, key)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read setting '{key}': {exc}") from exc
        return setting.value if setting else None

    async def set_setting(self, key: str, value: Optional[str]) -> None:
        try:
            setting = await self.db.get(SiteSetting, key)
            if setting is None:
                self.db.add(SiteSetting(key=key, value=value))
            else:
                setting.value = value
            await self.db.flush()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write setting '{key}': {exc}") from exc

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _load(self, name: str) -> tuple[list, int]:
        try:
            result = await self.db.execute(
                select(ContentDocument.data, ContentDocument.version).where(ContentDocument.name == name)
            )
        except SQLAlchemyError as exc:
            logger.error("Failed to load content document %s: %s", name, exc)
            raise StorageError(f"Failed to load '{name}': {exc}") from exc

        row = result.one_or_none()
        if row is None:
            return [], 0
        return list(row.data or []), row.version

    async def _current_version(self, name: str) -> int:
        result = await self.db.execute(
            select(ContentDocument.version).where(ContentDocument.name == name)
        )
        return result.scalar_one_or_none() or 0

    async def _save(self, name: str, data: list, expected_version: Optional[int]) -> int:
        try:
            current = await self._current_version(name)
            if expected_version is not None and expected_version != current:
                logger.warning(
                    "Rejected write to %s: expected version %d, found %d",
                    name, expected_version, current,
                )
                raise VersionConflictError(name, expected_version, current)

            if current == 0:
                self.db.add(ContentDocument(name=name, data=data, version=1))
                await self.db.flush()
                return 1

            # Compare-and-set: the WHERE on version loses to any writer that
            # committed after our read.
            result = await self.db.execute(
                update(ContentDocument)
                .where(ContentDocument.name == name, ContentDocument.version == current)
                .values(data=data, version=current + 1, updated_at=utcnow())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                actual = await self._current_version(name)
                logger.warning("Concurrent write detected on %s (version %d -> %d)", name, current, actual)
                raise VersionConflictError(name, current, actual)
        except SQLAlchemyError as exc:
            logger.error("Failed to save content document %s: %s", name, exc)
            raise StorageError(f"Failed to save '{name}': {exc}") from exc

        logger.debug("Saved %s at version %d", name, current + 1)
        return current + 1
