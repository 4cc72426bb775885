"""Seed the default admin user and the initial manual content on first startup."""

import logging
import os

from sqlalchemy import func, select

from manualkit.db.models import User, UserRole

logger = logging.getLogger(__name__)


async def seed_default_admin(session_factory):
    """Create a default admin user if no admin exists in the database."""
    async with session_factory() as session:
        result = await session.execute(
            select(func.count(User.id)).where(User.role == UserRole.ADMIN.value)
        )
        admin_count = result.scalar()

        if admin_count > 0:
            logger.debug("Admin already exists (%d), skipping admin seed.", admin_count)
            return

        from manualkit.api.deps import hash_password

        password = os.getenv("MANUAL_ADMIN_PASSWORD", "admin123")
        admin = User(
            username="admin",
            hashed_password=hash_password(password),
            role=UserRole.ADMIN.value,
        )
        session.add(admin)
        await session.commit()
        logger.info(
            "Default admin user created (username=admin). "
            "Change the password via MANUAL_ADMIN_PASSWORD env var."
        )


async def seed_initial_content(session_factory):
    """Write the starter pages and FAQs when those documents do not exist yet."""
    from manualkit.content.seed_data import INITIAL_FAQS, INITIAL_PAGES
    from manualkit.content.store import FAQS_DOCUMENT, PAGES_DOCUMENT, ContentStore
    from manualkit.core.schemas import FaqItem, load_pages

    async with session_factory() as session:
        store = ContentStore(session)
        if not await store.has_document(PAGES_DOCUMENT):
            await store.save_pages(load_pages(INITIAL_PAGES), expected_version=0)
            logger.info("Seeded initial manual pages (%d top-level)", len(INITIAL_PAGES))
        if not await store.has_document(FAQS_DOCUMENT):
            await store.save_faqs([FaqItem(**f) for f in INITIAL_FAQS], expected_version=0)
            logger.info("Seeded initial FAQs (%d)", len(INITIAL_FAQS))
        await session.commit()
