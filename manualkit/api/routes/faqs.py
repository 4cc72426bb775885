"""Manual Kit FAQ API routes — list, add, edit, delete.

Mutations rewrite the whole FAQ document and return the updated list. They
accept an optional ``expected_version`` (body field, or query parameter on
delete); a stale one is rejected with 409.
"""

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from manualkit.api.deps import get_current_user, get_store, http_error, require_admin
from manualkit.content import faqs as faq_ops
from manualkit.content.store import ContentStore
from manualkit.core.exceptions import ManualKitError
from manualkit.core.schemas import FaqItem
from manualkit.db.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/faqs", tags=["faqs"])


class VersionedRequest(BaseModel):
    expected_version: Optional[int] = Field(default=None, ge=0)


class FaqCreate(VersionedRequest):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}


class FaqUpdate(VersionedRequest):
    question: Optional[str] = Field(default=None, min_length=1)
    answer: Optional[str] = Field(default=None, min_length=1)

    model_config = {"str_strip_whitespace": True}


async def _apply(
    store: ContentStore,
    operation: Callable[[list[FaqItem]], list[FaqItem]],
    expected_version: Optional[int] = None,
) -> list[FaqItem]:
    try:
        faqs, version = await store.load_faqs()
        if expected_version is None:
            expected_version = version
        return await store.save_faqs(operation(faqs), expected_version=expected_version)
    except ManualKitError as exc:
        raise http_error(exc) from exc


@router.get("/", response_model=list[FaqItem], summary="List FAQs")
async def list_faqs(
    _user: User = Depends(get_current_user),
    store: ContentStore = Depends(get_store),
):
    try:
        faqs, _version = await store.load_faqs()
    except ManualKitError as exc:
        raise http_error(exc) from exc
    return faqs


@router.post(
    "/",
    response_model=list[FaqItem],
    status_code=status.HTTP_201_CREATED,
    summary="Add an FAQ",
)
async def create_faq(
    body: FaqCreate,
    admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    faqs = await _apply(
        store, lambda items: faq_ops.add_faq(items, body.question, body.answer), body.expected_version,
    )
    logger.info("FAQ added by %s", admin.username)
    return faqs


@router.put("/{faq_id}", response_model=list[FaqItem], summary="Edit an FAQ")
async def update_faq(
    faq_id: str,
    body: FaqUpdate,
    _admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    return await _apply(
        store, lambda items: faq_ops.update_faq(items, faq_id, body.question, body.answer),
        body.expected_version,
    )


@router.delete("/{faq_id}", response_model=list[FaqItem], summary="Delete an FAQ")
async def delete_faq(
    faq_id: str,
    expected_version: Optional[int] = Query(default=None, ge=0),
    admin: User = Depends(require_admin),
    store: ContentStore = Depends(get_store),
):
    faqs = await _apply(store, lambda items: faq_ops.delete_faq(items, faq_id), expected_version)
    logger.info("FAQ %s deleted by %s", faq_id, admin.username)
    return faqs
