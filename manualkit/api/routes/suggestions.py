"""Manual Kit suggestion (contact form) routes."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from manualkit.db.session import get_db
from manualkit.db.models import Suggestion, User
from manualkit.api.deps import get_current_user, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])


class SuggestionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)

    model_config = {"str_strip_whitespace": True}


class SuggestionResponse(BaseModel):
    id: str
    name: str
    department: str
    message: str
    submitted_by: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


@router.post(
    "/",
    response_model=SuggestionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a question or suggestion",
)
async def create_suggestion(
    body: SuggestionCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    suggestion = Suggestion(
        name=body.name,
        department=body.department,
        message=body.message,
        submitted_by=user.username,
    )
    db.add(suggestion)
    await db.flush()
    await db.refresh(suggestion)

    logger.info("Suggestion %s submitted by %s", suggestion.id, user.username)
    return suggestion


@router.get(
    "/",
    response_model=list[SuggestionResponse],
    summary="List suggestions, newest first (admin only)",
)
async def list_suggestions(
    limit: int = Query(default=100, ge=1, le=500),
    _admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Suggestion).order_by(Suggestion.created_at.desc()).limit(limit)
    )
    return result.scalars().all()
