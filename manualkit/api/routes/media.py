"""Manual Kit media routes — image and logo upload, public download."""

import logging
import os

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import Response as RawResponse
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from manualkit.db.session import get_db
from manualkit.db.models import MediaFile, User
from manualkit.api.deps import get_storage, http_error, require_admin
from manualkit.api.routes.pages import LOGO_SETTING
from manualkit.content.store import ContentStore
from manualkit.core.exceptions import StorageError
from manualkit.core.storage import StorageBackend

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media", tags=["media"])

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class MediaUrlResponse(BaseModel):
    id: str
    url: str


def _media_url(media_id: str) -> str:
    return f"/api/media/{media_id}"


async def _store_upload(file: UploadFile, db: AsyncSession, storage: StorageBackend) -> MediaFile:
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Only image uploads are accepted, got '{content_type or 'unknown'}'",
        )

    content = await file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty file")
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {MAX_UPLOAD_BYTES // (1024 * 1024)} MB",
        )

    media = MediaFile(
        filename=file.filename,
        content_type=content_type,
        storage_key="",
        file_size=len(content),
    )
    db.add(media)
    await db.flush()

    ext = os.path.splitext(file.filename or "")[1].lower()
    media.storage_key = f"media/{media.id}{ext}"
    try:
        storage.save(media.storage_key, content)
    except StorageError as exc:
        logger.error("Storage write failed for media %s: %s", media.id, exc)
        raise http_error(exc) from exc

    await db.flush()
    logger.info("Media uploaded: %s (id=%s, %d bytes)", media.filename, media.id, media.file_size)
    return media


@router.post("/images", response_model=MediaUrlResponse, summary="Upload an image for a content block")
async def upload_image(
    file: UploadFile = File(...),
    _admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    storage: StorageBackend = Depends(get_storage),
):
    media = await _store_upload(file, db, storage)
    return MediaUrlResponse(id=media.id, url=_media_url(media.id))


@router.post("/logo", response_model=MediaUrlResponse, summary="Upload and set the site logo")
async def upload_logo(
    file: UploadFile = File(...),
    _admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    storage: StorageBackend = Depends(get_storage),
):
    media = await _store_upload(file, db, storage)
    url = _media_url(media.id)
    await ContentStore(db).set_setting(LOGO_SETTING, url)
    return MediaUrlResponse(id=media.id, url=url)


@router.get("/{media_id}", summary="Download a media file")
async def get_media(
    media_id: str,
    db: AsyncSession = Depends(get_db),
    storage: StorageBackend = Depends(get_storage),
):
    """Serve the stored bytes. Public so images render without a session."""
    media = await db.get(MediaFile, media_id)
    if media is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Media not found")

    try:
        data = storage.load(media.storage_key)
    except StorageError as exc:
        logger.error("Media %s is registered but missing from storage: %s", media_id, exc)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Media not found") from exc

    return RawResponse(content=data, media_type=media.content_type)
