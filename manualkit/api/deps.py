"""FastAPI dependency injection — auth, database, content store, storage, LLM."""

import os
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from manualkit.db.session import get_db
from manualkit.db.models import User, UserRole
from manualkit.content.store import ContentStore
from manualkit.core.storage import LocalStorageBackend
from manualkit.core.llm import LLMClient, get_default_client
from manualkit.core.exceptions import (
    DuplicatePageError,
    LLMError,
    ManualKitError,
    NotFoundError,
    ValidationError,
    VersionConflictError,
)

SECRET_KEY = os.getenv("MANUAL_SECRET_KEY", "dev-secret-change-in-production")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24  # 24 hours
SESSION_COOKIE = "session_token"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


# --- Password hashing ---

def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


# --- JWT tokens ---

def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    return jwt.encode({"sub": user_id, "exp": expire}, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        return payload.get("sub")
    except JWTError:
        return None


# --- FastAPI dependencies ---

async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Authenticate via JWT Bearer token or the session cookie."""
    user_id = None

    if credentials and credentials.credentials:
        user_id = decode_token(credentials.credentials)

    if not user_id:
        session_token = request.cookies.get(SESSION_COOKIE)
        if session_token:
            user_id = decode_token(session_token)

    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    return user


async def require_admin(
    user: User = Depends(get_current_user),
) -> User:
    """Require the current user to have admin role."""
    if user.role != UserRole.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


def get_store(db: AsyncSession = Depends(get_db)) -> ContentStore:
    return ContentStore(db)


def get_storage() -> LocalStorageBackend:
    path = os.getenv("MANUAL_STORAGE_PATH", "./storage")
    return LocalStorageBackend(path)


def get_llm() -> LLMClient:
    return get_default_client()


# --- Error translation ---

def http_error(exc: ManualKitError) -> HTTPException:
    """Map a Manual Kit error onto the HTTP status the API reports for it."""
    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, (DuplicatePageError, VersionConflictError)):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exc, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, LLMError):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(exc))
