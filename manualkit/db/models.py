"""Manual Kit database models."""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, JSON, String, Text
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import DateTime as _SADateTime, TypeDecorator


class TZDateTime(TypeDecorator):
    """A DateTime type that stores timezone-aware datetimes in PostgreSQL
    and handles naive datetimes for SQLite compatibility."""
    impl = _SADateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Base(DeclarativeBase):
    pass


def generate_uuid():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=generate_uuid)
    username = Column(String(100), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), default=UserRole.USER.value)
    created_at = Column(TZDateTime, default=utcnow)


class ContentDocument(Base):
    """A whole-document JSON collection (the page forest or the FAQ list).

    ``version`` is bumped on every write and checked by compare-and-set
    writers.
    """
    __tablename__ = "content_documents"

    name = Column(String(50), primary_key=True)  # pages, faqs
    data = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False, default=1)
    updated_at = Column(TZDateTime, default=utcnow, onupdate=utcnow)


class Suggestion(Base):
    __tablename__ = "suggestions"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String(200), nullable=False)
    department = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    submitted_by = Column(String(100), nullable=True)
    created_at = Column(TZDateTime, default=utcnow, index=True)


class MediaFile(Base):
    __tablename__ = "media_files"

    id = Column(String, primary_key=True, default=generate_uuid)
    filename = Column(String(500), nullable=True)
    content_type = Column(String(100), nullable=False, default="application/octet-stream")
    storage_key = Column(String(1000), nullable=False)
    file_size = Column(Integer, default=0)
    created_at = Column(TZDateTime, default=utcnow)


class SiteSetting(Base):
    __tablename__ = "site_settings"

    key = Column(String(100), primary_key=True)  # logo
    value = Column(Text, nullable=True)
    updated_at = Column(TZDateTime, default=utcnow, onupdate=utcnow)
