"""Manual Kit media storage backend interface and local implementation.

Uploaded images and the site logo are stored as opaque blobs under a key;
their content type and id live in the ``media_files`` table.
"""

import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from .exceptions import ConfigurationError, StorageError

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Abstract interface for media blob storage."""

    @abstractmethod
    def save(self, key: str, data: bytes | BinaryIO) -> str:
        """Save data and return the storage key."""
        ...

    @abstractmethod
    def load(self, key: str) -> bytes:
        """Load data by key."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete data by key."""
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if key exists."""
        ...


class LocalStorageBackend(StorageBackend):
    """Local filesystem storage backend."""

    def __init__(self, base_path: str = "./storage"):
        self.base_path = Path(base_path)
        if self.base_path.exists() and not self.base_path.is_dir():
            raise ConfigurationError(f"Storage path is not a directory: {base_path}")
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _resolve(self, key: str) -> Path:
        resolved = (self.base_path / key).resolve()
        if not resolved.is_relative_to(self.base_path.resolve()):
            raise StorageError(f"Path traversal detected: {key}")
        return resolved

    def save(self, key: str, data: bytes | BinaryIO) -> str:
        path = self._resolve(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(data, (bytes, bytearray)):
                path.write_bytes(data)
            else:
                with open(path, "wb") as f:
                    shutil.copyfileobj(data, f)
        except OSError as exc:
            raise StorageError(f"Failed to write {key}: {exc}") from exc
        logger.debug("Stored media blob %s", key)
        return key

    def load(self, key: str) -> bytes:
        path = self._resolve(key)
        if not path.is_file():
            raise StorageError(f"File not found: {key}")
        return path.read_bytes()

    def delete(self, key: str) -> None:
        path = self._resolve(key)
        if path.is_file():
            path.unlink()

    def exists(self, key: str) -> bool:
        return self._resolve(key).is_file()
