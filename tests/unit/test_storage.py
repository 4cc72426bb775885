"""Unit tests for manualkit.core.storage.LocalStorageBackend."""

import io

import pytest

from manualkit.core.exceptions import ConfigurationError, StorageError
from manualkit.core.storage import LocalStorageBackend


@pytest.fixture
def storage(tmp_path):
    return LocalStorageBackend(str(tmp_path / "media"))


class TestLocalStorageBackend:

    def test_save_and_load(self, storage):
        storage.save("media/abc.png", b"dados")

        assert storage.exists("media/abc.png")
        assert storage.load("media/abc.png") == b"dados"

    def test_save_stream(self, storage):
        storage.save("logo.png", io.BytesIO(b"fluxo"))

        assert storage.load("logo.png") == b"fluxo"

    def test_delete(self, storage):
        storage.save("x.bin", b"1")
        storage.delete("x.bin")

        assert not storage.exists("x.bin")

    def test_missing_key(self, storage):
        with pytest.raises(StorageError):
            storage.load("nada.png")

    def test_path_traversal_rejected(self, storage):
        with pytest.raises(StorageError):
            storage.save("../fora.txt", b"x")

    def test_base_path_must_be_directory(self, tmp_path):
        target = tmp_path / "arquivo"
        target.write_text("x")

        with pytest.raises(ConfigurationError):
            LocalStorageBackend(str(target))
