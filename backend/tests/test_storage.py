"""
Unit tests for core/storage.py — uploaded image sink.

Run from the project root:
    cd backend
    pytest tests/test_storage.py -v
"""

import io
from pathlib import Path

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from core.storage import ImageStorage


def _upload(filename, content=b"\xff\xd8\xff", content_type="image/jpeg"):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture()
def storage(tmp_path):
    return ImageStorage(tmp_path / "UploadedImages")


class TestHasContent:

    def test_none(self):
        assert ImageStorage.has_content(None) is False

    def test_empty_filename(self):
        assert ImageStorage.has_content(_upload("")) is False

    def test_real_file(self):
        assert ImageStorage.has_content(_upload("1.jpg")) is True


class TestBuildName:

    def test_keeps_lowercased_extension(self, storage):
        assert storage.build_name("Poster.PNG").endswith(".png")

    def test_drops_directory_components(self, storage):
        name = storage.build_name("../../etc/passwd.jpg")
        assert "/" not in name
        assert ".." not in name

    def test_no_extension(self, storage):
        name = storage.build_name("image")
        assert len(name) == 32
        assert "." not in name


class TestSave:

    def test_creates_root_and_writes_bytes(self, storage, tmp_path):
        assert not storage.root.exists()

        stored = storage.save(_upload("1.jpg", b"0123456789"))

        path = Path(stored)
        assert path.parent == tmp_path / "UploadedImages"
        assert path.read_bytes() == b"0123456789"

    def test_reads_from_start_of_stream(self, storage):
        upload = _upload("1.jpg", b"abcdef")
        upload.file.read()  # consumed by an earlier reader

        stored = storage.save(upload)

        assert Path(stored).read_bytes() == b"abcdef"

    def test_each_save_gets_its_own_file(self, storage):
        first = storage.save(_upload("1.jpg", b"one"))
        second = storage.save(_upload("1.jpg", b"two"))

        assert first != second
        assert Path(first).read_bytes() == b"one"
        assert Path(second).read_bytes() == b"two"
