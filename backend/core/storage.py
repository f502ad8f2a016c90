"""core/storage.py — Local file sink for uploaded event images.

Files are written under a single root directory (settings.upload_dir) with a
generated name; only the extension of the client's filename is kept. The
returned path is what gets stored on Event.image_path.

The write is not coordinated with the database transaction: if the DB commit
fails after save(), the file stays on disk.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path, PurePath
from typing import Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024


class ImageStorage:
    """Writes uploaded images to `root` and hands back their stored path."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    @staticmethod
    def has_content(upload: Optional[UploadFile]) -> bool:
        """True when the form actually carried a file (browsers send an empty part otherwise)."""
        return upload is not None and bool(upload.filename)

    def build_name(self, filename: str) -> str:
        suffix = PurePath(filename).suffix.lower()
        return f"{uuid.uuid4().hex}{suffix}"

    def save(self, upload: UploadFile) -> str:
        """Copy the upload into storage and return the stored path."""
        self.root.mkdir(parents=True, exist_ok=True)
        name = self.build_name(upload.filename or "")
        target = self.root / name

        upload.file.seek(0)
        with target.open("wb") as out:
            shutil.copyfileobj(upload.file, out, _CHUNK_SIZE)

        stored = target.as_posix()
        logger.info(
            "image stored",
            extra={
                "original_filename": upload.filename,
                "content_type": upload.content_type,
                "stored_path": stored,
                "size_bytes": target.stat().st_size,
            },
        )
        return stored
