"""Attachment and logo storage on local disk.

Files are stored flat under the upload directory as
``<epoch millis>-<sanitized original name>``; the rest of the system only
ever sees that filename string.
"""

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from apphub.errors.exceptions import NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")
_CHUNK_SIZE = 64 * 1024


def sanitize_filename(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name)


@dataclass
class StoredFile:
    filename: str
    original_name: str
    size: int

    def to_json(self) -> dict:
        return {"filename": self.filename, "originalName": self.original_name, "size": self.size}


class UploadStore:
    def __init__(self, root: str | Path, max_bytes: int, allowed_extensions: list[str]):
        self.root = Path(root)
        self.max_bytes = max_bytes
        self.allowed_extensions = {ext.lower() for ext in allowed_extensions}

    async def save(self, upload: UploadFile) -> StoredFile:
        original = upload.filename or ""
        if not original:
            raise ValidationError("No file uploaded")
        extension = Path(original).suffix.lower()
        if extension not in self.allowed_extensions:
            allowed = ", ".join(sorted(self.allowed_extensions))
            raise ValidationError(
                "Invalid file type",
                [{"field": "file", "message": f"Allowed types: {allowed}", "type": "file_type"}],
            )

        chunks = []
        size = 0
        while chunk := await upload.read(_CHUNK_SIZE):
            size += len(chunk)
            if size > self.max_bytes:
                raise ValidationError(
                    "File too large",
                    [{"field": "file", "message": f"Limit is {self.max_bytes} bytes", "type": "file_size"}],
                )
            chunks.append(chunk)

        filename = f"{int(time.time() * 1000)}-{sanitize_filename(original)}"
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            (self.root / filename).write_bytes(b"".join(chunks))
        except OSError as exc:
            logger.error("Failed to store upload %s: %s", filename, exc)
            raise PersistenceError("File upload failed") from exc

        logger.info("Stored upload %s (%d bytes)", filename, size)
        return StoredFile(filename=filename, original_name=original, size=size)

    def resolve(self, filename: str) -> Path:
        """Path of a stored file; anything outside the upload root is not found."""
        root = self.root.resolve()
        path = (root / filename).resolve()
        if path.parent != root or not path.is_file():
            raise NotFoundError("File", filename)
        return path

    @staticmethod
    def original_name(filename: str) -> str:
        _, sep, rest = filename.partition("-")
        return rest if sep and rest else filename
