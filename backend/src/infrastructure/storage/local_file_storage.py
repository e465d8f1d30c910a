"""Private on-disk storage for uploaded documents."""

import asyncio
import json
import os
import re
from pathlib import Path
from uuid import uuid4

from application.interfaces import IFileStorage
from domain.exceptions import StorageError
from infrastructure.config import get_logger


KEY_PATTERN = re.compile(r"^[0-9a-f]{32}$")


class LocalFileStorage(IFileStorage):
    """
    Write-once document store in a directory outside any web root.

    Objects are named by random keys and sharded by their first two
    characters. A small JSON sidecar records the media type and size.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()
        self.logger = get_logger(self.__class__.__name__)

    async def save(self, content: bytes, content_type: str) -> str:
        storage_key = uuid4().hex
        try:
            await asyncio.to_thread(self._write, storage_key, content, content_type)
        except OSError as e:
            self.logger.error(f"Failed to write document: {e}", exc_info=True)
            raise StorageError("Could not store the uploaded document.") from e
        return storage_key

    async def exists(self, storage_key: str) -> bool:
        if not KEY_PATTERN.match(storage_key or ""):
            return False
        return await asyncio.to_thread(self._path_for(storage_key).is_file)

    async def read(self, storage_key: str) -> bytes:
        if not KEY_PATTERN.match(storage_key or ""):
            raise StorageError(f"Invalid storage key: {storage_key!r}")
        try:
            return await asyncio.to_thread(self._path_for(storage_key).read_bytes)
        except OSError as e:
            raise StorageError(f"Document {storage_key} could not be read") from e

    def _path_for(self, storage_key: str) -> Path:
        return self.root / storage_key[:2] / storage_key

    def _write(self, storage_key: str, content: bytes, content_type: str) -> None:
        path = self._path_for(storage_key)
        path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)

        meta_path = path.with_suffix(".json")
        created = []
        try:
            # "x" refuses to overwrite an existing object
            with open(path, "xb") as f:
                created.append(path)
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            meta = {"content_type": content_type, "size": len(content)}
            with open(meta_path, "x", encoding="utf-8") as f:
                created.append(meta_path)
                json.dump(meta, f)
        except OSError:
            # A half-written object must not be reported by exists()
            for created_path in created:
                created_path.unlink(missing_ok=True)
            raise
