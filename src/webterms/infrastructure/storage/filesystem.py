"""Filesystem blob storage."""

import asyncio
import os
import tempfile
from pathlib import Path

from webterms.domain.exceptions import StorageError


class FilesystemBlobStorage:
    """Stores each blob as a flat file under one directory."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def _path(self, name: str) -> Path:
        if not name or Path(name).name != name or name in (".", ".."):
            raise StorageError(f"Invalid blob name: {name!r}")
        return self._root / name

    async def ensure(self) -> None:
        await asyncio.to_thread(self._root.mkdir, parents=True, exist_ok=True)

    async def read(self, name: str) -> bytes:
        path = self._path(name)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise StorageError(f"Stored file not found or unreadable: {name}") from e

    async def write(self, name: str, data: bytes) -> None:
        path = self._path(name)
        try:
            await asyncio.to_thread(self._replace, path, data)
        except OSError as e:
            raise StorageError(f"Cannot write stored file {name}: {e}") from e

    async def delete(self, name: str) -> None:
        path = self._path(name)
        try:
            await asyncio.to_thread(path.unlink, True)
        except OSError as e:
            raise StorageError(f"Cannot delete stored file {name}: {e}") from e

    async def exists(self, name: str) -> bool:
        return await asyncio.to_thread(self._path(name).is_file)

    def _replace(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
