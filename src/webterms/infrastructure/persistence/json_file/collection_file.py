"""Single JSON file holding every persisted collection."""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from webterms.domain.exceptions import StorageError

EMPTY_COLLECTION: dict[str, list[Any]] = {"documents": [], "publicationJobs": []}


class JsonCollectionFile:
    """Reads the whole collection and rewrites it whole.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a failed write never leaves a truncated file. ``lock``
    serializes read-modify-write cycles within the process.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self.lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def ensure(self) -> None:
        """Create the file with empty collections when missing."""
        if not await asyncio.to_thread(self._path.exists):
            await self.write(EMPTY_COLLECTION)

    async def read(self) -> dict[str, list[dict[str, Any]]]:
        try:
            raw = await asyncio.to_thread(self._path.read_text, "utf-8")
        except FileNotFoundError:
            return {"documents": [], "publicationJobs": []}
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e
        try:
            parsed = json.loads(raw or "{}")
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt collection file {self._path}: {e}") from e
        documents = parsed.get("documents")
        jobs = parsed.get("publicationJobs")
        return {
            "documents": documents if isinstance(documents, list) else [],
            "publicationJobs": jobs if isinstance(jobs, list) else [],
        }

    async def write(self, data: dict[str, Any]) -> None:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
        try:
            await asyncio.to_thread(self._replace, payload)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e

    def _replace(self, payload: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
