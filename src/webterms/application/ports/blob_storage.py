"""Blob storage port - file contents keyed by generated file name."""

from typing import Protocol


class BlobStorage(Protocol):
    """Port for document file storage. I/O failures raise StorageError."""

    async def read(self, name: str) -> bytes: ...

    async def write(self, name: str, data: bytes) -> None: ...

    async def delete(self, name: str) -> None: ...

    async def exists(self, name: str) -> bool: ...
