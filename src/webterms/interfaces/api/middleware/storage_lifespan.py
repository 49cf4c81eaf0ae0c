"""Storage lifespan middleware - prepares the data file and blob directory on startup."""

from typing import Any

from webterms.infrastructure.persistence.json_file.collection_file import JsonCollectionFile
from webterms.infrastructure.storage.filesystem import FilesystemBlobStorage


class StorageLifespanMiddleware:
    """Middleware that creates the collection file and storage directory on startup."""

    def __init__(self, collection: JsonCollectionFile, blob_storage: FilesystemBlobStorage) -> None:
        self._collection = collection
        self._storage = blob_storage

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        """Ensure storage exists when ASGI server starts."""
        await self._storage.ensure()
        await self._collection.ensure()
