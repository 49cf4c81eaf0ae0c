"""JSON-file Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from webterms.infrastructure.persistence.json_file.collection_file import JsonCollectionFile
from webterms.infrastructure.persistence.json_file.document_repository import (
    JsonDocumentRepository,
)
from webterms.infrastructure.persistence.json_file.publication_job_repository import (
    JsonPublicationJobRepository,
)
from webterms.infrastructure.persistence.json_file.serialization import (
    document_from_json,
    document_to_json,
    job_from_json,
    job_to_json,
)


class JsonUnitOfWork:
    """JSON Unit of Work - holds the file lock, loads everything, writes back on commit."""

    def __init__(self, collection: JsonCollectionFile) -> None:
        self._collection = collection
        self._documents: JsonDocumentRepository | None = None
        self._publication_jobs: JsonPublicationJobRepository | None = None

    async def __aenter__(self) -> "JsonUnitOfWork":
        await self._collection.lock.acquire()
        try:
            data = await self._collection.read()
            self._documents = JsonDocumentRepository(
                [document_from_json(r) for r in data["documents"]]
            )
            self._publication_jobs = JsonPublicationJobRepository(
                [job_from_json(r) for r in data["publicationJobs"]]
            )
        except BaseException:
            self._collection.lock.release()
            raise
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self._collection.lock.release()

    @property
    def documents(self) -> JsonDocumentRepository:
        return self._documents

    @property
    def publication_jobs(self) -> JsonPublicationJobRepository:
        return self._publication_jobs

    async def commit(self) -> None:
        """Rewrite the collection file when anything changed."""
        if not (self._documents.dirty or self._publication_jobs.dirty):
            return
        await self._collection.write(
            {
                "documents": [document_to_json(d) for d in await self._documents.list_all()],
                "publicationJobs": [
                    job_to_json(j) for j in await self._publication_jobs.list_all()
                ],
            }
        )
        self._documents.dirty = False
        self._publication_jobs.dirty = False

    async def rollback(self) -> None:
        """Drop in-memory changes; nothing was written."""
        self._documents.dirty = False
        self._publication_jobs.dirty = False


def create_uow_factory(collection: JsonCollectionFile) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[JsonUnitOfWork]:
        uow = JsonUnitOfWork(collection)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
