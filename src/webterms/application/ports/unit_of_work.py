"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from webterms.application.ports.repositories.document_repository import DocumentRepository
from webterms.application.ports.repositories.publication_job_repository import (
    PublicationJobRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def publication_jobs(self) -> PublicationJobRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AsyncIterator[UnitOfWork]: ...
