"""Document repository port."""

from typing import Any, Protocol
from uuid import UUID

from webterms.application.dto.document_dto import DocumentQuery
from webterms.domain.entities import DocumentRecord


class DocumentRepository(Protocol):
    """Port for the document store (append-only log with soft delete)."""

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = True
    ) -> DocumentRecord | None: ...

    async def list_all(self) -> list[DocumentRecord]: ...

    async def query(self, query: DocumentQuery) -> list[DocumentRecord]: ...

    async def append(self, document: DocumentRecord) -> DocumentRecord: ...

    async def soft_delete(self, document_id: UUID) -> DocumentRecord: ...

    async def migrate_storage(self, document_id: UUID, **fields: Any) -> DocumentRecord: ...
