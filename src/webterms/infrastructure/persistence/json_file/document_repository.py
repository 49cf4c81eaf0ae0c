"""JSON-file document repository implementation."""

from dataclasses import replace
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from webterms.application.dto.document_dto import DocumentQuery
from webterms.domain.entities import DocumentRecord
from webterms.domain.exceptions import NotFound

# Fields a storage migration may rewrite; identity, scope and version are fixed.
_MIGRATABLE_FIELDS = frozenset(
    {
        "stored_file_name",
        "download_file_name",
        "original_mime_type",
        "mime_type",
        "size_bytes",
        "content_hash",
        "converted_to_pdf",
        "updated_at",
    }
)


class JsonDocumentRepository:
    """Document repository over the in-memory list loaded by the unit of work.

    Records keep insertion order. Invariants are checked by the upload
    workflow, not here.
    """

    def __init__(self, documents: list[DocumentRecord]) -> None:
        self._documents = documents
        self.dirty = False

    def _index_of(self, document_id: UUID) -> int:
        for i, d in enumerate(self._documents):
            if d.id == document_id:
                return i
        raise NotFound("Document", str(document_id))

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = True
    ) -> DocumentRecord | None:
        """Get document by id."""
        for d in self._documents:
            if d.id == document_id:
                if d.is_deleted and not include_deleted:
                    return None
                return d
        return None

    async def list_all(self) -> list[DocumentRecord]:
        """All documents, deleted included, in insertion order."""
        return list(self._documents)

    async def query(self, query: DocumentQuery) -> list[DocumentRecord]:
        """Filter documents; newest createdAt first."""
        matches = [d for d in self._documents if query.matches(d)]
        return sorted(matches, key=lambda d: d.created_at, reverse=True)

    async def append(self, document: DocumentRecord) -> DocumentRecord:
        self._documents.append(document)
        self.dirty = True
        return document

    async def soft_delete(self, document_id: UUID) -> DocumentRecord:
        """Set deletedAt once; an already deleted record is returned unchanged."""
        index = self._index_of(document_id)
        current = self._documents[index]
        if current.is_deleted:
            return current
        now = datetime.now(UTC)
        updated = replace(current, deleted_at=now, updated_at=now)
        self._documents[index] = updated
        self.dirty = True
        return updated

    async def migrate_storage(self, document_id: UUID, **fields: Any) -> DocumentRecord:
        """Rewrite storage fields of a record in place."""
        unknown = set(fields) - _MIGRATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be migrated: {', '.join(sorted(unknown))}")
        index = self._index_of(document_id)
        updated = replace(self._documents[index], **fields)
        self._documents[index] = updated
        self.dirty = True
        return updated
