"""Download document use case (with lazy PDF migration)."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from webterms.application.dto.document_dto import DocumentDownload
from webterms.application.ports import BlobStorage, Converter
from webterms.domain.entities import PDF_MIME_TYPE, DocumentRecord
from webterms.domain.exceptions import NotFound, StorageError
from webterms.domain.services import hash_bytes, public_file_name, stored_file_name, verify

logger = logging.getLogger(__name__)


class DownloadDocumentUseCase:
    """Serve the PDF of a document, converting legacy non-PDF blobs on first access.

    Conversion runs with no unit of work open; the record is migrated in a
    second unit of work and the old blob is removed only after that commit.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        converter: Converter,
        blob_storage: BlobStorage,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._converter = converter
        self._storage = blob_storage

    async def execute(self, document_id: UUID) -> DocumentDownload:
        """Get PDF bytes of a document (deleted documents stay downloadable)."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
        if not document:
            raise NotFound("Document", str(document_id))
        return await self.resolve(document)

    async def resolve(self, document: DocumentRecord) -> DocumentDownload:
        """Read the stored PDF or convert and migrate the record."""
        raw = await self._storage.read(document.stored_file_name)
        if document.is_pdf:
            if document.content_hash and not verify(raw, document.content_hash):
                raise StorageError(f"Stored file of document {document.id} failed integrity check")
            return DocumentDownload(
                content=raw,
                file_name=document.download_file_name or "document.pdf",
                document=document,
            )

        pdf = await self._converter.convert(
            raw, document.original_file_name or document.stored_file_name
        )
        old_name = document.stored_file_name
        new_name = stored_file_name(document.id, document.scope)
        await self._storage.write(new_name, pdf)
        try:
            async with self._uow_factory() as uow:
                migrated = await uow.documents.migrate_storage(
                    document.id,
                    stored_file_name=new_name,
                    download_file_name=public_file_name(document.scope),
                    original_mime_type=document.original_mime_type
                    or document.mime_type
                    or "application/octet-stream",
                    mime_type=PDF_MIME_TYPE,
                    size_bytes=len(pdf),
                    content_hash=hash_bytes(pdf),
                    converted_to_pdf=True,
                    updated_at=datetime.now(UTC),
                )
        except Exception:
            if new_name != old_name:
                await self._storage.delete(new_name)
            raise

        if new_name != old_name:
            await self._storage.delete(old_name)
        logger.info("Migrated document %s to PDF storage %s", document.id, new_name)
        return DocumentDownload(content=pdf, file_name=migrated.download_file_name, document=migrated)
