"""Upload document use case."""

import logging
from datetime import UTC, datetime
from pathlib import PurePath
from uuid import uuid4

from webterms.application.dto.document_dto import DocumentUploadInput
from webterms.application.ports import BlobStorage, Converter
from webterms.domain.entities import PDF_MIME_TYPE, DocumentRecord
from webterms.domain.exceptions import DuplicateDocument, ValidationError
from webterms.domain.services import (
    find_duplicate,
    hash_bytes,
    next_version,
    normalize_scope,
    public_file_name,
    stored_file_name,
)

logger = logging.getLogger(__name__)


class UploadDocumentUseCase:
    """Store a new document version: normalize, convert, deduplicate, version, save."""

    def __init__(
        self,
        unit_of_work_factory: type,
        converter: Converter,
        blob_storage: BlobStorage,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._converter = converter
        self._storage = blob_storage

    async def execute(self, input_data: DocumentUploadInput) -> DocumentRecord:
        """Upload document. Nothing is stored when conversion fails."""
        file_name = input_data.file_name.strip()
        if not file_name:
            raise ValidationError("fileName is required", field="fileName")
        if not input_data.content:
            raise ValidationError("contentBase64 is required", field="contentBase64")
        scope = normalize_scope(input_data.fields)

        if PurePath(file_name).suffix.lower() == ".pdf":
            pdf, converted = input_data.content, False
        else:
            pdf = await self._converter.convert(input_data.content, file_name)
            converted = True

        source_hash = hash_bytes(input_data.content)
        pdf_hash = hash_bytes(pdf)

        written: str | None = None
        try:
            async with self._uow_factory() as uow:
                records = await uow.documents.list_all()
                duplicate = find_duplicate(records, scope, source_hash, pdf_hash)
                if duplicate:
                    raise DuplicateDocument(
                        "Duplicate document content", entity_id=str(duplicate.id)
                    )

                doc_id = uuid4()
                blob_name = stored_file_name(doc_id, scope)
                await self._storage.write(blob_name, pdf)
                written = blob_name

                now = datetime.now(UTC)
                document = DocumentRecord(
                    id=doc_id,
                    scope=scope,
                    version=next_version(records, scope),
                    content_hash=pdf_hash,
                    source_content_hash=source_hash,
                    size_bytes=len(pdf),
                    mime_type=PDF_MIME_TYPE,
                    original_mime_type=input_data.mime_type or "application/octet-stream",
                    original_file_name=file_name,
                    stored_file_name=blob_name,
                    download_file_name=public_file_name(scope),
                    converted_to_pdf=converted,
                    created_at=now,
                    updated_at=now,
                )
                await uow.documents.append(document)
        except Exception:
            if written:
                await self._storage.delete(written)
            raise

        logger.info(
            "Stored document %s (%s/%s/%s/%s v%d)",
            document.id,
            scope.platform,
            scope.doc_type,
            scope.lang,
            scope.effective_date,
            document.version,
        )
        return document
