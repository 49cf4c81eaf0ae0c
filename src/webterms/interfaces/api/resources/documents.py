"""Document API resources."""

import base64
import binascii
import logging
from uuid import UUID

import falcon.asgi

from webterms.application.dto.document_dto import DocumentQuery, DocumentUploadInput
from webterms.application.use_cases.document.delete_document import DeleteDocumentUseCase
from webterms.application.use_cases.document.download_document import (
    DownloadDocumentUseCase,
)
from webterms.application.use_cases.document.list_documents import ListDocumentsUseCase
from webterms.application.use_cases.document.upload_document import UploadDocumentUseCase
from webterms.domain.entities import DocumentRecord
from webterms.domain.exceptions import (
    ConversionError,
    DuplicateDocument,
    NotFound,
    StorageError,
    ValidationError,
)
from webterms.infrastructure.persistence.json_file.serialization import to_iso

logger = logging.getLogger(__name__)

_SCOPE_FIELDS = ("platform", "line", "docType", "lang", "effectiveDate")


def _unauthorized(resp: falcon.asgi.Response, action: str) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": f"Unauthorized: login required for {action}"}


def _parse_uuid(value: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid UUID"}
        return None


class DocumentUploadResource:
    """POST /v1/documents/upload - upload a document as base64 JSON."""

    def __init__(self, upload_document: UploadDocumentUseCase) -> None:
        self._upload_document = upload_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create a new document version."""
        if not getattr(req.context, "user", None):
            _unauthorized(resp, "upload")
            return

        body = await req.get_media(default_when_empty={})
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "JSON object expected"}
            return
        file_name = str(body.get("fileName") or "").strip()
        content_b64 = str(body.get("contentBase64") or "").strip()
        if not file_name or not content_b64:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "fileName and contentBase64 are required"}
            return
        try:
            content = base64.b64decode(content_b64, validate=True)
        except (binascii.Error, ValueError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid base64 payload"}
            return

        try:
            document = await self._upload_document.execute(
                DocumentUploadInput(
                    file_name=file_name,
                    content=content,
                    fields={k: body.get(k) for k in _SCOPE_FIELDS},
                    mime_type=str(body.get("mimeType") or "application/octet-stream"),
                )
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "field": e.field}
            return
        except DuplicateDocument as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e), "duplicateDocumentId": e.entity_id}
            return
        except ConversionError as e:
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}
            return

        resp.status = falcon.HTTP_201
        resp.media = {"document": _document_to_dict(document)}


class DocumentsResource:
    """GET /v1/documents - list documents, newest submission first."""

    def __init__(self, list_documents: ListDocumentsUseCase) -> None:
        self._list_documents = list_documents

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List documents matching query parameters."""
        query = DocumentQuery(
            platform=(req.get_param("platform") or "").strip().lower(),
            line=(req.get_param("line") or "").strip().lower(),
            doc_type=(req.get_param("docType") or "").strip().lower(),
            lang=(req.get_param("lang") or "").strip(),
            search=(req.get_param("search") or "").strip().lower(),
            include_deleted=req.get_param("includeDeleted") == "true",
        )
        documents = await self._list_documents.execute(query)
        resp.media = {"documents": [_document_to_dict(d) for d in documents]}
        resp.status = falcon.HTTP_200


class DocumentResource:
    """DELETE /v1/documents/{document_id} - soft delete."""

    def __init__(self, delete_document: DeleteDocumentUseCase) -> None:
        self._delete_document = delete_document

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Soft delete document; repeated deletes return the same record."""
        if not getattr(req.context, "user", None):
            _unauthorized(resp, "delete")
            return
        doc_id = _parse_uuid(document_id, resp)
        if not doc_id:
            return
        try:
            document = await self._delete_document.execute(doc_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.media = {"document": _document_to_dict(document)}
        resp.status = falcon.HTTP_200


class DocumentDownloadResource:
    """GET /v1/documents/{document_id}/download - PDF attachment."""

    def __init__(self, download_document: DownloadDocumentUseCase) -> None:
        self._download_document = download_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Download the PDF of a document."""
        doc_id = _parse_uuid(document_id, resp)
        if not doc_id:
            return
        try:
            download = await self._download_document.execute(doc_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        except (ConversionError, StorageError) as e:
            logger.warning("Download of document %s failed: %s", doc_id, e)
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_200
        resp.content_type = "application/pdf"
        resp.set_header(
            "Content-Disposition", f'attachment; filename="{download.file_name or "document.pdf"}"'
        )
        resp.data = download.content


def _document_to_dict(d: DocumentRecord) -> dict:
    return {
        "id": str(d.id),
        "originalFileName": d.original_file_name,
        "downloadFileName": d.download_file_name,
        "storedFileName": d.stored_file_name,
        "originalMimeType": d.original_mime_type,
        "mimeType": d.mime_type,
        "sizeBytes": d.size_bytes,
        "sha256": d.content_hash,
        "sourceSha256": d.source_content_hash,
        "platform": d.scope.platform,
        "line": d.scope.line,
        "docType": d.scope.doc_type.value,
        "lang": d.scope.lang,
        "effectiveDate": d.scope.effective_date,
        "version": d.version,
        "convertedToPdf": d.converted_to_pdf,
        "createdAt": to_iso(d.created_at),
        "updatedAt": to_iso(d.updated_at),
        "deletedAt": to_iso(d.deleted_at),
        "isDeleted": d.is_deleted,
    }
