"""Mapping between entities and the persisted JSON layout (camelCase keys)."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from webterms.domain.entities import DocumentRecord, PublicationJob
from webterms.domain.value_objects import DocType, PublicationStatus, Scope


def to_iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def from_iso(value: str | None) -> datetime | None:
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def document_to_json(d: DocumentRecord) -> dict[str, Any]:
    return {
        "id": str(d.id),
        "originalFileName": d.original_file_name,
        "downloadFileName": d.download_file_name,
        "storedFileName": d.stored_file_name,
        "originalMimeType": d.original_mime_type,
        "sourceSha256": d.source_content_hash,
        "mimeType": d.mime_type,
        "sizeBytes": d.size_bytes,
        "sha256": d.content_hash,
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
    }


def document_from_json(r: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=UUID(r["id"]),
        scope=Scope(
            platform=r["platform"],
            line=r.get("line") or "",
            doc_type=DocType(r["docType"]),
            lang=r["lang"],
            effective_date=r["effectiveDate"],
        ),
        version=int(r.get("version") or 0),
        content_hash=r.get("sha256") or "",
        source_content_hash=r.get("sourceSha256"),
        size_bytes=int(r.get("sizeBytes") or 0),
        mime_type=r.get("mimeType") or "application/octet-stream",
        original_mime_type=r.get("originalMimeType"),
        original_file_name=r.get("originalFileName") or "",
        stored_file_name=r["storedFileName"],
        download_file_name=r.get("downloadFileName") or "",
        converted_to_pdf=bool(r.get("convertedToPdf")),
        created_at=from_iso(r["createdAt"]),
        updated_at=from_iso(r.get("updatedAt") or r["createdAt"]),
        deleted_at=from_iso(r.get("deletedAt")),
    )


def job_to_json(j: PublicationJob) -> dict[str, Any]:
    return {
        "id": str(j.id),
        "documentId": str(j.document_id),
        "targetRepo": j.target_repo,
        "targetBranch": j.target_branch,
        "status": j.status.value,
        "strategy": j.strategy,
        "commitSha": j.commit_sha,
        "prUrl": j.pr_url,
        "errorMessage": j.error_message,
        "createdBy": j.created_by,
        "createdAt": to_iso(j.created_at),
        "updatedAt": to_iso(j.updated_at),
    }


def job_from_json(r: dict[str, Any]) -> PublicationJob:
    return PublicationJob(
        id=UUID(r["id"]),
        document_id=UUID(r["documentId"]),
        target_repo=r["targetRepo"],
        target_branch=r["targetBranch"],
        status=PublicationStatus(r["status"]),
        strategy=r.get("strategy") or "pull-request",
        commit_sha=r.get("commitSha"),
        pr_url=r.get("prUrl"),
        error_message=r.get("errorMessage"),
        created_by=r.get("createdBy"),
        created_at=from_iso(r["createdAt"]),
        updated_at=from_iso(r.get("updatedAt") or r["createdAt"]),
    )
