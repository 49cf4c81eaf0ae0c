"""Pytest fixtures for webterms tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

import pytest

from webterms.application.dto.document_dto import DocumentQuery
from webterms.application.dto.publication_dto import PublishResult
from webterms.domain.entities import DocumentRecord, PublicationJob
from webterms.domain.exceptions import ConversionError, NotFound, StorageError
from webterms.domain.services import hash_bytes, public_file_name, stored_file_name
from webterms.domain.value_objects import DocType, Scope

PDF_BYTES = b"%PDF-1.4 fake pdf body"


def make_scope(
    platform: str = "web",
    line: str = "",
    doc_type: DocType = DocType.TERMS,
    lang: str = "it",
    effective_date: str = "2024-01-01",
) -> Scope:
    return Scope(
        platform=platform,
        line=line,
        doc_type=doc_type,
        lang=lang,
        effective_date=effective_date,
    )


def make_record(
    scope: Scope | None = None,
    version: int = 1,
    content: bytes = PDF_BYTES,
    created_at: datetime | None = None,
    deleted: bool = False,
    **overrides: Any,
) -> DocumentRecord:
    """Build a stored PDF record."""
    scope = scope or make_scope()
    doc_id = overrides.pop("id", None) or uuid4()
    created = created_at or datetime(2024, 1, 1, tzinfo=UTC)
    record = DocumentRecord(
        id=doc_id,
        scope=scope,
        version=version,
        content_hash=hash_bytes(content),
        source_content_hash=hash_bytes(content),
        size_bytes=len(content),
        mime_type="application/pdf",
        original_mime_type="application/pdf",
        original_file_name="terms.pdf",
        stored_file_name=stored_file_name(doc_id, scope),
        download_file_name=public_file_name(scope),
        created_at=created,
        updated_at=created,
        deleted_at=created if deleted else None,
    )
    return replace(record, **overrides) if overrides else record


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._documents: list[DocumentRecord] = []

    def add(self, *documents: DocumentRecord) -> None:
        self._documents.extend(documents)

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = True
    ) -> DocumentRecord | None:
        for d in self._documents:
            if d.id == document_id:
                return None if d.is_deleted and not include_deleted else d
        return None

    async def list_all(self) -> list[DocumentRecord]:
        return list(self._documents)

    async def query(self, query: DocumentQuery) -> list[DocumentRecord]:
        matches = [d for d in self._documents if query.matches(d)]
        return sorted(matches, key=lambda d: d.created_at, reverse=True)

    async def append(self, document: DocumentRecord) -> DocumentRecord:
        self._documents.append(document)
        return document

    async def soft_delete(self, document_id: UUID) -> DocumentRecord:
        for i, d in enumerate(self._documents):
            if d.id == document_id:
                if not d.is_deleted:
                    now = datetime.now(UTC)
                    self._documents[i] = replace(d, deleted_at=now, updated_at=now)
                return self._documents[i]
        raise NotFound("Document", str(document_id))

    async def migrate_storage(self, document_id: UUID, **fields: Any) -> DocumentRecord:
        for i, d in enumerate(self._documents):
            if d.id == document_id:
                self._documents[i] = replace(d, **fields)
                return self._documents[i]
        raise NotFound("Document", str(document_id))


class FakePublicationJobRepository:
    """In-memory publication job repository."""

    def __init__(self) -> None:
        self._jobs: dict[UUID, PublicationJob] = {}

    async def get_by_id(self, job_id: UUID) -> PublicationJob | None:
        return self._jobs.get(job_id)

    async def find_active_for_document(self, document_id: UUID) -> PublicationJob | None:
        for job in self._jobs.values():
            if job.document_id == document_id and job.is_active:
                return job
        return None

    async def create(self, job: PublicationJob) -> PublicationJob:
        self._jobs[job.id] = job
        return job

    async def update(self, job: PublicationJob) -> PublicationJob:
        if job.id not in self._jobs:
            raise NotFound("Publication job", str(job.id))
        self._jobs[job.id] = job
        return job


class FakeUnitOfWork:
    """Fake UoW holding in-memory repositories."""

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.publication_jobs = FakePublicationJobRepository()
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same UoW, committing or rolling back like the real one."""

    @asynccontextmanager
    async def _factory():
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return _factory


# --- Fake adapters ---


class FakeBlobStorage:
    """In-memory blob storage."""

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}

    async def read(self, name: str) -> bytes:
        if name not in self.blobs:
            raise StorageError(f"Stored file not found or unreadable: {name}")
        return self.blobs[name]

    async def write(self, name: str, data: bytes) -> None:
        self.blobs[name] = data

    async def delete(self, name: str) -> None:
        self.blobs.pop(name, None)

    async def exists(self, name: str) -> bool:
        return name in self.blobs


class FakeConverter:
    """Prefixes the source with a PDF header; fails when told to."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[str] = []

    async def convert(self, data: bytes, file_name: str) -> bytes:
        self.calls.append(file_name)
        if self.fail:
            raise ConversionError("Cannot convert file to PDF.")
        return b"%PDF-converted " + data

    async def health(self) -> dict[str, Any]:
        return {"mode": "fake", "reachable": not self.fail}


class FakePublisher:
    """Records publications; raises the configured error."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.published: list[tuple[PublicationJob, DocumentRecord, bytes]] = []

    async def publish(
        self, job: PublicationJob, document: DocumentRecord, pdf: bytes
    ) -> PublishResult:
        if self.error:
            raise self.error
        self.published.append((job, document, pdf))
        return PublishResult(
            commit_sha="abc123", pr_url=f"https://github.com/{job.target_repo}/pull/1"
        )


# --- Fixtures ---


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(uow: FakeUnitOfWork):
    return make_uow_factory(uow)


@pytest.fixture
def blob_storage() -> FakeBlobStorage:
    return FakeBlobStorage()


@pytest.fixture
def converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()
