"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from webterms.application.use_cases.document.delete_document import DeleteDocumentUseCase
from webterms.application.use_cases.document.download_document import (
    DownloadDocumentUseCase,
)
from webterms.application.use_cases.document.list_documents import ListDocumentsUseCase
from webterms.application.use_cases.document.upload_document import UploadDocumentUseCase
from webterms.application.use_cases.latest.get_latest import GetLatestUseCase
from webterms.application.use_cases.latest.get_latest_pdf import GetLatestPdfUseCase
from webterms.application.use_cases.publication.confirm_merge import ConfirmMergeUseCase
from webterms.application.use_cases.publication.create_publication import (
    CreatePublicationUseCase,
)
from webterms.application.use_cases.publication.fail_publication import FailPublicationUseCase
from webterms.application.use_cases.publication.get_publication_job import (
    GetPublicationJobUseCase,
)
from webterms.application.use_cases.publication.run_publication import RunPublicationUseCase
from webterms.infrastructure.auth.memory_session_store import InMemorySessionStore
from webterms.interfaces.api.app import create_app
from webterms.interfaces.api.middleware.auth import AuthMiddleware
from webterms.interfaces.api.middleware.cors import CORSMiddleware
from webterms.interfaces.api.resources.documents import (
    DocumentDownloadResource,
    DocumentResource,
    DocumentsResource,
    DocumentUploadResource,
)
from webterms.interfaces.api.resources.health import HealthResource
from webterms.interfaces.api.resources.public import LatestManifestResource, LatestPdfResource
from webterms.interfaces.api.resources.publications import (
    PublicationFailResource,
    PublicationJobResource,
    PublicationMergeResource,
    PublicationsResource,
)


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def auth_headers(session_store) -> dict[str, str]:
    return {"Authorization": f"Bearer {session_store.issue('editor@example.org')}"}


@pytest.fixture
def app(uow_factory, converter, blob_storage, publisher, session_store):
    """Falcon ASGI app wired to in-memory fakes; writes require a session."""
    download_document = DownloadDocumentUseCase(
        unit_of_work_factory=uow_factory,
        converter=converter,
        blob_storage=blob_storage,
    )
    upload_document = UploadDocumentUseCase(
        unit_of_work_factory=uow_factory,
        converter=converter,
        blob_storage=blob_storage,
    )
    return create_app(
        upload_resource=DocumentUploadResource(upload_document),
        documents_resource=DocumentsResource(ListDocumentsUseCase(uow_factory)),
        document_resource=DocumentResource(DeleteDocumentUseCase(uow_factory)),
        download_resource=DocumentDownloadResource(download_document),
        publications_resource=PublicationsResource(
            CreatePublicationUseCase(uow_factory, target_repo="org/public-docs"),
            RunPublicationUseCase(uow_factory, publisher, download_document),
        ),
        publication_job_resource=PublicationJobResource(GetPublicationJobUseCase(uow_factory)),
        publication_merge_resource=PublicationMergeResource(ConfirmMergeUseCase(uow_factory)),
        publication_fail_resource=PublicationFailResource(FailPublicationUseCase(uow_factory)),
        latest_manifest_resource=LatestManifestResource(GetLatestUseCase(uow_factory)),
        latest_pdf_resource=LatestPdfResource(
            GetLatestPdfUseCase(uow_factory, download_document)
        ),
        health_resource=HealthResource(converter),
        middleware=[
            CORSMiddleware(["*"]),
            AuthMiddleware(session_store, require_login=True),
        ],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
