"""Application entry point and composition root."""

import logging

from webterms import __version__
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
from webterms.config import Settings, configure_logging, get_settings
from webterms.domain.services import LatestUrls
from webterms.infrastructure.auth.memory_session_store import InMemorySessionStore
from webterms.infrastructure.conversion.http_converter import HttpConverter
from webterms.infrastructure.conversion.libreoffice_converter import LibreOfficeConverter
from webterms.infrastructure.persistence.json_file.collection_file import JsonCollectionFile
from webterms.infrastructure.persistence.json_file.unit_of_work import create_uow_factory
from webterms.infrastructure.publishing.github_publisher import GitHubPublisher
from webterms.infrastructure.publishing.stub_publisher import StubPublisher
from webterms.infrastructure.storage.filesystem import FilesystemBlobStorage
from webterms.interfaces.api.app import create_app
from webterms.interfaces.api.middleware.auth import AuthMiddleware
from webterms.interfaces.api.middleware.cors import CORSMiddleware
from webterms.interfaces.api.middleware.storage_lifespan import StorageLifespanMiddleware
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

logger = logging.getLogger(__name__)


def create_converter(settings: Settings):
    """Converter service when configured, local soffice otherwise."""
    if settings.converter_url:
        return HttpConverter(settings.converter_url, timeout=settings.converter_timeout_seconds)
    return LibreOfficeConverter(
        binary=settings.soffice_binary, timeout=settings.converter_timeout_seconds
    )


def create_publisher(settings: Settings):
    """GitHub publisher when a token is configured, stub otherwise."""
    if settings.github_token:
        return GitHubPublisher(
            token=settings.github_token,
            base_branch=settings.publication_base_branch,
            api_url=settings.github_api_url,
        )
    logger.warning("No GitHub token configured; publications use the stub publisher")
    return StubPublisher()


def create_webterms_app(settings: Settings | None = None, session_store=None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    collection = JsonCollectionFile(settings.data_file)
    blob_storage = FilesystemBlobStorage(settings.storage_dir)
    uow_factory = create_uow_factory(collection)
    converter = create_converter(settings)
    publisher = create_publisher(settings)
    session_store = session_store or InMemorySessionStore(settings.session_token_map())
    if settings.require_login and not settings.session_token_map():
        logger.warning("Login is required but no session tokens are configured")
    urls = LatestUrls(public_base=settings.public_base_path, api_base=settings.api_base_path)

    upload_document = UploadDocumentUseCase(
        unit_of_work_factory=uow_factory,
        converter=converter,
        blob_storage=blob_storage,
    )
    download_document = DownloadDocumentUseCase(
        unit_of_work_factory=uow_factory,
        converter=converter,
        blob_storage=blob_storage,
    )
    list_documents = ListDocumentsUseCase(unit_of_work_factory=uow_factory)
    delete_document = DeleteDocumentUseCase(unit_of_work_factory=uow_factory)
    create_publication = CreatePublicationUseCase(
        unit_of_work_factory=uow_factory,
        target_repo=settings.publication_target_repo,
    )
    run_publication = RunPublicationUseCase(
        unit_of_work_factory=uow_factory,
        publisher=publisher,
        download_document=download_document,
    )
    get_publication_job = GetPublicationJobUseCase(unit_of_work_factory=uow_factory)
    confirm_merge = ConfirmMergeUseCase(unit_of_work_factory=uow_factory)
    fail_publication = FailPublicationUseCase(unit_of_work_factory=uow_factory)
    get_latest = GetLatestUseCase(unit_of_work_factory=uow_factory, urls=urls)
    get_latest_pdf = GetLatestPdfUseCase(
        unit_of_work_factory=uow_factory,
        download_document=download_document,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        upload_resource=DocumentUploadResource(upload_document),
        documents_resource=DocumentsResource(list_documents),
        document_resource=DocumentResource(delete_document),
        download_resource=DocumentDownloadResource(download_document),
        publications_resource=PublicationsResource(create_publication, run_publication),
        publication_job_resource=PublicationJobResource(get_publication_job),
        publication_merge_resource=PublicationMergeResource(confirm_merge),
        publication_fail_resource=PublicationFailResource(fail_publication),
        latest_manifest_resource=LatestManifestResource(get_latest),
        latest_pdf_resource=LatestPdfResource(get_latest_pdf),
        health_resource=HealthResource(converter),
        middleware=[
            CORSMiddleware(cors_origins),
            StorageLifespanMiddleware(collection, blob_storage),
            AuthMiddleware(session_store, settings.require_login),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("webterms v%s starting on %s:%s", __version__, settings.host, settings.port)
    app = create_webterms_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> None:
    """CLI entry point."""
    run_server()


if __name__ == "__main__":
    main()
