"""Falcon ASGI application."""

import logging

import falcon.asgi
from falcon.asgi import App

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


async def log_exception(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    upload_resource: DocumentUploadResource,
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    download_resource: DocumentDownloadResource,
    publications_resource: PublicationsResource,
    publication_job_resource: PublicationJobResource,
    publication_merge_resource: PublicationMergeResource,
    publication_fail_resource: PublicationFailResource,
    latest_manifest_resource: LatestManifestResource,
    latest_pdf_resource: LatestPdfResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/upload", upload_resource)
    app.add_route("/v1/documents/{document_id}", document_resource)
    app.add_route("/v1/documents/{document_id}/download", download_resource)
    app.add_route("/v1/publications/{document_id}", publications_resource)
    app.add_route("/v1/publications/jobs/{job_id}", publication_job_resource)
    app.add_route("/v1/publications/jobs/{job_id}/merged", publication_merge_resource)
    app.add_route("/v1/publications/jobs/{job_id}/failed", publication_fail_resource)
    app.add_route("/v1/public/latest.json", latest_manifest_resource)
    app.add_route("/v1/public/{platform}/{doc_type}/{lang}.pdf", latest_pdf_resource)
    app.add_route("/v1/public/{file_slug}.pdf", latest_pdf_resource, suffix="by_name")
    return app
