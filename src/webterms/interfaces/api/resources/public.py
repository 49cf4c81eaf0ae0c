"""Public API resources - latest manifest and latest PDFs."""

import logging

import falcon.asgi

from webterms.application.dto.document_dto import DocumentDownload
from webterms.application.use_cases.latest.get_latest import GetLatestUseCase
from webterms.application.use_cases.latest.get_latest_pdf import GetLatestPdfUseCase
from webterms.domain.exceptions import ConversionError, NotFound, StorageError
from webterms.domain.services import manifest_to_dict
from webterms.domain.value_objects import DocType

logger = logging.getLogger(__name__)


class LatestManifestResource:
    """GET /v1/public/latest.json - platform -> docType -> lang -> latest entry."""

    def __init__(self, get_latest: GetLatestUseCase) -> None:
        self._get_latest = get_latest

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        manifest = await self._get_latest.execute()
        resp.media = {"latest": manifest_to_dict(manifest)}
        resp.status = falcon.HTTP_200


def _send_pdf(resp: falcon.asgi.Response, download: DocumentDownload) -> None:
    resp.status = falcon.HTTP_200
    resp.content_type = "application/pdf"
    resp.set_header(
        "Content-Disposition", f'inline; filename="{download.file_name or "document.pdf"}"'
    )
    resp.cache_control = ["public", "max-age=60"]
    resp.data = download.content


class LatestPdfResource:
    """GET /v1/public/{platform}/{doc_type}/{lang}.pdf and /v1/public/{file_slug}.pdf."""

    def __init__(self, get_latest_pdf: GetLatestPdfUseCase) -> None:
        self._get_latest_pdf = get_latest_pdf

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        platform: str,
        doc_type: str,
        lang: str,
    ) -> None:
        """Latest PDF by scope."""
        try:
            parsed_type = DocType(doc_type.lower())
        except ValueError:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Invalid docType"}
            return
        await self._respond(resp, self._get_latest_pdf.execute(platform.lower(), parsed_type, lang))

    async def on_get_by_name(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        file_slug: str,
    ) -> None:
        """Latest PDF by public file name {docType}_{platform}_{lang}.pdf."""
        await self._respond(resp, self._get_latest_pdf.execute_by_name(file_slug))

    async def _respond(self, resp: falcon.asgi.Response, pending) -> None:
        try:
            download = await pending
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No document found for requested scope"}
            return
        except (ConversionError, StorageError) as e:
            logger.warning("Public PDF could not be served: %s", e)
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}
            return
        _send_pdf(resp, download)
