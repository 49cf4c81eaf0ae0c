"""Get latest PDF use case - public download by scope or by public file name."""

from webterms.application.dto.document_dto import DocumentDownload
from webterms.application.use_cases.document.download_document import (
    DownloadDocumentUseCase,
)
from webterms.domain.exceptions import NotFound
from webterms.domain.services import select_latest, select_latest_by_slug
from webterms.domain.value_objects import DocType


class GetLatestPdfUseCase:
    """Serve the PDF of the latest document for (platform, docType, lang)."""

    def __init__(
        self,
        unit_of_work_factory: type,
        download_document: DownloadDocumentUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._download = download_document

    async def execute(self, platform: str, doc_type: DocType, lang: str) -> DocumentDownload:
        async with self._uow_factory() as uow:
            records = await uow.documents.list_all()
        document = select_latest(records, platform, doc_type, lang)
        if not document:
            raise NotFound("Latest document", f"{platform}/{doc_type}/{lang}")
        return await self._download.resolve(document)

    async def execute_by_name(self, slug: str) -> DocumentDownload:
        """Resolve the manifest URL name "{docType}_{platform}_{lang}" (without .pdf)."""
        async with self._uow_factory() as uow:
            records = await uow.documents.list_all()
        document = select_latest_by_slug(records, slug)
        if not document:
            raise NotFound("Public file", slug)
        return await self._download.resolve(document)
