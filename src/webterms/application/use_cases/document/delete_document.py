"""Soft delete document use case."""

import logging
from uuid import UUID

from webterms.domain.entities import DocumentRecord

logger = logging.getLogger(__name__)


class DeleteDocumentUseCase:
    """Soft delete a document. Deleting twice returns the record unchanged."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> DocumentRecord:
        async with self._uow_factory() as uow:
            document = await uow.documents.soft_delete(document_id)
        logger.info("Soft deleted document %s", document_id)
        return document
