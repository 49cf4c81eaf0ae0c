"""List documents use case."""

from webterms.application.dto.document_dto import DocumentQuery
from webterms.domain.entities import DocumentRecord


class ListDocumentsUseCase:
    """Filter documents, most recent submission first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, query: DocumentQuery) -> list[DocumentRecord]:
        async with self._uow_factory() as uow:
            return await uow.documents.query(query)
