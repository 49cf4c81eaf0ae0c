"""Publication job repository port."""

from typing import Protocol
from uuid import UUID

from webterms.domain.entities import PublicationJob


class PublicationJobRepository(Protocol):
    """Port for publication job persistence."""

    async def get_by_id(self, job_id: UUID) -> PublicationJob | None: ...

    async def find_active_for_document(self, document_id: UUID) -> PublicationJob | None: ...

    async def create(self, job: PublicationJob) -> PublicationJob: ...

    async def update(self, job: PublicationJob) -> PublicationJob: ...
