"""Get publication job use case."""

from uuid import UUID

from webterms.domain.entities import PublicationJob
from webterms.domain.exceptions import NotFound


class GetPublicationJobUseCase:
    """Get publication job by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, job_id: UUID) -> PublicationJob:
        async with self._uow_factory() as uow:
            job = await uow.publication_jobs.get_by_id(job_id)
            if not job:
                raise NotFound("Publication job", str(job_id))
            return job
