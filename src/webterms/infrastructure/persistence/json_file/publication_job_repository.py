"""JSON-file publication job repository implementation."""

from uuid import UUID

from webterms.domain.entities import PublicationJob
from webterms.domain.exceptions import NotFound


class JsonPublicationJobRepository:
    """Publication job repository over the in-memory list loaded by the unit of work."""

    def __init__(self, jobs: list[PublicationJob]) -> None:
        self._jobs = jobs
        self.dirty = False

    async def list_all(self) -> list[PublicationJob]:
        return list(self._jobs)

    async def get_by_id(self, job_id: UUID) -> PublicationJob | None:
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    async def find_active_for_document(self, document_id: UUID) -> PublicationJob | None:
        for job in self._jobs:
            if job.document_id == document_id and job.is_active:
                return job
        return None

    async def create(self, job: PublicationJob) -> PublicationJob:
        self._jobs.append(job)
        self.dirty = True
        return job

    async def update(self, job: PublicationJob) -> PublicationJob:
        for i, existing in enumerate(self._jobs):
            if existing.id == job.id:
                self._jobs[i] = job
                self.dirty = True
                return job
        raise NotFound("Publication job", str(job.id))
