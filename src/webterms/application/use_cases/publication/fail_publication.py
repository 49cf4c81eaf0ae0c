"""Fail publication job use case - releases a job stuck in an active status."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from webterms.domain.entities import PublicationJob
from webterms.domain.exceptions import NotFound

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Marked as failed manually"


class FailPublicationUseCase:
    """Move a queued, running or pr_open job to failed so a new job can be created."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, job_id: UUID, message: str | None = None) -> PublicationJob:
        async with self._uow_factory() as uow:
            job = await uow.publication_jobs.get_by_id(job_id)
            if not job:
                raise NotFound("Publication job", str(job_id))
            job.fail(datetime.now(UTC), (message or "").strip() or DEFAULT_FAILURE_MESSAGE)
            await uow.publication_jobs.update(job)
        logger.warning("Publication job %s marked failed: %s", job_id, job.error_message)
        return job
