"""Confirm merge use case - pr_open -> merged."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from webterms.domain.entities import PublicationJob
from webterms.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class ConfirmMergeUseCase:
    """Record that the pull request of a job was merged."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, job_id: UUID) -> PublicationJob:
        async with self._uow_factory() as uow:
            job = await uow.publication_jobs.get_by_id(job_id)
            if not job:
                raise NotFound("Publication job", str(job_id))
            job.mark_merged(datetime.now(UTC))
            await uow.publication_jobs.update(job)
        logger.info("Publication job %s merged", job_id)
        return job
