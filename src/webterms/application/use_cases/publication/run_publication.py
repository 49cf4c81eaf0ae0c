"""Run publication job use case - the worker step."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from webterms.application.ports import Publisher
from webterms.application.use_cases.document.download_document import (
    DownloadDocumentUseCase,
)
from webterms.domain.entities import PublicationJob
from webterms.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class RunPublicationUseCase:
    """Advance a queued job to running, publish, then pr_open or failed.

    Failures are recorded on the job instead of being raised: the job status
    is what callers poll. There is no retry; a new job is the retry.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        publisher: Publisher,
        download_document: DownloadDocumentUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._publisher = publisher
        self._download = download_document

    async def execute(self, job_id: UUID) -> PublicationJob:
        async with self._uow_factory() as uow:
            job = await uow.publication_jobs.get_by_id(job_id)
            if not job:
                raise NotFound("Publication job", str(job_id))
            job.start(datetime.now(UTC))
            await uow.publication_jobs.update(job)
        logger.info("Publication job %s running", job_id)

        try:
            download = await self._download.execute(job.document_id)
            result = await self._publisher.publish(job, download.document, download.content)
        except Exception as e:
            logger.exception("Publication job %s failed", job_id)
            return await self._finish(job_id, error=str(e) or type(e).__name__)

        return await self._finish(job_id, commit_sha=result.commit_sha, pr_url=result.pr_url)

    async def _finish(
        self,
        job_id: UUID,
        *,
        commit_sha: str | None = None,
        pr_url: str | None = None,
        error: str | None = None,
    ) -> PublicationJob:
        async with self._uow_factory() as uow:
            job = await uow.publication_jobs.get_by_id(job_id)
            if not job:
                raise NotFound("Publication job", str(job_id))
            now = datetime.now(UTC)
            if error is not None:
                job.fail(now, error)
            else:
                job.open_pr(now, commit_sha, pr_url)
            await uow.publication_jobs.update(job)
        logger.info("Publication job %s is %s", job_id, job.status)
        return job
