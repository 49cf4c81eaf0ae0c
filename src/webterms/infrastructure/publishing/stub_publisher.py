"""Stub publisher used when no GitHub token is configured."""

import logging

from webterms.application.dto.publication_dto import PublishResult
from webterms.domain.entities import DocumentRecord, PublicationJob

logger = logging.getLogger(__name__)


class StubPublisher:
    """Reports a predictable pull request URL without calling GitHub."""

    async def publish(
        self, job: PublicationJob, document: DocumentRecord, pdf: bytes
    ) -> PublishResult:
        pr_url = f"https://github.com/{job.target_repo}/pull/{job.id.hex[:8]}"
        logger.info("Stub publication of document %s -> %s", document.id, pr_url)
        return PublishResult(commit_sha=None, pr_url=pr_url)
