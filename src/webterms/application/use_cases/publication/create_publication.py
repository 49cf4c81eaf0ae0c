"""Create publication job use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from webterms.application.dto.publication_dto import PublicationCreateInput
from webterms.domain.entities import PublicationJob, target_branch_for
from webterms.domain.exceptions import ActivePublicationExists, NotFound, ValidationError
from webterms.domain.value_objects import PublicationStatus

logger = logging.getLogger(__name__)

SUPPORTED_TARGET = "public-repo"
SUPPORTED_STRATEGY = "pull-request"


class CreatePublicationUseCase:
    """Queue publication of a document. At most one active job per document."""

    def __init__(self, unit_of_work_factory: type, target_repo: str) -> None:
        self._uow_factory = unit_of_work_factory
        self._target_repo = target_repo

    async def execute(self, input_data: PublicationCreateInput) -> PublicationJob:
        target = input_data.target.strip().lower()
        strategy = input_data.strategy.strip().lower()
        if target != SUPPORTED_TARGET:
            raise ValidationError(f"target must be {SUPPORTED_TARGET}", field="target")
        if strategy != SUPPORTED_STRATEGY:
            raise ValidationError(f"strategy must be {SUPPORTED_STRATEGY}", field="strategy")

        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(input_data.document_id, include_deleted=False)
            if not document:
                raise NotFound("Document", str(input_data.document_id))

            existing = await uow.publication_jobs.find_active_for_document(document.id)
            if existing:
                raise ActivePublicationExists(
                    "An active publication job already exists for this document",
                    entity_id=str(existing.id),
                )

            now = datetime.now(UTC)
            job = PublicationJob(
                id=uuid4(),
                document_id=document.id,
                target_repo=self._target_repo,
                target_branch=target_branch_for(document),
                status=PublicationStatus.QUEUED,
                strategy=strategy,
                created_by=input_data.created_by,
                created_at=now,
                updated_at=now,
            )
            await uow.publication_jobs.create(job)

        logger.info("Queued publication job %s for document %s", job.id, job.document_id)
        return job
