"""Publisher port - pushes a document to the public repository."""

from typing import Protocol

from webterms.application.dto.publication_dto import PublishResult
from webterms.domain.entities import DocumentRecord, PublicationJob


class Publisher(Protocol):
    """Port for opening a pull request with a document. Failures raise PublicationError."""

    async def publish(
        self, job: PublicationJob, document: DocumentRecord, pdf: bytes
    ) -> PublishResult: ...
