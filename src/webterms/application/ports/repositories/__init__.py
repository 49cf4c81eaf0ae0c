"""Repository ports."""

from webterms.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from webterms.application.ports.repositories.publication_job_repository import (
    PublicationJobRepository,
)

__all__ = [
    "DocumentRepository",
    "PublicationJobRepository",
]
