"""Domain entities."""

from webterms.domain.entities.document import PDF_MIME_TYPE, DocumentRecord
from webterms.domain.entities.latest_entry import LatestEntry
from webterms.domain.entities.publication_job import PublicationJob, target_branch_for

__all__ = [
    "PDF_MIME_TYPE",
    "DocumentRecord",
    "LatestEntry",
    "PublicationJob",
    "target_branch_for",
]
