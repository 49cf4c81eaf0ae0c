"""Document record entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from webterms.domain.value_objects import Scope

PDF_MIME_TYPE = "application/pdf"


@dataclass
class DocumentRecord:
    """One uploaded version of a legal document.

    Only soft-delete and storage migration change a record after creation;
    id, scope and version never change.
    """

    id: UUID
    scope: Scope
    version: int
    content_hash: str
    size_bytes: int
    mime_type: str
    original_file_name: str
    stored_file_name: str
    download_file_name: str
    created_at: datetime
    updated_at: datetime
    source_content_hash: str | None = None
    original_mime_type: str | None = None
    converted_to_pdf: bool = False
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_pdf(self) -> bool:
        """True when the stored blob is already the rendered PDF."""
        return (
            self.mime_type.lower() == PDF_MIME_TYPE
            and self.stored_file_name.lower().endswith(".pdf")
        )
