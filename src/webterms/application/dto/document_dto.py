"""Document DTOs."""

from dataclasses import dataclass, field

from webterms.domain.entities import DocumentRecord


@dataclass
class DocumentUploadInput:
    """Input for uploading a document."""

    file_name: str
    content: bytes
    fields: dict[str, object]  # raw scope fields: platform, line, docType, lang, effectiveDate
    mime_type: str = "application/octet-stream"


@dataclass
class DocumentQuery:
    """Filter for listing documents. Empty strings match everything."""

    platform: str = ""
    line: str = ""
    doc_type: str = ""
    lang: str = ""
    search: str = ""
    include_deleted: bool = False

    def matches(self, record: DocumentRecord) -> bool:
        scope = record.scope
        if not self.include_deleted and record.is_deleted:
            return False
        if self.platform and scope.platform != self.platform:
            return False
        if self.line and scope.line != self.line:
            return False
        if self.doc_type and scope.doc_type != self.doc_type:
            return False
        if self.lang and scope.lang != self.lang:
            return False
        if self.search:
            haystack = (
                f"{record.original_file_name} {scope.platform} {scope.doc_type} {scope.lang}"
            ).lower()
            if self.search.lower() not in haystack:
                return False
        return True


@dataclass
class DocumentDownload:
    """PDF bytes ready to be served."""

    content: bytes
    file_name: str
    document: DocumentRecord = field(repr=False)
