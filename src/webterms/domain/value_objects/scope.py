"""Document scope - the tuple that groups versions of one document."""

from dataclasses import dataclass

from webterms.domain.value_objects.doc_type import DocType


@dataclass(frozen=True)
class Scope:
    """Identifying tuple of a document: versions are numbered per scope."""

    platform: str
    line: str
    doc_type: DocType
    lang: str
    effective_date: str

    @property
    def group_key(self) -> tuple[str, str, str, str]:
        """Key used to pick the latest record: scope without the effective date."""
        return (self.platform, self.line, self.doc_type.value, self.lang)
