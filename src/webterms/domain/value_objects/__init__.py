"""Domain value objects."""

from webterms.domain.value_objects.content_hash import ContentHash
from webterms.domain.value_objects.doc_type import DocType
from webterms.domain.value_objects.publication_status import PublicationStatus
from webterms.domain.value_objects.scope import Scope

__all__ = [
    "ContentHash",
    "DocType",
    "PublicationStatus",
    "Scope",
]
