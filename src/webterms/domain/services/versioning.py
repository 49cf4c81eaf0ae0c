"""Version assignment."""

from collections.abc import Iterable

from webterms.domain.entities import DocumentRecord
from webterms.domain.value_objects import Scope


def next_version(records: Iterable[DocumentRecord], scope: Scope) -> int:
    """Next version number for scope.

    Deleted records count, so deleting and re-uploading never reuses a version.
    """
    versions = [record.version for record in records if record.scope == scope]
    return max(versions, default=0) + 1
