"""Duplicate detection within a scope."""

from collections.abc import Iterable

from webterms.domain.entities import DocumentRecord
from webterms.domain.value_objects import Scope


def find_duplicate(
    records: Iterable[DocumentRecord],
    scope: Scope,
    source_hash: str | None,
    rendered_hash: str,
) -> DocumentRecord | None:
    """First non-deleted record of scope with the same source or rendered content."""
    for record in records:
        if record.is_deleted or record.scope != scope:
            continue
        same_source = bool(
            source_hash
            and record.source_content_hash
            and record.source_content_hash == source_hash
        )
        if same_source or record.content_hash == rendered_hash:
            return record
    return None
