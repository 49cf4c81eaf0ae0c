"""Latest selection and the published manifest."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from webterms.domain.entities import DocumentRecord, LatestEntry
from webterms.domain.services.file_names import public_slug
from webterms.domain.value_objects import DocType

# platform -> docType -> lang -> entry
Manifest = dict[str, dict[str, dict[str, LatestEntry]]]


@dataclass(frozen=True)
class LatestUrls:
    """Base paths used to build the public and download URLs of an entry."""

    public_base: str = "/v1/public"
    api_base: str = "/v1"

    def public_url(self, record: DocumentRecord) -> str:
        return f"{self.public_base}/{public_slug(record.scope)}.pdf"

    def download_url(self, record: DocumentRecord) -> str:
        return f"{self.api_base}/documents/{record.id}/download"


def recency_key(record: DocumentRecord) -> tuple:
    """Sort key: effective date, then version, then creation time."""
    return (record.scope.effective_date, record.version, record.created_at)


def compare_by_recency(a: DocumentRecord, b: DocumentRecord) -> int:
    """Negative when a is older than b, positive when newer, 0 when equal."""
    key_a, key_b = recency_key(a), recency_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def build_latest(
    records: Iterable[DocumentRecord], urls: LatestUrls | None = None
) -> Manifest:
    """Build the manifest from a full scan of the records.

    Records are grouped by (platform, line, docType, lang). The manifest is
    keyed without line: when several lines share (platform, docType, lang),
    the group seen last in the scan overwrites the earlier ones.
    """
    urls = urls or LatestUrls()
    winners: dict[tuple[str, str, str, str], DocumentRecord] = {}
    for record in records:
        if record.is_deleted:
            continue
        key = record.scope.group_key
        current = winners.get(key)
        if current is None or compare_by_recency(current, record) < 0:
            winners[key] = record

    latest: Manifest = {}
    for record in winners.values():
        scope = record.scope
        by_type = latest.setdefault(scope.platform, {}).setdefault(scope.doc_type.value, {})
        by_type[scope.lang] = LatestEntry(
            id=str(record.id),
            line=scope.line,
            version=record.version,
            effective_date=scope.effective_date,
            sha256=record.content_hash,
            url=urls.public_url(record),
            download_url=urls.download_url(record),
        )
    return latest


def _newest(records: Iterable[DocumentRecord]) -> DocumentRecord | None:
    """Greatest record by recency; on a full tie the record stored later wins."""
    selected: DocumentRecord | None = None
    for record in records:
        if selected is None or compare_by_recency(selected, record) <= 0:
            selected = record
    return selected


def select_latest(
    records: Iterable[DocumentRecord], platform: str, doc_type: DocType, lang: str
) -> DocumentRecord | None:
    """Newest non-deleted record for (platform, docType, lang) across all lines."""
    return _newest(
        r
        for r in records
        if not r.is_deleted
        and (r.scope.platform, r.scope.doc_type, r.scope.lang) == (platform, doc_type, lang)
    )


def select_latest_by_slug(
    records: Iterable[DocumentRecord], slug: str
) -> DocumentRecord | None:
    """Newest non-deleted record whose public slug is slug (the manifest URL name)."""
    return _newest(r for r in records if not r.is_deleted and public_slug(r.scope) == slug)


def manifest_to_dict(manifest: Manifest) -> dict[str, Any]:
    """JSON-ready form of a manifest."""
    return {
        platform: {
            doc_type: {lang: entry.to_dict() for lang, entry in by_lang.items()}
            for doc_type, by_lang in by_type.items()
        }
        for platform, by_type in manifest.items()
    }


def manifest_from_dict(data: dict[str, Any]) -> Manifest:
    return {
        platform: {
            doc_type: {lang: LatestEntry.from_dict(entry) for lang, entry in by_lang.items()}
            for doc_type, by_lang in by_type.items()
        }
        for platform, by_type in data.items()
    }
