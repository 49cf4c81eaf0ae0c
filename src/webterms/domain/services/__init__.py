"""Domain services - pure functions over records and scopes."""

from webterms.domain.services.duplicates import find_duplicate
from webterms.domain.services.file_names import (
    public_file_name,
    public_slug,
    sanitize_file_name,
    stored_file_name,
)
from webterms.domain.services.hashing import hash_bytes, verify
from webterms.domain.services.latest import (
    LatestUrls,
    Manifest,
    build_latest,
    compare_by_recency,
    manifest_from_dict,
    manifest_to_dict,
    select_latest,
    select_latest_by_slug,
)
from webterms.domain.services.scope_normalizer import normalize_scope
from webterms.domain.services.versioning import next_version

__all__ = [
    "LatestUrls",
    "Manifest",
    "build_latest",
    "compare_by_recency",
    "find_duplicate",
    "hash_bytes",
    "manifest_from_dict",
    "manifest_to_dict",
    "normalize_scope",
    "next_version",
    "public_file_name",
    "public_slug",
    "sanitize_file_name",
    "select_latest",
    "select_latest_by_slug",
    "stored_file_name",
    "verify",
]
