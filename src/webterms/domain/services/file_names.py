"""Blob and public file naming."""

import re
from uuid import UUID

from webterms.domain.value_objects import Scope

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")
_DASH_RUNS = re.compile(r"-+")


def sanitize_file_name(file_name: str) -> str:
    """Lower-case file_name and replace unsafe characters with single dashes."""
    cleaned = _UNSAFE_CHARS.sub("-", file_name)
    cleaned = _DASH_RUNS.sub("-", cleaned)
    return cleaned.strip("-").lower()


def public_file_name(scope: Scope) -> str:
    """Download name of a document: {docType}_{platform}_{lang}.pdf."""
    return f"{sanitize_file_name(public_slug(scope))}.pdf"


def stored_file_name(document_id: UUID, scope: Scope) -> str:
    """Blob name of a document: {id}_{docType}_{platform}_{lang}.pdf."""
    return f"{document_id}_{public_file_name(scope)}"


def public_slug(scope: Scope) -> str:
    """Unsanitized public name "{docType}_{platform}_{lang}" used in manifest URLs.

    Platform and lang may both contain underscores, so the slug is matched
    against the slugs of stored scopes, never split back into parts.
    """
    return f"{scope.doc_type}_{scope.platform}_{scope.lang}"
