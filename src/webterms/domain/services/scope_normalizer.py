"""Canonicalize and validate the scope fields of an upload."""

import re
from collections.abc import Mapping

from webterms.domain.exceptions import ValidationError
from webterms.domain.value_objects import DocType, Scope

# Pattern only: 2024-13-40 is accepted as a literal string.
_EFFECTIVE_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _field(raw: Mapping[str, object], *names: str) -> str:
    for name in names:
        value = raw.get(name)
        if value is not None:
            return str(value).strip()
    return ""


def normalize_scope(raw: Mapping[str, object]) -> Scope:
    """Build a Scope from raw request fields (camelCase or snake_case keys).

    platform, line and docType are lower-cased; lang keeps its case, so
    "it" and "IT" are distinct scopes.
    """
    platform = _field(raw, "platform").lower()
    line = _field(raw, "line").lower()
    doc_type = _field(raw, "docType", "doc_type").lower()
    lang = _field(raw, "lang")
    effective_date = _field(raw, "effectiveDate", "effective_date")

    if not platform:
        raise ValidationError("platform is required", field="platform")
    try:
        parsed_type = DocType(doc_type)
    except ValueError:
        raise ValidationError(
            "docType must be one of: terms, privacy, cookie", field="docType"
        ) from None
    if not lang:
        raise ValidationError("lang is required", field="lang")
    if not _EFFECTIVE_DATE.fullmatch(effective_date):
        raise ValidationError("effectiveDate must be YYYY-MM-DD", field="effectiveDate")

    return Scope(
        platform=platform,
        line=line,
        doc_type=parsed_type,
        lang=lang,
        effective_date=effective_date,
    )
