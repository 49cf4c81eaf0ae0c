"""Legal document types."""

from enum import StrEnum


class DocType(StrEnum):
    """Kinds of legal document that can be published."""

    TERMS = "terms"
    PRIVACY = "privacy"
    COOKIE = "cookie"
