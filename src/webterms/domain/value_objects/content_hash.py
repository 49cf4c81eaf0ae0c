"""Content digest used for duplicate detection and integrity checks."""

import re
from dataclasses import dataclass

_HEX_SHA256 = re.compile(r"[0-9a-f]{64}")


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 digest of document bytes (lower-case hex)."""

    value: str

    def __post_init__(self) -> None:
        if not _HEX_SHA256.fullmatch(self.value):
            raise ValueError("SHA-256 hash must be 64 lower-case hex characters")
