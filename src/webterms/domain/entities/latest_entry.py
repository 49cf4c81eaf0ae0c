"""Latest entry - the current document for a (platform, docType, lang) key."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LatestEntry:
    """Entry of the published manifest."""

    id: str
    line: str
    version: int
    effective_date: str
    sha256: str
    url: str
    download_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "line": self.line,
            "version": self.version,
            "effectiveDate": self.effective_date,
            "sha256": self.sha256,
            "url": self.url,
            "downloadUrl": self.download_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LatestEntry":
        return cls(
            id=data["id"],
            line=data.get("line", ""),
            version=int(data["version"]),
            effective_date=data["effectiveDate"],
            sha256=data["sha256"],
            url=data["url"],
            download_url=data["downloadUrl"],
        )
