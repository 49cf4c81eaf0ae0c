"""Publication DTOs."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class PublicationCreateInput:
    """Input for starting a publication job."""

    document_id: UUID
    target: str = "public-repo"
    strategy: str = "pull-request"
    created_by: str | None = None


@dataclass(frozen=True)
class PublishResult:
    """What the publisher reports once a pull request is open."""

    commit_sha: str | None
    pr_url: str | None
