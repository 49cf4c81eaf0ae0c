"""Publication job entity and its state machine."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from webterms.domain.entities.document import DocumentRecord
from webterms.domain.exceptions import InvalidTransition
from webterms.domain.value_objects import PublicationStatus


def target_branch_for(document: DocumentRecord) -> str:
    """Branch a document version is published on."""
    scope = document.scope
    return f"publish/{scope.platform}/{scope.doc_type}/{scope.lang}/{document.version}"


@dataclass
class PublicationJob:
    """Asynchronous publishing of one document to the public repository.

    queued -> running -> pr_open -> merged, or any active status -> failed.
    merged and failed are terminal.
    """

    id: UUID
    document_id: UUID
    target_repo: str
    target_branch: str
    status: PublicationStatus
    created_at: datetime
    updated_at: datetime
    strategy: str = "pull-request"
    created_by: str | None = None
    commit_sha: str | None = None
    pr_url: str | None = None
    error_message: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    def start(self, now: datetime) -> None:
        self._advance(PublicationStatus.RUNNING, now)

    def open_pr(self, now: datetime, commit_sha: str | None, pr_url: str | None) -> None:
        self._advance(PublicationStatus.PR_OPEN, now)
        self.commit_sha = commit_sha
        self.pr_url = pr_url

    def mark_merged(self, now: datetime) -> None:
        self._advance(PublicationStatus.MERGED, now)

    def fail(self, now: datetime, message: str) -> None:
        self._advance(PublicationStatus.FAILED, now)
        self.error_message = message

    def _advance(self, target: PublicationStatus, now: datetime) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidTransition(
                f"Publication job cannot move from {self.status} to {target}",
                entity_id=str(self.id),
            )
        self.status = target
        self.updated_at = now
