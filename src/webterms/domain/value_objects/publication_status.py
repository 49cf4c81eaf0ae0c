"""Publication job statuses."""

from enum import StrEnum


class PublicationStatus(StrEnum):
    """Lifecycle of a publication job."""

    QUEUED = "queued"
    RUNNING = "running"
    PR_OPEN = "pr_open"
    MERGED = "merged"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PublicationStatus.MERGED, PublicationStatus.FAILED)

    @property
    def is_active(self) -> bool:
        return not self.is_terminal

    def can_transition_to(self, target: "PublicationStatus") -> bool:
        """Return True when moving from this status to target is allowed."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[PublicationStatus, frozenset[PublicationStatus]] = {
    PublicationStatus.QUEUED: frozenset({PublicationStatus.RUNNING, PublicationStatus.FAILED}),
    PublicationStatus.RUNNING: frozenset({PublicationStatus.PR_OPEN, PublicationStatus.FAILED}),
    PublicationStatus.PR_OPEN: frozenset({PublicationStatus.MERGED, PublicationStatus.FAILED}),
    PublicationStatus.MERGED: frozenset(),
    PublicationStatus.FAILED: frozenset(),
}
