"""Unit tests for the publication job state machine."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from webterms.domain.entities import PublicationJob, target_branch_for
from webterms.domain.exceptions import InvalidTransition
from webterms.domain.value_objects import DocType, PublicationStatus

from tests.conftest import make_record, make_scope

NOW = datetime(2024, 5, 1, tzinfo=UTC)


def _job(status: PublicationStatus = PublicationStatus.QUEUED) -> PublicationJob:
    return PublicationJob(
        id=uuid4(),
        document_id=uuid4(),
        target_repo="org/public-docs",
        target_branch="publish/web/terms/it/1",
        status=status,
        created_at=NOW,
        updated_at=NOW,
    )


def test_happy_path() -> None:
    job = _job()
    later = datetime(2024, 5, 2, tzinfo=UTC)
    job.start(later)
    assert job.status is PublicationStatus.RUNNING
    assert job.updated_at == later
    job.open_pr(later, "abc", "https://github.com/org/public-docs/pull/1")
    assert job.status is PublicationStatus.PR_OPEN
    assert job.commit_sha == "abc"
    job.mark_merged(later)
    assert job.status is PublicationStatus.MERGED
    assert job.is_terminal


@pytest.mark.parametrize(
    "status",
    [PublicationStatus.QUEUED, PublicationStatus.RUNNING, PublicationStatus.PR_OPEN],
)
def test_active_status_can_fail(status) -> None:
    job = _job(status)
    assert job.is_active
    job.fail(NOW, "boom")
    assert job.status is PublicationStatus.FAILED
    assert job.error_message == "boom"


@pytest.mark.parametrize("status", [PublicationStatus.MERGED, PublicationStatus.FAILED])
def test_terminal_status_is_final(status) -> None:
    job = _job(status)
    with pytest.raises(InvalidTransition):
        job.fail(NOW, "again")
    with pytest.raises(InvalidTransition):
        job.start(NOW)
    assert job.status is status


def test_cannot_skip_states() -> None:
    job = _job()
    with pytest.raises(InvalidTransition):
        job.mark_merged(NOW)
    with pytest.raises(InvalidTransition):
        job.open_pr(NOW, None, None)
    assert job.status is PublicationStatus.QUEUED


def test_target_branch_for() -> None:
    record = make_record(make_scope(platform="app", doc_type=DocType.COOKIE, lang="en"), version=3)
    assert target_branch_for(record) == "publish/app/cookie/en/3"
