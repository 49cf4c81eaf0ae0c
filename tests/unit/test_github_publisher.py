"""Tests for the GitHub and stub publishers."""

import base64
import json
from datetime import UTC, datetime
from uuid import uuid4

import httpx
import pytest

from webterms.domain.entities import PublicationJob, target_branch_for
from webterms.domain.exceptions import PublicationError
from webterms.domain.value_objects import PublicationStatus
from webterms.infrastructure.publishing.github_publisher import GitHubPublisher
from webterms.infrastructure.publishing.stub_publisher import StubPublisher

from tests.conftest import PDF_BYTES, make_record

REPO = "org/public-docs"


def _job(document) -> PublicationJob:
    now = datetime(2024, 5, 1, tzinfo=UTC)
    return PublicationJob(
        id=uuid4(),
        document_id=document.id,
        target_repo=REPO,
        target_branch=target_branch_for(document),
        status=PublicationStatus.RUNNING,
        created_at=now,
        updated_at=now,
    )


class FakeGitHub:
    """Answers the GitHub endpoints used by the publisher."""

    def __init__(self, existing_sha: str | None = None, pr_status: int = 201) -> None:
        self.existing_sha = existing_sha
        self.pr_status = pr_status
        self.requests: list[tuple[str, str, dict | None]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        path = request.url.path
        self.requests.append((request.method, path, body))
        assert request.headers["Authorization"] == "Bearer token"
        if path.endswith("/git/ref/heads/main"):
            return httpx.Response(200, json={"object": {"sha": "base-sha"}})
        if path.endswith("/git/refs"):
            return httpx.Response(422, json={"message": "Reference already exists"})
        if "/contents/" in path and request.method == "GET":
            if self.existing_sha:
                return httpx.Response(200, json={"sha": self.existing_sha})
            return httpx.Response(404)
        if "/contents/" in path and request.method == "PUT":
            return httpx.Response(201, json={"commit": {"sha": "commit-sha"}})
        if path.endswith("/pulls"):
            return httpx.Response(self.pr_status, json={"html_url": f"https://github.com/{REPO}/pull/7"})
        return httpx.Response(404)


def _publisher(github: FakeGitHub) -> GitHubPublisher:
    return GitHubPublisher(token="token", transport=httpx.MockTransport(github))


@pytest.mark.asyncio
async def test_publish_opens_pull_request() -> None:
    document = make_record(version=2)
    github = FakeGitHub()
    result = await _publisher(github).publish(_job(document), document, PDF_BYTES)

    assert result.commit_sha == "commit-sha"
    assert result.pr_url == f"https://github.com/{REPO}/pull/7"
    put = next(r for r in github.requests if r[0] == "PUT")
    assert put[1] == f"/repos/{REPO}/contents/documents/web/terms/it/terms_web_it.pdf"
    assert base64.b64decode(put[2]["content"]) == PDF_BYTES
    assert put[2]["branch"] == "publish/web/terms/it/2"
    assert "sha" not in put[2]
    pr = github.requests[-1][2]
    assert pr["head"] == "publish/web/terms/it/2"
    assert pr["base"] == "main"


@pytest.mark.asyncio
async def test_publish_sends_existing_file_sha() -> None:
    document = make_record()
    github = FakeGitHub(existing_sha="old-sha")
    await _publisher(github).publish(_job(document), document, PDF_BYTES)
    put = next(r for r in github.requests if r[0] == "PUT")
    assert put[2]["sha"] == "old-sha"


@pytest.mark.asyncio
async def test_publish_http_error_raises_publication_error() -> None:
    document = make_record()
    with pytest.raises(PublicationError, match="422"):
        await _publisher(FakeGitHub(pr_status=422)).publish(_job(document), document, PDF_BYTES)


@pytest.mark.asyncio
async def test_stub_publisher() -> None:
    document = make_record()
    job = _job(document)
    result = await StubPublisher().publish(job, document, PDF_BYTES)
    assert result.commit_sha is None
    assert result.pr_url == f"https://github.com/{REPO}/pull/{job.id.hex[:8]}"
