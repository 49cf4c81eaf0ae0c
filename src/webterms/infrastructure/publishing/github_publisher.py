"""GitHub publisher - commits the PDF on a branch and opens a pull request."""

import base64
import logging
from typing import Any

import httpx

from webterms.application.dto.publication_dto import PublishResult
from webterms.domain.entities import DocumentRecord, PublicationJob
from webterms.domain.exceptions import PublicationError

logger = logging.getLogger(__name__)


class GitHubPublisher:
    """Publishes through the GitHub REST API.

    File contents are written with the sha read just before (optimistic
    concurrency): a concurrent writer makes the PUT fail instead of being
    overwritten.
    """

    def __init__(
        self,
        token: str,
        base_branch: str = "main",
        api_url: str = "https://api.github.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_branch = base_branch
        self._api_url = api_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._api_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=30.0,
            transport=self._transport,
        )

    @staticmethod
    def content_path(document: DocumentRecord) -> str:
        scope = document.scope
        return f"documents/{scope.platform}/{scope.doc_type}/{scope.lang}/{document.download_file_name}"

    async def publish(
        self, job: PublicationJob, document: DocumentRecord, pdf: bytes
    ) -> PublishResult:
        repo = job.target_repo
        branch = job.target_branch
        path = self.content_path(document)
        scope = document.scope
        title = (
            f"Publish {scope.doc_type} {scope.platform}/{scope.lang} "
            f"v{document.version} ({scope.effective_date})"
        )
        try:
            async with self._client() as client:
                base_sha = await self._base_sha(client, repo)
                await self._ensure_branch(client, repo, branch, base_sha)
                file_sha = await self._file_sha(client, repo, path, branch)
                body: dict[str, Any] = {
                    "message": title,
                    "content": base64.b64encode(pdf).decode("ascii"),
                    "branch": branch,
                }
                if file_sha:
                    body["sha"] = file_sha
                put = await client.put(f"/repos/{repo}/contents/{path}", json=body)
                put.raise_for_status()
                commit_sha = put.json().get("commit", {}).get("sha")

                pr = await client.post(
                    f"/repos/{repo}/pulls",
                    json={
                        "title": title,
                        "head": branch,
                        "base": self._base_branch,
                        "body": f"Document {document.id}, publication job {job.id}.",
                    },
                )
                pr.raise_for_status()
                pr_url = pr.json().get("html_url")
        except httpx.HTTPStatusError as e:
            raise PublicationError(
                f"GitHub API {e.request.method} {e.request.url.path} "
                f"answered {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise PublicationError(f"GitHub API unreachable: {e}") from e

        logger.info("Opened %s for job %s", pr_url, job.id)
        return PublishResult(commit_sha=commit_sha, pr_url=pr_url)

    async def _base_sha(self, client: httpx.AsyncClient, repo: str) -> str:
        response = await client.get(f"/repos/{repo}/git/ref/heads/{self._base_branch}")
        response.raise_for_status()
        return response.json()["object"]["sha"]

    async def _ensure_branch(
        self, client: httpx.AsyncClient, repo: str, branch: str, sha: str
    ) -> None:
        response = await client.post(
            f"/repos/{repo}/git/refs", json={"ref": f"refs/heads/{branch}", "sha": sha}
        )
        # 422: branch already exists
        if response.status_code != 422:
            response.raise_for_status()

    async def _file_sha(
        self, client: httpx.AsyncClient, repo: str, path: str, branch: str
    ) -> str | None:
        response = await client.get(f"/repos/{repo}/contents/{path}", params={"ref": branch})
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json().get("sha")
