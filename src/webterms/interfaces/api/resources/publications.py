"""Publication API resources."""

from uuid import UUID

import falcon.asgi

from webterms.application.dto.publication_dto import PublicationCreateInput
from webterms.application.use_cases.publication.confirm_merge import ConfirmMergeUseCase
from webterms.application.use_cases.publication.create_publication import (
    CreatePublicationUseCase,
)
from webterms.application.use_cases.publication.fail_publication import FailPublicationUseCase
from webterms.application.use_cases.publication.get_publication_job import (
    GetPublicationJobUseCase,
)
from webterms.application.use_cases.publication.run_publication import RunPublicationUseCase
from webterms.domain.entities import PublicationJob
from webterms.domain.exceptions import (
    ActivePublicationExists,
    InvalidTransition,
    NotFound,
    ValidationError,
)
from webterms.infrastructure.persistence.json_file.serialization import to_iso


def _parse_uuid(value: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid UUID"}
        return None


class PublicationsResource:
    """POST /v1/publications/{document_id} - queue publication, run it in the background."""

    def __init__(
        self,
        create_publication: CreatePublicationUseCase,
        run_publication: RunPublicationUseCase,
    ) -> None:
        self._create_publication = create_publication
        self._run_publication = run_publication

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Create a publication job (202); the worker step runs after the response."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized: login required for publication"}
            return
        doc_id = _parse_uuid(document_id, resp)
        if not doc_id:
            return
        body = await req.get_media(default_when_empty={})
        if not isinstance(body, dict):
            body = {}

        try:
            job = await self._create_publication.execute(
                PublicationCreateInput(
                    document_id=doc_id,
                    target=str(body.get("target") or "public-repo"),
                    strategy=str(body.get("strategy") or "pull-request"),
                    created_by=user.user_id,
                )
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "field": e.field}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        except ActivePublicationExists as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e), "jobId": e.entity_id}
            return

        async def run_job() -> None:
            await self._run_publication.execute(job.id)

        resp.schedule(run_job)
        resp.status = falcon.HTTP_202
        resp.media = {"job": _job_to_dict(job)}


class PublicationJobResource:
    """GET /v1/publications/jobs/{job_id} - job status."""

    def __init__(self, get_publication_job: GetPublicationJobUseCase) -> None:
        self._get_publication_job = get_publication_job

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        job_id: str,
    ) -> None:
        parsed = _parse_uuid(job_id, resp)
        if not parsed:
            return
        try:
            job = await self._get_publication_job.execute(parsed)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Publication job not found"}
            return
        resp.media = {"job": _job_to_dict(job)}
        resp.status = falcon.HTTP_200


class PublicationMergeResource:
    """POST /v1/publications/jobs/{job_id}/merged - merge confirmation."""

    def __init__(self, confirm_merge: ConfirmMergeUseCase) -> None:
        self._confirm_merge = confirm_merge

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        job_id: str,
    ) -> None:
        if not getattr(req.context, "user", None):
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized: login required for publication"}
            return
        parsed = _parse_uuid(job_id, resp)
        if not parsed:
            return
        try:
            job = await self._confirm_merge.execute(parsed)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Publication job not found"}
            return
        except InvalidTransition as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e), "jobId": e.entity_id}
            return
        resp.media = {"job": _job_to_dict(job)}
        resp.status = falcon.HTTP_200


class PublicationFailResource:
    """POST /v1/publications/jobs/{job_id}/failed - release a stuck job."""

    def __init__(self, fail_publication: FailPublicationUseCase) -> None:
        self._fail_publication = fail_publication

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        job_id: str,
    ) -> None:
        if not getattr(req.context, "user", None):
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized: login required for publication"}
            return
        parsed = _parse_uuid(job_id, resp)
        if not parsed:
            return
        body = await req.get_media(default_when_empty={})
        message = body.get("message") if isinstance(body, dict) else None
        try:
            job = await self._fail_publication.execute(parsed, str(message or ""))
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Publication job not found"}
            return
        except InvalidTransition as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e), "jobId": e.entity_id}
            return
        resp.media = {"job": _job_to_dict(job)}
        resp.status = falcon.HTTP_200


def _job_to_dict(j: PublicationJob) -> dict:
    return {
        "id": str(j.id),
        "documentId": str(j.document_id),
        "targetRepo": j.target_repo,
        "targetBranch": j.target_branch,
        "status": j.status.value,
        "strategy": j.strategy,
        "commitSha": j.commit_sha,
        "prUrl": j.pr_url,
        "errorMessage": j.error_message,
        "createdBy": j.created_by,
        "createdAt": to_iso(j.created_at),
        "updatedAt": to_iso(j.updated_at),
        "isTerminal": j.is_terminal,
    }
