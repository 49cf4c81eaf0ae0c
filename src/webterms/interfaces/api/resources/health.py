"""Health check endpoint."""

import falcon.asgi

from webterms.application.ports import Converter


class HealthResource:
    """Liveness plus converter availability."""

    def __init__(self, converter: Converter) -> None:
        self._converter = converter

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness and converter status."""
        resp.media = {"status": "ok", "converter": await self._converter.health()}
        resp.status = falcon.HTTP_200
