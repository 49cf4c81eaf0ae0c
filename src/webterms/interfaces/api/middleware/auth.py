"""Auth middleware - resolves the bearer token against the session store."""

from dataclasses import dataclass

import falcon.asgi

from webterms.application.ports import SessionStore

ANONYMOUS = "anonymous"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class AuthMiddleware:
    """Sets req.context.user; None means writes must be refused with 401."""

    def __init__(self, session_store: SessionStore, require_login: bool) -> None:
        self._sessions = session_store
        self._require_login = require_login

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        auth = req.get_header("Authorization") or ""
        if auth.lower().startswith("bearer "):
            subject = self._sessions.validate(auth[7:].strip())
            if subject:
                req.context.user = RequestUser(user_id=subject)
                return
        req.context.user = None if self._require_login else RequestUser(user_id=ANONYMOUS)
