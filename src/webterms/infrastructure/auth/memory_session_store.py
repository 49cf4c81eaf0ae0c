"""In-memory session store."""

import secrets


class InMemorySessionStore:
    """Keeps token -> subject in process memory.

    Tokens seeded at construction come from configuration; issued tokens
    die with the process.
    """

    def __init__(self, sessions: dict[str, str] | None = None) -> None:
        self._sessions: dict[str, str] = dict(sessions or {})

    def issue(self, subject: str) -> str:
        token = secrets.token_urlsafe(32)
        self._sessions[token] = subject
        return token

    def validate(self, token: str) -> str | None:
        return self._sessions.get(token)

    def revoke(self, token: str) -> None:
        self._sessions.pop(token, None)
