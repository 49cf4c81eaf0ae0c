"""Session store port - bearer tokens for the request layer."""

from typing import Protocol


class SessionStore(Protocol):
    """Issues, validates and revokes session tokens."""

    def issue(self, subject: str) -> str: ...

    def validate(self, token: str) -> str | None: ...

    def revoke(self, token: str) -> None: ...
