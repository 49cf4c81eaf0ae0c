"""Converter backed by a Gotenberg-compatible HTTP service (LibreOffice route)."""

import logging
from pathlib import PurePath
from typing import Any

import httpx

from webterms.domain.exceptions import ConversionError

logger = logging.getLogger(__name__)


class HttpConverter:
    """POSTs the source file to {base_url}/forms/libreoffice/convert."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout, transport=self._transport)

    async def convert(self, data: bytes, file_name: str) -> bytes:
        """Convert data to PDF. Raises ConversionError; no retry."""
        endpoint = f"{self._base_url}/forms/libreoffice/convert"
        try:
            async with self._client(self._timeout) as client:
                response = await client.post(
                    endpoint, files={"files": (PurePath(file_name).name, data)}
                )
        except httpx.HTTPError as e:
            logger.warning("Converter request for %s failed: %s", file_name, e)
            raise ConversionError("Cannot convert file to PDF via converter service.") from e
        if response.status_code >= 400:
            logger.warning("Converter answered %d for %s", response.status_code, file_name)
            raise ConversionError(
                f"Cannot convert file to PDF via converter service (HTTP {response.status_code})."
            )
        if not response.content:
            raise ConversionError("Converter service returned an empty PDF.")
        return response.content

    async def health(self) -> dict[str, Any]:
        try:
            async with self._client(5.0) as client:
                response = await client.get(f"{self._base_url}/health")
            reachable = response.is_success
        except httpx.HTTPError:
            reachable = False
        return {"mode": "docker", "configuredUrl": self._base_url, "reachable": reachable}
