"""Converter running a local LibreOffice (soffice) in headless mode."""

import asyncio
import logging
import tempfile
from pathlib import Path, PurePath
from typing import Any

from webterms.domain.exceptions import ConversionError

logger = logging.getLogger(__name__)

_UNAVAILABLE = (
    "Cannot convert file to PDF. Configure WEBTERMS_CONVERTER_URL "
    "or install LibreOffice (soffice)."
)


class LibreOfficeConverter:
    """Runs ``soffice --headless --convert-to pdf`` in a temporary directory."""

    def __init__(self, binary: str = "soffice", timeout: float = 120.0) -> None:
        self._binary = binary
        self._timeout = timeout

    async def _run(self, *args: str, timeout: float) -> int:
        process = await asyncio.create_subprocess_exec(
            self._binary,
            *args,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        try:
            return await asyncio.wait_for(process.wait(), timeout=timeout)
        except TimeoutError:
            process.kill()
            await process.wait()
            raise

    async def convert(self, data: bytes, file_name: str) -> bytes:
        """Convert data to PDF. Raises ConversionError; no retry."""
        source_name = PurePath(file_name).name
        with tempfile.TemporaryDirectory(prefix="webterms-convert-") as tmp:
            tmp_dir = Path(tmp)
            source = tmp_dir / source_name
            output = tmp_dir / f"{PurePath(source_name).stem}.pdf"
            try:
                await asyncio.to_thread(source.write_bytes, data)
                code = await self._run(
                    "--headless",
                    "--convert-to",
                    "pdf",
                    "--outdir",
                    str(tmp_dir),
                    str(source),
                    timeout=self._timeout,
                )
                if code != 0:
                    raise ConversionError(f"{_UNAVAILABLE} (exit code {code})")
                return await asyncio.to_thread(output.read_bytes)
            except TimeoutError as e:
                logger.warning("soffice timed out after %.0fs on %s", self._timeout, file_name)
                raise ConversionError(f"{_UNAVAILABLE} (timed out)") from e
            except OSError as e:
                logger.warning("soffice conversion of %s failed: %s", file_name, e)
                raise ConversionError(_UNAVAILABLE) from e

    async def health(self) -> dict[str, Any]:
        try:
            code = await self._run("--version", timeout=5.0)
        except (OSError, TimeoutError):
            return {"mode": "none", "reachable": False}
        if code != 0:
            return {"mode": "none", "reachable": False}
        return {"mode": "local", "reachable": True}
