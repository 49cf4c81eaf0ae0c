"""Converter port - turns source documents into PDF."""

from typing import Any, Protocol


class Converter(Protocol):
    """Port for PDF conversion. Failures raise ConversionError."""

    async def convert(self, data: bytes, file_name: str) -> bytes: ...

    async def health(self) -> dict[str, Any]: ...
