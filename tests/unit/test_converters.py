"""Tests for PDF converters."""

import httpx
import pytest

from webterms.domain.exceptions import ConversionError
from webterms.infrastructure.conversion.http_converter import HttpConverter
from webterms.infrastructure.conversion.libreoffice_converter import LibreOfficeConverter


def _converter(handler) -> HttpConverter:
    return HttpConverter("http://converter:3000/", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_http_converter_posts_multipart() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.read()
        return httpx.Response(200, content=b"%PDF-1.7")

    pdf = await _converter(handler).convert(b"docx", "dir/terms.docx")
    assert pdf == b"%PDF-1.7"
    assert seen["url"] == "http://converter:3000/forms/libreoffice/convert"
    assert b'filename="terms.docx"' in seen["body"]


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [httpx.Response(500), httpx.Response(200, content=b"")])
async def test_http_converter_bad_response(response) -> None:
    with pytest.raises(ConversionError):
        await _converter(lambda request: response).convert(b"x", "a.docx")


@pytest.mark.asyncio
async def test_http_converter_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    converter = _converter(handler)
    with pytest.raises(ConversionError):
        await converter.convert(b"x", "a.docx")
    health = await converter.health()
    assert health == {
        "mode": "docker",
        "configuredUrl": "http://converter:3000",
        "reachable": False,
    }


@pytest.mark.asyncio
async def test_http_converter_health_ok() -> None:
    health = await _converter(lambda request: httpx.Response(200)).health()
    assert health["reachable"] is True


@pytest.mark.asyncio
async def test_libreoffice_missing_binary() -> None:
    converter = LibreOfficeConverter(binary="webterms-no-such-soffice", timeout=5)
    with pytest.raises(ConversionError):
        await converter.convert(b"x", "a.docx")
    assert await converter.health() == {"mode": "none", "reachable": False}
