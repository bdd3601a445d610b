"""Unit tests for line sources and asynchronous registry loading."""

import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from mime_typemap.exceptions import TypeMapLoadError
from mime_typemap.media import MimeTypeRegistry
from mime_typemap.media.sources import (
    describe_source,
    is_url,
    iter_stream_lines,
    iter_text_lines,
    open_line_source,
    read_path_lines,
)


def _mock_http_client(content: bytes = b"", error: Exception = None):
    mock_response = MagicMock()
    mock_response.content = content
    mock_response.raise_for_status = MagicMock()

    mock_client = AsyncMock()
    if error is not None:
        mock_client.get = AsyncMock(side_effect=error)
    else:
        mock_client.get = AsyncMock(return_value=mock_response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    return mock_client, mock_response


def test_is_url():
    assert is_url("https://example.com/mime.types")
    assert is_url("HTTP://example.com/mime.types")
    assert not is_url("/etc/mime.types")
    assert not is_url(Path("/etc/mime.types"))


def test_iter_text_lines():
    assert list(iter_text_lines("a\nb\r\nc")) == ["a", "b", "c"]


def test_iter_stream_lines_text_and_bytes():
    assert list(iter_stream_lines(io.StringIO("a\nb\n"))) == ["a", "b"]
    assert list(iter_stream_lines(io.BytesIO("é x\r\ny\n".encode("utf-8")))) == [
        "é x",
        "y",
    ]
    assert list(iter_stream_lines(io.BytesIO(b"\xe9\n"), encoding="latin-1")) == ["é"]


def test_describe_source(tmp_path: Path):
    assert describe_source("/etc/mime.types") == "/etc/mime.types"
    assert describe_source(tmp_path) == str(tmp_path)
    assert describe_source(io.StringIO("")) == "<StringIO>"


@pytest.mark.asyncio
async def test_read_path_lines(tmp_path: Path):
    path = tmp_path / "mime.types"
    path.write_bytes(b"text/plain txt\nimage/png png\n")
    assert await read_path_lines(path) == ["text/plain txt", "image/png png"]


@pytest.mark.asyncio
async def test_read_path_lines_missing_file(tmp_path: Path):
    with pytest.raises(TypeMapLoadError) as exc:
        await read_path_lines(tmp_path / "absent.types")
    assert exc.value.details["error_type"] == "FileNotFoundError"


@pytest.mark.asyncio
async def test_read_path_lines_bad_encoding(tmp_path: Path):
    path = tmp_path / "mime.types"
    path.write_bytes(b"text/plain \xff\n")
    with pytest.raises(TypeMapLoadError):
        await read_path_lines(path)


@pytest.mark.asyncio
async def test_open_line_source_url():
    mock_client, _ = _mock_http_client(b"text/csv csv\n")
    with patch("httpx.AsyncClient") as mock_async_client:
        mock_async_client.return_value = mock_client
        description, lines = await open_line_source("https://example.com/mime.types")
    assert description == "https://example.com/mime.types"
    assert list(lines) == ["text/csv csv"]
    mock_client.get.assert_awaited_once_with("https://example.com/mime.types")


@pytest.mark.asyncio
async def test_load_from_path(tmp_path: Path, sample_typemap):
    path = tmp_path / "mime.types"
    path.write_text(sample_typemap, encoding="utf-8")
    reg = MimeTypeRegistry()
    calls = []
    result = await reg.load(str(path), calls.append)
    assert result.succeeded
    assert result.bindings == 4
    assert result.source == str(path)
    assert calls == [None]
    assert reg.get_mime_type_string("html") == "text/html"


@pytest.mark.asyncio
async def test_load_from_stream():
    reg = MimeTypeRegistry()
    result = await reg.load(io.BytesIO(b"type=text/css exts=css\n"))
    assert result.succeeded
    assert result.bindings == 1
    assert reg.get_mime_type_string("css") == "text/css"


@pytest.mark.asyncio
async def test_load_missing_path_reports_through_completion(tmp_path: Path):
    reg = MimeTypeRegistry()
    calls = []
    result = await reg.load(tmp_path / "absent.types", calls.append)
    assert not result.succeeded
    assert result.error_code == "LOAD_ERROR"
    assert len(calls) == 1
    assert isinstance(calls[0], TypeMapLoadError)
    assert len(reg) == 0


@pytest.mark.asyncio
async def test_load_parse_error_keeps_prior_bindings():
    reg = MimeTypeRegistry()
    calls = []
    result = await reg.load(
        io.StringIO("text/plain txt\nbroken bad\nimage/png png\n"), calls.append
    )
    assert not result.succeeded
    assert result.error_code == "PARSE_ERROR"
    assert result.details["kind"] == "missing_subtype"
    assert result.bindings == 1
    assert reg.has_mime_type("txt")
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_load_stream_decode_error():
    reg = MimeTypeRegistry()
    result = await reg.load(io.BytesIO(b"text/plain \xff\n"))
    assert not result.succeeded
    assert result.error_code == "LOAD_ERROR"
    assert result.details["error_type"] == "UnicodeDecodeError"


@pytest.mark.asyncio
async def test_load_from_url():
    mock_client, _ = _mock_http_client(b"type=application/json exts=json\n")
    reg = MimeTypeRegistry()
    with patch("httpx.AsyncClient") as mock_async_client:
        mock_async_client.return_value = mock_client
        result = await reg.load("https://example.com/mime.types", timeout=2.5)
    assert result.succeeded
    assert reg.get_mime_type_string("json") == "application/json"
    _, kwargs = mock_async_client.call_args
    assert kwargs["timeout"] == 2.5
    assert kwargs["follow_redirects"] is True


@pytest.mark.asyncio
async def test_load_from_url_connection_error():
    request = httpx.Request("GET", "https://example.com/mime.types")
    mock_client, _ = _mock_http_client(
        error=httpx.ConnectError("connection refused", request=request)
    )
    reg = MimeTypeRegistry()
    calls = []
    with patch("httpx.AsyncClient") as mock_async_client:
        mock_async_client.return_value = mock_client
        result = await reg.load("https://example.com/mime.types", calls.append)
    assert not result.succeeded
    assert result.details["error_type"] == "ConnectError"
    assert isinstance(calls[0], TypeMapLoadError)


@pytest.mark.asyncio
async def test_load_from_url_error_status():
    mock_client, mock_response = _mock_http_client(b"")
    request = httpx.Request("GET", "https://example.com/mime.types")
    mock_response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError(
            "404 Not Found", request=request, response=httpx.Response(404)
        )
    )
    reg = MimeTypeRegistry()
    with patch("httpx.AsyncClient") as mock_async_client:
        mock_async_client.return_value = mock_client
        result = await reg.load("https://example.com/mime.types")
    assert not result.succeeded
    assert result.details["error_type"] == "HTTPStatusError"
