"""Line sources for type-map parsing.

The registry parses any iterable of text lines. This module turns the
places type maps come from into such iterables: in-memory text, open
text or binary streams, files on disk and HTTP(S) URLs. File and URL
sources are acquired asynchronously; once acquired, parsing proceeds
synchronously to exhaustion.

Dependencies:
    - httpx: Async HTTP client for URL sources
    - asyncio: File reads are moved off the event loop
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Tuple, Union

import httpx

from ..exceptions import TypeMapLoadError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
DEFAULT_TIMEOUT = 10.0

Source = Union[str, "os.PathLike[str]", IO]


def is_url(source: object) -> bool:
    """Return True if ``source`` is an HTTP(S) URL string."""
    return isinstance(source, str) and source.lower().startswith(
        ("http://", "https://")
    )


def iter_text_lines(text: str) -> Iterator[str]:
    """Yield the physical lines of ``text`` without line terminators."""
    return iter(text.splitlines())


def iter_stream_lines(
    stream: Iterable[Union[str, bytes]], encoding: str = DEFAULT_ENCODING
) -> Iterator[str]:
    """Yield lines from an open text or binary stream.

    Byte lines are decoded with ``encoding``; line terminators are removed.

    :param stream: Open file object or any iterable of lines
    :type stream: Iterable[Union[str, bytes]]
    :param encoding: Encoding used for byte lines
    :type encoding: str
    """
    for line in stream:
        if isinstance(line, bytes):
            line = line.decode(encoding)
        yield line.rstrip("\r\n")


def _decode(data: bytes, encoding: str, source: str) -> List[str]:
    try:
        return data.decode(encoding).splitlines()
    except UnicodeDecodeError as e:
        raise TypeMapLoadError(
            f"Unable to decode type map as {encoding}", source=source, original_error=e
        ) from e


async def read_path_lines(
    path: Union[str, "os.PathLike[str]"], encoding: str = DEFAULT_ENCODING
) -> List[str]:
    """Read a type-map file without blocking the event loop.

    :param path: Path of the type-map file
    :type path: Union[str, os.PathLike]
    :param encoding: File encoding
    :type encoding: str
    :return: Lines of the file
    :rtype: List[str]
    :raises TypeMapLoadError: If the file cannot be read or decoded
    """
    file_path = Path(path).expanduser()
    try:
        data = await asyncio.to_thread(file_path.read_bytes)
    except OSError as e:
        raise TypeMapLoadError(
            f"Unable to open type map {file_path}",
            source=str(file_path),
            original_error=e,
        ) from e
    logger.debug("Read %d bytes from %s", len(data), file_path)
    return _decode(data, encoding, str(file_path))


async def fetch_url_lines(
    url: str,
    encoding: str = DEFAULT_ENCODING,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[str]:
    """Fetch a type map over HTTP(S).

    :param url: URL of the type map
    :type url: str
    :param encoding: Encoding of the response body
    :type encoding: str
    :param timeout: Request timeout in seconds
    :type timeout: float
    :return: Lines of the response body
    :rtype: List[str]
    :raises TypeMapLoadError: If the request fails or returns an error status
    """
    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as e:
        raise TypeMapLoadError(
            f"Unable to fetch type map from {url}", source=url, original_error=e
        ) from e
    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return _decode(response.content, encoding, url)


def describe_source(source: Source) -> str:
    """Return a short human-readable description of ``source``."""
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    name = getattr(source, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(source).__name__}>"


async def open_line_source(
    source: Source,
    encoding: str = DEFAULT_ENCODING,
    timeout: float = DEFAULT_TIMEOUT,
) -> Tuple[str, Iterable[str]]:
    """Acquire the lines of ``source``.

    :param source: Path, HTTP(S) URL or open stream
    :type source: Source
    :param encoding: Encoding for byte sources
    :type encoding: str
    :param timeout: Request timeout in seconds for URL sources
    :type timeout: float
    :return: Tuple of (source description, lines)
    :rtype: Tuple[str, Iterable[str]]
    :raises TypeMapLoadError: If the source cannot be opened or read
    """
    description = describe_source(source)
    if is_url(source):
        return description, await fetch_url_lines(source, encoding, timeout)
    if isinstance(source, (str, os.PathLike)):
        return description, await read_path_lines(source, encoding)
    return description, iter_stream_lines(source, encoding)


__all__ = [
    "is_url",
    "iter_text_lines",
    "iter_stream_lines",
    "read_path_lines",
    "fetch_url_lines",
    "describe_source",
    "open_line_source",
]
