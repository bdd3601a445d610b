"""Extension to media type registry built from type-map text.

A type map is line-oriented text. Blank lines and ``#`` comments are
ignored, and a physical line ending in a backslash continues on the next
line. Each logical line uses one of two syntaxes::

    type=text/html; exts=htm,html
    text/plain txt text

The registry maps every listed extension to a ``MimeType``. Later
bindings for an extension replace earlier ones, within one parse and
across parses.
"""

import logging
from typing import Callable, Dict, Iterable, KeysView, Optional, ValuesView

from ..exceptions import MimeTypeParseError, TypeMapLoadError
from .models import LoadResult
from .sources import (
    DEFAULT_ENCODING,
    DEFAULT_TIMEOUT,
    Source,
    describe_source,
    iter_text_lines,
    open_line_source,
)
from .tokenizer import LineTokenizer
from .types import MimeType

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[Optional[BaseException]], None]


class MimeTypeRegistry:
    """Registry of file extensions and their media types.

    Extensions are stored as written in the type map; lookups are
    case-sensitive. The registry is never cleared implicitly and is not
    safe for concurrent parses.
    """

    def __init__(self) -> None:
        self._types: Dict[str, MimeType] = {}
        self._bindings_applied = 0

    def get_mime_type(self, extension: str) -> Optional[MimeType]:
        return self._types.get(extension)

    def has_mime_type(self, extension: str) -> bool:
        return extension in self._types

    def get_mime_type_string(self, extension: str) -> Optional[str]:
        """Return the base type bound to ``extension`` or None."""
        entry = self._types.get(extension)
        if entry is not None:
            return entry.get_base_type()
        return None

    def get_extensions(self) -> KeysView[str]:
        return self._types.keys()

    def get_mime_types(self) -> ValuesView[MimeType]:
        return self._types.values()

    def get_mime_type_for_filename(self, filename: str) -> Optional[MimeType]:
        """Classify a file name by its last extension.

        The extension is looked up as written first, then lower-cased.

        :param filename: File name or path
        :type filename: str
        :return: Bound media type or None
        :rtype: Optional[MimeType]
        """
        _, dot, extension = filename.rpartition(".")
        if not dot or not extension or "/" in extension:
            return None
        entry = self._types.get(extension)
        if entry is None:
            entry = self._types.get(extension.lower())
        return entry

    def _bind(self, extension: str, mime_type: Optional[str]) -> None:
        # exts= ahead of any type= binds the default application/*
        entry = MimeType(mime_type, extension)
        self._types[extension] = entry
        self._bindings_applied += 1
        logger.debug("Bound %s to %s", extension, entry.get_base_type())

    def parse(
        self,
        lines: Iterable[str],
        on_complete: Optional[CompletionCallback] = None,
    ) -> int:
        """Parse type-map lines into the registry.

        A line ending in a backslash has the backslash removed and the next
        line appended before the combined line is parsed. A pending
        continuation at the end of input is parsed as well.

        :param lines: Physical lines, or type-map text as a single string
        :type lines: Iterable[str]
        :param on_complete: Called with None once every line is parsed
        :type on_complete: Optional[Callable[[Optional[BaseException]], None]]
        :return: Number of extension bindings applied
        :rtype: int
        :raises MimeTypeParseError: If an entry names a malformed media type;
            bindings applied before the failure are kept
        """
        if isinstance(lines, str):
            lines = iter_text_lines(lines)
        before = self._bindings_applied
        pending: Optional[str] = None
        for line in lines:
            line = line.rstrip("\r\n")
            pending = line if pending is None else pending + line
            if pending.endswith("\\"):
                pending = pending[:-1]
                continue
            self.parse_entry(pending)
            pending = None
        if pending:
            self.parse_entry(pending)
        if on_complete is not None:
            on_complete(None)
        return self._bindings_applied - before

    def parse_entry(self, line: str) -> None:
        """Parse one logical type-map line.

        :param line: A logical line (continuations already joined)
        :type line: str
        :raises MimeTypeParseError: If the line binds a malformed media type
        """
        line = line.strip()
        if not line or line.startswith("#"):
            return

        if line.find("=") > 0:
            self._parse_keyed_entry(line)
        else:
            self._parse_positional_entry(line)

    def _parse_keyed_entry(self, line: str) -> None:
        mime_type: Optional[str] = None
        tokenizer = LineTokenizer(line, singles="=")
        while tokenizer.has_more_tokens():
            name = tokenizer.next_token()
            value: Optional[str] = None
            if (
                tokenizer.has_more_tokens()
                and tokenizer.next_token() == "="
                and tokenizer.has_more_tokens()
            ):
                value = tokenizer.next_token()
            if value is None:
                logger.debug("No value for %r, ignoring rest of line: %s", name, line)
                return
            if name == "type":
                mime_type = value
            elif name == "exts":
                for extension in value.split(","):
                    if extension:
                        self._bind(extension, mime_type)

    def _parse_positional_entry(self, line: str) -> None:
        tokens = list(LineTokenizer(line, singles=""))
        if not tokens:
            return
        mime_type, *extensions = tokens
        for extension in extensions:
            self._bind(extension, mime_type)

    def set_mime_type(
        self, mime_types: str, on_complete: Optional[CompletionCallback] = None
    ) -> None:
        """Parse in-memory type-map text without raising parse errors.

        Failures are passed to ``on_complete`` (and logged) instead of
        being raised.

        :param mime_types: Type-map text
        :type mime_types: str
        :param on_complete: Called with None on success or the error
        :type on_complete: Optional[Callable[[Optional[BaseException]], None]]
        """
        try:
            self.parse(iter_text_lines(mime_types))
        except MimeTypeParseError as e:
            logger.warning("Failed to parse type map text: %s", e)
            if on_complete is not None:
                on_complete(e)
            return
        if on_complete is not None:
            on_complete(None)

    async def load(
        self,
        source: Source,
        on_complete: Optional[CompletionCallback] = None,
        *,
        encoding: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> LoadResult:
        """Load a type map from a path, URL or open stream.

        Opening happens asynchronously; the acquired lines are then parsed
        synchronously. Failures to open, read or parse the source are
        reported through the returned result and ``on_complete`` rather
        than raised.

        :param source: Path, HTTP(S) URL or open stream
        :type source: Source
        :param on_complete: Called once with None or the error
        :type on_complete: Optional[Callable[[Optional[BaseException]], None]]
        :param encoding: Encoding for byte sources (default utf-8)
        :type encoding: Optional[str]
        :param timeout: Request timeout in seconds for URL sources
        :type timeout: Optional[float]
        :return: Outcome of the load
        :rtype: LoadResult
        """
        description = describe_source(source)
        before = self._bindings_applied
        error: Optional[BaseException] = None
        try:
            description, lines = await open_line_source(
                source,
                encoding or DEFAULT_ENCODING,
                DEFAULT_TIMEOUT if timeout is None else timeout,
            )
            self.parse(lines)
        except (TypeMapLoadError, MimeTypeParseError) as e:
            error = e
        except (OSError, ValueError) as e:
            error = TypeMapLoadError(
                f"Unable to read type map {description}",
                source=description,
                original_error=e,
            )

        applied = self._bindings_applied - before
        if error is not None:
            logger.warning("Failed to load type map %s: %s", description, error)
            result = LoadResult.from_error(description, error, bindings=applied)
        else:
            logger.info("Loaded %d bindings from %s", applied, description)
            result = LoadResult(source=description, bindings=applied)
        if on_complete is not None:
            on_complete(error)
        return result

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, extension: object) -> bool:
        return extension in self._types

    def __repr__(self) -> str:
        return f"MimeTypeRegistry({len(self._types)} extensions)"


_default_registry: Optional[MimeTypeRegistry] = None


def get_default_registry() -> MimeTypeRegistry:
    """Get or create the shared registry instance.

    The instance is created empty on first use; see
    ``load_default_registry`` to seed it from configuration.

    :return: Shared registry instance
    :rtype: MimeTypeRegistry
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = MimeTypeRegistry()
    return _default_registry


def reset_default_registry() -> None:
    """Discard the shared registry so the next access creates a new one."""
    global _default_registry
    _default_registry = None


__all__ = [
    "MimeTypeRegistry",
    "get_default_registry",
    "reset_default_registry",
]
