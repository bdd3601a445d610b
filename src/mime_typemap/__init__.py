"""MIME media type parsing and extension type maps.

This package parses media type descriptors such as
``text/html; charset=utf-8`` into structured values, serializes them
back to canonical text, and builds registries mapping file extensions to
media types from line-oriented type-map text.

:var __version__: Current package version
:type __version__: str
"""

from .exceptions import (
    ConfigurationError,
    MimeTypemapError,
    MimeTypeParseError,
    ParseErrorKind,
    TokenizerExhaustedError,
    TypeMapLoadError,
)
from .media import (
    LineTokenizer,
    LoadResult,
    MimeType,
    MimeTypeParameterList,
    MimeTypeRegistry,
    get_default_registry,
    load_default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "MimeType",
    "MimeTypeParameterList",
    "LineTokenizer",
    "MimeTypeRegistry",
    "LoadResult",
    "get_default_registry",
    "load_default_registry",
    "MimeTypemapError",
    "MimeTypeParseError",
    "ParseErrorKind",
    "TokenizerExhaustedError",
    "TypeMapLoadError",
    "ConfigurationError",
]
