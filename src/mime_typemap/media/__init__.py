"""Media type public API (re-exports)."""

from .defaults import DEFAULT_TYPEMAP, load_default_registry
from .models import LoadResult
from .parameters import MimeTypeParameterList
from .registry import MimeTypeRegistry, get_default_registry, reset_default_registry
from .tokenizer import LineTokenizer
from .tokens import TSPECIALS, is_token_char, is_valid_token, quote, unquote
from .types import MimeType

__all__ = [
    "MimeType",
    "MimeTypeParameterList",
    "LineTokenizer",
    "MimeTypeRegistry",
    "LoadResult",
    "get_default_registry",
    "reset_default_registry",
    "load_default_registry",
    "DEFAULT_TYPEMAP",
    "TSPECIALS",
    "is_token_char",
    "is_valid_token",
    "quote",
    "unquote",
]
