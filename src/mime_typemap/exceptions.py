"""Structured exception classes for mime-typemap."""

import json
from enum import Enum
from typing import Any, Dict, Optional


class ParseErrorKind(str, Enum):
    """Kinds of grammar violations reported by the parsers.

    The value is used as the machine-readable part of the error so that
    callers can decide whether to skip an entry, abort a batch load or
    surface the problem to a user.
    """

    MISSING_SUBTYPE = "missing_subtype"
    INVALID_PRIMARY_TYPE = "invalid_primary_type"
    INVALID_SUB_TYPE = "invalid_sub_type"
    MISSING_SEPARATOR = "missing_separator"
    MISSING_VALUE = "missing_value"
    UNTERMINATED_QUOTE = "unterminated_quote"
    UNEXPECTED_CHARACTER = "unexpected_character"
    TRAILING_CHARACTERS = "trailing_characters"


class MimeTypemapError(Exception):
    """Base exception for all mime-typemap errors.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class MimeTypeParseError(MimeTypemapError, ValueError):
    """Raised when a media type, parameter list or token is malformed.

    :param message: Description of the grammar violation
    :param kind: Which rule of the grammar was violated
    :param position: Optional index into the parsed text
    :param fragment: Optional offending text (a type, parameter name, line)
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        position: Optional[int] = None,
        fragment: Optional[str] = None,
    ):
        """Initialize parse error with message, kind and optional context."""
        details: Dict[str, Any] = {"kind": kind.value}
        if position is not None:
            details["position"] = position
        if fragment is not None:
            details["fragment"] = fragment
        super().__init__(message=message, code="PARSE_ERROR", details=details)
        self.kind = kind
        self.position = position
        self.fragment = fragment


class TokenizerExhaustedError(MimeTypemapError, LookupError):
    """Raised when a token is requested from an exhausted tokenizer."""

    def __init__(self, message: str = "No more tokens available"):
        """Initialize exhaustion error with message."""
        super().__init__(message=message, code="TOKENIZER_EXHAUSTED")


class TypeMapLoadError(MimeTypemapError):
    """Raised when a type-map source cannot be opened or read.

    :param message: Description of the failure
    :param source: Optional path, URL or stream description
    :param original_error: Optional underlying I/O or HTTP error
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        """Initialize load error with message and optional context."""
        details: Dict[str, Any] = {}
        if source:
            details["source"] = source
        if original_error is not None:
            details["original_error"] = str(original_error)
            details["error_type"] = type(original_error).__name__
        super().__init__(message=message, code="LOAD_ERROR", details=details)
        self.source = source
        self.original_error = original_error


class ConfigurationError(MimeTypemapError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)
