"""MIME media types.

This module provides the ``MimeType`` value object: a lower-cased
``primary/sub`` pair, an ordered parameter list and, when the type came
from a type map, the file extension it was registered for. It parses
and serializes the ``token "/" token [";" parameters]`` grammar and
implements subtype wildcard matching.
"""

from typing import Optional, Union

from ..exceptions import MimeTypeParseError, ParseErrorKind
from .parameters import MimeTypeParameterList
from .tokens import is_valid_token


def _invalid_primary(primary: str) -> MimeTypeParseError:
    return MimeTypeParseError(
        "Primary type is invalid.",
        kind=ParseErrorKind.INVALID_PRIMARY_TYPE,
        fragment=primary,
    )


def _invalid_sub(sub: str) -> MimeTypeParseError:
    return MimeTypeParseError(
        "Sub type is invalid.",
        kind=ParseErrorKind.INVALID_SUB_TYPE,
        fragment=sub,
    )


class MimeType:
    """A parsed MIME media type.

    Construction follows one of three forms:

    - ``MimeType(primary="text", sub="html", extension="html")`` validates
      and lower-cases the explicit type tokens;
    - ``MimeType("text/html; charset=utf-8", extension="html")`` parses the
      text;
    - ``MimeType()`` yields ``application/*`` with no parameters.

    :param mime: Media type text to parse
    :type mime: Optional[str]
    :param extension: File extension this type is associated with
    :type extension: Optional[str]
    :param primary: Explicit primary type
    :type primary: Optional[str]
    :param sub: Explicit sub type
    :type sub: Optional[str]
    :raises MimeTypeParseError: If the text or tokens are malformed
    """

    def __init__(
        self,
        mime: Optional[str] = None,
        extension: Optional[str] = None,
        *,
        primary: Optional[str] = None,
        sub: Optional[str] = None,
    ) -> None:
        self.parameters = MimeTypeParameterList()
        self.file_extension = extension or ""
        if primary is not None:
            if not is_valid_token(primary):
                raise _invalid_primary(primary)
            if sub is None or not is_valid_token(sub):
                raise _invalid_sub(sub or "")
            self.primary_type = primary.lower()
            self.sub_type = sub.lower()
        elif mime is not None:
            self.parse(mime)
        else:
            self.primary_type = "application"
            self.sub_type = "*"

    @classmethod
    def from_string(cls, text: str, extension: str = "") -> "MimeType":
        """Parse ``text`` into a new ``MimeType``."""
        return cls(text, extension)

    def parse(self, mime: str) -> None:
        """Parse ``mime`` into this instance, replacing type and parameters.

        :param mime: Text such as ``"text/html; charset=utf-8"``
        :type mime: str
        :raises MimeTypeParseError: If there is no sub type, a type token is
            invalid or the parameter list is malformed
        """
        slash = mime.find("/")
        semicolon = mime.find(";")
        if slash < 0 or (0 <= semicolon <= slash):
            raise MimeTypeParseError(
                "Unable to find a sub type.",
                kind=ParseErrorKind.MISSING_SUBTYPE,
                fragment=mime,
            )

        if semicolon < 0:
            primary, sub = mime.split("/")[:2]
            parameters = MimeTypeParameterList()
        else:
            primary = mime[:slash]
            sub = mime[slash + 1 : semicolon]
            parameters = MimeTypeParameterList(mime[semicolon:])

        primary = primary.strip().lower()
        sub = sub.strip().lower()
        if not is_valid_token(primary):
            raise _invalid_primary(primary)
        if not is_valid_token(sub):
            raise _invalid_sub(sub)

        self.primary_type = primary
        self.sub_type = sub
        self.parameters = parameters

    def get_base_type(self) -> str:
        return f"{self.primary_type}/{self.sub_type}"

    def get_primary_type(self) -> str:
        return self.primary_type

    def get_sub_type(self) -> str:
        return self.sub_type

    def set_sub_type(self, sub: str) -> None:
        """Replace the sub type.

        :raises MimeTypeParseError: If ``sub`` is not a valid token
        """
        if not is_valid_token(sub):
            raise _invalid_sub(sub)
        self.sub_type = sub.lower()

    def get_file_extensions(self) -> str:
        return self.file_extension

    def get_parameters(self) -> MimeTypeParameterList:
        return self.parameters

    def get_parameter(self, name: str) -> Optional[str]:
        return self.parameters.get(name)

    def set_parameter(self, name: str, value: str) -> None:
        self.parameters.set(name, value)

    def remove_parameter(self, name: str) -> None:
        self.parameters.remove(name)

    def match(self, other: Union["MimeType", str], extension: str = "") -> bool:
        """Return True if ``other`` has the same primary type and a
        compatible sub type.

        Either side having ``*`` as its sub type matches any sub type.
        The primary type is compared literally. Parameters are ignored.

        :param other: A ``MimeType`` or media type text to parse first
        :type other: Union[MimeType, str]
        :param extension: Extension used when ``other`` is text
        :type extension: str
        :return: Whether the types match
        :rtype: bool
        :raises MimeTypeParseError: If ``other`` is malformed text
        """
        if isinstance(other, str):
            other = MimeType(other, extension)
        return self.primary_type == other.primary_type and (
            self.sub_type == "*"
            or other.sub_type == "*"
            or self.sub_type == other.sub_type
        )

    def to_string(self) -> str:
        """Return base type, parameters and the file extension."""
        return f"{self.get_base_type()}{self.parameters} {self.file_extension}"

    def __str__(self) -> str:
        return f"{self.get_base_type()}{self.parameters}"

    def __repr__(self) -> str:
        return f"MimeType({str(self)!r}, extension={self.file_extension!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return (
            self.primary_type == other.primary_type
            and self.sub_type == other.sub_type
            and self.parameters == other.parameters
        )

    def __hash__(self) -> int:
        return hash(
            (self.primary_type, self.sub_type, frozenset(self.parameters.items()))
        )


__all__ = ["MimeType"]
