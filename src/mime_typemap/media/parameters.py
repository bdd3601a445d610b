"""Media type parameter lists.

A parameter list is the ``; name=value`` sequence that follows the base
type of a media type. Names are case-insensitive and stored lower-cased;
values keep their case. Iteration follows insertion order so that
serialization is deterministic.
"""

from typing import Dict, Iterator, KeysView, Optional, Tuple

from ..exceptions import MimeTypeParseError, ParseErrorKind
from .tokens import is_token_char, quote, skip_whitespace, unquote


class MimeTypeParameterList:
    """Ordered mapping of parameter names to values.

    :param parameter_list: Optional text to parse, starting at the first ``;``
    :type parameter_list: Optional[str]
    """

    def __init__(self, parameter_list: Optional[str] = None) -> None:
        self._parameters: Dict[str, str] = {}
        if parameter_list is not None:
            self.parse(parameter_list)

    def parse(self, parameter_list: str) -> None:
        """Parse ``; name=value`` groups into this list.

        Values are either token runs or double-quoted strings. Later
        occurrences of a name overwrite earlier ones.

        :param parameter_list: Text such as ``"; charset=utf-8; q=\\"a b\\""``
        :type parameter_list: str
        :raises MimeTypeParseError: If the text does not follow the grammar
        """
        if not parameter_list:
            return
        text = parameter_list
        length = len(text)

        i = skip_whitespace(text, 0)
        while i < length and text[i] == ";":
            i = skip_whitespace(text, i + 1)
            if i >= length:
                return

            start = i
            while i < length and is_token_char(text[i]):
                i += 1
            name = text[start:i].lower()

            i = skip_whitespace(text, i)
            if i >= length or text[i] != "=":
                raise MimeTypeParseError(
                    "Couldn't find the '=' that separates a parameter name "
                    f"from its value in parameter {name!r}.",
                    kind=ParseErrorKind.MISSING_SEPARATOR,
                    position=i,
                    fragment=name,
                )

            i = skip_whitespace(text, i + 1)
            if i >= length:
                raise MimeTypeParseError(
                    f"Couldn't find a value for parameter named {name!r}.",
                    kind=ParseErrorKind.MISSING_VALUE,
                    position=i,
                    fragment=name,
                )

            c = text[i]
            if c == '"':
                opening = i
                i += 1
                start = i
                while i < length and text[i] != '"':
                    if text[i] == "\\":
                        i += 1
                    i += 1
                if i >= length:
                    raise MimeTypeParseError(
                        "Encountered unterminated quoted parameter value.",
                        kind=ParseErrorKind.UNTERMINATED_QUOTE,
                        position=opening,
                        fragment=name,
                    )
                value = unquote(text[start:i])
                i += 1
            elif is_token_char(c):
                start = i
                while i < length and is_token_char(text[i]):
                    i += 1
                value = text[start:i]
            else:
                raise MimeTypeParseError(
                    f"Unexpected character encountered at index {i}.",
                    kind=ParseErrorKind.UNEXPECTED_CHARACTER,
                    position=i,
                    fragment=c,
                )

            self._parameters[name] = value
            i = skip_whitespace(text, i)

        if i < length:
            raise MimeTypeParseError(
                "More characters encountered in input than expected.",
                kind=ParseErrorKind.TRAILING_CHARACTERS,
                position=i,
                fragment=text[i:],
            )

    @staticmethod
    def _normalize(name: str) -> str:
        return name.strip().lower()

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value for ``name`` or ``default`` if it is not set."""
        return self._parameters.get(self._normalize(name), default)

    def set(self, name: str, value: str) -> None:
        """Set ``name`` to ``value``, overwriting any previous value."""
        self._parameters[self._normalize(name)] = value

    def remove(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._parameters.pop(self._normalize(name), None)

    def size(self) -> int:
        return len(self._parameters)

    def is_empty(self) -> bool:
        return not self._parameters

    def get_names(self) -> KeysView[str]:
        """Return the parameter names in insertion order."""
        return self._parameters.keys()

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._parameters.items())

    def to_string(self) -> str:
        """Serialize as ``; name=value`` groups, quoting values as needed.

        :return: Serialized parameter list, empty if there are no parameters
        :rtype: str
        """
        return "".join(
            f"; {name}={quote(value)}" for name, value in self._parameters.items()
        )

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._normalize(name) in self._parameters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MimeTypeParameterList):
            return NotImplemented
        return self._parameters == other._parameters

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"MimeTypeParameterList({self.to_string()!r})"


__all__ = ["MimeTypeParameterList"]
