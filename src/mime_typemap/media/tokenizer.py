"""Lookahead tokenizer for type-map lines.

The tokenizer splits text on whitespace, returns each configured
single-character token on its own, and returns double-quoted regions as
one token with their escapes processed. Tokens can be pushed back for
one-token lookahead.
"""

from typing import Iterator, List

from ..exceptions import MimeTypeParseError, ParseErrorKind, TokenizerExhaustedError
from .tokens import unquote


class LineTokenizer:
    """Tokenizer over a single line of text.

    :param text: Text to tokenize
    :type text: str
    :param singles: Characters returned as tokens of their own
    :type singles: str
    """

    def __init__(self, text: str, singles: str = "="):
        self.text = text
        self.singles = singles
        self.position = 0
        self.max_position = len(text)
        self._stack: List[str] = []

    def _skip_whitespace(self) -> None:
        while (
            self.position < self.max_position and self.text[self.position].isspace()
        ):
            self.position += 1

    def has_more_tokens(self) -> bool:
        """Return True if another token is available.

        :return: Whether ``next_token`` would succeed
        :rtype: bool
        """
        if self._stack:
            return True
        self._skip_whitespace()
        return self.position < self.max_position

    def next_token(self) -> str:
        """Return the next token.

        Pushed-back tokens are returned first, most recent first.

        :return: The next token
        :rtype: str
        :raises TokenizerExhaustedError: If no token remains
        :raises MimeTypeParseError: If a quoted token is not terminated
        """
        if self._stack:
            return self._stack.pop()
        self._skip_whitespace()
        if self.position >= self.max_position:
            raise TokenizerExhaustedError()

        start = self.position
        c = self.text[start]
        if c == '"':
            self.position += 1
            while self.position < self.max_position:
                c = self.text[self.position]
                self.position += 1
                if c == "\\":
                    self.position += 1
                elif c == '"':
                    return unquote(self.text[start + 1 : self.position - 1])
            raise MimeTypeParseError(
                "Encountered unterminated quoted token.",
                kind=ParseErrorKind.UNTERMINATED_QUOTE,
                position=start,
                fragment=self.text[start:],
            )
        if c in self.singles:
            self.position += 1
            return c

        while self.position < self.max_position:
            c = self.text[self.position]
            if c in self.singles or c.isspace():
                break
            self.position += 1
        return self.text[start : self.position]

    def push_token(self, token: str) -> None:
        """Push ``token`` back so the next ``next_token`` call returns it."""
        self._stack.append(token)

    def __iter__(self) -> Iterator[str]:
        while self.has_more_tokens():
            yield self.next_token()


__all__ = ["LineTokenizer"]
