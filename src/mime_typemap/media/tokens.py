"""Token classification and quoted-string helpers.

Tokens are the building blocks of the media type grammar: a non-empty
run of printable ASCII characters that contains none of the structural
"specials". Parameter values that are not tokens are carried as quoted
strings, with backslash escaping of backslash and double quote.
"""

TSPECIALS = frozenset('()<>@,;:/[]?=\\"')
"""Characters that may not appear unescaped inside an unquoted token."""


def is_token_char(c: str) -> bool:
    """Return True if ``c`` may appear inside an unquoted token.

    :param c: A single character
    :type c: str
    :return: True for printable ASCII (33-126) that is not a special
    :rtype: bool
    """
    return 32 < ord(c) < 127 and c not in TSPECIALS


def is_valid_token(s: str) -> bool:
    """Return True if ``s`` is a non-empty run of token characters.

    :param s: Candidate token
    :type s: str
    :return: Whether the string is a valid token
    :rtype: bool
    """
    return bool(s) and all(is_token_char(c) for c in s)


def skip_whitespace(text: str, i: int) -> int:
    """Return the first index at or after ``i`` that is not whitespace."""
    length = len(text)
    while i < length and text[i].isspace():
        i += 1
    return i


def quote(value: str) -> str:
    """Quote a parameter value if it is not a plain token.

    Values made only of token characters, including the empty string, are
    returned unchanged. Anything else is wrapped in double quotes with
    backslashes and double quotes escaped.

    :param value: Raw parameter value
    :type value: str
    :return: Value safe to embed after ``name=``
    :rtype: str
    """
    if all(is_token_char(c) for c in value):
        return value
    escaped = "".join("\\" + c if c in '\\"' else c for c in value)
    return '"' + escaped + '"'


def unquote(body: str) -> str:
    """Recover the literal value from the body of a quoted string.

    ``body`` is the text between the surrounding quotes. A backslash
    escapes the following character; an unescaped double quote ends the
    value.

    :param body: Quoted-string body without its surrounding quotes
    :type body: str
    :return: Unescaped value
    :rtype: str
    """
    out = []
    escaped = False
    for c in body:
        if escaped:
            out.append(c)
            escaped = False
        elif c == "\\":
            escaped = True
        elif c == '"':
            break
        else:
            out.append(c)
    return "".join(out)


__all__ = [
    "TSPECIALS",
    "is_token_char",
    "is_valid_token",
    "skip_whitespace",
    "quote",
    "unquote",
]
