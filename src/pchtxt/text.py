"""Stateless string helpers shared by the meta and patch passes."""

from __future__ import annotations

WHITESPACE = " \t\n\r\x0b\x0c"
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

COMMENT_MARKER = "/"
QUOTE = '"'


def ltrim(text: str) -> str:
    return text.lstrip(WHITESPACE)


def rtrim(text: str) -> str:
    return text.rstrip(WHITESPACE)


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def first_token(text: str) -> str:
    for index, char in enumerate(text):
        if char in WHITESPACE:
            return text[:index]
    return text


def fold(text: str) -> str:
    """ASCII-only lower-casing; non-ASCII characters are left untouched."""
    return "".join(chr(ord(char) + 32) if "A" <= char <= "Z" else char for char in text)


def starts_with(text: str, prefix: str) -> bool:
    return len(text) >= len(prefix) and text[: len(prefix)] == prefix


def is_hex(text: str) -> bool:
    return bool(text) and all(char in HEX_DIGITS for char in text)


def comment_position(text: str) -> int:
    """Return the index of the first ``/`` outside double quotes, or ``len(text)``.

    Each ``"`` toggles the in-string state, so URLs inside quoted values are
    not mistaken for comments.
    """
    in_string = False
    for index, char in enumerate(text):
        if not in_string and char == COMMENT_MARKER:
            return index
        if char == QUOTE:
            in_string = not in_string
    return len(text)


def strip_comment(text: str) -> str:
    return trim(text[: comment_position(text)])


def comment_content(text: str) -> str:
    """Return the payload of the comment in *text* (markers and padding removed)."""
    start = comment_position(text)
    while start < len(text) and (text[start] in WHITESPACE or text[start] == COMMENT_MARKER):
        start += 1
    return rtrim(text[start:])


def unquote(text: str) -> str:
    """Remove one pair of surrounding double quotes, if present."""
    if len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE:
        return text[1:-1]
    return text
