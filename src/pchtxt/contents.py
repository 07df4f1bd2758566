"""Decode ``offset value`` body lines of binary and heap patches."""

from __future__ import annotations

from pchtxt.models.patch import MAX_OFFSET, PatchContent
from pchtxt.text import QUOTE, first_token, is_hex, trim


def decode_value(text: str) -> bytes:
    """Turn the value part of a body line into bytes.

    A double-quoted value is a string and is encoded as UTF-8. Anything else
    is a run of hex tokens which are joined before decoding, so ``1F2003D5``
    and ``1F 20 03 D5`` are the same value.

    Raises:
        ValueError: If the value is missing, unterminated or not valid hex.
    """
    value = trim(text)
    if not value:
        raise ValueError("missing value")
    if value[0] == QUOTE:
        end = value.find(QUOTE, 1)
        if end == -1:
            raise ValueError("unterminated string value")
        return value[1:end].encode("utf-8")

    digits = "".join(value.split())
    if not is_hex(digits):
        raise ValueError(f"invalid hex value: {value}")
    if len(digits) % 2:
        raise ValueError(f"odd number of hex digits in value: {value}")
    return bytes.fromhex(digits)


def decode_content(code: str) -> PatchContent:
    """Decode a comment-stripped body line into a :class:`PatchContent`.

    Raises:
        ValueError: If the offset or the value cannot be decoded.
    """
    token = first_token(code)
    if not is_hex(token):
        raise ValueError(f"invalid offset: {token}")
    offset = int(token, 16)
    if offset > MAX_OFFSET:
        raise ValueError(f"offset out of range: {token}")
    return PatchContent(offset=offset, value=decode_value(code[len(token) :]))
