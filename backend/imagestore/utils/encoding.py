from __future__ import annotations

import base64
import re

_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/]")
_URLSAFE = str.maketrans("-_", "+/")


def decode_base64_payload(payload: str) -> bytes:
    """Decode base64 text leniently.

    Decoding stops at the first ``=``; whitespace and foreign characters are
    dropped, URL-safe characters are accepted and padding is optional.
    """
    cleaned = _NON_BASE64.sub("", payload.split("=", 1)[0].translate(_URLSAFE))
    remainder = len(cleaned) % 4
    if remainder == 1:
        # a lone trailing sextet cannot form a byte
        cleaned = cleaned[:-1]
        remainder = 0
    if remainder:
        cleaned += "=" * (4 - remainder)
    return base64.b64decode(cleaned)


def binary_string_to_bytes(data: str) -> bytes:
    """Map each character to its low byte (single-byte "binary" encoding)."""
    return bytes(ord(ch) & 0xFF for ch in data)
