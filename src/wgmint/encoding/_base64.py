from __future__ import annotations

import base64
import binascii

KEY_SIZE = 32


def encode_key(key: bytes) -> str:
    """Render raw key bytes as standard, padded, unwrapped base64."""
    return base64.b64encode(key).decode("ascii")


def decode_key(encoded: str) -> bytes:
    """
    Decode a base64 key string back to raw bytes.

    Raises ValueError on malformed input or when the result is not
    exactly 32 bytes long.
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
    except binascii.Error as error:
        raise ValueError(f"Key is not valid base64: {error}") from error
    if len(raw) != KEY_SIZE:
        raise ValueError(f"Key must decode to {KEY_SIZE} bytes, got {len(raw)}")
    return raw
