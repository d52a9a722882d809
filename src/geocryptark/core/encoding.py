""" Utility for base64 and text conversions shared by the crypto layers. """

from __future__ import annotations

import base64
import binascii


def to_base64(data: bytes) -> str:
    # Standard alphabet with padding, ASCII string output.
    return base64.b64encode(bytes(data)).decode("ascii")


def from_base64(text: str) -> bytes:
    """Decode standard base64 text; raise ValueError on malformed input."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, TypeError) as e:
        raise ValueError(f"Invalid base64 data: {e}") from e


def to_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)
