"""
Base64URL without padding (RFC 7515 section 2), as used by JWK members.
"""

from __future__ import annotations

import base64
import binascii
import re

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_base64url(data: bytes) -> str:
    """Encode bytes as unpadded Base64URL text."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_base64url(text: str) -> bytes:
    """
    Decode unpadded Base64URL text.

    Args:
        text: Base64URL string without "=" padding.

    Returns:
        Decoded bytes.

    Raises:
        ValueError: text is not a string, contains characters outside the
            URL-safe alphabet, or has an impossible length.
    """
    if not isinstance(text, str):
        raise ValueError("base64url value must be str")
    if not _B64URL_RE.fullmatch(text):
        raise ValueError("invalid base64url characters")
    if len(text) % 4 == 1:
        raise ValueError("invalid base64url length")
    pad = "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(text + pad)
    except binascii.Error as e:
        raise ValueError(f"invalid base64url: {e}") from e


__all__: tuple[str, ...] = (
    "decode_base64url",
    "encode_base64url",
)
