"""
Small-order point detection for X25519 public keys.

A peer public key in the small subgroup (order 1, 2, 4 or 8) forces the
Diffie-Hellman output into a handful of predictable values. The check is an
exact byte comparison against the RFC 7748 section 6.1 list; it is not an
encoding validator.
"""

from __future__ import annotations

import hmac

from ..errors import ValidationError

SMALL_ORDER_POINTS: tuple[bytes, ...] = tuple(
    bytes.fromhex(h)
    for h in (
        # 0 (order 1)
        "0000000000000000000000000000000000000000000000000000000000000000",
        # 1 (order 1)
        "0100000000000000000000000000000000000000000000000000000000000000",
        # order 8
        "e0eb7a7c3b41b8ae1656e3faf19fc46ada098deb9c32b1fd866205165f49b800",
        # order 8
        "5f9c95bca3508c24b1d0b1559c83ef5b04445cc4581c8e86d8224eddd09f1157",
        # The last three are compared as literal bytes. They are big-endian
        # renderings of p - 1, p and p + 1, not the little-endian u-coordinate
        # encodings of those values.
        "7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffec",
        "7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffed",
        "7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffee",
    )
)


def x25519_is_small_order_point(public_key: bytes) -> bool:
    """
    True iff public_key is byte-for-byte one of SMALL_ORDER_POINTS.

    Raises:
        ValidationError: public_key is not 32 bytes.
    """
    if len(public_key) != 32:
        raise ValidationError(
            f"X25519 public key must be 32 bytes, got {len(public_key)}"
        )
    candidate = bytes(public_key)
    found = False
    for point in SMALL_ORDER_POINTS:
        found |= hmac.compare_digest(candidate, point)
    return found


__all__: tuple[str, ...] = (
    "SMALL_ORDER_POINTS",
    "x25519_is_small_order_point",
)
