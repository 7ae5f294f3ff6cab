"""
Montgomery curves (X25519): curve handle over the cryptography package's
RFC 7748 implementation, with an injectable random-byte source.
"""

from __future__ import annotations

from typing import Callable

from cryptography.hazmat.primitives.asymmetric import x25519
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..errors import UnknownCurveError
from .types import CurveUtils, RandomBytes, default_random_bytes

# Field prime p = 2^255 - 19
X25519_P = 2**255 - 19
# Encoded u-coordinate / private scalar length
X25519_BYTES = 32


def adjust_scalar_bytes(data: bytes) -> bytes:
    """RFC 7748 section 5 clamping: clear bits 0-2 and 255, set bit 254."""
    if len(data) != X25519_BYTES:
        raise ValueError("X25519 scalar must be 32 bytes")
    k = bytearray(data)
    k[0] &= 248
    k[31] &= 127
    k[31] |= 64
    return bytes(k)


class MontgomeryCurve:
    """
    Capability object for one Montgomery curve.

    Attributes:
        p: Field prime.
        gu_bytes_length: Byte length of an encoded u-coordinate (and of a
            private scalar).
        random_bytes: Bound random-byte source.
        utils: Key helpers; utils.random_private_key returns adjusted bytes.
    """

    def __init__(
        self,
        p: int,
        gu_bytes_length: int,
        random_bytes: RandomBytes,
        adjust_scalar_bytes: Callable[[bytes], bytes],
        private_key_type=x25519.X25519PrivateKey,
        public_key_type=x25519.X25519PublicKey,
    ) -> None:
        self.p = p
        self.gu_bytes_length = gu_bytes_length
        self.random_bytes = random_bytes
        self.adjust_scalar_bytes = adjust_scalar_bytes
        self._private_key_type = private_key_type
        self._public_key_type = public_key_type
        self.utils = CurveUtils(random_private_key=self._random_private_key)

    def _random_private_key(self) -> bytes:
        return self.adjust_scalar_bytes(self.random_bytes(self.gu_bytes_length))

    def get_public_key(self, private_key: bytes) -> bytes:
        """u-coordinate of scalar * base point."""
        key = self._private_key_type.from_private_bytes(bytes(private_key))
        return key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    def get_shared_secret(self, private_key: bytes, public_key: bytes) -> bytes:
        """Raw Diffie-Hellman output; the library rejects an all-zero result."""
        key = self._private_key_type.from_private_bytes(bytes(private_key))
        peer = self._public_key_type.from_public_bytes(bytes(public_key))
        return key.exchange(peer)


def create_x25519(
    random_bytes: RandomBytes = default_random_bytes,
) -> MontgomeryCurve:
    """X25519 curve handle bound to random_bytes."""
    return MontgomeryCurve(
        p=X25519_P,
        gu_bytes_length=X25519_BYTES,
        random_bytes=random_bytes,
        adjust_scalar_bytes=adjust_scalar_bytes,
    )


def get_montgomery_curve_name(curve: MontgomeryCurve) -> str:
    """Canonical curve name from the encoded point length."""
    if curve.gu_bytes_length == 32:
        return "X25519"
    raise UnknownCurveError("Unknown curve")


__all__: tuple[str, ...] = (
    "MontgomeryCurve",
    "X25519_BYTES",
    "X25519_P",
    "adjust_scalar_bytes",
    "create_x25519",
    "get_montgomery_curve_name",
)
